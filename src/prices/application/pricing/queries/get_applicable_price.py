"""Get applicable price query"""
import logging
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict

from ....mediator import Request, RequestHandler
from ....domain.pricing.price import PriceRecord
from ....domain.pricing.services import PriceResolver
from ....domain.shared.exceptions import (
    InvalidFieldError,
    MissingFieldError,
    PriceNotApplicableError,
)
from ....ports.outbound.price_repository import IPriceRepository

logger = logging.getLogger(__name__)

TWO_PLACES = Decimal("0.01")


@dataclass(frozen=True)
class PriceResponse:
    """Applicable price as handed to the presentation layer"""
    product_id: int
    brand_id: int
    price_list: int
    start_date: datetime
    end_date: datetime
    final_price: Decimal

    @classmethod
    def from_price(cls, price: PriceRecord) -> 'PriceResponse':
        return cls(
            product_id=price.product_id,
            brand_id=price.brand_id,
            price_list=price.price_list,
            start_date=price.start_date,
            end_date=price.end_date,
            final_price=price.amount
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "productId": self.product_id,
            "brandId": self.brand_id,
            "priceList": self.price_list,
            "startDate": self.start_date.isoformat(),
            "endDate": self.end_date.isoformat(),
            "finalPrice": str(self.final_price.quantize(TWO_PLACES)),
        }


@dataclass(frozen=True)
class GetApplicablePriceQuery(Request[PriceResponse]):
    """Query for the price a brand applies to a product at an instant"""
    application_date: datetime
    product_id: int
    brand_id: int

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """
        Raise MissingFieldError naming the first absent field, or
        InvalidFieldError for an instant carrying a time zone.
        """
        for field_name in ("application_date", "product_id", "brand_id"):
            if getattr(self, field_name) is None:
                raise MissingFieldError(field_name)
        if self.application_date.tzinfo is not None:
            raise InvalidFieldError("application_date", self.application_date, "local datetime")


class GetApplicablePriceHandler(RequestHandler[GetApplicablePriceQuery, PriceResponse]):
    """Handler resolving the applicable price for a query"""

    def __init__(self, price_repository: IPriceRepository):
        """
        Initialize handler.

        Args:
            price_repository: Storage collaborator providing candidates
        """
        self._price_repo = price_repository

    async def handle(self, request: GetApplicablePriceQuery) -> PriceResponse:
        """
        Resolve the applicable price.

        Issues exactly one read against the repository. Storage errors
        propagate unchanged.

        Args:
            request: Validated query

        Returns:
            PriceResponse for the highest-priority applicable record

        Raises:
            PriceNotApplicableError: If no record applies at the instant
        """
        candidates = self._price_repo.find_candidates(
            request.application_date,
            request.product_id,
            request.brand_id
        )
        logger.debug(
            f"Repository returned {len(candidates)} candidate(s) for "
            f"product {request.product_id}, brand {request.brand_id}"
        )

        selected = PriceResolver.resolve(
            candidates,
            request.application_date,
            request.product_id,
            request.brand_id
        )
        if selected is None:
            raise PriceNotApplicableError(
                request.application_date,
                request.product_id,
                request.brand_id
            )

        return PriceResponse.from_price(selected)
