import logging
from datetime import datetime
from typing import Iterable, Optional

from .price import PriceRecord

logger = logging.getLogger(__name__)


class PriceResolver:
    """
    Domain service that picks the applicable price among candidates

    Business rules:
    - Only records for the requested product and brand whose window contains
      the instant (both bounds inclusive) are considered
    - Highest priority wins
    - Equal priority: lowest price_list wins, then the earliest candidate
    """

    @staticmethod
    def resolve(
        candidates: Iterable[PriceRecord],
        instant: datetime,
        product_id: int,
        brand_id: int
    ) -> Optional[PriceRecord]:
        """
        Reduce candidates to the single applicable record.

        Storage may already filter and order the candidates; neither is
        relied upon here.

        Args:
            candidates: Records returned by the storage collaborator
            instant: Application instant
            product_id: Requested product
            brand_id: Requested brand

        Returns:
            The applicable PriceRecord, or None when nothing applies
        """
        selected: Optional[PriceRecord] = None
        considered = 0

        for candidate in candidates:
            if not candidate.applies_to(product_id, brand_id):
                continue
            if not candidate.is_applicable_at(instant):
                continue
            considered += 1
            if selected is None or PriceResolver.outranks(candidate, selected):
                selected = candidate

        logger.debug(
            f"Resolved {considered} candidate(s) for product {product_id}, "
            f"brand {brand_id} at {instant.isoformat()}: {selected!r}"
        )
        return selected

    @staticmethod
    def outranks(challenger: PriceRecord, incumbent: PriceRecord) -> bool:
        """True when challenger should replace incumbent as the selected record"""
        if challenger.priority != incumbent.priority:
            return challenger.priority > incumbent.priority
        return challenger.price_list < incumbent.price_list
