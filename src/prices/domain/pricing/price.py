from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from ..shared.exceptions import InvalidPriceRecordError


@dataclass(frozen=True)
class PriceRecord:
    """
    Price record entity - the amount a brand charges for a product
    during a validity window.

    Invariants:
    - brand_id and product_id are present
    - start_date <= end_date (window is inclusive on both ends)
    - priority is present and non-negative
    """
    price_id: Optional[int]
    brand_id: int
    product_id: int
    price_list: int
    start_date: datetime
    end_date: datetime
    priority: int
    amount: Decimal
    currency: str = "EUR"

    def __post_init__(self):
        if self.brand_id is None or self.product_id is None:
            raise InvalidPriceRecordError("brand_id and product_id are required")
        if self.start_date is None or self.end_date is None:
            raise InvalidPriceRecordError("start_date and end_date are required")
        if self.start_date > self.end_date:
            raise InvalidPriceRecordError("start_date must not be after end_date")
        if self.priority is None or self.priority < 0:
            raise InvalidPriceRecordError("priority must be non-negative")

    def is_applicable_at(self, instant: datetime) -> bool:
        """Check whether instant falls inside the validity window"""
        return self.start_date <= instant <= self.end_date

    def applies_to(self, product_id: int, brand_id: int) -> bool:
        return self.product_id == product_id and self.brand_id == brand_id

    def __repr__(self) -> str:
        return (
            f"PriceRecord(list={self.price_list}, product={self.product_id}, "
            f"brand={self.brand_id}, priority={self.priority}, {self.amount} {self.currency})"
        )
