from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Optional

from ....domain.pricing.price import PriceRecord

TWO_PLACES = Decimal("0.01")


def _parse_datetime(value) -> datetime:
    """Parse datetime from database - SQLite may hand back ISO strings"""
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(value)


def _parse_amount(value) -> Decimal:
    """Normalise stored amounts to a two-place Decimal"""
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(TWO_PLACES)


class PriceMapper:
    """Map between database rows and PriceRecord entities"""

    @staticmethod
    def from_db_row(row) -> PriceRecord:
        """Convert a prices row to a PriceRecord (audit columns are dropped)"""
        return PriceRecord(
            price_id=int(row.price_id),
            brand_id=int(row.brand_id),
            product_id=int(row.product_id),
            price_list=int(row.price_list),
            start_date=_parse_datetime(row.start_date),
            end_date=_parse_datetime(row.end_date),
            priority=int(row.priority),
            amount=_parse_amount(row.price),
            currency=row.curr
        )

    @staticmethod
    def to_db_dict(
        price: PriceRecord,
        updated_at: Optional[datetime] = None,
        updated_by: Optional[str] = None
    ) -> Dict[str, Any]:
        """Convert a PriceRecord to column values for insertion"""
        values = {
            "brand_id": price.brand_id,
            "product_id": price.product_id,
            "price_list": price.price_list,
            "start_date": price.start_date,
            "end_date": price.end_date,
            "priority": price.priority,
            "price": price.amount,
            "curr": price.currency,
            "last_update": updated_at,
            "last_update_by": updated_by,
        }
        if price.price_id is not None:
            values["price_id"] = price.price_id
        return values
