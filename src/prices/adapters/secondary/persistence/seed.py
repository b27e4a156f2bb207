"""Sample price catalogue for local databases and acceptance tests"""
import logging
from datetime import datetime
from decimal import Decimal
from typing import Tuple

from ....domain.pricing.price import PriceRecord
from .price_repository import PriceRepositorySQLAlchemy

logger = logging.getLogger(__name__)

SEED_USER = "seed"

SAMPLE_PRICES: Tuple[PriceRecord, ...] = (
    PriceRecord(
        price_id=None, brand_id=1, product_id=35455, price_list=1,
        start_date=datetime(2020, 6, 14, 0, 0, 0),
        end_date=datetime(2020, 12, 31, 23, 59, 59),
        priority=0, amount=Decimal("35.50"), currency="EUR"
    ),
    PriceRecord(
        price_id=None, brand_id=1, product_id=35455, price_list=2,
        start_date=datetime(2020, 6, 14, 15, 0, 0),
        end_date=datetime(2020, 6, 14, 18, 30, 0),
        priority=1, amount=Decimal("25.45"), currency="EUR"
    ),
    PriceRecord(
        price_id=None, brand_id=1, product_id=35455, price_list=3,
        start_date=datetime(2020, 6, 15, 0, 0, 0),
        end_date=datetime(2020, 6, 15, 11, 0, 0),
        priority=1, amount=Decimal("30.50"), currency="EUR"
    ),
    PriceRecord(
        price_id=None, brand_id=1, product_id=35455, price_list=4,
        start_date=datetime(2020, 6, 15, 16, 0, 0),
        end_date=datetime(2020, 12, 31, 23, 59, 59),
        priority=1, amount=Decimal("38.95"), currency="EUR"
    ),
)


def seed_sample_prices(repository: PriceRepositorySQLAlchemy, reset: bool = False) -> int:
    """
    Load SAMPLE_PRICES into the repository.

    Args:
        repository: Target repository
        reset: Delete existing rows first

    Returns:
        Number of records inserted (0 when the table was already populated)
    """
    if reset:
        removed = repository.delete_all()
        logger.info(f"Removed {removed} existing price record(s)")
    elif repository.count() > 0:
        logger.info("Price table already populated, skipping seed")
        return 0

    stored = repository.add_all(SAMPLE_PRICES, updated_by=SEED_USER)
    logger.info(f"Seeded {len(stored)} price record(s)")
    return len(stored)
