"""SQLAlchemy-based PriceRepository implementation."""

import logging
from dataclasses import replace
from datetime import datetime
from typing import Iterable, List, Optional

from sqlalchemy import delete, func, insert, select
from sqlalchemy.engine import Engine

from ....domain.pricing.price import PriceRecord
from ....ports.outbound.price_repository import IPriceRepository
from .mappers import PriceMapper
from .models import prices

logger = logging.getLogger(__name__)


class PriceRepositorySQLAlchemy(IPriceRepository):
    """Repository for price records using SQLAlchemy Core"""

    def __init__(self, engine: Engine):
        """
        Initialize price repository.

        Args:
            engine: SQLAlchemy Engine instance
        """
        self._engine = engine

    def find_candidates(
        self,
        application_date: datetime,
        product_id: int,
        brand_id: int
    ) -> List[PriceRecord]:
        """
        Find price records for a product and brand valid at an instant.

        Results are ordered by priority descending as a convenience only.

        Args:
            application_date: Instant the price must apply at
            product_id: Product identifier
            brand_id: Brand identifier

        Returns:
            List of PriceRecord entities (empty if none apply)
        """
        stmt = (
            select(prices)
            .where(
                prices.c.brand_id == brand_id,
                prices.c.product_id == product_id,
                prices.c.start_date <= application_date,
                prices.c.end_date >= application_date
            )
            .order_by(prices.c.priority.desc(), prices.c.price_list)
        )

        with self._engine.connect() as conn:
            rows = conn.execute(stmt).fetchall()

        return [PriceMapper.from_db_row(row) for row in rows]

    def add(self, price: PriceRecord, updated_by: Optional[str] = None) -> PriceRecord:
        """
        Persist a new price record.

        Returns:
            The record with its assigned price_id
        """
        with self._engine.begin() as conn:
            result = conn.execute(
                insert(prices).values(
                    **PriceMapper.to_db_dict(price, datetime.now(), updated_by)
                )
            )
            price_id = result.inserted_primary_key[0]

        logger.debug(f"Stored price {price_id}: {price!r}")
        return replace(price, price_id=price_id)

    def add_all(self, records: Iterable[PriceRecord], updated_by: Optional[str] = None) -> List[PriceRecord]:
        """Persist several price records, returning them with assigned ids"""
        return [self.add(record, updated_by) for record in records]

    def count(self) -> int:
        with self._engine.connect() as conn:
            return conn.execute(select(func.count()).select_from(prices)).scalar_one()

    def delete_all(self) -> int:
        """Remove every price record; returns the number of rows deleted"""
        with self._engine.begin() as conn:
            result = conn.execute(delete(prices))
        return result.rowcount
