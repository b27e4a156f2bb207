"""Price repository port interface"""
from abc import ABC, abstractmethod
from datetime import datetime
from typing import List

from ...domain.pricing.price import PriceRecord


class IPriceRepository(ABC):
    """Port interface for reading price records"""

    @abstractmethod
    def find_candidates(
        self,
        application_date: datetime,
        product_id: int,
        brand_id: int
    ) -> List[PriceRecord]:
        """
        Find every price record for a product and brand whose validity
        window contains the instant (start_date <= instant <= end_date).

        Args:
            application_date: Instant the price must apply at
            product_id: Product identifier
            brand_id: Brand identifier

        Returns:
            Candidate PriceRecords, possibly empty; order is not significant
        """
        pass
