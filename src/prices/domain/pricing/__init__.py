"""Pricing domain - price records and applicable price selection"""

from .price import PriceRecord
from .services import PriceResolver

__all__ = [
    'PriceRecord',
    'PriceResolver',
]
