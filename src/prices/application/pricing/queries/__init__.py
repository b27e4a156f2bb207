"""Pricing queries"""
from .get_applicable_price import (
    GetApplicablePriceQuery,
    GetApplicablePriceHandler,
    PriceResponse,
)

__all__ = [
    'GetApplicablePriceQuery',
    'GetApplicablePriceHandler',
    'PriceResponse',
]
