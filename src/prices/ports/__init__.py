"""Port interfaces for dependency inversion"""
from .outbound.price_repository import IPriceRepository

__all__ = ['IPriceRepository']
