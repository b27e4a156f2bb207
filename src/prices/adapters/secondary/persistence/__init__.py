"""Persistence adapters"""
from .engine import create_engine_from_config, get_database_url
from .models import metadata, prices
from .price_repository import PriceRepositorySQLAlchemy

__all__ = [
    'create_engine_from_config',
    'get_database_url',
    'metadata',
    'prices',
    'PriceRepositorySQLAlchemy',
]
