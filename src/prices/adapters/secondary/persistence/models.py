"""SQLAlchemy table definitions for the prices database.

Tables are defined with SQLAlchemy Core (NOT ORM) as metadata for schema
generation and query building.
"""

from sqlalchemy import (
    MetaData,
    Table,
    Column,
    Integer,
    BigInteger,
    String,
    Numeric,
    DateTime,
    Index,
)

metadata = MetaData()

# Price records; windows are local wall-clock times, inclusive on both ends
prices = Table(
    'prices',
    metadata,
    Column('price_id', Integer, primary_key=True, autoincrement=True),
    Column('brand_id', BigInteger, nullable=False),
    Column('product_id', BigInteger, nullable=False),
    Column('price_list', Integer, nullable=False),
    Column('start_date', DateTime, nullable=False),
    Column('end_date', DateTime, nullable=False),
    Column('priority', Integer, nullable=False),
    Column('price', Numeric(10, 2), nullable=False),
    Column('curr', String(3), nullable=False),
    Column('last_update', DateTime),
    Column('last_update_by', String(50)),
)

Index(
    'idx_prices_lookup',
    prices.c.product_id,
    prices.c.brand_id,
    prices.c.start_date,
    prices.c.end_date,
)
