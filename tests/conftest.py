import pytest
from datetime import datetime
from decimal import Decimal

from prices.configuration.container import (
    get_engine,
    get_mediator,
    get_price_repository,
    reset_container,
)
from prices.adapters.secondary.persistence.models import metadata
from prices.domain.pricing.price import PriceRecord


@pytest.fixture(autouse=True)
def use_test_database(monkeypatch):
    """
    Point the container at an in-memory database for every test.
    Each test gets a fresh, isolated schema.
    """
    # DATABASE_URL would take precedence over the SQLite path
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setenv("PRICES_DB_PATH", ":memory:")

    reset_container()
    metadata.create_all(get_engine())

    yield

    reset_container()


@pytest.fixture
def context():
    """Shared context for BDD steps"""
    return {}


@pytest.fixture
def mediator():
    """Get mediator instance for testing"""
    return get_mediator()


@pytest.fixture
def price_repo():
    """Real price repository backed by the test database"""
    return get_price_repository()


@pytest.fixture
def make_price():
    """Factory for PriceRecords with sensible defaults"""
    def _make(
        price_list=1,
        start="2020-06-14T00:00:00",
        end="2020-12-31T23:59:59",
        priority=0,
        amount="35.50",
        product_id=35455,
        brand_id=1,
        price_id=None,
        currency="EUR"
    ) -> PriceRecord:
        return PriceRecord(
            price_id=price_id,
            brand_id=brand_id,
            product_id=product_id,
            price_list=price_list,
            start_date=datetime.fromisoformat(start),
            end_date=datetime.fromisoformat(end),
            priority=priority,
            amount=Decimal(amount),
            currency=currency
        )
    return _make


@pytest.fixture
def records_from_table(make_price):
    """Convert a pytest-bdd datatable (headers first) into PriceRecords"""
    def _convert(datatable):
        headers = datatable[0]
        records = []
        for index, row in enumerate(datatable[1:], start=1):
            data = dict(zip(headers, row))
            records.append(make_price(
                price_id=index,
                price_list=int(data["price_list"]),
                start=data["start"],
                end=data["end"],
                priority=int(data["priority"]),
                amount=data["amount"],
                product_id=int(data.get("product_id", 35455)),
                brand_id=int(data.get("brand_id", 1)),
            ))
        return records
    return _convert
