from datetime import datetime
from typing import Any


class DomainException(Exception):
    """Base exception for all domain errors"""
    pass


class InvalidPriceRecordError(ValueError):
    """Raised when a price record violates one of its invariants"""
    pass


class PriceNotApplicableError(DomainException):
    """Raised when no price record applies to the requested instant"""

    def __init__(self, application_date: datetime, product_id: int, brand_id: int):
        self.application_date = application_date
        self.product_id = product_id
        self.brand_id = brand_id
        super().__init__(
            f"No price found for product {product_id}, brand {brand_id} "
            f"at {application_date.isoformat()}"
        )


class QueryValidationError(DomainException):
    """Base exception for malformed price queries"""
    pass


class MissingFieldError(QueryValidationError):
    """Raised when a required query field is absent"""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Required parameter '{field}' is missing")


class InvalidFieldError(QueryValidationError):
    """Raised when a query field cannot be read as its expected type"""

    def __init__(self, field: str, value: Any, expected: str):
        self.field = field
        self.value = value
        self.expected = expected
        super().__init__(
            f"Invalid value '{value}' for parameter '{field}'. Expected type: {expected}"
        )
