"""
Validation of raw price query inputs.

Turns loosely typed values (command line strings, already parsed values)
into a GetApplicablePriceQuery, failing fast on the first bad field.
"""
from datetime import datetime
from typing import Any, Optional

from ...domain.shared.exceptions import InvalidFieldError, MissingFieldError
from .queries.get_applicable_price import GetApplicablePriceQuery

# Accepted instant layouts, second precision at most
DATE_FORMATS = ("%Y-%m-%dT%H:%M:%S", "%Y-%m-%dT%H:%M")

# Identifiers are stored as signed 64-bit integers
MAX_IDENTIFIER = 2 ** 63 - 1


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _parse_date_string(value: str) -> datetime:
    for date_format in DATE_FORMATS:
        try:
            return datetime.strptime(value, date_format)
        except ValueError:
            continue
    raise InvalidFieldError("application_date", value, "datetime")


def parse_application_date(value: Any) -> datetime:
    """
    Read an application instant.

    Accepts a datetime or a string laid out as YYYY-MM-DDTHH:MM[:SS].
    Offsets are rejected since price windows are stored as local
    wall-clock times.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        parsed = _parse_date_string(value.strip())
    else:
        raise InvalidFieldError("application_date", value, "datetime")

    if parsed.tzinfo is not None:
        raise InvalidFieldError("application_date", value, "local datetime")
    return parsed


def parse_identifier(field_name: str, value: Any) -> int:
    """Read a positive integer identifier that fits a 64-bit column"""
    if isinstance(value, bool):
        raise InvalidFieldError(field_name, value, "int")
    if isinstance(value, int):
        parsed = value
    elif isinstance(value, str) and value.strip().isascii() and value.strip().isdigit():
        parsed = int(value.strip())
    else:
        raise InvalidFieldError(field_name, value, "int")

    if parsed <= 0 or parsed > MAX_IDENTIFIER:
        raise InvalidFieldError(field_name, value, "positive int")
    return parsed


def parse_price_query(
    application_date: Optional[Any],
    product_id: Optional[Any],
    brand_id: Optional[Any]
) -> GetApplicablePriceQuery:
    """
    Build a validated query from raw inputs.

    Presence is checked for all three fields before any value is parsed,
    so a missing field is always reported as MissingFieldError.

    Raises:
        MissingFieldError: A field is None or blank
        InvalidFieldError: A field cannot be read as its expected type
    """
    raw = {
        "application_date": application_date,
        "product_id": product_id,
        "brand_id": brand_id,
    }
    for field_name, value in raw.items():
        if _is_missing(value):
            raise MissingFieldError(field_name)

    return GetApplicablePriceQuery(
        application_date=parse_application_date(application_date),
        product_id=parse_identifier("product_id", product_id),
        brand_id=parse_identifier("brand_id", brand_id)
    )
