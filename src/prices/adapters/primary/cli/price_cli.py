"""
Price CLI commands.

Resolves the applicable price for a product, brand and instant.
"""
import argparse
import asyncio
import json

from ....configuration.container import get_mediator
from ....application.pricing.validation import parse_price_query
from ....domain.shared.exceptions import (
    InvalidFieldError,
    MissingFieldError,
    PriceNotApplicableError,
)

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_INVALID = 2

# Query field -> command line option, for error messages
OPTION_NAMES = {
    "application_date": "--date",
    "product_id": "--product",
    "brand_id": "--brand",
}


def get_price_command(args: argparse.Namespace) -> int:
    """
    Handle price get command.

    Args:
        args: Command arguments with date, product, brand and json flag

    Returns:
        0 on success, 1 when no price applies, 2 on invalid input
    """
    try:
        query = parse_price_query(args.date, args.product, args.brand)
    except MissingFieldError as e:
        print(f"❌ Required parameter '{OPTION_NAMES.get(e.field, e.field)}' is missing")
        return EXIT_INVALID
    except InvalidFieldError as e:
        print(
            f"❌ Invalid value '{e.value}' for parameter "
            f"'{OPTION_NAMES.get(e.field, e.field)}'. Expected type: {e.expected}"
        )
        return EXIT_INVALID

    mediator = get_mediator()
    try:
        response = asyncio.run(mediator.send_async(query))
    except PriceNotApplicableError as e:
        print(f"❌ {e}")
        return EXIT_NOT_FOUND

    if args.json:
        print(json.dumps(response.to_dict(), indent=2))
        return EXIT_OK

    print(f"✅ Price list {response.price_list}: {response.to_dict()['finalPrice']}")
    print(f"   Product: {response.product_id}")
    print(f"   Brand:   {response.brand_id}")
    print(f"   Valid:   {response.start_date.isoformat()} -> {response.end_date.isoformat()}")
    return EXIT_OK


def setup_price_commands(subparsers):
    """
    Setup price CLI commands.

    Command structure:
    - prices price get --date <iso> --product <id> --brand <id> [--json]

    Args:
        subparsers: Argparse subparsers to add commands to
    """
    price_parser = subparsers.add_parser(
        "price",
        help="Query applicable prices"
    )
    price_subparsers = price_parser.add_subparsers(dest="price_command")

    # Options stay optional here so the query validator reports what is missing
    get_parser = price_subparsers.add_parser(
        "get",
        help="Get the price that applies at an instant"
    )
    get_parser.add_argument(
        "--date",
        help="Application date, ISO-8601 (e.g., 2020-06-14T16:00:00)"
    )
    get_parser.add_argument(
        "--product",
        help="Product identifier (e.g., 35455)"
    )
    get_parser.add_argument(
        "--brand",
        help="Brand identifier (e.g., 1)"
    )
    get_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON"
    )
    get_parser.set_defaults(func=get_price_command)
