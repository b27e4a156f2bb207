"""
Database CLI commands.

Creates the schema and loads the sample price catalogue.
"""
import argparse

from ....configuration.container import get_engine, get_price_repository, get_settings
from ...secondary.persistence.engine import get_database_url
from ...secondary.persistence.models import metadata
from ...secondary.persistence.seed import seed_sample_prices


def _safe_url() -> str:
    url = get_database_url(get_settings())
    return url.split('@')[-1] if '@' in url else url


def init_db_command(args: argparse.Namespace) -> int:
    """
    Create the database schema if missing.

    Returns:
        0 on success
    """
    metadata.create_all(get_engine())
    print(f"✅ Schema ready at {_safe_url()}")
    return 0


def seed_db_command(args: argparse.Namespace) -> int:
    """
    Create the schema and load the sample prices.

    Args:
        args: Command arguments with reset flag

    Returns:
        0 on success
    """
    metadata.create_all(get_engine())
    inserted = seed_sample_prices(get_price_repository(), reset=args.reset)

    if inserted:
        print(f"✅ Seeded {inserted} price record(s) into {_safe_url()}")
    else:
        print("✅ Prices already present, nothing seeded (use --reset to reload)")
    return 0


def setup_db_commands(subparsers):
    """
    Setup database CLI commands.

    Command structure:
    - prices db init
    - prices db seed [--reset]

    Args:
        subparsers: Argparse subparsers to add commands to
    """
    db_parser = subparsers.add_parser(
        "db",
        help="Manage the prices database"
    )
    db_subparsers = db_parser.add_subparsers(dest="db_command")

    init_parser = db_subparsers.add_parser(
        "init",
        help="Create the database schema"
    )
    init_parser.set_defaults(func=init_db_command)

    seed_parser = db_subparsers.add_parser(
        "seed",
        help="Load the sample price catalogue"
    )
    seed_parser.add_argument(
        "--reset",
        action="store_true",
        help="Delete existing prices before seeding"
    )
    seed_parser.set_defaults(func=seed_db_command)
