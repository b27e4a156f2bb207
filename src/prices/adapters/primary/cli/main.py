#!/usr/bin/env python3
import argparse
import logging
import sys

from dotenv import load_dotenv

from ....configuration.container import get_settings
from .price_cli import setup_price_commands
from .db_cli import setup_db_commands


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def main(argv=None):
    # .env must be loaded before settings are first read
    load_dotenv()
    configure_logging(get_settings().log_level)

    parser = argparse.ArgumentParser(description="Applicable price lookup")
    subparsers = parser.add_subparsers(dest="command")

    setup_price_commands(subparsers)
    setup_db_commands(subparsers)

    args = parser.parse_args(argv)

    # Use func attribute set by set_defaults
    if hasattr(args, "func"):
        sys.exit(args.func(args))
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
