"""Marketplace database management CLI.

Creates or drops the relational schema for the marketplace domain. Only
providers backed by SQLAlchemy (sqlite, postgresql) are touched.

Usage:
    PROTEAN_ENV=production python src/manage.py setup-db   # Create all tables
    PROTEAN_ENV=production python src/manage.py drop-db    # Drop all tables
"""

import argparse
import sys

from marketplace.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


def setup_databases() -> list[str]:
    """Create the marketplace schema. Returns the providers that were set up."""
    from marketplace.domain import marketplace
    from marketplace.utils.db import setup_db

    marketplace.init()
    providers = setup_db(marketplace)
    if not providers:
        logger.warning("No relational provider configured; nothing to create")
    for name in providers:
        logger.info("Schema created", provider=name)
    return providers


def drop_databases() -> list[str]:
    """Drop the marketplace schema. Returns the providers that were dropped."""
    from marketplace.domain import marketplace
    from marketplace.utils.db import drop_db

    marketplace.init()
    providers = drop_db(marketplace)
    for name in providers:
        logger.info("Schema dropped", provider=name)
    return providers


def main(argv=None):
    parser = argparse.ArgumentParser(description="Marketplace database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    args = parser.parse_args(argv)
    configure_logging(log_dir=None)

    if args.command == "setup-db":
        setup_databases()
    elif args.command == "drop-db":
        drop_databases()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
