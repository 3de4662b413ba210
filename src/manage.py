"""Storefront database management CLI.

Creates and drops the relational schema for the `ordering` domain using the
providers configured for the active PROTEAN_ENV.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
"""

import argparse
import sys


def setup_databases():
    from ordering.domain import ordering
    from ordering.utils.db import setup_db

    print("Initializing ordering domain...")
    ordering.init()
    created = setup_db(ordering)
    if created:
        print(f"  Schema ready for provider(s): {', '.join(created)}")
    else:
        print("  No relational providers configured; nothing to create.")
    print("Done.")


def drop_databases():
    from ordering.domain import ordering
    from ordering.utils.db import drop_db

    print("Initializing ordering domain...")
    ordering.init()
    dropped = drop_db(ordering)
    if dropped:
        print(f"  Schema dropped for provider(s): {', '.join(dropped)}")
    else:
        print("  No relational providers configured; nothing to drop.")
    print("Done.")


def main():
    parser = argparse.ArgumentParser(description="Storefront database management")
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_databases()
    elif args.command == "drop-db":
        drop_databases()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
