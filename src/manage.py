"""Storefront database management CLI.

Provides commands to create, drop and seed the storefront schema in the
database configured by ``STOREFRONT_DATABASE_URI``.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
    python src/manage.py seed       # Add the starter catalogue if it is empty
"""

import argparse
import sys

# Starter catalogue: whole-taka prices, opening stock
SEED_PRODUCTS: list[dict] = [
    {"name": "Aromatic Chinigura Rice (1kg)", "category": "Grains", "price": 160, "stock": 80},
    {"name": "Red Lentils (1kg)", "category": "Grains", "price": 130, "stock": 60},
    {"name": "Brown Atta (2kg)", "category": "Grains", "price": 150, "stock": 45},
    {"name": "Sundarban Honey (500g)", "category": "Honey", "price": 550, "stock": 25},
    {"name": "Mustard Honey (500g)", "category": "Honey", "price": 420, "stock": 30},
    {"name": "Farm Fresh Eggs (12)", "category": "Dairy & Eggs", "price": 165, "stock": 100},
    {"name": "Cow Ghee (400g)", "category": "Dairy & Eggs", "price": 780, "stock": 20},
    {"name": "Cold-pressed Mustard Oil (1L)", "category": "Oils", "price": 320, "stock": 40},
    {"name": "Green Chilli (250g)", "category": "Vegetables", "price": 40, "stock": 70},
    {"name": "Himsagar Mango (1kg)", "category": "Fruits", "price": 180, "stock": 50},
]


def setup_database():
    """Create the storefront schema."""
    from shared.db import get_engine, setup_db

    print("Creating storefront database schema...")
    setup_db(get_engine())
    print("Done.")


def drop_database():
    """Drop the storefront schema."""
    from shared.db import drop_db, get_engine

    print("Dropping storefront database schema...")
    drop_db(get_engine())
    print("Done.")


def seed_catalogue():
    """Insert the starter products, but only into an empty catalogue."""
    from catalogue.product.creation import add_product
    from catalogue.product.listing import list_products
    from shared.db import get_session_factory

    with get_session_factory().begin() as session:
        if list_products(session):
            print("Catalogue already has products; nothing seeded.")
            return
        for product in SEED_PRODUCTS:
            add_product(session, **product)

    print(f"Seeded {len(SEED_PRODUCTS)} products.")


def main():
    from shared.logging import configure_logging

    configure_logging()

    parser = argparse.ArgumentParser(description="Storefront database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")
    subparsers.add_parser("seed", help="Add the starter catalogue to an empty database")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "seed":
        seed_catalogue()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
