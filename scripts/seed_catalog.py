#!/usr/bin/env python
"""Seed and inspect the catalog database for local development.

This script:
1. Creates the catalog tables if they are missing
2. Loads a small sample catalog through the regular services

Usage:
    # Create tables and load the sample catalog
    python scripts/seed_catalog.py --sample

    # Drop everything and start over
    python scripts/seed_catalog.py --reset --sample

    # Show what is stored
    python scripts/seed_catalog.py --list
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.infra.database import close_db_engine, create_tables, drop_tables, get_db_session
from app.infra.logging import setup_logging, get_logger
from app.schemas.category import CategoryPayload
from app.schemas.product import ProductPayload
from app.services.category_service import CategoryService
from app.services.product_service import ProductService


setup_logging()
logger = get_logger(__name__)


# Sample catalog: category payload -> product payloads
SAMPLE_CATALOG: list[tuple[dict, list[dict]]] = [
    (
        {"name": "Electrónica", "description": "Productos tecnológicos", "code": 10, "discount": 5.5},
        [
            {"name": "Audífonos", "price": 249.9, "stock": 50},
            {"name": "Teclado mecánico", "price": 150.0, "stock": 20},
            {"name": "Monitor 27", "price": 300.0, "stock": 8},
        ],
    ),
    (
        {"name": "Hogar", "description": "Artículos para el hogar", "code": 20},
        [
            {"name": "Lámpara de escritorio", "price": 45.0, "stock": 35},
            {"name": "Cafetera", "price": 89.9, "stock": 12},
        ],
    ),
    (
        {"name": "Libros", "code": 30, "discount": 10.0},
        [],
    ),
]


async def load_sample_catalog() -> tuple[int, int]:
    """Insert the sample catalog, skipping categories that already exist.

    Returns:
        Tuple of (categories_created, products_created)
    """
    categories_created = 0
    products_created = 0

    async with get_db_session() as session:
        categories = CategoryService(session)
        products = ProductService(session)

        existing = {c.name for c in await categories.list()}

        for category_data, product_rows in SAMPLE_CATALOG:
            if category_data["name"] in existing:
                logger.info("Category already present, skipping", name=category_data["name"])
                continue

            category = await categories.create(CategoryPayload(**category_data))
            categories_created += 1

            for product_data in product_rows:
                await products.create(ProductPayload(**product_data), category.id)
                products_created += 1

    return categories_created, products_created


async def print_catalog() -> None:
    """Print every category with its products."""
    async with get_db_session() as session:
        categories = CategoryService(session)
        rows = await categories.list()

        if not rows:
            print("  Catalog is empty")
            return

        for category in rows:
            print(f"  [{category.id}] {category.name} (code={category.code}, discount={category.discount})")
            for product in await categories.list_products(category.id) or []:
                print(f"      - [{product.id}] {product.name}: price={product.price} stock={product.stock}")


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Seed and inspect the catalog database",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--reset",
        action="store_true",
        help="Drop and recreate all catalog tables",
    )
    parser.add_argument(
        "--sample",
        action="store_true",
        help="Load the sample catalog",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="Print the stored catalog",
    )

    return parser.parse_args()


async def main() -> int:
    """Main entry point."""
    args = parse_args()

    if not (args.reset or args.sample or args.list):
        print("Error: nothing to do (use --sample, --reset or --list)")
        return 1

    try:
        if args.reset:
            await drop_tables()
        await create_tables()

        if args.sample:
            categories_created, products_created = await load_sample_catalog()
            print(f"\nSample catalog loaded: {categories_created} categories, {products_created} products")

        if args.list:
            print("\nCatalog:")
            print("-" * 60)
            await print_catalog()

    except Exception as e:
        logger.error("Seeding failed", error=str(e))
        return 1

    finally:
        await close_db_engine()

    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
