"""Database seed script — fills the products table with mock data.

Run: python -m products_api.seed [--count 100]
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import random

from sqlalchemy import delete, func, select

from products_api.db.base import async_session_factory, dispose_db, init_db
from products_api.domain.product import Product

logger = logging.getLogger(__name__)

CATEGORIES = [
    "Electronics", "Accessories", "Computers", "Gaming", "Smartphones",
    "Audio", "Wearables", "Home Appliances", "Cameras", "Networking",
]

_PREFIXES = [
    "Pro", "Ultra", "Premium", "Smart", "Advanced", "Wireless", "Portable",
    "Digital", "HD", "4K", "Bluetooth", "Gaming", "Professional", "Mini",
    "Compact", "Deluxe", "Elite", "Supreme", "Classic", "Modern",
]

_TYPES = [
    "Laptop", "Mouse", "Keyboard", "Monitor", "Headphones", "Smartphone",
    "Tablet", "Smartwatch", "Speaker", "Webcam", "Microphone", "Router",
    "Camera", "Printer", "Scanner", "External Drive", "Power Bank",
    "USB Cable", "Phone Case", "Screen Protector", "Charger", "Adapter",
    "Hub", "Dock", "Stand", "Light", "Fan", "Cooler", "Cleaner", "Bag",
]

_SUFFIXES = [
    "X1", "X2", "Pro", "Plus", "Max", "Air", "Ultra", "Lite", "SE", "XL",
    "2024", "2023", "Gen 2", "Gen 3", "V2", "V3", "Edition", "Series",
]

_DESCRIPTIONS = [
    "High-quality product with advanced features",
    "Perfect for professionals and enthusiasts",
    "Sleek design with powerful performance",
    "Innovative technology for modern users",
    "Premium build quality and reliability",
    "Compact and portable design",
    "Enhanced functionality and ease of use",
    "Industry-leading performance",
    "Cutting-edge technology",
    "Best-in-class features",
    "Ergonomic design for comfort",
    "Energy efficient and eco-friendly",
    "Durable and long-lasting",
    "Versatile and multifunctional",
    "Easy to set up and use",
]

# (min, max, weight)
_PRICE_RANGES = [
    (9.99, 49.99, 0.30),
    (50.0, 199.99, 0.30),
    (200.0, 999.99, 0.25),
    (1000.0, 2999.99, 0.15),
]


def generate_name(rng: random.Random) -> str:
    prefix, kind, suffix = rng.choice(_PREFIXES), rng.choice(_TYPES), rng.choice(_SUFFIXES)
    roll = rng.random()
    if roll < 0.33:
        return f"{prefix} {kind}"
    if roll < 0.66:
        return f"{kind} {suffix}"
    return f"{prefix} {kind} {suffix}"


def generate_price(rng: random.Random) -> float:
    low, high, _ = rng.choices(_PRICE_RANGES, weights=[w for *_, w in _PRICE_RANGES])[0]
    return round(rng.uniform(low, high), 2)


def generate_quantity(rng: random.Random) -> int:
    roll = rng.random()
    if roll < 0.1:
        return 0  # out of stock
    if roll < 0.3:
        return rng.randint(1, 10)
    if roll < 0.7:
        return rng.randint(10, 59)
    return rng.randint(50, 249)


def generate_description(rng: random.Random) -> str:
    first, second = rng.choice(_DESCRIPTIONS), rng.choice(_DESCRIPTIONS)
    return first if rng.random() < 0.5 else f"{first}. {second}."


def generate_products(count: int, rng: random.Random | None = None) -> list[dict]:
    """Return *count* product dicts with unique names."""
    rng = rng or random.Random()
    max_unique = len(_PREFIXES) * len(_TYPES) + len(_TYPES) * len(_SUFFIXES) \
        + len(_PREFIXES) * len(_TYPES) * len(_SUFFIXES)
    if count > max_unique:
        raise ValueError(f"Cannot generate more than {max_unique} unique product names")

    used: set[str] = set()
    products: list[dict] = []
    while len(products) < count:
        name = generate_name(rng)
        if name in used:
            continue
        used.add(name)
        products.append(
            {
                "name": name,
                "description": generate_description(rng),
                "price": generate_price(rng),
                "quantity": generate_quantity(rng),
                "category": rng.choice(CATEGORIES),
            }
        )
    return products


async def seed(count: int = 100, rng: random.Random | None = None) -> dict:
    """Clear the products table, insert *count* mock rows, return summary stats."""
    await init_db()
    async with async_session_factory() as session:
        async with session.begin():
            await session.execute(delete(Product))
            logger.info("Existing products cleared")
            session.add_all(Product(**data) for data in generate_products(count, rng))
        logger.info("Inserted %d products", count)

        row = (
            await session.execute(
                select(func.count(), func.sum(Product.quantity), func.avg(Product.price))
                .select_from(Product)
            )
        ).one()

    stats = {
        "total": row[0],
        "total_quantity": row[1] or 0,
        "average_price": round(row[2] or 0.0, 2),
    }
    logger.info(
        "Total products: %d | Total inventory: %d units | Average price: $%.2f",
        stats["total"], stats["total_quantity"], stats["average_price"],
    )
    return stats


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Seed the products table with mock data.")
    parser.add_argument("--count", type=int, default=100, help="Number of products to insert")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for repeatable data")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    async def _run() -> None:
        try:
            await seed(args.count, random.Random(args.seed))
        finally:
            await dispose_db()

    asyncio.run(_run())


if __name__ == "__main__":
    main()
