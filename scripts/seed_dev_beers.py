"""Seed script for populating a development beer catalog."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

import sys
from pathlib import Path

# Ensure project root is on PYTHONPATH when running as a script.
ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from app.api.deps import build_beer_service
from app.core.config import settings
from app.db.session_async import AsyncSessionLocal
from app.schemas.beer import BeerCreate
from app.services.exceptions import BeerAlreadyRegisteredError


@dataclass(frozen=True, slots=True)
class DevBeer:
    name: str
    quantity: int
    max: int


DEV_BEERS: tuple[DevBeer, ...] = (
    DevBeer(name="Skol", quantity=10, max=50),
    DevBeer(name="Brahma", quantity=25, max=60),
    DevBeer(name="Heineken", quantity=0, max=40),
    DevBeer(name="Guinness", quantity=12, max=20),
    DevBeer(name="Paulaner Weissbier", quantity=5, max=30),
)


async def seed_dev_beers() -> None:
    """Insert the development beers that are not registered yet."""
    logger = logging.getLogger("seed_dev_beers")
    logger.info("Seeding development beers into %s", settings.ASYNC_DATABASE_URL)

    created = 0
    skipped = 0

    async with AsyncSessionLocal() as session:
        service = build_beer_service(session)
        for dev_beer in DEV_BEERS:
            try:
                await service.create(
                    BeerCreate(name=dev_beer.name, quantity=dev_beer.quantity, max=dev_beer.max)
                )
            except BeerAlreadyRegisteredError:
                skipped += 1
                logger.debug("Skipped beer %s (already registered)", dev_beer.name)
                continue
            created += 1
            logger.debug("Created beer %s", dev_beer.name)

        await session.commit()

    logger.info("Seed completed: %s created, %s skipped", created, skipped)


async def main() -> None:
    await seed_dev_beers()


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
