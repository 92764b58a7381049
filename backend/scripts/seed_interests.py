"""Seed the default interest tags. Safe to run repeatedly."""
import asyncio

from gotogether.config.constants import DEFAULT_INTERESTS
from gotogether.models.database import AsyncSessionLocal, init_db
from gotogether.services.interest_service import interest_service


async def seed_interests():
    await init_db()
    async with AsyncSessionLocal() as db:
        for name, description in DEFAULT_INTERESTS:
            interest = await interest_service.upsert(db, name, description)
            print(f"  - {interest.name}")
    print(f"✅ Seeded {len(DEFAULT_INTERESTS)} interests")


if __name__ == "__main__":
    asyncio.run(seed_interests())
