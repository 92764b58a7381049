import asyncio
from gotogether.models import Base  # noqa: F401 registers every model on the metadata
from gotogether.models.database import init_db


async def create_tables():
    """Create all database tables"""
    print("Creating database tables...")
    print("Tables to create:")
    for table in Base.metadata.sorted_tables:
        print(f"  - {table.name}")

    await init_db()

    print("✅ All tables created successfully!")
    print("\nDatabase schema ready for GoTogether")


if __name__ == "__main__":
    asyncio.run(create_tables())
