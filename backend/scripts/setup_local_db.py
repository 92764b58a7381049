import asyncio
import asyncpg
from gotogether.config.settings import settings

# Force the superuser for local setup; the app user may not exist yet
DB_USER = "postgres"
DB_HOST = "localhost"


async def setup_db():
    print(f"🔌 Connecting to PostgreSQL at {DB_HOST} as {DB_USER}...")

    try:
        # Connect to default 'postgres' database to create the new one
        sys_conn = await asyncpg.connect(
            user=DB_USER,
            password=settings.DB_PASSWORD,
            database='postgres',
            host=DB_HOST,
            port=settings.DB_PORT
        )
    except (OSError, asyncpg.PostgresError) as e:
        print(f"❌ Connection failed: {e}")
        print("\nPlease ensure:")
        print("1. PostgreSQL is running")
        print("2. You updated DB_PASSWORD in .env")
        print("3. You are using the 'postgres' user (we will use this for local dev)")
        return

    try:
        exists = await sys_conn.fetchval("SELECT 1 FROM pg_database WHERE datname = $1", settings.DB_NAME)

        if not exists:
            print(f"📦 Creating database '{settings.DB_NAME}'...")
            await sys_conn.execute(f'CREATE DATABASE "{settings.DB_NAME}"')
            print("✅ Database created!")
        else:
            print(f"✅ Database '{settings.DB_NAME}' already exists.")
    finally:
        await sys_conn.close()


if __name__ == "__main__":
    # Run from the backend directory so 'gotogether' is importable
    asyncio.run(setup_db())
