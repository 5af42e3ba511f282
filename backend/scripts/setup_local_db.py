"""
Create the PostgreSQL database named by DB_NAME if it does not exist.

Connects to the maintenance database `postgres` with the configured
credentials. Run from the backend directory:
    python -m scripts.setup_local_db
"""
import asyncio

import asyncpg

from contact_api.config.settings import settings


async def setup_db():
    print(f"🔌 Connecting to PostgreSQL at {settings.DB_HOST}:{settings.DB_PORT} as {settings.DB_USER}...")

    try:
        sys_conn = await asyncpg.connect(
            user=settings.DB_USER,
            password=settings.DB_PASSWORD,
            database="postgres",
            host=settings.DB_HOST,
            port=settings.DB_PORT,
        )
    except (OSError, asyncpg.PostgresError) as e:
        print(f"❌ Connection failed: {e}")
        print("Check DB_HOST, DB_PORT, DB_USER and DB_PASSWORD in .env")
        raise SystemExit(1)

    try:
        exists = await sys_conn.fetchval(
            "SELECT 1 FROM pg_database WHERE datname = $1", settings.DB_NAME
        )
        if exists:
            print(f"✅ Database '{settings.DB_NAME}' already exists.")
        else:
            print(f"📦 Creating database '{settings.DB_NAME}'...")
            await sys_conn.execute(f'CREATE DATABASE "{settings.DB_NAME}"')
            print("✅ Database created!")
    finally:
        await sys_conn.close()


if __name__ == "__main__":
    asyncio.run(setup_db())
