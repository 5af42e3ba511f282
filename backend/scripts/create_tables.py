"""
Create the contact, message and user tables.

Usage (from the backend directory):
    python -m scripts.create_tables
"""
import asyncio

from contact_api.config.settings import settings
from contact_api.models.database import create_engine_from_settings, init_db


async def create_tables():
    """Create all database tables"""
    print("Creating database tables...")
    print("Tables to create:")
    print("  - contact")
    print("  - message")
    print("  - user")

    engine = create_engine_from_settings(settings)
    try:
        await init_db(engine)
    finally:
        await engine.dispose()

    print("✅ All tables created successfully!")


if __name__ == "__main__":
    asyncio.run(create_tables())
