"""
Add a login credential row to the `user` table.

The API never writes this table; use this script to seed accounts.

Usage (from the backend directory):
    python -m scripts.add_user admin 'password1!' admin
"""
import argparse
import asyncio

from contact_api.config.settings import settings
from contact_api.models.database import create_engine_from_settings, create_session_factory
from contact_api.models.user import User


async def add_user(username: str, password: str, role: str):
    engine = create_engine_from_settings(settings)
    try:
        session_factory = create_session_factory(engine)
        async with session_factory() as db:
            db.add(User(username=username, password=password, role=role))
            await db.commit()
    finally:
        await engine.dispose()
    print(f"✅ Added user '{username}' with role '{role}'")


def main():
    parser = argparse.ArgumentParser(description="Seed a credential row for /contact/login")
    parser.add_argument("username")
    parser.add_argument("password")
    parser.add_argument("role")
    args = parser.parse_args()
    asyncio.run(add_user(args.username, args.password, args.role))


if __name__ == "__main__":
    main()
