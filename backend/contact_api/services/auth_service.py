"""
Auth Service - Credential check for the login endpoint

Note: passwords are stored and compared as plain text, matching the
existing `user` table. No tokens or sessions are issued; the caller only
learns the role.
"""
import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker

from contact_api.models.user import User
from contact_api.services.exceptions import (
    MissingFieldError,
    InvalidCredentialsError,
    StoreUnavailableError,
)

logger = logging.getLogger(__name__)


class AuthService:

    def __init__(self, session_factory: async_sessionmaker):
        self._session_factory = session_factory

    async def verify_credentials(self, username: Optional[str], password: Optional[str]) -> str:
        """Return the role of the first user row matching both fields."""
        if not username or not password:
            raise MissingFieldError("Username and password are required.")

        stmt = (
            select(User)
            .where(User.username == username, User.password == password)
            .order_by(User.id)
            .limit(1)
        )
        async with self._session_factory() as db:
            try:
                result = await db.execute(stmt)
                user = result.scalar_one_or_none()
            except SQLAlchemyError as e:
                logger.error(f"Database error during login: {e}")
                raise StoreUnavailableError("An error occurred. Please try again.") from e

        if user is None:
            logger.info(f"Failed login for {username!r}")
            raise InvalidCredentialsError("Invalid username or password.")

        return user.role
