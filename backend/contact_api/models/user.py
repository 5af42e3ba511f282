"""
User Model - Login Credentials

Read-only from the API's point of view: rows are seeded by
scripts/add_user.py. Passwords are stored and compared as plain text.
"""
from sqlalchemy import Column, Integer, String

from contact_api.config.constants import (
    USERNAME_MAX_LENGTH,
    PASSWORD_MAX_LENGTH,
    ROLE_MAX_LENGTH,
)
from .database import Base


class User(Base):
    """Credential record used by the login check"""
    __tablename__ = "user"

    id = Column(Integer, primary_key=True, autoincrement=True)

    # Column keeps the legacy name `user`
    username = Column("user", String(USERNAME_MAX_LENGTH), nullable=False, index=True)
    password = Column(String(PASSWORD_MAX_LENGTH), nullable=False)
    role = Column(String(ROLE_MAX_LENGTH), nullable=False)

    def __repr__(self):
        return f"<User {self.username} ({self.role})>"
