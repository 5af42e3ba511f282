"""
Database Models Package

This module exports all SQLAlchemy models for the Contact Directory API.

Tables:
1. contact - Contact directory entries
2. message - Per-contact message threads
3. user - Login credentials and roles (read-only)
"""

from .database import (
    Base,
    create_engine_from_settings,
    create_session_factory,
    id_in_range,
    init_db,
    reset_db,
)

from .contact import Contact
from .message import Message
from .user import User

__all__ = [
    # Database utilities
    "Base",
    "create_engine_from_settings",
    "create_session_factory",
    "id_in_range",
    "init_db",
    "reset_db",

    # Models
    "Contact",
    "Message",
    "User",
]
