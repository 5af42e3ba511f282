"""
Schemas Package

Pydantic models for API requests and responses.
"""

from contact_api.schemas.contact import (
    ContactResponse,
    ContactUpdateRequest,
    ProfilePictureResponse,
    StatusMessage,
)
from contact_api.schemas.message import MessageResponse, MessageCreateRequest
from contact_api.schemas.auth import LoginRequest, LoginResponse

__all__ = [
    "ContactResponse",
    "ContactUpdateRequest",
    "ProfilePictureResponse",
    "StatusMessage",
    "MessageResponse",
    "MessageCreateRequest",
    "LoginRequest",
    "LoginResponse",
]
