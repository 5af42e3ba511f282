"""
Message Service - Per-contact message threads

Messages are append-only. The contact id is not checked against the
contact table: unknown ids simply have no messages.
"""
import logging
from datetime import datetime
from typing import Any, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker

from contact_api.models.database import id_in_range
from contact_api.models.message import Message
from contact_api.services.exceptions import MessageWriteError, StoreUnavailableError

logger = logging.getLogger(__name__)


def _coerce_contact_id(value: Any) -> Optional[int]:
    """Accept ints and numeric strings within the key range; anything else has no valid id."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        cid = value
    else:
        try:
            cid = int(str(value).strip())
        except ValueError:
            return None
    return cid if id_in_range(cid) else None


class MessageService:
    """Service for appending and listing contact messages."""

    def __init__(self, session_factory: async_sessionmaker):
        self._session_factory = session_factory

    async def list_messages(self, contact_id: Any) -> List[Message]:
        """Messages for a contact, most recent first."""
        cid = _coerce_contact_id(contact_id)
        if cid is None:
            return []

        stmt = (
            select(Message)
            .where(Message.contact_id == cid)
            .order_by(Message.message_timestamp.desc(), Message.id.desc())
        )
        async with self._session_factory() as db:
            try:
                result = await db.execute(stmt)
                return list(result.scalars().all())
            except SQLAlchemyError as e:
                logger.error(f"Error fetching messages for contact {cid}: {e}")
                raise StoreUnavailableError(f"Error fetching Messages: {e}") from e

    async def append_message(self, contact_id: Any, text: Optional[str]) -> Message:
        """
        Insert a message stamped with the current time.

        Every failure to write, including a missing or non-numeric
        contact id, is reported as MessageWriteError.
        """
        cid = _coerce_contact_id(contact_id)
        if cid is None:
            logger.warning(f"Rejected message with invalid contact id {contact_id!r}")
            raise MessageWriteError("Error adding message: a numeric contactId is required")

        message = Message(
            contact_id=cid,
            message=text,
            message_timestamp=datetime.utcnow(),
        )
        async with self._session_factory() as db:
            db.add(message)
            try:
                await db.commit()
            except SQLAlchemyError as e:
                await db.rollback()
                logger.error(f"Error adding message for contact {cid}: {e}")
                raise MessageWriteError(f"Error adding message: {e}") from e

        return message
