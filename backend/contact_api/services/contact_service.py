"""
Contact Service - Manage the contact directory

Encapsulates logic for:
- Enforcing unique contact names on create
- Listing, searching, updating and deleting contacts
- Storing an optional profile image and looking it up by name
"""
import logging
from typing import List, Optional

from sqlalchemy import select, update, delete
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from contact_api.models.contact import Contact
from contact_api.models.database import id_in_range
from contact_api.services.image_storage import ImageStorage
from contact_api.services.exceptions import (
    MissingFieldError,
    DuplicateContactError,
    ContactNotFoundError,
    StoreUnavailableError,
)

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "contact_name, phone_number and message are required"


class ContactService:
    """Service for the contact directory."""

    def __init__(self, session_factory: async_sessionmaker, image_storage: ImageStorage):
        self._session_factory = session_factory
        self._image_storage = image_storage

    async def list_contacts(self) -> List[Contact]:
        """Return every contact in insertion order."""
        async with self._session_factory() as db:
            try:
                result = await db.execute(select(Contact).order_by(Contact.id))
                return list(result.scalars().all())
            except SQLAlchemyError as e:
                logger.error(f"Error reading all contacts: {e}")
                raise StoreUnavailableError("Error reading all contacts") from e

    async def create_contact(
        self,
        contact_name: Optional[str],
        phone_number: Optional[str],
        message: Optional[str],
        image_data: Optional[bytes] = None,
        image_filename: Optional[str] = None,
    ) -> Contact:
        """
        Create a contact after checking the name is free.

        The image is written before the insert. If the insert is then
        rejected the file stays on disk.

        Raises:
            DuplicateContactError: name already taken (pre-check or constraint)
            MissingFieldError: the store rejected a missing required field
            StoreUnavailableError: any other store or disk failure
        """
        async with self._session_factory() as db:
            try:
                taken = await self._name_taken(db, contact_name)
            except SQLAlchemyError as e:
                logger.error(f"Database error during validation: {e}")
                raise StoreUnavailableError(f"Error checking contact name: {e}") from e

            if taken:
                logger.info(f"Rejected duplicate contact name {contact_name!r}")
                raise DuplicateContactError("Contact name already exists.")

            image_url = None
            if image_data is not None:
                image_url = await self._image_storage.save(image_data, image_filename)

            contact = Contact(
                contact_name=contact_name,
                phone_number=phone_number,
                message=message,
                image_url=image_url,
            )
            db.add(contact)
            try:
                await db.commit()
            except IntegrityError as e:
                await db.rollback()
                if None in (contact_name, phone_number, message):
                    raise MissingFieldError(REQUIRED_FIELDS_MESSAGE) from e
                logger.warning(f"Unique constraint rejected contact name {contact_name!r}")
                raise DuplicateContactError("Contact name already exists.") from e
            except SQLAlchemyError as e:
                await db.rollback()
                logger.error(f"Error adding contact: {e}")
                raise StoreUnavailableError(f"Error adding contact: {e}") from e

            logger.info(f"Created contact {contact.id} ({contact_name!r})")
            return contact

    async def delete_contact(self, contact_id: int) -> None:
        """Delete a contact. Its messages and image file are left in place."""
        if not id_in_range(contact_id):
            raise ContactNotFoundError("Contact not found")

        async with self._session_factory() as db:
            try:
                result = await db.execute(delete(Contact).where(Contact.id == contact_id))
                deleted = result.rowcount
                await db.commit()
            except SQLAlchemyError as e:
                await db.rollback()
                logger.error(f"Error deleting contact {contact_id}: {e}")
                raise StoreUnavailableError("Error deleting contact") from e

        if deleted == 0:
            raise ContactNotFoundError("Contact not found")
        logger.info(f"Deleted contact {contact_id}")

    async def update_contact(
        self,
        contact_id: int,
        contact_name: Optional[str],
        phone_number: Optional[str],
        message: Optional[str],
    ) -> None:
        """Overwrite name, phone and note. The image reference is untouched."""
        if not id_in_range(contact_id):
            raise ContactNotFoundError("Contact not found")

        stmt = (
            update(Contact)
            .where(Contact.id == contact_id)
            .values(contact_name=contact_name, phone_number=phone_number, message=message)
        )
        async with self._session_factory() as db:
            try:
                result = await db.execute(stmt)
                updated = result.rowcount
                await db.commit()
            except IntegrityError as e:
                await db.rollback()
                if None in (contact_name, phone_number, message):
                    raise MissingFieldError(REQUIRED_FIELDS_MESSAGE) from e
                raise DuplicateContactError("Contact name already exists.") from e
            except SQLAlchemyError as e:
                await db.rollback()
                logger.error(f"Error updating contact {contact_id}: {e}")
                raise StoreUnavailableError("Error updating contact") from e

        if updated == 0:
            raise ContactNotFoundError("Contact not found")
        logger.info(f"Updated contact {contact_id}")

    async def search_by_name(self, contact_name: Optional[str]) -> List[Contact]:
        """Case-insensitive substring search. No match is an empty list."""
        if not contact_name:
            raise MissingFieldError("contact_name is required")

        stmt = (
            select(Contact)
            .where(Contact.contact_name.icontains(contact_name, autoescape=True))
            .order_by(Contact.id)
        )
        async with self._session_factory() as db:
            try:
                result = await db.execute(stmt)
                return list(result.scalars().all())
            except SQLAlchemyError as e:
                logger.error(f"Error fetching contacts: {e}")
                raise StoreUnavailableError("Error fetching contacts") from e

    async def get_profile_picture(self, contact_name: str) -> Optional[str]:
        """
        Look up the image reference for an exact contact name.

        Returns None when the contact exists without an image; raises
        ContactNotFoundError when no contact has that name.
        """
        async with self._session_factory() as db:
            try:
                result = await db.execute(
                    select(Contact.image_url).where(Contact.contact_name == contact_name)
                )
                row = result.first()
            except SQLAlchemyError as e:
                logger.error(f"Error fetching profile picture for {contact_name!r}: {e}")
                raise StoreUnavailableError(f"Error fetching Profile Picture: {e}") from e

        if row is None:
            raise ContactNotFoundError("Profile picture not found")
        return row.image_url

    @staticmethod
    async def _name_taken(db: AsyncSession, contact_name: Optional[str]) -> bool:
        result = await db.execute(
            select(Contact.id).where(Contact.contact_name == contact_name).limit(1)
        )
        return result.first() is not None
