"""
Contact Model - Contact Directory Entries

One row per directory entry. `contact_name` is unique at the store level so
concurrent creates with the same name cannot both succeed.
"""
from sqlalchemy import Column, Integer, String, Text, UniqueConstraint

from contact_api.config.constants import (
    CONTACT_NAME_MAX_LENGTH,
    PHONE_NUMBER_MAX_LENGTH,
    IMAGE_URL_MAX_LENGTH,
)
from .database import Base


class Contact(Base):
    """Contact directory entry"""
    __tablename__ = "contact"

    id = Column(Integer, primary_key=True, autoincrement=True)

    contact_name = Column(String(CONTACT_NAME_MAX_LENGTH), nullable=False)
    phone_number = Column(String(PHONE_NUMBER_MAX_LENGTH), nullable=False)

    # Free-text note about the contact
    message = Column(Text, nullable=False)

    # Retrievable path of the profile image (e.g. /uploads/1729350000000000000.png)
    image_url = Column(String(IMAGE_URL_MAX_LENGTH), nullable=True)

    __table_args__ = (
        UniqueConstraint('contact_name', name='uq_contact_name'),
    )

    def __repr__(self):
        return f"<Contact {self.id} {self.contact_name!r}>"
