from sqlalchemy import Column, DateTime, Integer, Text
from datetime import datetime

from .database import Base


class Message(Base):
    """Timestamped note attached to a contact"""
    __tablename__ = "message"

    # Primary key
    id = Column(Integer, primary_key=True, autoincrement=True)

    # Not a foreign key: messages may reference contacts that were deleted
    contact_id = Column(Integer, nullable=False, index=True)

    message = Column(Text, nullable=False)

    # Assigned by the server at insertion time
    message_timestamp = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)

    def __repr__(self):
        return f"<Message {self.id} for contact {self.contact_id}>"
