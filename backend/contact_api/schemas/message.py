from datetime import datetime
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field


class MessageResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    contact_id: int
    message: str
    message_timestamp: datetime


class MessageCreateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Any value accepted here; a non-numeric id fails the write (409)
    contact_id: Optional[Any] = Field(None, alias="contactId")
    message: Optional[str] = None
