from typing import Optional
from pydantic import BaseModel, ConfigDict


class ContactResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    contact_name: str
    phone_number: Optional[str] = None
    message: Optional[str] = None
    image_url: Optional[str] = None


class ContactUpdateRequest(BaseModel):
    # Presence is enforced by the store, not by the request model
    contact_name: Optional[str] = None
    phone_number: Optional[str] = None
    message: Optional[str] = None


class ProfilePictureResponse(BaseModel):
    picture: Optional[str] = None


class StatusMessage(BaseModel):
    message: str
