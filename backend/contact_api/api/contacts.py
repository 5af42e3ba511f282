"""
Contacts API - Manage the contact directory

Endpoints for:
- Listing and searching contacts
- Creating contacts (with an optional profile image)
- Updating and deleting contacts
- Looking up a contact's profile picture
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, UploadFile, status

from contact_api.api.deps import get_contact_service
from contact_api.config.constants import UPLOAD_READ_CHUNK_BYTES
from contact_api.schemas.contact import (
    ContactResponse,
    ContactUpdateRequest,
    ProfilePictureResponse,
    StatusMessage,
)
from contact_api.services.contact_service import ContactService
from contact_api.services.exceptions import (
    MissingFieldError,
    DuplicateContactError,
    ContactNotFoundError,
    StoreUnavailableError,
)

router = APIRouter(prefix="/contact", tags=["Contacts"])


@router.get("", response_model=List[ContactResponse])
async def list_contacts(service: ContactService = Depends(get_contact_service)):
    """List every contact."""
    try:
        contacts = await service.list_contacts()
    except StoreUnavailableError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return [ContactResponse.model_validate(c) for c in contacts]


@router.post("", response_model=StatusMessage, status_code=201)
async def create_contact(
    contact_name: Optional[str] = Form(None),
    phone_number: Optional[str] = Form(None),
    message: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    service: ContactService = Depends(get_contact_service),
):
    """Create a contact from multipart form data. `image` is optional."""
    image_data = None
    image_filename = None
    if image is not None and image.filename:
        chunks = []
        while chunk := await image.read(UPLOAD_READ_CHUNK_BYTES):
            chunks.append(chunk)
        image_data = b"".join(chunks)
        image_filename = image.filename

    try:
        await service.create_contact(
            contact_name,
            phone_number,
            message,
            image_data=image_data,
            image_filename=image_filename,
        )
    except DuplicateContactError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except MissingFieldError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except StoreUnavailableError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return StatusMessage(message="Contact added successfully")


@router.get("/name", response_model=List[ContactResponse])
async def search_contacts(
    contact_name: Optional[str] = Query(None),
    service: ContactService = Depends(get_contact_service),
):
    """Case-insensitive partial match on contact_name."""
    try:
        contacts = await service.search_by_name(contact_name)
    except MissingFieldError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except StoreUnavailableError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return [ContactResponse.model_validate(c) for c in contacts]


@router.get("/profile_picture/{contact_name}", response_model=ProfilePictureResponse)
async def get_profile_picture(
    contact_name: str,
    service: ContactService = Depends(get_contact_service),
):
    """Return the stored image path, or null if the contact has none."""
    try:
        picture = await service.get_profile_picture(contact_name)
    except ContactNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except StoreUnavailableError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return ProfilePictureResponse(picture=picture)


@router.delete("/{contact_id}", response_model=StatusMessage)
async def delete_contact(
    contact_id: int,
    service: ContactService = Depends(get_contact_service),
):
    """Delete a contact. Messages and image files are kept."""
    try:
        await service.delete_contact(contact_id)
    except ContactNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except StoreUnavailableError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return StatusMessage(message="Contact deleted successfully")


@router.put("/{contact_id}", response_model=StatusMessage)
async def update_contact(
    contact_id: int,
    req: Optional[ContactUpdateRequest] = None,
    service: ContactService = Depends(get_contact_service),
):
    """Overwrite name, phone number and note."""
    req = req or ContactUpdateRequest()
    try:
        await service.update_contact(contact_id, req.contact_name, req.phone_number, req.message)
    except ContactNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except DuplicateContactError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except MissingFieldError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except StoreUnavailableError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return StatusMessage(message="Contact updated successfully")
