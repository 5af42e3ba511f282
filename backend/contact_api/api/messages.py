"""
Messages API - Per-contact message threads
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from contact_api.api.deps import get_message_service
from contact_api.schemas.contact import StatusMessage
from contact_api.schemas.message import MessageCreateRequest, MessageResponse
from contact_api.services.message_service import MessageService
from contact_api.services.exceptions import MessageWriteError, StoreUnavailableError

router = APIRouter(prefix="/contact", tags=["Messages"])


@router.get("/messages/{contact_id}", response_model=List[MessageResponse])
async def list_messages(
    contact_id: str,
    service: MessageService = Depends(get_message_service),
):
    """List a contact's messages, newest first."""
    try:
        messages = await service.list_messages(contact_id)
    except StoreUnavailableError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return [MessageResponse.model_validate(m) for m in messages]


@router.post("/messages", response_model=StatusMessage, status_code=201)
async def add_message(
    req: Optional[MessageCreateRequest] = None,
    service: MessageService = Depends(get_message_service),
):
    """Append a message to a contact's thread."""
    req = req or MessageCreateRequest()
    try:
        await service.append_message(req.contact_id, req.message)
    except MessageWriteError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return StatusMessage(message="Message added successfully")
