from fastapi import APIRouter, Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from contact_api.api import auth
from contact_api.api import contacts
from contact_api.api import messages

router = APIRouter()


@router.get("/health")
async def health(request: Request):
    """Report whether the database answers."""
    try:
        async with request.app.state.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        database = "connected"
    except SQLAlchemyError:
        database = "disconnected"
    return {"status": "ok" if database == "connected" else "degraded", "database": database}


# Static segments (/login, /messages, /name) are registered before /{contact_id}
router.include_router(auth.router)
router.include_router(messages.router)
router.include_router(contacts.router)
