from typing import Optional

import httpx
from sqlalchemy import func, select

from contact_api.models.contact import Contact
from contact_api.models.user import User

# Smallest valid PNG (1x1 transparent pixel)
PNG_BYTES = (
    b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01\x08\x06"
    b"\x00\x00\x00\x1f\x15\xc4\x89\x00\x00\x00\rIDATx\x9cc\xf8\x0f\x00\x00\x01\x01"
    b"\x00\x05\x18\xd8N\x00\x00\x00\x00IEND\xaeB`\x82"
)


async def seed_user(session_factory, username: str, password: str, role: str) -> None:
    async with session_factory() as db:
        db.add(User(username=username, password=password, role=role))
        await db.commit()


async def count_contacts(session_factory, contact_name: Optional[str] = None) -> int:
    stmt = select(func.count(Contact.id))
    if contact_name is not None:
        stmt = stmt.where(Contact.contact_name == contact_name)
    async with session_factory() as db:
        return await db.scalar(stmt)


async def post_contact(
    client: httpx.AsyncClient,
    contact_name: str,
    phone_number: str = "555-0100",
    message: str = "hi",
    image: Optional[bytes] = None,
    image_filename: str = "avatar.png",
) -> httpx.Response:
    data = {
        "contact_name": contact_name,
        "phone_number": phone_number,
        "message": message,
    }
    files = None
    if image is not None:
        files = {"image": (image_filename, image, "image/png")}
    return await client.post("/contact", data=data, files=files)
