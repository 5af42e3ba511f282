from datetime import datetime, timedelta

import pytest

from contact_api.models.database import reset_db
from contact_api.models.message import Message
from contact_api.services.exceptions import MessageWriteError, StoreUnavailableError


@pytest.mark.asyncio
async def test_messages_listed_newest_first(message_service):
    for i in range(5):
        await message_service.append_message(7, f"message {i}")

    messages = await message_service.list_messages(7)

    assert len(messages) == 5
    assert [m.message for m in messages] == [f"message {i}" for i in reversed(range(5))]
    timestamps = [m.message_timestamp for m in messages]
    assert timestamps == sorted(timestamps, reverse=True)


@pytest.mark.asyncio
async def test_ordering_follows_timestamp_not_insertion(message_service, session_factory):
    now = datetime.utcnow()
    async with session_factory() as db:
        db.add_all([
            Message(contact_id=1, message="middle", message_timestamp=now - timedelta(minutes=5)),
            Message(contact_id=1, message="newest", message_timestamp=now),
            Message(contact_id=1, message="oldest", message_timestamp=now - timedelta(days=1)),
        ])
        await db.commit()

    messages = await message_service.list_messages(1)

    assert [m.message for m in messages] == ["newest", "middle", "oldest"]


@pytest.mark.asyncio
async def test_messages_scoped_to_contact(message_service):
    await message_service.append_message(1, "for one")
    await message_service.append_message(2, "for two")

    messages = await message_service.list_messages(1)

    assert [m.message for m in messages] == ["for one"]


@pytest.mark.asyncio
async def test_unknown_contact_has_no_messages(message_service):
    assert await message_service.list_messages(424242) == []
    assert await message_service.list_messages("not-a-number") == []


@pytest.mark.asyncio
async def test_numeric_string_contact_id(message_service):
    await message_service.append_message("3", "from a form field")

    messages = await message_service.list_messages("3")
    assert messages[0].contact_id == 3


@pytest.mark.asyncio
async def test_append_sets_server_timestamp(message_service):
    before = datetime.utcnow()
    message = await message_service.append_message(1, "hello")

    assert message.id is not None
    assert before <= message.message_timestamp <= datetime.utcnow()


@pytest.mark.asyncio
@pytest.mark.parametrize("contact_id", [None, "abc", "", True])
async def test_append_with_invalid_contact_id_conflicts(message_service, contact_id):
    with pytest.raises(MessageWriteError):
        await message_service.append_message(contact_id, "hello")


@pytest.mark.asyncio
async def test_append_without_text_conflicts(message_service):
    with pytest.raises(MessageWriteError):
        await message_service.append_message(1, None)

    assert await message_service.list_messages(1) == []


@pytest.mark.asyncio
async def test_store_failures(message_service, engine):
    await reset_db(engine)

    with pytest.raises(MessageWriteError):
        await message_service.append_message(1, "hello")
    with pytest.raises(StoreUnavailableError):
        await message_service.list_messages(1)


@pytest.mark.asyncio
@pytest.mark.parametrize("contact_id", [0, -3, 2**31, 10**30, str(10**30)])
async def test_out_of_range_contact_id(message_service, contact_id):
    assert await message_service.list_messages(contact_id) == []

    with pytest.raises(MessageWriteError):
        await message_service.append_message(contact_id, "hello")
