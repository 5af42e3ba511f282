import pytest

from contact_api.services.exceptions import (
    InvalidCredentialsError,
    MissingFieldError,
)
from tests.helpers import seed_user


@pytest.mark.asyncio
async def test_correct_credentials_return_role(auth_service, session_factory):
    await seed_user(session_factory, "admin", "password1!", "admin")

    assert await auth_service.verify_credentials("admin", "password1!") == "admin"


@pytest.mark.asyncio
async def test_wrong_password_is_unauthorized(auth_service, session_factory):
    await seed_user(session_factory, "admin", "password1!", "admin")

    with pytest.raises(InvalidCredentialsError):
        await auth_service.verify_credentials("admin", "wrong")


@pytest.mark.asyncio
async def test_unknown_user_is_unauthorized(auth_service):
    with pytest.raises(InvalidCredentialsError):
        await auth_service.verify_credentials("ghost", "password")


@pytest.mark.asyncio
async def test_username_match_is_exact(auth_service, session_factory):
    await seed_user(session_factory, "admin", "pw", "admin")

    with pytest.raises(InvalidCredentialsError):
        await auth_service.verify_credentials("ADMIN", "pw")


@pytest.mark.asyncio
@pytest.mark.parametrize("username,password", [
    (None, "pw"),
    ("admin", None),
    ("", "pw"),
    ("admin", ""),
])
async def test_missing_fields(auth_service, username, password):
    with pytest.raises(MissingFieldError):
        await auth_service.verify_credentials(username, password)


@pytest.mark.asyncio
async def test_duplicate_rows_use_first_role(auth_service, session_factory):
    await seed_user(session_factory, "shared", "pw", "viewer")
    await seed_user(session_factory, "shared", "pw", "admin")

    assert await auth_service.verify_credentials("shared", "pw") == "viewer"

