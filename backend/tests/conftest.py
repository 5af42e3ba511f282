import httpx
import pytest

from contact_api.config.settings import Settings
from contact_api.main import create_app
from contact_api.models.database import (
    create_engine_from_settings,
    create_session_factory,
    init_db,
)
from contact_api.services.auth_service import AuthService
from contact_api.services.contact_service import ContactService
from contact_api.services.image_storage import ImageStorage
from contact_api.services.message_service import MessageService


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """In-memory SQLite and a throwaway upload folder per test."""
    return Settings(
        DATABASE_URL="sqlite+aiosqlite:///:memory:",
        DB_CREATE_TABLES=True,
        UPLOADS_DIR=str(tmp_path / "uploads"),
        UPLOADS_URL_PREFIX="/uploads",
        CORS_ORIGINS="*",
    )


@pytest.fixture
async def engine(test_settings):
    engine = create_engine_from_settings(test_settings)
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture
def image_storage(test_settings) -> ImageStorage:
    storage = ImageStorage(test_settings.UPLOADS_DIR, test_settings.UPLOADS_URL_PREFIX)
    storage.ensure_directory()
    return storage


@pytest.fixture
def contact_service(session_factory, image_storage) -> ContactService:
    return ContactService(session_factory, image_storage)


@pytest.fixture
def message_service(session_factory) -> MessageService:
    return MessageService(session_factory)


@pytest.fixture
def auth_service(session_factory) -> AuthService:
    return AuthService(session_factory)


@pytest.fixture
async def app(test_settings):
    """Application with its lifespan running (engine, tables, services)."""
    application = create_app(test_settings)
    async with application.router.lifespan_context(application):
        yield application


@pytest.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
