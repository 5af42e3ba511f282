"""
Contact Directory API - Main Application

This is the entry point for the FastAPI application.
It handles:
- REST API endpoints (contacts, messages, login)
- Static serving of uploaded profile images
- Engine, storage and service construction for the process lifetime
"""
from contextlib import asynccontextmanager
import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from contact_api.api import router as api_router
from contact_api.config.settings import Settings, settings as default_settings
from contact_api.models.database import create_engine_from_settings, create_session_factory, init_db
from contact_api.services.auth_service import AuthService
from contact_api.services.contact_service import ContactService
from contact_api.services.image_storage import ImageStorage
from contact_api.services.message_service import MessageService

logger = logging.getLogger(__name__)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed requests are reported as 400 rather than FastAPI's 422."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid request", "errors": jsonable_encoder(exc.errors())},
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application. Collaborators are created in the lifespan."""
    settings = settings or default_settings
    logging.basicConfig(level=settings.LOG_LEVEL.upper())

    image_storage = ImageStorage(settings.UPLOADS_DIR, settings.UPLOADS_URL_PREFIX)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan manager.

        Opens the database engine and wires the services at startup,
        disposes the engine at shutdown.
        """
        # === STARTUP ===
        logger.info("🚀 Starting Contact Directory API...")

        image_storage.ensure_directory()

        engine = create_engine_from_settings(settings)
        if settings.DB_CREATE_TABLES:
            await init_db(engine)
            logger.info("✅ Database tables created")

        session_factory = create_session_factory(engine)
        app.state.engine = engine
        app.state.session_factory = session_factory
        app.state.image_storage = image_storage
        app.state.contact_service = ContactService(session_factory, image_storage)
        app.state.message_service = MessageService(session_factory)
        app.state.auth_service = AuthService(session_factory)
        logger.info("✅ Services ready")

        yield  # Application runs here

        # === SHUTDOWN ===
        logger.info("🛑 Shutting down...")
        await engine.dispose()

    app = FastAPI(
        title="Contact Directory API",
        description="Contacts, profile pictures and per-contact messages",
        version="1.0.0",
        debug=settings.DEBUG,
        lifespan=lifespan
    )
    app.state.settings = settings

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(api_router)

    # Folder is created in the lifespan, so skip the mount-time check
    app.mount(
        image_storage.url_prefix,
        StaticFiles(directory=settings.UPLOADS_DIR, check_dir=False),
        name="uploads",
    )

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "name": "Contact Directory API",
            "version": "1.0.0",
            "status": "running"
        }

    return app


app = create_app()
