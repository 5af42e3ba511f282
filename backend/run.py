"""
Start the Contact Directory API with uvicorn.

Usage:
    python run.py

Host and port come from API_HOST / API_PORT (see contact_api.config.settings).
"""
import uvicorn

from contact_api.config.settings import settings

if __name__ == "__main__":
    uvicorn.run(
        "contact_api.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
