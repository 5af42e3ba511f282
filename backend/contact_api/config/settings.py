from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Database
    DB_USER: str = Field("contacts_admin")
    DB_PASSWORD: str = Field("ContactsPass2024")
    DB_NAME: str = Field("contact_directory")
    DB_HOST: str = Field("localhost")
    DB_PORT: int = Field(5432)
    DATABASE_URL: Optional[str] = Field(None)  # Full URL override (e.g. sqlite+aiosqlite)
    DB_ECHO: bool = Field(False)
    DB_CREATE_TABLES: bool = Field(True)

    # App
    API_HOST: str = Field("127.0.0.1")
    API_PORT: int = Field(3000)
    DEBUG: bool = Field(False)
    LOG_LEVEL: str = Field("INFO")
    CORS_ORIGINS: str = Field("*")

    # File Storage
    UPLOADS_DIR: str = Field("uploads")
    UPLOADS_URL_PREFIX: str = Field("/uploads")

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        env_file_encoding="utf-8"
    )

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+asyncpg://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )

    @property
    def cors_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


settings = Settings()
