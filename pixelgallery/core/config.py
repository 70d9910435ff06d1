

import os

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings model.

    All configuration variables are loaded from environment variables
    with fallback defaults for development.
    """

    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./data.sqlite")

    # Public base URL used to build self and next links
    api_base_url: str = os.getenv("API_BASE_URL", "http://localhost:8000")

    # Caller identity header: "<scheme> <prefix><subject>"
    auth_scheme: str = os.getenv("AUTH_SCHEME", "Bearer")
    auth_sub_prefix: str = os.getenv("AUTH_SUB_PREFIX", "sub:")

    # Pagination
    default_page_limit: int = int(os.getenv("DEFAULT_PAGE_LIMIT", "5"))

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Debug endpoints (/debug/db, /debug/reset, /debug/serialize)
    enable_debug_routes: bool = os.getenv("ENABLE_DEBUG_ROUTES", "false").lower() in ("1", "true", "yes")

    # Server
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))
    reload: bool = os.getenv("RELOAD", "false").lower() in ("1", "true", "yes")

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


# Global settings instance
settings = Settings()
