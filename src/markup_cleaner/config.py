# -*- coding: utf-8 -*-
"""
Markup cleaner configuration using Pydantic BaseSettings.
"""
from typing import List, Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Central service configuration loaded from environment variables.
    Pydantic's BaseSettings provides automatic validation, type casting,
    and reading from .env files.
    """

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8002

    # Logging
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # API Documentation (disable in production for security)
    DOCS_ENABLED: bool = True

    # CORS
    CORS_ORIGINS: List[str] = ["*"]
    CORS_ALLOW_CREDENTIALS: bool = False

    # Request tracking
    REQUEST_ID_HEADER: str = "X-Request-ID"

    # Compression
    GZIP_MIN_SIZE: int = 1000

    # Upper bound on accepted markup size (characters) for API requests
    MAX_MARKUP_LENGTH: int = 2_000_000

    # ==========================================================================
    # Normalization Pipeline Configuration
    # ==========================================================================

    # Step 2: unwrap <p> inside <li> and emphasize "Label:" prefixes
    ENABLE_LIST_ITEM_NORMALIZATION: bool = True

    # Step 3: remove elements without content or useful attributes
    ENABLE_EMPTY_PRUNING: bool = True

    # Step 4: hyperlink phone numbers and email addresses
    ENABLE_AUTO_LINKING: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


# Global configuration instance
settings = Settings()
