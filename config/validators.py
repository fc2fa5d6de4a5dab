"""
Configuration Validation for Status Poster Application

This module contains configuration validation logic and the loading of
the BlueSky credentials that are handed to the publisher.
"""

from dataclasses import dataclass
from typing import Optional

from utils.exceptions import ConfigurationError
from utils.logger import get_logger

logger = get_logger(__name__)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Credentials:
    """BlueSky account credentials."""
    identifier: str
    secret: str
    base_url: Optional[str] = None

    def __repr__(self) -> str:
        return f"Credentials(identifier={self.identifier!r}, secret='***', base_url={self.base_url!r})"


def validate_settings():
    """
    Validate that all required settings are properly configured.

    Raises:
        ConfigurationError: If required settings are missing or invalid.
    """
    # Import settings here to avoid circular imports
    from config import settings

    errors = []

    # Required environment variables
    required_vars = [
        ("BSKY_USERNAME", settings.BSKY_USERNAME),
        ("BSKY_PASSWORD", settings.BSKY_PASSWORD),
    ]

    for var_name, var_value in required_vars:
        if not var_value:
            errors.append(f"Missing required environment variable: {var_name}")

    if settings.LOG_LEVEL not in VALID_LOG_LEVELS:
        errors.append(f"LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}, got {settings.LOG_LEVEL}")

    # Raise all errors at once
    if errors:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ConfigurationError(error_msg)

    return True


def load_credentials() -> Credentials:
    """
    Validate settings and return the BlueSky credentials.

    Raises:
        ConfigurationError: If either credential is missing.
    """
    from config import settings

    validate_settings()
    logger.debug(f"Loaded BlueSky credentials for {settings.BSKY_USERNAME}")
    return Credentials(
        identifier=settings.BSKY_USERNAME,
        secret=settings.BSKY_PASSWORD,
        base_url=settings.BSKY_BASE_URL,
    )


def get_config_summary() -> dict:
    """
    Returns a summary of current configuration (without sensitive values).
    Useful for logging startup state.
    """
    # Import settings here to avoid circular imports
    from config import settings

    return {
        "bluesky": {
            "username_set": bool(settings.BSKY_USERNAME),
            "password_set": bool(settings.BSKY_PASSWORD),
            "base_url": settings.BSKY_BASE_URL or "default",
        },
        "post_settings": {
            "body_max_length": settings.UPDATE_BODY_MAX_LENGTH,
            "prefix": settings.POST_TEXT_PREFIX,
            "language": settings.POST_LANGUAGE,
        },
        "log_level": settings.LOG_LEVEL,
    }
