"""
Configuration Settings for Status Poster

This module centralizes all configuration settings for the Status Poster
application, including environment variables, credentials, and post
formatting constants.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Determine the application root directory
APP_ROOT = Path(__file__).resolve().parent.parent

# Load environment variables from .env file
load_dotenv(dotenv_path=os.path.join(APP_ROOT, '.env'))

# AT Protocol (BlueSky) Authentication
BSKY_USERNAME = os.getenv("BSKY_USERNAME")
BSKY_PASSWORD = os.getenv("BSKY_PASSWORD")
BSKY_BASE_URL = os.getenv("BSKY_BASE_URL") or None  # None uses the SDK default PDS

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# =============================================================================
# Post Formatting Settings
# =============================================================================

UPDATE_BODY_MAX_LENGTH = 250         # Max characters of the update body (before "...")
TRUNCATION_SUFFIX = "..."            # Appended when the body is cut
POST_TEXT_PREFIX = "[update]"        # Leading tag of every post
POST_LANGUAGE = "en"                 # Single language tag attached to posts

# =============================================================================
# HTTP Response Settings
# =============================================================================

SUCCESS_STATUS_CODE = 200
SUCCESS_CONTENT_TYPE = "text/html"
SUCCESS_BODY = "Success"
