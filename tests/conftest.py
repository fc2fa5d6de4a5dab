"""
Shared Test Fixtures for Status Poster Application

This module provides common fixtures used across all test modules.
Fixtures include mocks for settings, the AT Protocol client and logging,
and factories for webhook payloads and data model objects.
"""

import pytest
from unittest.mock import MagicMock, patch
from datetime import datetime, timezone
from typing import Optional, Dict, Any, List
import json
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


# =============================================================================
# Settings Fixtures
# =============================================================================

@pytest.fixture
def mock_settings():
    """
    Mock the settings module with test configuration values.

    This fixture patches the config.settings module with safe test values,
    preventing tests from reading real BlueSky credentials.

    Usage:
        def test_something(mock_settings):
            mock_settings.BSKY_USERNAME = None
            # ... test code

    Returns:
        MagicMock: A mock settings object with default test values.
    """
    import config.settings  # noqa: F401  patch() needs the submodule loaded

    with patch('config.settings') as mock_settings_module:
        mock_settings_module.BSKY_USERNAME = "test-bsky-user"
        mock_settings_module.BSKY_PASSWORD = "test-bsky-password"
        mock_settings_module.BSKY_BASE_URL = None
        mock_settings_module.LOG_LEVEL = "INFO"

        mock_settings_module.UPDATE_BODY_MAX_LENGTH = 250
        mock_settings_module.TRUNCATION_SUFFIX = "..."
        mock_settings_module.POST_TEXT_PREFIX = "[update]"
        mock_settings_module.POST_LANGUAGE = "en"

        yield mock_settings_module


# =============================================================================
# Logging Fixtures
# =============================================================================

@pytest.fixture
def capture_logs():
    """
    Capture log messages for assertion in tests.

    Returns:
        list: A list that will contain captured log records.
    """
    import logging

    class LogCapture(logging.Handler):
        def __init__(self):
            super().__init__()
            self.records = []

        def emit(self, record):
            self.records.append(record)

    handler = LogCapture()
    handler.setLevel(logging.DEBUG)

    root_logger = logging.getLogger()
    original_level = root_logger.level
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(handler)

    yield handler.records

    root_logger.removeHandler(handler)
    root_logger.setLevel(original_level)


# =============================================================================
# AT Protocol Fixtures
# =============================================================================

@pytest.fixture
def mock_at_client():
    """Create a mock, already logged-in AT Protocol Client."""
    mock_client = MagicMock()
    mock_client.login.return_value = MagicMock()
    mock_client.me.did = "did:plc:testuser123"

    mock_response = MagicMock()
    mock_response.uri = "at://did:plc:testuser123/app.bsky.feed.post/abc123"
    mock_response.cid = "bafyreiabc123"
    mock_client.app.bsky.feed.post.create.return_value = mock_response

    return mock_client


@pytest.fixture
def mock_publisher():
    """Create a mock publisher satisfying PublisherProtocol."""
    publisher = MagicMock()
    publisher.authenticate.return_value = MagicMock(name="session")
    publisher.publish.return_value = "at://did:plc:testuser123/app.bsky.feed.post/abc123"
    return publisher


@pytest.fixture
def credentials():
    """Test BlueSky credentials."""
    from config.validators import Credentials
    return Credentials(identifier="test-bsky-user", secret="test-bsky-password")


# =============================================================================
# Payload Factories
# =============================================================================

@pytest.fixture
def update_payload_factory():
    """
    Factory fixture for creating incident update payload dicts.

    Usage:
        def test_update(update_payload_factory):
            update = update_payload_factory(body="Fixed", display_at="2024-01-02T00:00:00Z")
    """
    def _create_update(
        body: str = "We are investigating.",
        display_at: str = "2024-01-01T00:00:00Z",
        **extra
    ) -> Dict[str, Any]:
        update = {"body": body, "display_at": display_at}
        update.update(extra)
        return update

    return _create_update


@pytest.fixture
def payload_factory(update_payload_factory):
    """
    Factory fixture for creating Statuspage webhook payload dicts.

    Usage:
        def test_payload(payload_factory):
            payload = payload_factory(status="resolved", backfilled=True)
            raw = json.dumps(payload).encode()

    Returns:
        callable: A factory function for creating payload dicts.
    """
    def _create_payload(
        status: str = "investigating",
        shortlink: str = "https://status.example/1",
        name: str = "API outage",
        backfilled: Optional[bool] = False,
        updates: Optional[List[Dict[str, Any]]] = None,
        **extra
    ) -> Dict[str, Any]:
        if updates is None:
            updates = [update_payload_factory()]

        incident = {
            "status": status,
            "shortlink": shortlink,
            "name": name,
            "incident_updates": updates,
        }
        if backfilled is not None:
            incident["backfilled"] = backfilled
        incident.update(extra)
        return {"incident": incident}

    return _create_payload


@pytest.fixture
def raw_payload(payload_factory):
    """The default single-update payload serialized as request body bytes."""
    return json.dumps(payload_factory()).encode("utf-8")


# =============================================================================
# Data Model Factories
# =============================================================================

@pytest.fixture
def incident_factory():
    """
    Factory fixture for creating Incident test objects.

    Updates are given as (body, datetime) tuples.
    """
    from data.models import Incident, IncidentUpdate

    def _create_incident(
        updates=None,
        status: str = "investigating",
        shortlink: str = "https://status.example/1",
        name: str = "API outage",
        backfilled: bool = False,
    ) -> Incident:
        if updates is None:
            updates = [("We are investigating.", datetime(2024, 1, 1, tzinfo=timezone.utc))]

        return Incident(
            name=name,
            status=status,
            shortlink=shortlink,
            backfilled=backfilled,
            updates=[IncidentUpdate(body=body, display_at=display_at) for body, display_at in updates],
        )

    return _create_incident
