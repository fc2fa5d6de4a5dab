"""
Event Parser Module

This module decodes a Statuspage webhook payload into the typed data
classes in data.models, and decides whether the decoded event should be
posted at all.
"""

import json
from typing import Any, Dict, List, Optional, Union

from data.models import Incident, IncidentUpdate, IncomingEvent
from utils.exceptions import EmptyPayloadError, MalformedPayloadError
from utils.helpers import parse_timestamp
from utils.logger import get_logger

logger = get_logger(__name__)


def _require_str(data: Dict[str, Any], key: str, path: str) -> str:
    if key not in data:
        raise MalformedPayloadError(f"Missing required field: {path}.{key}")
    value = data[key]
    if not isinstance(value, str):
        raise MalformedPayloadError(f"Field {path}.{key} must be a string, got {type(value).__name__}")
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as e:
        raise MalformedPayloadError(f"Field {path}.{key} is not valid Unicode: {e}") from e
    return value


def _parse_update(data: Any, path: str) -> IncidentUpdate:
    if not isinstance(data, dict):
        raise MalformedPayloadError(f"{path} must be an object")

    body = _require_str(data, "body", path)
    raw_display_at = _require_str(data, "display_at", path)
    display_at = parse_timestamp(raw_display_at)
    if display_at is None:
        raise MalformedPayloadError(
            f"Field {path}.display_at is not an ISO-8601 timestamp with timezone: {raw_display_at!r}"
        )

    return IncidentUpdate(body=body, display_at=display_at)


def _parse_incident(data: Any) -> Incident:
    if not isinstance(data, dict):
        raise MalformedPayloadError("incident must be an object or null")

    backfilled = data.get("backfilled", False)
    if not isinstance(backfilled, bool):
        raise MalformedPayloadError(f"Field incident.backfilled must be a boolean, got {type(backfilled).__name__}")

    if "incident_updates" not in data:
        raise MalformedPayloadError("Missing required field: incident.incident_updates")
    raw_updates = data["incident_updates"]
    if not isinstance(raw_updates, list):
        raise MalformedPayloadError("Field incident.incident_updates must be a list")

    updates: List[IncidentUpdate] = [
        _parse_update(entry, f"incident.incident_updates[{index}]")
        for index, entry in enumerate(raw_updates)
    ]

    return Incident(
        name=_require_str(data, "name", "incident"),
        status=_require_str(data, "status", "incident"),
        shortlink=_require_str(data, "shortlink", "incident"),
        backfilled=backfilled,
        updates=updates,
    )


def parse(raw_payload: Optional[Union[bytes, str]]) -> IncomingEvent:
    """
    Decode a raw webhook body into an IncomingEvent.

    Unknown fields are ignored. A missing or null "incident" decodes to an
    event without an incident.

    Args:
        raw_payload: The request body as received.

    Returns:
        IncomingEvent: The decoded event.

    Raises:
        EmptyPayloadError: If no body is present.
        MalformedPayloadError: If the body is not JSON of the expected shape.
    """
    if raw_payload is None:
        raise EmptyPayloadError("No payload provided")

    if isinstance(raw_payload, bytes):
        try:
            raw_payload = raw_payload.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedPayloadError(f"Payload is not valid UTF-8: {e}") from e

    if not raw_payload.strip():
        raise EmptyPayloadError("No payload provided")

    try:
        data = json.loads(raw_payload)
    except (json.JSONDecodeError, RecursionError) as e:
        raise MalformedPayloadError(f"Payload is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise MalformedPayloadError("Payload must be a JSON object")

    raw_incident = data.get("incident")
    if raw_incident is None:
        return IncomingEvent(incident=None)

    return IncomingEvent(incident=_parse_incident(raw_incident))


def select_incident(event: IncomingEvent) -> Optional[Incident]:
    """
    Return the incident to post, or None when the event must be skipped.

    Events without an incident and backfilled incidents are skipped;
    neither is an error.
    """
    incident = event.incident
    if incident is None:
        logger.info("skipping statuspage event with no incident details")
        return None

    if incident.backfilled:
        logger.info(f"skipping backfilled incident: {incident.name}")
        return None

    return incident
