"""
Data Models for Status Poster Application

This module contains the data classes describing an inbound Statuspage
webhook event and the outbound BlueSky post built from it. All of them are
immutable values: created once, handed on, discarded.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass(frozen=True)
class IncidentUpdate:
    """A single update posted on a Statuspage incident."""
    body: str                          # Free-text update description
    display_at: datetime               # When the update became visible (tz-aware)


@dataclass(frozen=True)
class Incident:
    """A Statuspage incident with its updates."""
    name: str                          # Short incident title
    status: str                        # e.g. "investigating", "resolved"
    shortlink: str                     # Canonical incident URL
    backfilled: bool = False           # Historical replay, never posted
    updates: List[IncidentUpdate] = field(default_factory=list)  # Order not meaningful


@dataclass(frozen=True)
class IncomingEvent:
    """Decoded webhook payload. An absent incident is a valid no-op."""
    incident: Optional[Incident] = None


@dataclass(frozen=True)
class PostEmbed:
    """External link-preview card attached to a post."""
    title: str
    description: str
    uri: str


@dataclass(frozen=True)
class OutgoingPost:
    """A finished post, ready to be handed to the publisher."""
    text: str
    created_at: datetime
    embed: Optional[PostEmbed] = None
    language: str = "en"
