"""
Post Builder Module

This module turns a Statuspage incident into the BlueSky post announcing
its most recent update. It performs no I/O.
"""

from typing import List

from config import settings
from data.models import Incident, IncidentUpdate, OutgoingPost, PostEmbed
from utils.exceptions import NoUpdatesError
from utils.helpers import title_case, truncate_text
from utils.logger import get_logger

logger = get_logger(__name__)


def latest_update(updates: List[IncidentUpdate]) -> IncidentUpdate:
    """
    Return the update with the most recent display_at.

    The sort is stable, so among updates sharing the latest timestamp the
    one appearing first in the payload is chosen.

    Raises:
        NoUpdatesError: If there are no updates.
    """
    sorted_updates = sorted(updates, key=lambda update: update.display_at, reverse=True)
    if not sorted_updates:
        raise NoUpdatesError("No incident update information provided")
    return sorted_updates[0]


def build(incident: Incident) -> OutgoingPost:
    """
    Build the post announcing an incident's latest update.

    Args:
        incident: A parsed, non-backfilled incident.

    Returns:
        OutgoingPost: Text, link-preview embed and metadata for the post.

    Raises:
        NoUpdatesError: If the incident carries no updates.
    """
    update = latest_update(incident.updates)
    update_text = truncate_text(
        update.body,
        max_length=settings.UPDATE_BODY_MAX_LENGTH,
        suffix=settings.TRUNCATION_SUFFIX,
    )

    embed = PostEmbed(
        title=incident.name,
        description=update_text,
        uri=incident.shortlink,
    )

    post = OutgoingPost(
        text=f"{settings.POST_TEXT_PREFIX} {title_case(incident.status)}: {update_text}",
        created_at=update.display_at,
        embed=embed,
        language=settings.POST_LANGUAGE,
    )
    logger.debug(f"Built post for incident {incident.name!r} from update at {update.display_at.isoformat()}")
    return post
