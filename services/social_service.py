"""
Social Service Module

This module handles social media integration with the AT Protocol (BlueSky).
It authenticates with BlueSky and creates posts from OutgoingPost values.
The mapping onto the app.bsky.feed.post record schema lives in to_record()
and nowhere else.
"""

from typing import Optional

from atproto import Client, models

from data.models import OutgoingPost
from utils.exceptions import AuthenticationError, PostingError
from utils.helpers import format_timestamp
from utils.logger import get_logger

logger = get_logger(__name__)


class SocialService:
    """Service for posting to the AT Protocol (BlueSky)."""

    def __init__(self, base_url: Optional[str] = None):
        """
        Initialize the social service.

        Args:
            base_url: XRPC endpoint of the PDS to use, or None for the SDK default.
        """
        self.base_url = base_url

    def authenticate(self, identifier: str, secret: str) -> Client:
        """
        Log in to BlueSky.

        Args:
            identifier: The account handle or e-mail.
            secret: The account (app) password.

        Returns:
            Client: A logged-in AT Protocol client.

        Raises:
            AuthenticationError: If the login fails for any reason.
        """
        client = Client(base_url=self.base_url)
        try:
            client.login(identifier, secret)
        except Exception as e:
            raise AuthenticationError(f"Failed to authenticate with AT Protocol as {identifier}: {e}") from e

        logger.info(f"Successfully logged in to AT Protocol as {identifier}")
        return client

    @staticmethod
    def to_record(post: OutgoingPost) -> models.AppBskyFeedPost.Record:
        """
        Map an OutgoingPost onto the app.bsky.feed.post record schema.

        Args:
            post: The post to convert.

        Returns:
            models.AppBskyFeedPost.Record: The record to create.
        """
        embed = None
        if post.embed is not None:
            embed = models.AppBskyEmbedExternal.Main(
                external=models.AppBskyEmbedExternal.External(
                    title=post.embed.title,
                    description=post.embed.description,
                    uri=post.embed.uri,
                )
            )

        return models.AppBskyFeedPost.Record(
            text=post.text,
            created_at=format_timestamp(post.created_at),
            embed=embed,
            langs=[post.language],
        )

    def publish(self, session: Client, post: OutgoingPost) -> str:
        """
        Create a post in the logged-in account's repository.

        Args:
            session: A client returned by authenticate().
            post: The post to create.

        Returns:
            str: The at:// URI of the created post.

        Raises:
            PostingError: If the record could not be created.
        """
        record = self.to_record(post)
        try:
            response = session.app.bsky.feed.post.create(session.me.did, record)
        except Exception as e:
            raise PostingError(f"Error posting to AT Protocol: {e}") from e

        logger.info(f"Successfully posted to AT Protocol: {response.uri}")
        return response.uri
