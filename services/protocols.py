"""
Service Protocol Definitions

This module defines typing.Protocol interfaces for the services used by the
Status Poster. They let the orchestrator take any publisher, which keeps
the network out of tests.

Protocols defined:
- PublisherProtocol: Interface for the social network the post is sent to
"""

from typing import Any, Protocol

from data.models import OutgoingPost


class PublisherProtocol(Protocol):
    """Protocol defining the interface for publishing a finished post.

    Implementations should provide methods for:
    - Authenticating with the social network
    - Creating a post in the authenticated account
    """

    def authenticate(self, identifier: str, secret: str) -> Any:
        """Log in to the social network.

        Args:
            identifier: Account handle or e-mail.
            secret: Account password or app password.

        Returns:
            A session object to pass to publish().

        Raises:
            AuthenticationError: If login fails.
        """
        ...

    def publish(self, session: Any, post: OutgoingPost) -> str:
        """Create a post.

        Args:
            session: The object returned by authenticate().
            post: The post to create.

        Returns:
            The identifier (URI) of the created post.

        Raises:
            PostingError: If the post could not be created.
        """
        ...
