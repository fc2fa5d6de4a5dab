"""
Status Poster Application

This is the main entry point for the Status Poster application.
It receives a Statuspage incident webhook and posts the incident's latest
update to BlueSky. It runs as an HTTP-triggered AWS Lambda function
(handler) or from the command line against a saved payload (main).
"""

import argparse
import base64
import binascii
import logging
import sys
from typing import Any, Dict, Optional, Union

from config import settings
from config.validators import Credentials, get_config_summary, load_credentials
from services import event_parser, post_builder
from services.protocols import PublisherProtocol
from services.social_service import SocialService
from utils.exceptions import MalformedPayloadError, StatusPosterError
from utils.logger import get_logger, setup_logging

# Set up logging
logger = get_logger(__name__)


class StatusPoster:
    """
    Main application class for the Status Poster.

    This class orchestrates parsing a webhook payload, building the post
    and publishing it to BlueSky.
    """

    def __init__(self, credentials: Credentials, publisher: Optional[PublisherProtocol] = None):
        """
        Initialize the Status Poster.

        Args:
            credentials: BlueSky credentials used to authenticate the publisher.
            publisher: Optional publisher, defaults to a SocialService for
                credentials.base_url.
        """
        self.credentials = credentials
        self.publisher = publisher if publisher is not None else SocialService(base_url=credentials.base_url)

    def process(self, raw_payload: Optional[Union[bytes, str]], dry_run: bool = False) -> Optional[str]:
        """
        Turn one webhook payload into at most one BlueSky post.

        Args:
            raw_payload: The webhook request body.
            dry_run: If True, build and log the post without publishing it.

        Returns:
            str: URI of the created post, or None if the event was skipped
                or this was a dry run.

        Raises:
            StatusPosterError: On any parse, build or publish failure.
        """
        event = event_parser.parse(raw_payload)

        incident = event_parser.select_incident(event)
        if incident is None:
            return None

        post = post_builder.build(incident)

        if dry_run:
            logger.info(f"DRY RUN: Would post for incident: {incident.name}")
            logger.info(f"Post text: {post.text}")
            return None

        session = self.publisher.authenticate(self.credentials.identifier, self.credentials.secret)
        uri = self.publisher.publish(session, post)
        logger.info(f"Posted update for incident {incident.name}: {uri}")
        return uri


def extract_body(event: Dict[str, Any]) -> Optional[bytes]:
    """
    Extract the request body from an API Gateway / Function URL proxy event.

    Args:
        event: The Lambda invocation event.

    Returns:
        bytes: The raw body, or None if the request had none.

    Raises:
        MalformedPayloadError: If a base64-flagged body cannot be decoded.
    """
    body = event.get("body")
    if body is None:
        return None

    if event.get("isBase64Encoded"):
        try:
            return base64.b64decode(body, validate=True)
        except (binascii.Error, ValueError) as e:
            raise MalformedPayloadError(f"Body is not valid base64: {e}") from e

    return body.encode("utf-8")


def success_response() -> Dict[str, Any]:
    """Build the response returned for every successful invocation, skips included."""
    return {
        "statusCode": settings.SUCCESS_STATUS_CODE,
        "headers": {"content-type": settings.SUCCESS_CONTENT_TYPE},
        "body": settings.SUCCESS_BODY,
    }


def handler(event, context):
    """
    AWS Lambda entry point for the Statuspage webhook.

    Any failure is logged and re-raised so the runtime reports the
    invocation as failed.
    """
    setup_logging(getattr(logging, settings.LOG_LEVEL, logging.INFO))

    try:
        credentials = load_credentials()
        StatusPoster(credentials).process(extract_body(event))
    except StatusPosterError as e:
        logger.error(f"Status poster error: {e}", exc_info=True)
        raise
    except Exception as e:
        logger.error(f"Unexpected error handling statuspage event: {e}", exc_info=True)
        raise

    return success_response()


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description='Post a Statuspage webhook payload to BlueSky')
    parser.add_argument('payload', type=str,
                        help='Path to a JSON webhook payload, or - to read from stdin')
    parser.add_argument('--dry-run', action='store_true', help='Build the post without publishing it')
    parser.add_argument('--log-file', type=str, default=None, help='Log file path')
    parser.add_argument('--log-level', type=str, choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        default=None, help='Logging level (defaults to LOG_LEVEL)')
    return parser.parse_args(argv)


def read_payload(path: str) -> bytes:
    """Read a payload from a file, or from stdin when path is "-"."""
    if path == '-':
        return sys.stdin.buffer.read()
    with open(path, 'rb') as f:
        return f.read()


def main(argv=None):
    """Main entry point for the command line."""
    # Parse command line arguments
    args = parse_arguments(argv)

    log_level = getattr(logging, args.log_level or settings.LOG_LEVEL, logging.INFO)

    try:
        # Set up logging
        setup_logging(log_level, args.log_file)

        logger.info("Starting Status Poster")
        logger.debug(f"Configuration: {get_config_summary()}")

        credentials = load_credentials()
        raw_payload = read_payload(args.payload)
        uri = StatusPoster(credentials).process(raw_payload, dry_run=args.dry_run)

        if uri:
            logger.info(f"Status Poster completed, created {uri}")
        else:
            logger.info("Status Poster completed, nothing posted")
        exit_code = 0

    except StatusPosterError as e:
        logger.error(f"Status poster error: {e}", exc_info=True)
        exit_code = 1
    except Exception as e:
        logger.error(f"Unhandled exception in Status Poster: {e}", exc_info=True)
        exit_code = 2

    logger.info(f"Status Poster finished with exit code {exit_code}")
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
