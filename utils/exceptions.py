"""
Custom Exception Classes for Status Poster Application

This module defines custom exceptions for better error handling and
categorization of failures across the application. Every one of them is
fatal to the current invocation.
"""


class StatusPosterError(Exception):
    """Base exception for all Status Poster application errors."""
    pass


# =============================================================================
# Configuration Errors
# =============================================================================

class ConfigurationError(StatusPosterError):
    """Raised when configuration validation fails or required settings are missing."""
    pass


# =============================================================================
# Payload Errors
# =============================================================================

class ParseError(StatusPosterError):
    """Base exception for webhook payload decoding errors."""
    pass


class EmptyPayloadError(ParseError):
    """Raised when the webhook request carries no body at all."""
    pass


class MalformedPayloadError(ParseError):
    """Raised when the payload is not JSON of the expected shape."""
    pass


# =============================================================================
# Post Building Errors
# =============================================================================

class BuildError(StatusPosterError):
    """Base exception for errors turning an incident into a post."""
    pass


class NoUpdatesError(BuildError):
    """Raised when an incident carries no incident updates."""
    pass


# =============================================================================
# Social Media Errors
# =============================================================================

class SocialMediaError(StatusPosterError):
    """Base exception for social media platform errors."""
    pass


class AuthenticationError(SocialMediaError):
    """Raised when authentication with a social media platform fails."""
    pass


class PostingError(SocialMediaError):
    """Raised when posting to a social media platform fails."""
    pass
