"""
Centralized error handling for the application.

Every failure the proxies can report is a ``SummarizerError`` carrying the
HTTP status it maps to. The API layer turns them into the JSON error envelope
``{"error": ..., "details": ...}`` that the frontend understands.
"""

from typing import Optional, Dict, Any

import requests


class SummarizerError(Exception):
    """Base class for errors reported to API callers."""

    status_code = 500

    def __init__(self, message: str, details: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> Dict[str, Any]:
        """Render the error as the API error envelope."""
        return error_envelope(self.message, self.details)


class MissingInputError(SummarizerError):
    """A required request field is missing or empty."""

    status_code = 400


class AuthenticationError(SummarizerError):
    """No API key was supplied and none is configured."""

    status_code = 401


class InvalidApiKeyError(AuthenticationError):
    """The upstream provider rejected the API key."""


class TranscriptNotFoundError(SummarizerError):
    """The transcription provider has no transcript for the video."""

    status_code = 404


class UpstreamServiceError(SummarizerError):
    """The upstream provider failed or could not be reached."""

    status_code = 500


class InvalidResponseError(UpstreamServiceError):
    """The upstream provider answered successfully but without usable content."""


class SummaryParseError(Exception):
    """The summary text is not a valid structured summary."""


def error_envelope(message: str, details: Optional[str] = None) -> Dict[str, Any]:
    """Build the JSON body used for every error response."""
    body = {"error": message}
    if details:
        body["details"] = details
    return body


def extract_upstream_message(response: requests.Response) -> Optional[str]:
    """
    Pull a human readable message out of an upstream error response.

    Args:
        response: The failed upstream response

    Returns:
        The provider's message, or None when the body is not JSON or has none
    """
    try:
        data = response.json()
    except ValueError:
        return None

    if not isinstance(data, dict):
        return None

    message = data.get("message")
    if not message and isinstance(data.get("error"), dict):
        message = data["error"].get("message")
    elif not message and isinstance(data.get("error"), str):
        message = data["error"]

    return message or None


def describe_provider_exception(error: Exception) -> str:
    """Best-effort message for an exception raised by an LLM client."""
    # openai-style errors expose the decoded error object as ``body``
    body = getattr(error, "body", None)
    if isinstance(body, dict):
        message = body.get("message")
        if not message and isinstance(body.get("error"), dict):
            message = body["error"].get("message")
        if message:
            return message
    return str(error) or error.__class__.__name__
