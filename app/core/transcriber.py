"""
Module for fetching video transcripts from the Supadata API.
"""

from typing import Dict, Any, Optional

import requests

from app.config import config
from app.utils.error_handling import (
    AuthenticationError,
    InvalidApiKeyError,
    InvalidResponseError,
    TranscriptNotFoundError,
    UpstreamServiceError,
    extract_upstream_message,
)
from app.utils.logger import logging


class TranscriptFetcher:
    """Class to handle transcript retrieval from the transcription provider."""

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        """
        Initialize the fetcher.

        Args:
            base_url: Supadata API base URL (defaults to the configured one)
            timeout: Request timeout in seconds (None keeps the transport default)
        """
        self.base_url = (base_url or config.SUPADATA_API_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else config.REQUEST_TIMEOUT

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/youtube/transcript"

    @staticmethod
    def resolve_api_key(custom_api_key: Optional[str] = None) -> str:
        """
        Pick the caller's key if given, otherwise the configured one.

        Raises:
            AuthenticationError: if neither is available
        """
        if custom_api_key and custom_api_key.strip():
            return custom_api_key.strip()
        if config.SUPADATA_API_KEY:
            return config.SUPADATA_API_KEY

        logging.error("Transcription API key is missing")
        raise AuthenticationError("API configuration error - Missing API key")

    def fetch(self, url: str, custom_api_key: Optional[str] = None) -> Dict[str, Any]:
        """
        Fetch the plain-text transcript of a video.

        Args:
            url: Video URL
            custom_api_key: Caller supplied Supadata key

        Returns:
            The provider payload, unmodified (``content`` plus optional language fields)
        """
        api_key = self.resolve_api_key(custom_api_key)

        logging.info("Making request to transcription API for [VIDEO_URL]")
        try:
            response = requests.get(
                self.endpoint,
                params={"url": url, "text": "true"},
                headers={"x-api-key": api_key, "Accept": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logging.error(f"Transcription request failed: {str(e)}")
            raise UpstreamServiceError("Transcription service error", details=str(e)) from e

        logging.info(f"Transcription API response status: {response.status_code}")

        if not response.ok:
            self._raise_for_status(response)

        try:
            data = response.json()
        except ValueError as e:
            logging.error(f"Transcription API returned undecodable JSON: {str(e)}")
            raise UpstreamServiceError("Transcription service error", details=str(e)) from e

        if not isinstance(data, dict) or not data.get("content"):
            logging.error("Invalid response format from transcription API")
            raise InvalidResponseError("Invalid response from transcription service")

        logging.info(
            f"Transcript received: lang={data.get('lang')}, "
            f"available_langs={data.get('availableLangs')}, chars={len(data['content'])}"
        )
        return data

    def _raise_for_status(self, response: requests.Response):
        """Map an upstream error status onto the error taxonomy."""
        message = extract_upstream_message(response)
        logging.error(f"Transcription API error {response.status_code}: {message}")

        if response.status_code == 401:
            raise InvalidApiKeyError("Invalid API key")
        if response.status_code == 404:
            raise TranscriptNotFoundError("No transcript available for this video")

        raise UpstreamServiceError(
            "Transcription service error",
            details=message or "Failed to get transcript",
        )
