"""
API client for communicating with the YouTube Transcript Summarizer backend.
"""

import requests
from typing import Dict, Any, Optional
from urllib.parse import urljoin
from app.config import config


class ApiError(Exception):
    """Error envelope (or unusable response) returned by the backend."""

    def __init__(self, message: str, status_code: Optional[int] = None, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details


class ApiClient:
    """Client for interacting with the YouTube Transcript Summarizer API."""

    def __init__(self, base_url: str = config.PUBLIC_URL, timeout: Optional[float] = None):
        """
        Initialize the API client.

        Args:
            base_url: Base URL of the API
            timeout: Request timeout in seconds
        """
        self.base_url = base_url
        # Keep any path prefix the API is mounted under
        self.api_base = base_url.rstrip("/") + "/api/"
        self.timeout = timeout

    def _url(self, endpoint: str) -> str:
        """Get the full URL for an endpoint."""
        return urljoin(self.api_base, endpoint)

    def transcribe(self, url: str, custom_api_key: Optional[str] = None) -> Dict[str, Any]:
        """
        Request the transcript of a video.

        Args:
            url: YouTube video URL
            custom_api_key: Supadata key to use instead of the server's

        Returns:
            Transcript payload with ``content`` and optional language fields
        """
        payload = {"url": url}
        headers = {"Accept": "application/json"}
        if custom_api_key:
            payload["customApiKey"] = custom_api_key
            headers["X-Supadata-Api-Key"] = custom_api_key

        response = requests.post(self._url("transcribe"), json=payload, headers=headers, timeout=self.timeout)
        return self._handle_response(response, "Failed to transcribe video")

    def summarize(self, transcript: str, custom_api_key: Optional[str] = None) -> Dict[str, Any]:
        """
        Request a summary of a transcript.

        Args:
            transcript: Transcript text
            custom_api_key: DeepSeek key to use instead of the server's

        Returns:
            Dictionary with the raw ``summary`` text
        """
        payload = {"transcript": transcript}
        headers = {"Accept": "application/json"}
        if custom_api_key:
            payload["customApiKey"] = custom_api_key
            headers["X-Deepseek-Api-Key"] = custom_api_key

        response = requests.post(self._url("summarize"), json=payload, headers=headers, timeout=self.timeout)
        return self._handle_response(response, "Failed to generate summary")

    @staticmethod
    def _handle_response(response: requests.Response, fallback: str) -> Dict[str, Any]:
        try:
            data = response.json()
        except ValueError:
            raise ApiError(
                "Server returned an invalid response. Please try again.",
                status_code=response.status_code,
            )

        if not response.ok:
            message, details = fallback, None
            if isinstance(data, dict):
                message = data.get("error") or data.get("message") or fallback
                details = data.get("details")
            raise ApiError(message, status_code=response.status_code, details=details)

        return data
