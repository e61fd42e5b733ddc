"""
Sequencing of the transcribe and summarize calls for the UI.

The transcript is the primary result. Summarization is an enhancement on top
of it: when it fails, the transcript is still returned and the failure is
reported as a warning rather than an error.
"""

from enum import Enum
from typing import Callable, Optional

import requests
from pydantic import BaseModel, ValidationError

from app.frontend.api_client import ApiClient, ApiError
from app.frontend.credentials import CredentialStore
from app.models.schemas import Transcript, VideoSummary, parse_summary
from app.utils.error_handling import SummaryParseError
from app.utils.logger import logging

CREDENTIAL_ERROR_MARKERS = ("API key", "API configuration", "401")


class ProcessingState(str, Enum):
    """States a video goes through while being processed."""
    IDLE = "idle"
    TRANSCRIBING = "transcribing"
    SUMMARIZING = "summarizing"
    DONE = "done"
    DONE_WITH_SUMMARY_ERROR = "done_with_summary_error"
    ERROR = "error"


class ProcessingResult(BaseModel):
    """Everything the UI needs to render after processing a URL."""
    state: ProcessingState = ProcessingState.IDLE
    url: Optional[str] = None
    transcript: Optional[str] = None
    language: Optional[str] = None
    summary: Optional[VideoSummary] = None
    error: Optional[str] = None
    warning: Optional[str] = None
    needs_api_keys: bool = False


def is_credential_error(message: Optional[str], status_code: Optional[int] = None) -> bool:
    """Whether a failure looks like a missing or rejected API key."""
    if status_code == 401:
        return True
    return bool(message) and any(marker in message for marker in CREDENTIAL_ERROR_MARKERS)


class VideoProcessor:
    """Runs transcription then summarization for a single URL."""

    def __init__(
        self,
        client: ApiClient,
        credentials: CredentialStore,
        on_state_change: Optional[Callable[[ProcessingState], None]] = None,
    ):
        self.client = client
        self.credentials = credentials
        self.on_state_change = on_state_change
        self.state = ProcessingState.IDLE

    def _set_state(self, result: ProcessingResult, state: ProcessingState):
        self.state = state
        result.state = state
        logging.debug(f"Processing state -> {state.value}")
        if self.on_state_change:
            self.on_state_change(state)

    def process(self, url: Optional[str]) -> ProcessingResult:
        """
        Transcribe and summarize a video.

        Args:
            url: YouTube video URL

        Returns:
            ProcessingResult; never raises for upstream or network failures
        """
        result = ProcessingResult(url=url)
        url = (url or "").strip()
        if not url:
            self._set_state(result, ProcessingState.IDLE)
            return result

        self._set_state(result, ProcessingState.TRANSCRIBING)
        transcript = self._transcribe(url, result)
        if transcript is None:
            self._set_state(result, ProcessingState.ERROR)
            return result

        result.transcript = transcript.content
        result.language = transcript.lang

        self._set_state(result, ProcessingState.SUMMARIZING)
        summary = self._summarize(transcript.content, result)
        if summary is None:
            self._set_state(result, ProcessingState.DONE_WITH_SUMMARY_ERROR)
            return result

        result.summary = summary
        self._set_state(result, ProcessingState.DONE)
        return result

    def _transcribe(self, url: str, result: ProcessingResult) -> Optional[Transcript]:
        try:
            data = self.client.transcribe(url, self.credentials.supadata_api_key)
        except ApiError as e:
            logging.error(f"Transcription failed ({e.status_code}): {e.message}")
            result.error = e.message
            result.needs_api_keys = is_credential_error(e.message, e.status_code)
            return None
        except requests.RequestException as e:
            logging.error(f"Transcription request failed: {str(e)}")
            result.error = f"Could not reach the transcription service: {str(e)}"
            return None

        try:
            transcript = Transcript.model_validate(data)
        except ValidationError:
            transcript = None
        if transcript is None or not transcript.content:
            result.error = "No transcript content received"
            return None

        return transcript

    def _summarize(self, transcript: str, result: ProcessingResult) -> Optional[VideoSummary]:
        try:
            data = self.client.summarize(transcript, self.credentials.deepseek_api_key)
            return parse_summary(data.get("summary") if isinstance(data, dict) else None)
        except ApiError as e:
            logging.error(f"Summary generation failed ({e.status_code}): {e.message}")
            result.warning = f"{e.message}. You can still view the full transcript below."
            result.needs_api_keys = is_credential_error(e.message, e.status_code)
        except requests.RequestException as e:
            logging.error(f"Summary request failed: {str(e)}")
            result.warning = "Failed to generate summary. You can still view the full transcript below."
        except SummaryParseError as e:
            logging.error(f"Failed to parse summary content: {str(e)}")
            result.warning = "Received invalid summary format. You can still view the full transcript below."
        return None
