"""
API routes for the YouTube Transcript Summarizer application.

Both endpoints are thin proxies: validate the body, call the provider and let
``SummarizerError`` propagate to the envelope handler in ``app.api.app``.
"""

from typing import Optional
from fastapi import APIRouter, Header
from fastapi.responses import JSONResponse

from app.api.schems import (
    TranscribeRequest,
    SummarizeRequest,
    SummarizeResponse,
    ErrorResponse,
)
from app.core.transcriber import TranscriptFetcher
from app.core.summarizer import TranscriptSummarizer
from app.utils.error_handling import MissingInputError
from app.utils.logger import logging

router = APIRouter(prefix="/api", tags=["youtube"])

error_responses = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def caller_api_key(*candidates: Optional[str]) -> Optional[str]:
    """First non-blank key in body, header order; None leaves the configured key in charge."""
    for key in candidates:
        if key and key.strip():
            return key.strip()
    return None


@router.post("/transcribe", responses=error_responses)
def transcribe_video(
    request: TranscribeRequest,
    x_supadata_api_key: Optional[str] = Header(default=None),
):
    """
    Fetch the transcript of a YouTube video.

    - Uses ``customApiKey`` from the body, then the ``X-Supadata-Api-Key``
      header, then the server's configured key
    - Returns the provider payload unchanged
    """
    logging.info("Received POST request to /api/transcribe")
    if not request.url or not request.url.strip():
        raise MissingInputError("URL is required")

    fetcher = TranscriptFetcher()
    data = fetcher.fetch(request.url.strip(), caller_api_key(request.custom_api_key, x_supadata_api_key))
    return JSONResponse(content=data)


@router.post("/summarize", response_model=SummarizeResponse, responses=error_responses)
def summarize_transcript(
    request: SummarizeRequest,
    x_deepseek_api_key: Optional[str] = Header(default=None),
):
    """Summarize a transcript and return the model's raw JSON text."""
    logging.info("Received POST request to /api/summarize")
    summarizer = TranscriptSummarizer()
    summary = summarizer.summarize(request.transcript, caller_api_key(request.custom_api_key, x_deepseek_api_key))
    return SummarizeResponse(summary=summary)
