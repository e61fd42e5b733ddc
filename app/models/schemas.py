"""
Data models for the YouTube transcript summarizer application.
"""
import json
from typing import Optional, List

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from app.utils.error_handling import SummaryParseError


class Transcript(BaseModel):
    """Transcript payload as returned by the transcription provider."""
    content: str
    lang: Optional[str] = None
    available_langs: Optional[List[str]] = Field(default=None, alias="availableLangs")

    # Unknown provider fields are kept so the payload can be passed on untouched
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class MainPoint(BaseModel):
    """A key point of the video and its explanation."""
    point: str
    description: str


class Highlight(BaseModel):
    """A notable moment, with a timestamp when the model could infer one."""
    moment: str
    timestamp: Optional[str] = None


class Reference(BaseModel):
    """A resource mentioned in the video (book, link, tool...)."""
    type: str
    description: str


class VideoSummary(BaseModel):
    """Structured summary produced by the language model."""
    title: str
    quick_summary: str = Field(alias="quickSummary")
    main_points: List[MainPoint] = Field(default_factory=list, alias="mainPoints")
    highlights: List[Highlight] = Field(default_factory=list)
    key_conclusions: str = Field(alias="keyConclusions")
    references: List[Reference] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)

    def to_json(self, **kwargs) -> str:
        """Serialize using the camelCase field names the model is asked to produce."""
        return self.model_dump_json(by_alias=True, **kwargs)


def parse_summary(text: Optional[str]) -> VideoSummary:
    """
    Parse the raw completion text into a VideoSummary.

    Args:
        text: JSON text returned by the summarization endpoint

    Returns:
        The parsed summary

    Raises:
        SummaryParseError: if the text is missing, not JSON, or not summary-shaped
    """
    if not text:
        raise SummaryParseError("Summary response was empty")

    try:
        data = json.loads(text)
    except (TypeError, ValueError) as e:
        raise SummaryParseError(f"Summary is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise SummaryParseError("Summary JSON must be an object")

    try:
        return VideoSummary.model_validate(data)
    except ValidationError as e:
        raise SummaryParseError(f"Summary does not match the expected format: {e}") from e
