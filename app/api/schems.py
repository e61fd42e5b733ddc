from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class TranscribeRequest(BaseModel):
    """Model for requesting a video transcript."""
    url: Optional[str] = None
    custom_api_key: Optional[str] = Field(default=None, alias="customApiKey")

    model_config = ConfigDict(populate_by_name=True)


class SummarizeRequest(BaseModel):
    """Model for requesting a transcript summary."""
    transcript: Optional[str] = None
    custom_api_key: Optional[str] = Field(default=None, alias="customApiKey")

    model_config = ConfigDict(populate_by_name=True)


class SummarizeResponse(BaseModel):
    """Raw model completion; parsing is left to the caller."""
    summary: str


class ErrorResponse(BaseModel):
    """Error envelope returned by every endpoint."""
    error: str
    details: Optional[str] = None
