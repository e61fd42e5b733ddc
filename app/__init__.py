"""
YouTube Transcript Summarization Application.

This application fetches YouTube transcripts from a transcription service
and generates structured summaries of them using LLM models.
"""

from app.config import config

__version__ = config.APP_VERSION
