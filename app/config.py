"""
Configuration settings for the YouTube transcript summarizer application.
"""

import os
from typing import Dict, Any, Optional
from dotenv import load_dotenv


# Ensure environment variables are loaded
load_dotenv()


def _optional_float(name: str) -> Optional[float]:
    value = os.getenv(name)
    return float(value) if value else None


class Config:
    """Base configuration class."""

    # Application info
    APP_NAME = "YouTube Transcript Summarizer"
    APP_VERSION = "0.2.0"

    # Transcription provider
    SUPADATA_API_KEY = os.getenv("SUPADATA_API_KEY")
    SUPADATA_API_URL = os.getenv("SUPADATA_API_URL", "https://api.supadata.ai/v1")

    # Language model provider, also read directly by langchain-deepseek
    DEEPSEEK_API_KEY = os.getenv("DEEPSEEK_API_KEY")
    DEEPSEEK_API_BASE = os.getenv("DEEPSEEK_API_BASE", "https://api.deepseek.com/v1")

    # Summary defaults
    DEFAULT_SUMMARY_MODEL = os.getenv("SUMMARY_MODEL", "deepseek-chat")
    SUMMARY_TEMPERATURE = 0.3
    SUMMARY_MAX_TOKENS = 2000

    # None leaves the transport default in place
    REQUEST_TIMEOUT = _optional_float("REQUEST_TIMEOUT")

    PUBLIC_URL = os.getenv("PUBLIC_URL", "http://localhost:8000")

    DEBUG = False
    LOG_LEVEL = "INFO"

    @classmethod
    def initialize(cls):
        """Initialize the application configuration."""
        from app.utils.logger import logging

        # Both keys may also arrive per request, so a missing one is only a warning
        if not cls.SUPADATA_API_KEY:
            logging.warning("SUPADATA_API_KEY environment variable not set. "
                            "Requests must supply their own transcription key.")
        if not cls.DEEPSEEK_API_KEY:
            logging.warning("DEEPSEEK_API_KEY environment variable not set. "
                            "Requests must supply their own summarization key.")

    @classmethod
    def get_providers(cls) -> Dict[str, Any]:
        """Get provider endpoints and whether a default key is configured."""
        return {
            "transcription": {
                "url": cls.SUPADATA_API_URL,
                "key_configured": bool(cls.SUPADATA_API_KEY),
            },
            "summarization": {
                "url": cls.DEEPSEEK_API_BASE,
                "model": cls.DEFAULT_SUMMARY_MODEL,
                "key_configured": bool(cls.DEEPSEEK_API_KEY),
            },
        }


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True
    LOG_LEVEL = "DEBUG"


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False
    LOG_LEVEL = "INFO"


# Determine which configuration to use based on environment
def get_config():
    """Get the appropriate configuration based on environment."""
    env = os.getenv("ENVIRONMENT", "development").lower()
    if env == "production":
        return ProductionConfig
    else:
        return DevelopmentConfig


# Create a config instance
config = get_config()
