"""
Configuration for pytest tests.
"""

import os
import json
import pytest
from unittest.mock import MagicMock

import requests


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Setup test environment variables."""
    os.environ["ENVIRONMENT"] = "development"
    yield


@pytest.fixture(autouse=True)
def provider_keys():
    """Configure default provider keys; tests that need them missing patch them to None."""
    from unittest.mock import patch
    from app.config import config

    with patch.object(config, "SUPADATA_API_KEY", "test_supadata_key"), \
            patch.object(config, "DEEPSEEK_API_KEY", "test_deepseek_key"):
        yield


@pytest.fixture(scope="session")
def test_video_url():
    """Return a test YouTube video URL."""
    return "https://www.youtube.com/watch?v=abc123"


@pytest.fixture
def sample_summary_data():
    """A summary as the language model is asked to produce it."""
    return {
        "title": "Testing Python Code",
        "quickSummary": "A short talk about unit testing. It covers mocks and fixtures.",
        "mainPoints": [
            {"point": "Fixtures", "description": "Share setup between tests."},
            {"point": "Mocks", "description": "Replace network calls."},
        ],
        "highlights": [
            {"moment": "Live demo of pytest", "timestamp": "03:15"},
            {"moment": "Q&A"},
        ],
        "keyConclusions": "Test behaviour, not implementation.",
        "references": [
            {"type": "book", "description": "Python Testing with pytest"},
        ],
    }


def make_response(status_code=200, body=None, text=None):
    """Build a fake requests.Response."""
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.ok = status_code < 400
    if body is not None:
        response.json.return_value = body
        response.text = json.dumps(body)
    else:
        response.json.side_effect = ValueError("No JSON object could be decoded")
        response.text = text or ""
    return response


@pytest.fixture
def fake_response():
    """Factory fixture for fake requests.Response objects."""
    return make_response
