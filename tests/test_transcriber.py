"""
Tests for the transcript fetcher module.
"""

import pytest
import requests
from unittest.mock import patch
from hypothesis import given, settings, HealthCheck, strategies as st

from app.config import config
from app.core.transcriber import TranscriptFetcher
from app.utils.error_handling import (
    AuthenticationError,
    InvalidApiKeyError,
    InvalidResponseError,
    TranscriptNotFoundError,
    UpstreamServiceError,
)
from conftest import make_response


@pytest.fixture
def mock_get():
    """Fixture to mock requests.get in the transcriber module."""
    with patch('app.core.transcriber.requests.get') as mock:
        yield mock


@pytest.fixture
def fetcher():
    return TranscriptFetcher(base_url="https://api.supadata.test/v1")


def test_fetch_passes_payload_through(mock_get, fetcher, fake_response, test_video_url):
    """A successful response is returned exactly as the provider sent it."""
    payload = {"content": "Hello world", "lang": "en", "availableLangs": ["en", "es"], "extra": 1}
    mock_get.return_value = fake_response(200, payload)

    result = fetcher.fetch(test_video_url)

    assert result == payload


def test_fetch_request_shape(mock_get, fetcher, fake_response, test_video_url):
    """The provider is called with the URL, the text flag and the key header."""
    mock_get.return_value = fake_response(200, {"content": "Hello world"})

    fetcher.fetch(test_video_url)

    args, kwargs = mock_get.call_args
    assert args[0] == "https://api.supadata.test/v1/youtube/transcript"
    assert kwargs["params"] == {"url": test_video_url, "text": "true"}
    assert kwargs["headers"]["x-api-key"] == "test_supadata_key"


def test_fetch_prefers_custom_key(mock_get, fetcher, fake_response, test_video_url):
    mock_get.return_value = fake_response(200, {"content": "Hello world"})

    fetcher.fetch(test_video_url, custom_api_key="user_key")

    assert mock_get.call_args.kwargs["headers"]["x-api-key"] == "user_key"


def test_fetch_blank_custom_key_falls_back(mock_get, fetcher, fake_response, test_video_url):
    mock_get.return_value = fake_response(200, {"content": "Hello world"})

    fetcher.fetch(test_video_url, custom_api_key="   ")

    assert mock_get.call_args.kwargs["headers"]["x-api-key"] == "test_supadata_key"


def test_fetch_without_any_key(mock_get, fetcher, test_video_url):
    """No key anywhere is an authentication error and nothing is sent."""
    with patch.object(config, "SUPADATA_API_KEY", None):
        with pytest.raises(AuthenticationError) as exc_info:
            fetcher.fetch(test_video_url)

    assert exc_info.value.status_code == 401
    mock_get.assert_not_called()


def test_fetch_not_found(mock_get, fetcher, fake_response, test_video_url):
    mock_get.return_value = fake_response(404, {"message": "Transcript unavailable"})

    with pytest.raises(TranscriptNotFoundError) as exc_info:
        fetcher.fetch(test_video_url)

    assert exc_info.value.status_code == 404
    assert exc_info.value.message == "No transcript available for this video"


@settings(max_examples=30, suppress_health_check=[HealthCheck.function_scoped_fixture])
@given(body=st.one_of(
    st.none(),
    st.dictionaries(st.text(max_size=10), st.text(max_size=20), max_size=3),
))
def test_fetch_unauthorized_regardless_of_body(fetcher, test_video_url, body):
    """HTTP 401 is always an invalid-key error, whatever the body says."""
    with patch('app.core.transcriber.requests.get') as mock_get:
        mock_get.return_value = make_response(401, body, text="<html>nope</html>")

        with pytest.raises(InvalidApiKeyError) as exc_info:
            fetcher.fetch(test_video_url)

    assert exc_info.value.status_code == 401
    assert exc_info.value.message == "Invalid API key"


def test_fetch_other_error_carries_upstream_message(mock_get, fetcher, fake_response, test_video_url):
    mock_get.return_value = fake_response(429, {"message": "Rate limit exceeded"})

    with pytest.raises(UpstreamServiceError) as exc_info:
        fetcher.fetch(test_video_url)

    assert exc_info.value.status_code == 500
    assert exc_info.value.details == "Rate limit exceeded"


def test_fetch_other_error_unparseable_body(mock_get, fetcher, fake_response, test_video_url):
    mock_get.return_value = fake_response(502, text="Bad Gateway")

    with pytest.raises(UpstreamServiceError) as exc_info:
        fetcher.fetch(test_video_url)

    assert exc_info.value.details == "Failed to get transcript"


def test_fetch_missing_content(mock_get, fetcher, fake_response, test_video_url):
    mock_get.return_value = fake_response(200, {"lang": "en"})

    with pytest.raises(InvalidResponseError) as exc_info:
        fetcher.fetch(test_video_url)

    assert exc_info.value.message == "Invalid response from transcription service"


def test_fetch_transport_failure(mock_get, fetcher, test_video_url):
    mock_get.side_effect = requests.ConnectionError("connection refused")

    with pytest.raises(UpstreamServiceError) as exc_info:
        fetcher.fetch(test_video_url)

    assert "connection refused" in exc_info.value.details


def test_fetch_undecodable_success_body(mock_get, fetcher, fake_response, test_video_url):
    mock_get.return_value = fake_response(200, text="not json")

    with pytest.raises(UpstreamServiceError):
        fetcher.fetch(test_video_url)
