"""
Tests for the frontend API client.
"""

import pytest
from unittest.mock import patch

from app.frontend.api_client import ApiClient, ApiError


@pytest.fixture
def mock_post():
    with patch('app.frontend.api_client.requests.post') as mock:
        yield mock


@pytest.fixture
def api():
    return ApiClient("http://localhost:8000")


def test_transcribe(mock_post, api, fake_response, test_video_url):
    mock_post.return_value = fake_response(200, {"content": "Hello world"})

    data = api.transcribe(test_video_url)

    assert data == {"content": "Hello world"}
    args, kwargs = mock_post.call_args
    assert args[0] == "http://localhost:8000/api/transcribe"
    assert kwargs["json"] == {"url": test_video_url}
    assert "X-Supadata-Api-Key" not in kwargs["headers"]


@pytest.mark.parametrize("base_url", ["http://host/prefix", "http://host/prefix/"])
def test_path_prefix_is_kept(mock_post, fake_response, base_url):
    mock_post.return_value = fake_response(200, {"summary": "{}"})

    ApiClient(base_url).summarize("Hello world")

    assert mock_post.call_args.args[0] == "http://host/prefix/api/summarize"


def test_transcribe_with_custom_key(mock_post, api, fake_response, test_video_url):
    mock_post.return_value = fake_response(200, {"content": "Hello world"})

    api.transcribe(test_video_url, custom_api_key="user_key")

    kwargs = mock_post.call_args.kwargs
    assert kwargs["json"] == {"url": test_video_url, "customApiKey": "user_key"}
    assert kwargs["headers"]["X-Supadata-Api-Key"] == "user_key"


def test_summarize(mock_post, api, fake_response):
    mock_post.return_value = fake_response(200, {"summary": "{}"})

    data = api.summarize("Hello world", custom_api_key="deep_key")

    assert data == {"summary": "{}"}
    args, kwargs = mock_post.call_args
    assert args[0] == "http://localhost:8000/api/summarize"
    assert kwargs["json"] == {"transcript": "Hello world", "customApiKey": "deep_key"}
    assert kwargs["headers"]["X-Deepseek-Api-Key"] == "deep_key"


def test_error_envelope_raises(mock_post, api, fake_response, test_video_url):
    mock_post.return_value = fake_response(404, {"error": "No transcript available for this video"})

    with pytest.raises(ApiError) as exc_info:
        api.transcribe(test_video_url)

    assert exc_info.value.status_code == 404
    assert exc_info.value.message == "No transcript available for this video"


def test_error_without_envelope_uses_fallback(mock_post, api, fake_response):
    mock_post.return_value = fake_response(500, {"unexpected": True})

    with pytest.raises(ApiError) as exc_info:
        api.summarize("Hello world")

    assert exc_info.value.message == "Failed to generate summary"


def test_non_json_response(mock_post, api, fake_response, test_video_url):
    mock_post.return_value = fake_response(502, text="<html>Bad Gateway</html>")

    with pytest.raises(ApiError) as exc_info:
        api.transcribe(test_video_url)

    assert exc_info.value.message == "Server returned an invalid response. Please try again."
    assert exc_info.value.status_code == 502
