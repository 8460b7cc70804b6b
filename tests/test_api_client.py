"""
Tests for the frontend API client.
"""

import pytest
import requests
from unittest.mock import patch, MagicMock

from app.frontend.api_client import ApiClient


def make_response(status_code, body):
    response = MagicMock()
    response.status_code = status_code
    response.ok = status_code < 400
    response.json.return_value = body
    return response


@pytest.fixture
def client():
    return ApiClient("http://testserver:8000")


def test_urls(client):
    assert client._url("analyze") == "http://testserver:8000/api/v1/analyze"


@patch('app.frontend.api_client.requests.post')
def test_analyze_video_success(mock_post, client):
    mock_post.return_value = make_response(200, {"analysis": "{}", "video_id": "dQw4w9WgXcQ"})

    result = client.analyze_video("https://youtu.be/dQw4w9WgXcQ")

    assert result == {"analysis": "{}", "video_id": "dQw4w9WgXcQ"}
    assert mock_post.call_args.kwargs["json"] == {"url": "https://youtu.be/dQw4w9WgXcQ"}


@patch('app.frontend.api_client.requests.post')
def test_analyze_video_surfaces_server_message(mock_post, client):
    """The 404 detail reaches the UI unchanged."""
    mock_post.return_value = make_response(404, {"detail": "No transcript available for this video"})

    result = client.analyze_video("https://youtu.be/dQw4w9WgXcQ")

    assert result["error"] == "No transcript available for this video"
    assert result["status_code"] == 404


@patch('app.frontend.api_client.requests.post')
def test_analyze_video_non_json_error(mock_post, client):
    response = make_response(502, None)
    response.json.side_effect = ValueError("not json")
    mock_post.return_value = response

    assert client.analyze_video("https://youtu.be/dQw4w9WgXcQ")["error"] == "Failed to analyze video"


@patch('app.frontend.api_client.requests.post')
def test_analyze_video_connection_error(mock_post, client):
    mock_post.side_effect = requests.ConnectionError("refused")

    assert "refused" in client.analyze_video("https://youtu.be/dQw4w9WgXcQ")["error"]


@patch('app.frontend.api_client.requests.post')
def test_save_analysis(mock_post, client):
    mock_post.return_value = make_response(200, {"success": True, "data": {"id": 1}})

    assert client.save_analysis({"topic": "A"})["success"] is True
    assert mock_post.call_args.kwargs["json"] == {"result": {"topic": "A"}}


@patch('app.frontend.api_client.requests.post')
def test_save_analysis_failure(mock_post, client):
    mock_post.return_value = make_response(500, {"success": False, "error": "Failed to save video analysis"})

    result = client.save_analysis("raw")

    assert result == {"success": False, "error": "Failed to save video analysis"}


def test_extract_video_id(client):
    assert client.extract_video_id("https://youtu.be/dQw4w9WgXcQ") == "dQw4w9WgXcQ"
    assert client.extract_video_id("not a url") is None
