"""
Tests for the transcript summarizer module.
"""

import pytest
import requests
from unittest.mock import patch, MagicMock

from app.models.schemas import LLMProvider, SummaryConfig
from app.core.summarizer import (
    TranscriptSummarizer,
    GeminiBackend,
    OpenRouterBackend,
    OPENROUTER_URL,
    build_summary_config,
)
from app.utils.error_handling import AnalysisFailedError


@pytest.fixture
def gemini_config():
    """Fixture to create a Gemini SummaryConfig."""
    return SummaryConfig(provider="gemini", model="gemini-1.5-pro", api_key="test_gemini_key")


@pytest.fixture
def openrouter_config():
    """Fixture to create an OpenRouter SummaryConfig."""
    return SummaryConfig(
        provider="openrouter",
        model="deepseek/deepseek-r1:free",
        api_key="test_openrouter_key",
        site_name="Video Summary AI",
        site_url="https://example.com",
        timeout=30,
    )


@pytest.fixture
def mock_genai_client():
    """Fixture to mock the google-genai client."""
    with patch('app.core.summarizer.genai.Client') as mock_client_class:
        mock_client = mock_client_class.return_value
        mock_response = MagicMock()
        mock_response.text = '{"topic": "T", "keyPoints": [], "summary": "S"}'
        mock_client.models.generate_content.return_value = mock_response
        yield mock_client


@pytest.fixture
def mock_session():
    """A requests session returning an OpenRouter-style response."""
    session = MagicMock(spec=requests.Session)
    response = MagicMock()
    response.json.return_value = {
        "choices": [{"message": {"content": '{"topic": "T", "keyPoints": [], "summary": "S"}'}}]
    }
    session.post.return_value = response
    return session


def test_provider_selects_backend(gemini_config, openrouter_config, mock_genai_client):
    """The configured provider decides which backend is built."""
    assert isinstance(TranscriptSummarizer(gemini_config).backend, GeminiBackend)
    assert isinstance(TranscriptSummarizer(openrouter_config).backend, OpenRouterBackend)


def test_provider_name_is_case_insensitive():
    config = SummaryConfig(provider=" OpenRouter ", model="m", api_key="k")
    assert config.provider == LLMProvider.OPENROUTER


def test_unknown_provider_rejected():
    with pytest.raises(ValueError):
        SummaryConfig(provider="anthropic", model="m", api_key="k")


def test_missing_api_key_raises(mock_genai_client):
    with pytest.raises(ValueError):
        TranscriptSummarizer(SummaryConfig(provider="gemini", model="m"))
    with pytest.raises(ValueError):
        TranscriptSummarizer(SummaryConfig(provider="openrouter", model="m"))


def test_gemini_analyze(gemini_config, mock_genai_client):
    """Gemini gets the transcript in the contents and the schema in the system instruction."""
    summarizer = TranscriptSummarizer(gemini_config)
    result = summarizer.analyze("This is a short test transcript.")

    assert result == '{"topic": "T", "keyPoints": [], "summary": "S"}'
    mock_genai_client.models.generate_content.assert_called_once()
    kwargs = mock_genai_client.models.generate_content.call_args.kwargs
    assert kwargs["model"] == "gemini-1.5-pro"
    assert "This is a short test transcript." in kwargs["contents"]
    assert "keyPoints" in kwargs["config"].system_instruction


def test_openrouter_analyze(openrouter_config, mock_session):
    """OpenRouter receives auth and site metadata headers."""
    backend = OpenRouterBackend(openrouter_config, session=mock_session)
    summarizer = TranscriptSummarizer(openrouter_config, backend=backend)

    result = summarizer.analyze("Transcript text")

    assert result == '{"topic": "T", "keyPoints": [], "summary": "S"}'
    args, kwargs = mock_session.post.call_args
    assert args[0] == OPENROUTER_URL
    assert kwargs["headers"]["Authorization"] == "Bearer test_openrouter_key"
    assert kwargs["headers"]["HTTP-Referer"] == "https://example.com"
    assert kwargs["headers"]["X-Title"] == "Video Summary AI"
    assert kwargs["timeout"] == 30
    roles = [m["role"] for m in kwargs["json"]["messages"]]
    assert roles == ["system", "user"]
    assert "Transcript text" in kwargs["json"]["messages"][1]["content"]


def test_http_error_becomes_analysis_failed(openrouter_config, mock_session):
    mock_session.post.return_value.raise_for_status.side_effect = requests.HTTPError("401 Unauthorized")
    summarizer = TranscriptSummarizer(openrouter_config, backend=OpenRouterBackend(openrouter_config, mock_session))

    with pytest.raises(AnalysisFailedError) as exc_info:
        summarizer.analyze("Transcript text")

    assert exc_info.value.message == "Failed to analyze transcript with AI"


def test_malformed_response_becomes_analysis_failed(openrouter_config, mock_session):
    mock_session.post.return_value.json.return_value = {"error": {"message": "quota"}}
    summarizer = TranscriptSummarizer(openrouter_config, backend=OpenRouterBackend(openrouter_config, mock_session))

    with pytest.raises(AnalysisFailedError):
        summarizer.analyze("Transcript text")


def test_empty_response_becomes_analysis_failed(gemini_config, mock_genai_client):
    mock_genai_client.models.generate_content.return_value.text = "   "

    with pytest.raises(AnalysisFailedError):
        TranscriptSummarizer(gemini_config).analyze("Transcript text")


def test_build_summary_config_uses_settings():
    with patch('app.core.summarizer.app_config') as mock_config:
        mock_config.LLM_PROVIDER = "gemini"
        mock_config.GEMINI_MODEL = "gemini-test"
        mock_config.GEMINI_API_KEY = "g-key"
        mock_config.OPENROUTER_MODEL = "or-test"
        mock_config.OPENROUTER_API_KEY = "or-key"
        mock_config.LLM_TIMEOUT = 12.0
        mock_config.SITE_NAME = "Site"
        mock_config.SITE_URL = "https://site"

        default = build_summary_config()
        override = build_summary_config("openrouter")

    assert default.provider == LLMProvider.GEMINI
    assert default.model == "gemini-test"
    assert default.api_key == "g-key"
    assert override.provider == LLMProvider.OPENROUTER
    assert override.model == "or-test"
    assert override.api_key == "or-key"
    assert override.site_url == "https://site"
    assert override.timeout == 12.0
