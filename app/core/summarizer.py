"""
Module for analyzing transcripts using LLM providers.

Two backends are available, Gemini and OpenRouter. The one in use is picked
by ``SummaryConfig.provider``; both take the formatted prompt messages and
return the model's raw text.
"""

from typing import List, Optional, Union

import requests
from google import genai
from google.genai import types
from langchain_core.messages import BaseMessage

from app.config import config as app_config
from app.core.prompts import analysis_prompt
from app.models.schemas import LLMProvider, SummaryConfig
from app.utils.error_handling import AnalysisFailedError
from app.utils.logger import logging


OPENROUTER_URL = "https://openrouter.ai/api/v1/chat/completions"

ROLE_NAMES = {"system": "system", "human": "user", "ai": "assistant"}


class GeminiBackend:
    """Google Gemini through the google-genai SDK."""

    provider = LLMProvider.GEMINI

    def __init__(self, config: SummaryConfig):
        if not config.api_key:
            raise ValueError("Gemini API key is required. Set GEMINI_API_KEY in .env file or pass directly.")
        self.config = config
        self.client = genai.Client(api_key=config.api_key)

    def generate(self, messages: List[BaseMessage]) -> str:
        system = "\n".join(m.content for m in messages if m.type == "system")
        contents = "\n".join(m.content for m in messages if m.type != "system")

        response = self.client.models.generate_content(
            model=self.config.model,
            contents=contents,
            config=types.GenerateContentConfig(
                system_instruction=system or None,
                temperature=self.config.temperature,
                max_output_tokens=self.config.max_tokens,
            ),
        )
        return response.text


class OpenRouterBackend:
    """OpenRouter chat completions over plain HTTP."""

    provider = LLMProvider.OPENROUTER

    def __init__(self, config: SummaryConfig, session: Optional[requests.Session] = None):
        if not config.api_key:
            raise ValueError("OpenRouter API key is required. Set OPENROUTER_API_KEY in .env file or pass directly.")
        self.config = config
        self.session = session or requests.Session()

    def generate(self, messages: List[BaseMessage]) -> str:
        headers = {
            "Authorization": f"Bearer {self.config.api_key}",
            "HTTP-Referer": self.config.site_url,
            "X-Title": self.config.site_name,
            "Content-Type": "application/json",
        }
        payload = {
            "model": self.config.model,
            "messages": [
                {"role": ROLE_NAMES.get(m.type, "user"), "content": m.content}
                for m in messages
            ],
            "temperature": self.config.temperature,
            "max_tokens": self.config.max_tokens,
        }

        response = self.session.post(
            OPENROUTER_URL,
            headers=headers,
            json=payload,
            timeout=self.config.timeout,
        )
        response.raise_for_status()

        data = response.json()
        return data["choices"][0]["message"]["content"]


Backend = Union[GeminiBackend, OpenRouterBackend]

BACKENDS = {
    LLMProvider.GEMINI: GeminiBackend,
    LLMProvider.OPENROUTER: OpenRouterBackend,
}


def build_summary_config(provider: Optional[str] = None) -> SummaryConfig:
    """
    Build a SummaryConfig from application settings.

    Args:
        provider: Provider name overriding LLM_PROVIDER

    Returns:
        SummaryConfig for the selected provider
    """
    selected = LLMProvider((provider or app_config.LLM_PROVIDER).strip().lower())

    if selected == LLMProvider.OPENROUTER:
        model, api_key = app_config.OPENROUTER_MODEL, app_config.OPENROUTER_API_KEY
    else:
        model, api_key = app_config.GEMINI_MODEL, app_config.GEMINI_API_KEY

    return SummaryConfig(
        provider=selected,
        model=model,
        api_key=api_key,
        timeout=app_config.LLM_TIMEOUT,
        site_name=app_config.SITE_NAME,
        site_url=app_config.SITE_URL,
    )


class TranscriptSummarizer:
    """Class to handle transcript analysis operations."""

    def __init__(self, config: SummaryConfig, backend: Optional[Backend] = None):
        """
        Initialize the summarizer for one provider.

        Args:
            config: Provider, model and credentials to use
            backend: Ready-made backend (built from config if None)
        """
        self.config = config
        self.backend = backend or BACKENDS[config.provider](config)

    def analyze(self, transcript_text: str) -> str:
        """
        Ask the model for a structured analysis of a transcript.

        Args:
            transcript_text: Full transcript text

        Returns:
            Raw model output, ideally a JSON object with topic, keyPoints and summary

        Raises:
            AnalysisFailedError: the provider call failed or returned nothing
        """
        messages = analysis_prompt.format_messages(transcript=transcript_text)
        logging.info(
            f"Analyzing transcript ({len(transcript_text)} chars) with "
            f"{self.config.provider.value}:{self.config.model}"
        )

        try:
            text = self.backend.generate(messages)
        except Exception as e:
            logging.error(f"Error in {self.config.provider.value} analysis: {str(e)}")
            raise AnalysisFailedError() from e

        if not text or not text.strip():
            logging.error(f"Empty response from {self.config.provider.value}")
            raise AnalysisFailedError()

        return text
