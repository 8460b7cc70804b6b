"""
Centralized error handling for the application.
"""

import json
from typing import Dict, Any

from app.config import config
from app.utils.logger import logging


class VideoAnalysisError(Exception):
    """Base class for errors raised while analyzing a video."""

    status_code = 500
    default_message = "Failed to analyze video"

    def __init__(self, message: str = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class InvalidVideoURLError(VideoAnalysisError):
    """The submitted URL is missing or has no recognizable video ID."""

    status_code = 400
    default_message = "Invalid YouTube URL"


class TranscriptNotFoundError(VideoAnalysisError):
    """The video exists but has no transcript we can use."""

    status_code = 404
    default_message = "No transcript available for this video"


class TranscriptFetchError(VideoAnalysisError):
    """The transcript service failed for a reason other than a missing transcript."""

    default_message = "Failed to fetch video transcript"


class AnalysisFailedError(VideoAnalysisError):
    """The LLM provider call failed."""

    default_message = "Failed to analyze transcript with AI"


class PersistenceError(VideoAnalysisError):
    """Storing or loading a saved analysis failed."""

    default_message = "Failed to save video analysis"


def log_diagnostic_info(context: Dict[str, Any]):
    """
    Log diagnostic information for debugging.

    Args:
        context: Dictionary of diagnostic information
    """
    if not config.DEBUG:
        return

    try:
        logging.debug(f"Diagnostic info: {json.dumps(context, default=str)}")
    except (TypeError, ValueError) as e:
        logging.error(f"Error logging diagnostic info: {str(e)}")
