"""
Video Summary AI.

This application fetches the transcript of a YouTube video, asks an LLM for
its topic, key points and summary, and shows the result in a web UI.
"""

from app.config import config

__version__ = config.APP_VERSION
