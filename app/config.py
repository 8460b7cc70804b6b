"""
Configuration settings for the Video Summary AI application.
"""

import os
from typing import List
from pathlib import Path
from dotenv import load_dotenv


# Ensure environment variables are loaded
load_dotenv()


class Config:
    """Base configuration class."""

    # Application info
    APP_NAME = "Video Summary AI"
    APP_VERSION = "0.2.0"

    # Data directories
    BASE_DIR = Path(__file__).resolve().parent.parent.absolute()
    DATA_DIR = BASE_DIR / "data"
    ANALYSES_DIR = DATA_DIR / "analyses"

    # LLM provider selection and API keys
    LLM_PROVIDER = os.getenv("LLM_PROVIDER", "gemini")
    GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")
    OPENROUTER_API_KEY = os.getenv("OPENROUTER_API_KEY")

    # Default models
    GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-1.5-pro")
    OPENROUTER_MODEL = os.getenv("OPENROUTER_MODEL", "deepseek/deepseek-r1:free")
    LLM_TIMEOUT = float(os.getenv("LLM_TIMEOUT", "60"))

    # Request metadata sent to OpenRouter
    SITE_NAME = os.getenv("SITE_NAME", "Video Summary AI")
    SITE_URL = os.getenv("SITE_URL", "")

    # Caption languages tried in order
    TRANSCRIPT_LANGUAGES = os.getenv("TRANSCRIPT_LANGUAGES", "en,id")

    PUBLIC_URL = os.getenv("PUBLIC_URL", "http://localhost:8000")

    # Create data directories if they don't exist
    @classmethod
    def initialize(cls):
        """Initialize the application configuration."""
        cls.DATA_DIR.mkdir(parents=True, exist_ok=True)
        cls.ANALYSES_DIR.mkdir(parents=True, exist_ok=True)

        # Validate required environment variables
        key_name = f"{cls.LLM_PROVIDER.upper()}_API_KEY"
        if not getattr(cls, key_name, None):
            print(f"WARNING: {key_name} environment variable not set.")
            print("Please set it in the .env file or environment variables.")

    @classmethod
    def get_transcript_languages(cls) -> List[str]:
        """Caption language codes in preference order."""
        return [lang.strip() for lang in cls.TRANSCRIPT_LANGUAGES.split(",") if lang.strip()]


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
config.initialize()
