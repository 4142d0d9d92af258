"""
Configuration settings for the YouTube notes application.
"""

import os
from pathlib import Path
from dotenv import load_dotenv


# Ensure environment variables are loaded
load_dotenv()


class Config:
    """Base configuration class."""

    # Application info
    APP_NAME = "YouTube Notes"
    APP_VERSION = "0.2.0"

    # Directories
    BASE_DIR = Path(__file__).resolve().parent.parent.absolute()
    SUMMARIES_DIR = Path(os.getenv("SUMMARIES_DIR", "summaries"))
    LOG_DIR = Path(os.getenv("LOG_DIR", BASE_DIR / "logs"))

    # API keys
    OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")

    # Default model
    DEFAULT_SUMMARY_MODEL = os.getenv("LLM_MODEL", "gpt-4o-mini")
    MODEL_PROVIDER = os.getenv("MODEL_PROVIDER", "openai")
    TEMPERATURE = float(os.getenv("TEMPERATURE", "0"))

    # Chunking
    CHUNK_SIZE = 500
    CHUNK_OVERLAP = 50

    # Transcripts
    YOUTUBE_URL_TEMPLATE = "https://youtu.be/{video_id}"
    DEFAULT_LANGUAGE = "en"
    SUPPORTED_LANGUAGES = ("en", "pt-BR")

    @classmethod
    def initialize(cls):
        """Initialize the application configuration."""
        # Validate required environment variables
        if not cls.OPENAI_API_KEY:
            print("WARNING: OPENAI_API_KEY environment variable not set.")
            print("Please set it in the .env file or environment variables.")


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
