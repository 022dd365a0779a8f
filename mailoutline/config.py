"""Configuration settings for the outline pipeline."""

from typing import Optional

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError

# Input / output
DEFAULT_INPUT_PATH = "sampleInput.txt"
DEFAULT_OUTPUT_DIR = "."
OUTPUT_JSON_FILENAME = "output.json"
OUTPUT_HTML_FILENAME = "output.html"
JSON_INDENT = 2

# Outline settings
DEFAULT_TITLE = "Untitled"
SUBJECT_SECTION_TITLE = "Subject"
DEFAULT_DOC_TYPE = "general"

# Model settings
DEFAULT_GEMINI_MODEL = "gemini-2.0-flash"
DEFAULT_OLLAMA_MODEL = "mistral"


class Settings(BaseSettings):
    """Model backend settings.

    Loaded from environment variables or a .env file in the working directory.
    """
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    GOOGLE_API_KEY: str = ""
    MAILOUTLINE_BACKEND: str = "auto"  # auto, gemini or ollama
    MAILOUTLINE_MODEL: Optional[str] = None  # None means backend default
    OLLAMA_HOST: str = "http://localhost:11434"
    MAILOUTLINE_TIMEOUT: float = 120.0  # seconds


def get_settings() -> Settings:
    """Load the settings from the environment and .env.

    Read on every call so a .env in the current working directory is honored.

    Raises:
        ConfigurationError: If a setting has an invalid value
    """
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {str(e)}") from e
