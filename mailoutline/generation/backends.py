"""Language model backends.

Every backend exposes `invoke(prompt) -> str` and raises `GenerationError` on
any failure. The pipeline receives a backend instance so tests can substitute
a fake one returning canned text.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

import ollama
import requests
from google import genai
from google.genai import types

from ..config import DEFAULT_GEMINI_MODEL, DEFAULT_OLLAMA_MODEL, get_settings
from ..exceptions import GenerationError

logger = logging.getLogger(__name__)

BACKENDS = ("auto", "gemini", "ollama")

class LanguageModel(ABC):
    """Opaque text-to-text model boundary."""

    model_name: str = ""

    @abstractmethod
    def invoke(self, prompt: str) -> str:
        """Send a prompt to the model and return its text response.

        Args:
            prompt: Fully interpolated prompt

        Returns:
            Raw model response text

        Raises:
            GenerationError: If the model call fails
        """
        pass

class GeminiModel(LanguageModel):
    """Hosted Google generative-language model."""

    def __init__(
        self,
        model_name: str = DEFAULT_GEMINI_MODEL,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None
    ):
        """Initialize the Gemini backend.

        Args:
            model_name: Gemini model identifier
            api_key: API key, read from GOOGLE_API_KEY when not given
            timeout: Request timeout in seconds, MAILOUTLINE_TIMEOUT when not given

        Raises:
            GenerationError: If no API key is available
        """
        settings = get_settings()
        api_key = api_key or settings.GOOGLE_API_KEY
        timeout = timeout if timeout is not None else settings.MAILOUTLINE_TIMEOUT
        if not api_key:
            raise GenerationError("GOOGLE_API_KEY is not set")
        self.model_name = model_name
        self.client = genai.Client(
            api_key=api_key,
            http_options=types.HttpOptions(timeout=int(timeout * 1000))
        )

    def invoke(self, prompt: str) -> str:
        try:
            response = self.client.models.generate_content(
                model=self.model_name,
                contents=prompt
            )
        except Exception as e:
            logger.error(f"Model error: {str(e)}")
            raise GenerationError(f"Failed to get model response: {str(e)}") from e

        text = response.text
        if not text:
            raise GenerationError(f"Model {self.model_name} returned an empty response")
        return text

class OllamaModel(LanguageModel):
    """Local model served by Ollama."""

    def __init__(
        self,
        model_name: str = DEFAULT_OLLAMA_MODEL,
        host: Optional[str] = None,
        timeout: Optional[float] = None
    ):
        settings = get_settings()
        host = host or settings.OLLAMA_HOST
        timeout = timeout if timeout is not None else settings.MAILOUTLINE_TIMEOUT
        self.model_name = model_name
        self.host = host
        self.client = ollama.Client(host=host, timeout=timeout)

    def is_available(self) -> bool:
        """Check whether the Ollama server answers on its API."""
        try:
            response = requests.get(f"{self.host.rstrip('/')}/api/tags", timeout=5)
            return response.status_code == 200
        except requests.RequestException:
            return False

    def invoke(self, prompt: str) -> str:
        try:
            response = self.client.generate(
                model=self.model_name,
                prompt=prompt,
                stream=False
            )
            text = response['response']
        except Exception as e:
            logger.error(f"Model error: {str(e)}")
            raise GenerationError(f"Failed to get model response: {str(e)}") from e

        if not text:
            raise GenerationError(f"Model {self.model_name} returned an empty response")
        return text

def create_model(
    backend: Optional[str] = None,
    model_name: Optional[str] = None,
    api_key: Optional[str] = None,
    timeout: Optional[float] = None
) -> LanguageModel:
    """Build a language model backend.

    Args:
        backend: "gemini", "ollama", or "auto" to use Gemini when an API key
            is configured and Ollama otherwise; MAILOUTLINE_BACKEND when None
        model_name: Model identifier; MAILOUTLINE_MODEL, then the backend
            default, when None
        api_key: Google API key for the Gemini backend
        timeout: Request timeout in seconds

    Returns:
        Configured backend

    Raises:
        GenerationError: If the backend is unknown or cannot be configured
        ConfigurationError: If the environment or .env holds invalid settings
    """
    settings = get_settings()
    backend = backend or settings.MAILOUTLINE_BACKEND
    model_name = model_name or settings.MAILOUTLINE_MODEL
    if backend == "auto":
        backend = "gemini" if (api_key or settings.GOOGLE_API_KEY) else "ollama"

    if backend == "gemini":
        return GeminiModel(model_name or DEFAULT_GEMINI_MODEL, api_key=api_key, timeout=timeout)
    if backend == "ollama":
        return OllamaModel(model_name or DEFAULT_OLLAMA_MODEL, timeout=timeout)
    raise GenerationError(f"Unknown model backend: {backend}")
