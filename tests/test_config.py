import pytest

from mailoutline.config import get_settings
from mailoutline.exceptions import ConfigurationError
from mailoutline.generation import GeminiModel, OllamaModel, create_model


def test_defaults_without_environment():
    settings = get_settings()

    assert settings.GOOGLE_API_KEY == ""
    assert settings.MAILOUTLINE_BACKEND == "auto"
    assert settings.MAILOUTLINE_MODEL is None
    assert settings.OLLAMA_HOST == "http://localhost:11434"
    assert settings.MAILOUTLINE_TIMEOUT == 120.0


def test_api_key_from_dotenv_selects_gemini(tmp_path):
    (tmp_path / ".env").write_text("GOOGLE_API_KEY=from-dotenv\nMAILOUTLINE_MODEL=gemini-dotenv\n", encoding="utf-8")

    model = create_model("auto")

    assert isinstance(model, GeminiModel)
    assert model.model_name == "gemini-dotenv"


def test_environment_overrides_dotenv(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("MAILOUTLINE_BACKEND=gemini\nOLLAMA_HOST=http://dotenv:1\n", encoding="utf-8")
    monkeypatch.setenv("MAILOUTLINE_BACKEND", "ollama")
    monkeypatch.setenv("OLLAMA_HOST", "http://gpu-box:11434")

    model = create_model()

    assert isinstance(model, OllamaModel)
    assert model.host == "http://gpu-box:11434"


def test_unrelated_dotenv_entries_are_ignored(tmp_path):
    (tmp_path / ".env").write_text("DATABASE_URL=sqlite://\nMAILOUTLINE_TIMEOUT=30\n", encoding="utf-8")

    assert get_settings().MAILOUTLINE_TIMEOUT == 30.0


def test_invalid_timeout_is_configuration_error(monkeypatch):
    monkeypatch.setenv("MAILOUTLINE_TIMEOUT", "two minutes")

    with pytest.raises(ConfigurationError):
        get_settings()
    with pytest.raises(ConfigurationError):
        create_model("ollama")
