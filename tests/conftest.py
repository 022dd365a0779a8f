"""Pytest configuration helpers.

This conftest ensures the project root is on `sys.path` so tests can import
the `mailoutline` package regardless of how pytest is invoked, and provides a
fake language model returning canned text.
"""
import os
import sys

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from mailoutline.generation import LanguageModel  # noqa: E402

SETTINGS_ENV = (
    "GOOGLE_API_KEY",
    "MAILOUTLINE_BACKEND",
    "MAILOUTLINE_MODEL",
    "OLLAMA_HOST",
    "MAILOUTLINE_TIMEOUT",
)


class FakeModel(LanguageModel):
    """Language model returning a canned response and recording prompts."""

    model_name = "fake"

    def __init__(self, response="[]", error=None):
        self.response = response
        self.error = error
        self.prompts = []

    def invoke(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep the developer's environment and .env out of the settings."""
    for name in SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def make_model():
    return FakeModel


@pytest.fixture
def meeting_file(tmp_path):
    path = tmp_path / "meeting.txt"
    path.write_text("Meeting at 3pm\n- Discuss budget\n- Review timeline\n", encoding="utf-8")
    return path


@pytest.fixture
def outline_response():
    return """```json
[
  {"title": "Whatever the model said", "content": "ignored"},
  {"title": "Agenda", "content": "- Discuss budget\\n- Review timeline"},
  {"title": "Details", "content": {"Place": "Room 4", "Time": "3pm"}},
  {"title": "Next steps", "content": ["Send notes", {"Owner": "Ana"}]}
]
```"""
