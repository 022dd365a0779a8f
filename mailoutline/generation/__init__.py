"""Generation package for prompt templates and language model backends."""

from .backends import LanguageModel, GeminiModel, OllamaModel, create_model, BACKENDS
from .requester import OutlineRequester
from .templates import TEMPLATES, DOC_TYPES, get_template, build_prompt

__all__ = [
    'LanguageModel',
    'GeminiModel',
    'OllamaModel',
    'create_model',
    'BACKENDS',
    'OutlineRequester',
    'TEMPLATES',
    'DOC_TYPES',
    'get_template',
    'build_prompt'
]
