"""Outline requests against a language model."""

import logging

from ..config import DEFAULT_DOC_TYPE
from ..exceptions import GenerationError
from ..models.document import Document
from .backends import LanguageModel
from .templates import build_prompt

logger = logging.getLogger(__name__)

class OutlineRequester:
    """Builds the outline prompt for a document and calls the model once."""

    def __init__(self, model: LanguageModel, doc_type: str = DEFAULT_DOC_TYPE):
        """Initialize the requester.

        Args:
            model: Language model backend
            doc_type: Document type selecting the prompt template
        """
        self.model = model
        self.doc_type = doc_type

    def build_prompt(self, document: Document) -> str:
        """Return the prompt for a document."""
        return build_prompt(self.doc_type, document.title, document.raw_text)

    def request(self, document: Document) -> str:
        """Request an outline for a document.

        Args:
            document: Extracted document

        Returns:
            Raw model response text

        Raises:
            GenerationError: If the model call fails
        """
        prompt = self.build_prompt(document)
        logger.info(f"Requesting {self.doc_type} outline from {self.model.model_name or 'model'}...")
        logger.debug(f"Prompt length: {len(prompt)} characters")

        try:
            response = self.model.invoke(prompt)
        except GenerationError:
            raise
        except Exception as e:
            logger.error(f"Model error: {str(e)}")
            raise GenerationError(f"Failed to get model response: {str(e)}") from e

        logger.debug(f"Response length: {len(response)} characters")
        return response
