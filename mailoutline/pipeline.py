"""Core pipeline turning one input document into the outline artifacts."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from .config import DEFAULT_DOC_TYPE
from .extraction import TextExtractor
from .generation import LanguageModel, OutlineRequester
from .models.document import Document
from .models.section import Section
from .outline import OutlineParser
from .rendering import ContentRenderer, DocumentRenderer
from .storage import OutputWriter

logger = logging.getLogger(__name__)

@dataclass
class PipelineResult:
    """Artifacts produced by one pipeline run."""
    document: Document
    sections: List[Section]
    html: str
    json_path: Path
    html_path: Path

class OutlinePipeline:
    """Runs extraction, the model call, parsing and rendering in sequence.

    Nothing is retried and every error propagates to the caller. The JSON
    outline and the HTML document are written together, and only once the
    response parsed and the outline rendered.
    """

    def __init__(
        self,
        model: LanguageModel,
        doc_type: str = DEFAULT_DOC_TYPE,
        writer: Optional[OutputWriter] = None,
        extractor: Optional[TextExtractor] = None,
        subheadings: bool = False
    ):
        """Initialize the pipeline.

        Args:
            model: Language model backend
            doc_type: Document type selecting the prompt template
            writer: Sink for the JSON and HTML artifacts
            extractor: Text extractor, a default one when None
            subheadings: Render "**Heading**" markers as sub-sections
        """
        self.writer = writer or OutputWriter()
        self.extractor = extractor or TextExtractor()
        self.requester = OutlineRequester(model, doc_type)
        self.parser = OutlineParser()
        self.renderer = DocumentRenderer(ContentRenderer(subheadings=subheadings))

    def run(self, input_path: Union[str, Path]) -> PipelineResult:
        """Process one document.

        Args:
            input_path: Path to a .txt, .md or .pdf file

        Returns:
            Pipeline result with the outline, the HTML and the artifact paths

        Raises:
            ExtractionError: If the input cannot be read
            GenerationError: If the model call fails
            MalformedOutlineError: If the response is not a JSON array
            RenderError: If the outline cannot be rendered
        """
        logger.info("=== Step 1: Extracting document ===")
        document = self.extractor.extract(input_path)

        logger.info("=== Step 2: Generating outline ===")
        response = self.requester.request(document)

        logger.info("=== Step 3: Parsing outline ===")
        sections = self.parser.parse(response, document.title)

        logger.info("=== Step 4: Rendering HTML ===")
        html = self.renderer.render(sections)
        json_path, html_path = self.writer.write_artifacts(sections, html)

        return PipelineResult(
            document=document,
            sections=sections,
            html=html,
            json_path=json_path,
            html_path=html_path
        )
