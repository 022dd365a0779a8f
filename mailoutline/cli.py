"""Command-line interface for the outline pipeline."""

import logging
from pathlib import Path
from typing import Optional

import typer

from .config import DEFAULT_DOC_TYPE, DEFAULT_INPUT_PATH, DEFAULT_OUTPUT_DIR
from .exceptions import OutlineError
from .generation import BACKENDS, DOC_TYPES, OllamaModel, create_model
from .pipeline import OutlinePipeline
from .storage import OutputWriter

logger = logging.getLogger(__name__)

app = typer.Typer()

@app.command()
def main(
    input_path: Path = typer.Argument(
        DEFAULT_INPUT_PATH,
        help="Document to summarize (.txt, .md or .pdf)"
    ),
    doc_type: str = typer.Option(
        DEFAULT_DOC_TYPE,
        help=f"Document type, one of: {', '.join(DOC_TYPES)}"
    ),
    backend: Optional[str] = typer.Option(
        None,
        help=f"Model backend, one of: {', '.join(BACKENDS)} (default: MAILOUTLINE_BACKEND or auto)"
    ),
    model: Optional[str] = typer.Option(
        None,
        help="Model name (default: MAILOUTLINE_MODEL or the backend default)"
    ),
    output_dir: Path = typer.Option(
        DEFAULT_OUTPUT_DIR,
        help="Directory receiving output.json and output.html"
    ),
    subheadings: bool = typer.Option(
        False,
        help="Render **Heading** markers in section text as sub-headings"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")
):
    """
    Turn a document into an email outline (output.json) and an HTML email (output.html).
    """
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO)

    try:
        language_model = create_model(backend, model)
        if isinstance(language_model, OllamaModel) and not language_model.is_available():
            logger.error(f"Ollama is not running at {language_model.host}. Start it with 'ollama serve' or set GOOGLE_API_KEY.")
            raise typer.Exit(code=1)

        pipeline = OutlinePipeline(
            language_model,
            doc_type=doc_type,
            writer=OutputWriter(output_dir),
            subheadings=subheadings
        )
        result = pipeline.run(input_path)
    except OutlineError as e:
        logger.error(f"{type(e).__name__}: {str(e)}")
        raise typer.Exit(code=1)
    except OSError as e:
        logger.error(f"Failed to write output: {str(e)}")
        raise typer.Exit(code=1)

    logger.info(f"Done: {len(result.sections)} sections written to {result.json_path} and {result.html_path}")

if __name__ == "__main__":
    app()
