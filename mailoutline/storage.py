"""Output artifacts written to disk."""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import List, Tuple, Union

from .config import DEFAULT_OUTPUT_DIR, JSON_INDENT, OUTPUT_HTML_FILENAME, OUTPUT_JSON_FILENAME
from .models.section import Section

logger = logging.getLogger(__name__)

def outline_to_json(sections: List[Section]) -> str:
    """Serialize an outline as a pretty-printed JSON array."""
    return json.dumps([section.to_dict() for section in sections], indent=JSON_INDENT, ensure_ascii=False)

class OutputWriter:
    """Writes the JSON outline and the HTML document to an output directory.

    Each file is written to a temporary file next to its target and moved into
    place with `os.replace`, so an interrupted run never leaves a partial
    artifact and a previous one is overwritten in a single step. The pipeline
    writes both artifacts through `write_artifacts` once rendering succeeded.
    """

    def __init__(
        self,
        output_dir: Union[str, Path] = DEFAULT_OUTPUT_DIR,
        json_filename: str = OUTPUT_JSON_FILENAME,
        html_filename: str = OUTPUT_HTML_FILENAME
    ):
        self.output_dir = Path(output_dir)
        self.json_path = self.output_dir / json_filename
        self.html_path = self.output_dir / html_filename

    def _stage(self, path: Path, text: str) -> str:
        """Write `text` to a temporary file next to `path` and return its name."""
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                f.write(text)
        except BaseException:
            os.unlink(tmp_name)
            raise
        return tmp_name

    def write_text(self, path: Path, text: str) -> Path:
        """Atomically replace `path` with `text`."""
        tmp_name = self._stage(path, text)
        try:
            os.replace(tmp_name, path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
        return path

    def write_outline(self, sections: List[Section]) -> Path:
        """Write the outline as pretty-printed JSON."""
        path = self.write_text(self.json_path, outline_to_json(sections))
        logger.info(f"JSON output saved to {path}")
        return path

    def write_html(self, html: str) -> Path:
        """Write the rendered HTML document."""
        path = self.write_text(self.html_path, html)
        logger.info(f"HTML output saved to {path}")
        return path

    def write_artifacts(self, sections: List[Section], html: str) -> Tuple[Path, Path]:
        """Write the JSON outline and the HTML document as a pair.

        Both files are staged before either target is replaced, so a failure
        while writing leaves the previous pair untouched.

        Returns:
            Tuple of (JSON path, HTML path)
        """
        staged: List[str] = []
        try:
            staged.append(self._stage(self.json_path, outline_to_json(sections)))
            staged.append(self._stage(self.html_path, html))
            os.replace(staged[0], self.json_path)
            os.replace(staged[1], self.html_path)
        except BaseException:
            for tmp_name in staged:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
            raise
        logger.info(f"JSON output saved to {self.json_path}")
        logger.info(f"HTML output saved to {self.html_path}")
        return self.json_path, self.html_path
