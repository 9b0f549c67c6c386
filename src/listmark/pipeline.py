"""File-level workflows around the parser and serializer.

Reads markdown or saved tree JSON from disk, converts, and writes the
result back out.
"""

from __future__ import annotations

import logging
from pathlib import Path

from listmark.config import Config
from listmark.exceptions import PipelineError, TreeError
from listmark.markdown import parse, serialize
from listmark.tree.report import TreeReport
from listmark.tree.schema import Doc

logger = logging.getLogger(__name__)


class Converter:
    """Orchestrates markdown ↔ tree conversion for files."""

    def __init__(self, config: Config | None = None):
        self.config = config or Config.default()
        self.last_report: TreeReport | None = None

    def parse_file(self, md_path: Path) -> Doc:
        """Read a markdown file and parse it into a tree.

        Raises:
            PipelineError: If the file cannot be read.
        """
        md_path = Path(md_path)
        logger.info("Parsing %s", md_path)
        try:
            text = md_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise PipelineError(f"Markdown file not found: {md_path}")
        except UnicodeDecodeError as exc:
            raise PipelineError(f"Markdown file is not UTF-8: {md_path}") from exc
        return parse(text, self.config)

    def render(self, doc: Doc, output_path: Path) -> Path:
        """Serialize a tree and write the markdown to ``output_path``."""
        output_path = Path(output_path)
        logger.info("Writing %s", output_path)
        output_path.write_text(serialize(doc, self.config), encoding="utf-8")
        return output_path

    def rewrite(self, md_path: Path) -> str:
        """Markdown file → tree → markdown text, recording a report of the tree."""
        doc = self.parse_file(md_path)
        self.last_report = TreeReport.from_doc(doc)
        return serialize(doc, self.config)

    def normalize(self, md_path: Path, output_path: Path) -> Path:
        """Rewrite a markdown file into its canonical form at ``output_path``."""
        output_path = Path(output_path)
        text = self.rewrite(md_path)
        logger.info("Writing %s", output_path)
        output_path.write_text(text, encoding="utf-8")
        return output_path

    def inspect(self, md_path: Path) -> str:
        """Parse a markdown file and return its tree as formatted JSON."""
        return self.parse_file(md_path).to_json()

    def load_tree(self, tree_path: Path) -> Doc:
        """Load a tree from its saved JSON projection.

        Raises:
            PipelineError: If the file is missing or not a valid tree.
        """
        tree_path = Path(tree_path)
        logger.info("Loading tree from %s", tree_path)
        try:
            json_str = tree_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise PipelineError(f"Tree file not found: {tree_path}")
        try:
            return Doc.from_json(json_str)
        except TreeError as exc:
            raise PipelineError(f"Failed to load tree from {tree_path}: {exc}") from exc

    def from_tree(self, tree_path: Path, output_path: Path) -> Path:
        """Write markdown for a saved tree JSON file."""
        return self.render(self.load_tree(tree_path), output_path)

    @staticmethod
    def save_tree(doc: Doc, path: Path) -> Path:
        """Save a tree to a JSON file."""
        path = Path(path)
        logger.info("Saving tree to %s", path)
        path.write_text(doc.to_json(), encoding="utf-8")
        return path
