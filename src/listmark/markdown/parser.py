"""Markdown → document tree."""

from __future__ import annotations

import logging
from typing import Optional

from listmark.config import Config
from listmark.markdown.assembler import assemble
from listmark.markdown.classifier import classify
from listmark.markdown.grouper import group_lines
from listmark.tree.schema import Doc, OrderedList

logger = logging.getLogger(__name__)


def parse(markdown: str, config: Optional[Config] = None) -> Doc:
    """Parse markdown text into a document tree.

    Never fails: any line the grammar does not recognise is kept as
    paragraph text.

    Args:
        markdown: Source text. Both ``\\n`` and ``\\r\\n`` line endings work.
        config: Converter configuration. Uses default if None.

    Returns:
        A fresh Doc.
    """
    config = config or Config.default()

    kinds = [classify(line, config.parser) for line in markdown.splitlines()]
    runs = group_lines(kinds)
    doc = assemble(runs)

    logger.debug(
        "Parsed %d lines into %d blocks (%d ordered lists)",
        len(kinds),
        len(doc.content),
        sum(1 for block in doc.content if isinstance(block, OrderedList)),
    )
    return doc
