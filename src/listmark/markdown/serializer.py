"""Document tree → markdown.

Markers are recomputed from each list's recorded style and start index,
never re-inferred from the items themselves.
"""

from __future__ import annotations

import logging
from typing import Optional

from listmark.config import Config, ParserConfig
from listmark.exceptions import SerializeError
from listmark.markdown.classifier import MAX_NUMBER, escape_plain
from listmark.tree.schema import (
    Doc,
    Heading,
    ListItem,
    ListStyle,
    OrderedList,
    Paragraph,
    Text,
)

logger = logging.getLogger(__name__)


def serialize(doc: Doc, config: Optional[Config] = None) -> str:
    """Render a document tree as markdown.

    Top-level blocks are separated by the configured block separator (a
    blank line by default); list items are written one per line.

    Args:
        doc: The tree to render.
        config: Converter configuration. Uses default if None.

    Returns:
        Markdown text, newline-terminated unless empty.

    Raises:
        SerializeError: If the tree is structurally malformed.
    """
    config = config or Config.default()
    if not isinstance(doc, Doc):
        raise SerializeError(f"Expected a doc node, got {type(doc).__name__}")

    chunks = [_render_block(block, config.parser) for block in doc.content]
    text = config.serializer.block_separator.join(chunk for chunk in chunks if chunk)

    logger.debug("Serialized %d blocks to %d characters", len(doc.content), len(text))
    return text + "\n" if text else ""


def format_marker(style: ListStyle, value: int) -> str:
    """Return the marker (without the period) for the item numbered ``value``.

    Letters wrap after z: 27 renders as ``a`` again.
    """
    if style == ListStyle.NUMBER:
        return str(value)
    letter = chr(ord("a") + (value - 1) % 26)
    if style == ListStyle.UPPER_ALPHA:
        return letter.upper()
    return letter


def _render_block(block, parser_config: ParserConfig) -> str:
    if isinstance(block, Paragraph):
        return "\n".join(
            escape_plain(line, parser_config) for line in _inline_text(block).split("\n")
        )
    if isinstance(block, Heading):
        return _render_heading(block)
    if isinstance(block, OrderedList):
        return _render_list(block, parser_config)
    raise SerializeError(f"Unknown block node: {_type_name(block)}")


def _render_heading(node: Heading) -> str:
    level = getattr(getattr(node, "attrs", None), "level", None)
    if not isinstance(level, int) or not 1 <= level <= 6:
        raise SerializeError(f"Heading has invalid level: {level!r}")
    text = _inline_text(node)
    return "#" * level + (f" {text}" if text else "")


def _render_list(node: OrderedList, parser_config: ParserConfig) -> str:
    attrs = getattr(node, "attrs", None)
    style = getattr(attrs, "list_style", None)
    order = getattr(attrs, "order", None)
    if not isinstance(style, ListStyle):
        raise SerializeError(f"Ordered list has invalid listStyle: {style!r}")
    if not isinstance(order, int) or order < 1:
        raise SerializeError(f"Ordered list has invalid order: {order!r}")
    if style == ListStyle.NUMBER and order + len(node.content) - 1 > MAX_NUMBER:
        raise SerializeError(
            f"Ordered list numbering from {order} runs past {MAX_NUMBER}"
        )

    lines = []
    for i, item in enumerate(node.content):
        if not isinstance(item, ListItem):
            raise SerializeError(
                f"Ordered list child {i} is {_type_name(item)}, expected list_item"
            )
        lines.append(_render_item(item, format_marker(style, order + i), parser_config))
    return "\n".join(lines)


def _render_item(item: ListItem, marker: str, parser_config: ParserConfig) -> str:
    prefix = f"{marker}. "
    indent = " " * len(prefix)

    blocks = list(item.content)
    head = ""
    if blocks and isinstance(blocks[0], Paragraph):
        head = _inline_text(blocks.pop(0))

    lines = [prefix + _indent_tail(head, indent)]
    for block in blocks:
        rendered = _render_block(block, parser_config)
        if rendered:
            lines.append(indent + _indent_tail(rendered, indent))
    return "\n".join(lines)


def _indent_tail(text: str, indent: str) -> str:
    """Indent every line of ``text`` after the first."""
    return text.replace("\n", "\n" + indent)


def _inline_text(node) -> str:
    parts = []
    for child in node.content:
        if not isinstance(child, Text):
            raise SerializeError(
                f"{_type_name(node)} holds {_type_name(child)}, expected text"
            )
        parts.append(child.text)
    return "".join(parts)


def _type_name(node) -> str:
    return getattr(node, "type", None) or type(node).__name__
