"""Markdown parsing and serialization."""

from listmark.markdown.parser import parse
from listmark.markdown.serializer import format_marker, serialize

__all__ = ["format_marker", "parse", "serialize"]
