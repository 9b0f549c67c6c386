"""Markdown ↔ document tree conversion with alphabetic ordered lists."""

from listmark.markdown import parse, serialize

__version__ = "0.1.0"

__all__ = ["parse", "serialize", "__version__"]
