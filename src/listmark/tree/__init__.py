"""Document tree models."""

from listmark.tree.schema import (
    Block,
    Doc,
    Heading,
    HeadingAttrs,
    ListItem,
    ListStyle,
    OrderedList,
    OrderedListAttrs,
    Paragraph,
    Text,
)

__all__ = [
    "Block",
    "Doc",
    "Heading",
    "HeadingAttrs",
    "ListItem",
    "ListStyle",
    "OrderedList",
    "OrderedListAttrs",
    "Paragraph",
    "Text",
]
