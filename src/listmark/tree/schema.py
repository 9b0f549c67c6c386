"""Pydantic models for the document tree.

The tree is the contract between the markdown parser and serializer, and its
dict projection (``{type, attrs?, content?}`` with ``{type: "text", text}``
leaves) is the wire format handed to callers. Node kinds form a closed set
discriminated by the ``type`` field.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from listmark.exceptions import TreeError


class ListStyle(str, Enum):
    NUMBER = "number"
    LOWER_ALPHA = "lower-alpha"
    UPPER_ALPHA = "upper-alpha"


class _Node(BaseModel):
    """Shared wire projection for every node kind."""

    def to_dict(self) -> dict[str, Any]:
        """Project the node to its wire dict, dropping empty content lists."""
        return _prune(self.model_dump(by_alias=True, mode="json"))


def _prune(data: dict[str, Any]) -> dict[str, Any]:
    content = data.get("content")
    if content is not None:
        if content:
            data["content"] = [_prune(child) for child in content]
        else:
            del data["content"]
    return data


# ---------------------------------------------------------------------------
# Inline
# ---------------------------------------------------------------------------


class Text(_Node):
    """A run of plain text; always a leaf."""

    type: Literal["text"] = "text"
    text: str = Field(min_length=1)


# ---------------------------------------------------------------------------
# Attributes
# ---------------------------------------------------------------------------


class HeadingAttrs(BaseModel):
    level: int = Field(ge=1, le=6)


class OrderedListAttrs(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    list_style: ListStyle = Field(alias="listStyle")
    order: int = Field(ge=1)


# ---------------------------------------------------------------------------
# Blocks (discriminated union via `type` field)
# ---------------------------------------------------------------------------


class Paragraph(_Node):
    type: Literal["paragraph"] = "paragraph"
    content: list[Text] = Field(default_factory=list)

    @classmethod
    def from_text(cls, text: str) -> Paragraph:
        """Wrap ``text`` in a paragraph; an empty string gives an empty one."""
        return cls(content=[Text(text=text)] if text else [])

    @property
    def text(self) -> str:
        return "".join(node.text for node in self.content)


class Heading(_Node):
    type: Literal["heading"] = "heading"
    attrs: HeadingAttrs
    content: list[Text] = Field(default_factory=list)

    @classmethod
    def from_text(cls, level: int, text: str) -> Heading:
        return cls(
            attrs=HeadingAttrs(level=level),
            content=[Text(text=text)] if text else [],
        )

    @property
    def text(self) -> str:
        return "".join(node.text for node in self.content)


class ListItem(_Node):
    """One entry of an ordered list, holding its own blocks."""

    type: Literal["list_item"] = "list_item"
    content: list[Block] = Field(default_factory=list)


class OrderedList(_Node):
    type: Literal["ordered_list"] = "ordered_list"
    attrs: OrderedListAttrs
    content: list[ListItem] = Field(default_factory=list)


Block = Annotated[
    Union[Paragraph, Heading, OrderedList],
    Field(discriminator="type"),
]

# Rebuild the recursive models now that Block is defined
ListItem.model_rebuild()
OrderedList.model_rebuild()


# ---------------------------------------------------------------------------
# Root
# ---------------------------------------------------------------------------


class Doc(_Node):
    """The root of a parsed markdown document."""

    type: Literal["doc"] = "doc"
    content: list[Block] = Field(default_factory=list)

    def to_json(self, indent: int = 2) -> str:
        """Serialize the wire projection to a JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Any) -> Doc:
        """Validate a wire dict into a tree.

        Raises:
            TreeError: If the dict does not describe a well-formed tree.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise TreeError(f"Malformed document tree: {exc}") from exc

    @classmethod
    def from_json(cls, json_str: str) -> Doc:
        """Deserialize a tree from its JSON wire projection."""
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as exc:
            raise TreeError(f"Invalid tree JSON: {exc}") from exc
        return cls.from_dict(data)
