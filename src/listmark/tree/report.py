"""Tree report — block statistics for a parsed document."""

from __future__ import annotations

import json
from dataclasses import dataclass, field

from listmark.tree.schema import Doc, Heading, ListItem, OrderedList, Paragraph


@dataclass
class TreeReport:
    """Summary of the blocks in one document tree."""

    paragraph_count: int = 0
    heading_count: int = 0
    list_count: int = 0
    item_count: int = 0

    # List style distribution: {style: count}
    lists_by_style: dict[str, int] = field(default_factory=dict)

    def to_json(self, indent: int = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self._to_dict(), indent=indent)

    def _to_dict(self) -> dict:
        return {
            "block_counts": {
                "paragraphs": self.paragraph_count,
                "headings": self.heading_count,
                "ordered_lists": self.list_count,
                "list_items": self.item_count,
            },
            "lists_by_style": dict(sorted(self.lists_by_style.items())),
        }

    @classmethod
    def from_doc(cls, doc: Doc) -> TreeReport:
        """Build a report by walking a document tree."""
        report = cls()
        _walk_blocks(doc.content, report)
        return report


def _walk_blocks(blocks: list, report: TreeReport) -> None:
    """Recursively walk blocks to populate report counters."""
    for block in blocks:
        if isinstance(block, Paragraph):
            report.paragraph_count += 1
        elif isinstance(block, Heading):
            report.heading_count += 1
        elif isinstance(block, OrderedList):
            report.list_count += 1
            style = block.attrs.list_style.value
            report.lists_by_style[style] = report.lists_by_style.get(style, 0) + 1
            _walk_blocks(block.content, report)
        elif isinstance(block, ListItem):
            report.item_count += 1
            _walk_blocks(block.content, report)
