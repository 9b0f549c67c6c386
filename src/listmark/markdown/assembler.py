"""Assembles grouped runs into the document root."""

from __future__ import annotations

from listmark.markdown.builder import build_list
from listmark.markdown.grouper import HeadingRun, MarkerRun, PlainRun, Run
from listmark.tree.schema import Block, Doc, Heading, Paragraph


def assemble(runs: list[Run]) -> Doc:
    """Turn block-candidate runs into a Doc.

    A document with no blocks still gets exactly one empty paragraph, so
    every parsed tree has an editable body.
    """
    blocks: list[Block] = []
    for run in runs:
        if isinstance(run, MarkerRun):
            blocks.append(build_list(run))
        elif isinstance(run, PlainRun):
            blocks.append(Paragraph.from_text("\n".join(line.text for line in run.lines)))
        elif isinstance(run, HeadingRun):
            blocks.append(Heading.from_text(run.line.level, run.line.text))
        else:
            raise TypeError(f"Unknown run type: {type(run).__name__}")

    if not blocks:
        blocks.append(Paragraph())

    return Doc(content=blocks)
