"""Block grouping: partitions classified lines into homogeneous runs.

The scan is a small state machine whose state is the currently open run:
nothing open, an open marker run of one marker kind, or an open plain run.
Blank lines close a plain run but are skipped inside a marker run, which is
what keeps ``a. x`` / blank / ``b. y`` a single list.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Union

from listmark.markdown.classifier import (
    MAX_NUMBER,
    Blank,
    HeadingLine,
    LineKind,
    Marker,
    NumberMarker,
    Plain,
)


@dataclass
class MarkerRun:
    """Marker lines of a single kind, in input order."""

    lines: list[Marker] = field(default_factory=list)

    @property
    def kind(self) -> type:
        return type(self.lines[0])

    def is_full(self) -> bool:
        """True when one more number item would be numbered past MAX_NUMBER."""
        first = self.lines[0]
        return isinstance(first, NumberMarker) and first.value + len(self.lines) > MAX_NUMBER


@dataclass
class PlainRun:
    """Consecutive plain-text lines with no blank line between them."""

    lines: list[Plain] = field(default_factory=list)


@dataclass
class HeadingRun:
    line: HeadingLine


Run = Union[MarkerRun, PlainRun, HeadingRun]


def group_lines(kinds: Iterable[LineKind]) -> list[Run]:
    """Group classified lines into block-candidate runs.

    Rules:
      - a marker line extends the open run only when that run holds markers
        of the identical kind; otherwise it closes the open run and opens
        a new marker run
      - a blank line closes an open plain run and is skipped otherwise
      - a plain line closes an open marker run and opens or extends a
        plain run
      - a heading line closes any open run and is a run of its own
      - a number run also closes once its items would be numbered past
        MAX_NUMBER, so every list stays renderable
    """
    runs: list[Run] = []
    current: Optional[Union[MarkerRun, PlainRun]] = None

    def close():
        nonlocal current
        if current is not None:
            runs.append(current)
            current = None

    for kind in kinds:
        if isinstance(kind, Blank):
            if isinstance(current, PlainRun):
                close()
        elif isinstance(kind, HeadingLine):
            close()
            runs.append(HeadingRun(line=kind))
        elif isinstance(kind, Plain):
            if not isinstance(current, PlainRun):
                close()
                current = PlainRun()
            current.lines.append(kind)
        elif (
            isinstance(current, MarkerRun)
            and type(kind) is current.kind
            and not current.is_full()
        ):
            current.lines.append(kind)
        else:
            close()
            current = MarkerRun(lines=[kind])

    close()
    return runs
