"""Ordered-list construction from a single marker run."""

from __future__ import annotations

from listmark.exceptions import RunConsistencyError
from listmark.markdown.grouper import MarkerRun
from listmark.tree.schema import ListItem, OrderedList, OrderedListAttrs, Paragraph


def build_list(run: MarkerRun) -> OrderedList:
    """Convert a run of same-kind marker lines into an OrderedList.

    The list style comes from the marker kind and ``order`` from the first
    marker's value (digits as written, letters a=1 through z=26). Each line
    becomes a list item holding one paragraph with the marker's trailing text.

    Raises:
        RunConsistencyError: If the run is empty or mixes marker kinds.
    """
    if not run.lines:
        raise RunConsistencyError("Cannot build a list from an empty run")

    kind = run.kind
    for line in run.lines:
        if type(line) is not kind:
            raise RunConsistencyError(
                f"Mixed marker kinds in one run: {kind.__name__} and "
                f"{type(line).__name__}"
            )

    first = run.lines[0]
    return OrderedList(
        attrs=OrderedListAttrs(list_style=first.style, order=first.value),
        content=[
            ListItem(content=[Paragraph.from_text(line.text)])
            for line in run.lines
        ],
    )
