"""Line classification: the first pass of the markdown parser.

Each input line maps to exactly one line kind. Marker kinds are
case-sensitive, so ``a.`` and ``A.`` never belong to the same list.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar, Optional, Union

from listmark.config import ParserConfig
from listmark.tree.schema import ListStyle

MAX_NUMBER = 999_999_999

_HEADING_RE = re.compile(r"^ {0,3}(#{1,6})(?:[ \t]+(.*))?$")
_NUMBER_RE = re.compile(r"^\s*(\d{1,9})\.[ \t]+(.*)$")
_ALPHA_RE = re.compile(r"^\s*([a-zA-Z])\.[ \t]+(.*)$")


@dataclass(frozen=True)
class Blank:
    pass


@dataclass(frozen=True)
class Plain:
    text: str


@dataclass(frozen=True)
class HeadingLine:
    level: int
    text: str


@dataclass(frozen=True)
class NumberMarker:
    value: int
    text: str

    style: ClassVar[ListStyle] = ListStyle.NUMBER


@dataclass(frozen=True)
class LowerAlphaMarker:
    letter: str
    text: str

    style: ClassVar[ListStyle] = ListStyle.LOWER_ALPHA

    @property
    def value(self) -> int:
        return ord(self.letter) - ord("a") + 1


@dataclass(frozen=True)
class UpperAlphaMarker:
    letter: str
    text: str

    style: ClassVar[ListStyle] = ListStyle.UPPER_ALPHA

    @property
    def value(self) -> int:
        return ord(self.letter) - ord("A") + 1


Marker = Union[NumberMarker, LowerAlphaMarker, UpperAlphaMarker]
LineKind = Union[Blank, Plain, HeadingLine, NumberMarker, LowerAlphaMarker, UpperAlphaMarker]


def classify(line: str, config: Optional[ParserConfig] = None) -> LineKind:
    """Classify a single line of markdown.

    Checked in priority order: blank, heading, number marker, lowercase
    letter marker, uppercase letter marker. Anything else is plain text.
    Marker kinds disabled in ``config`` fall through to plain text. A plain
    line escaped with a leading backslash (see ``escape_plain``) has the
    backslash removed.
    """
    config = config or ParserConfig()

    if not line.strip():
        return Blank()

    if config.headings:
        m = _HEADING_RE.match(line)
        if m:
            return HeadingLine(level=len(m.group(1)), text=(m.group(2) or "").strip())

    marker = _match_marker(line)
    if marker is not None and marker.style in config.list_styles:
        return marker

    return Plain(text=_unescape(line.strip(), config))


def escape_plain(text: str, config: Optional[ParserConfig] = None) -> str:
    """Escape one line of paragraph text so it reads back as plain text.

    Lines that would classify as a heading or a marker, and lines already
    starting with a backslash, get a leading backslash.
    """
    if _needs_escape(text, config):
        return "\\" + text
    return text


def _unescape(text: str, config: ParserConfig) -> str:
    if text.startswith("\\") and _needs_escape(text[1:], config):
        return text[1:]
    return text


def _needs_escape(text: str, config: Optional[ParserConfig]) -> bool:
    return text.startswith("\\") or not isinstance(classify(text, config), (Plain, Blank))


def _match_marker(line: str) -> Optional[Marker]:
    m = _NUMBER_RE.match(line)
    if m:
        value = int(m.group(1))
        # order must stay positive
        if value == 0:
            return None
        return NumberMarker(value=value, text=m.group(2).strip())

    m = _ALPHA_RE.match(line)
    if m:
        letter = m.group(1)
        text = m.group(2).strip()
        if letter.islower():
            return LowerAlphaMarker(letter=letter, text=text)
        return UpperAlphaMarker(letter=letter, text=text)

    return None
