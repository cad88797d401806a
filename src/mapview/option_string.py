"""Tokenizer for ``@``-prefixed view option strings.

An option string starts with the sigil, may carry a leading zoom directive
(``@1.25``, ``@.5``) and then any number of single-letter option tokens::

    @1.5C80DQ~f0aH40S10ft

Tokens are matched in source order by one scanner built from an ordered list
of per-kind patterns; the first letter of a match selects the field it sets.
Characters that match no pattern are skipped.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator

from .option_constants import OPTION_SIGIL

COLOUR_TOKEN = r"(?:PK|PU|BK|GY|BN|[WKEARGBYPCNOI]|~[0-9A-F]{6}|~[0-9A-F]{3})"

# Earlier entries win when two patterns could match at the same position.
TOKEN_PATTERNS: tuple[str, ...] = (
    rf"Q{COLOUR_TOKEN}",  # grid colour
    rf"G{COLOUR_TOKEN}",  # background colour
    r"[DEFN]",  # flags
    r"[CH][0-9]*",  # cell size, grid opacity
    r"[BZ][0-9]*(?:\.[0-9]*)?",  # background zoom, zoom
    r"O[0-9]+:[0-9]+",  # background offset
    r"S[0-9]{1,2}(?:FT|M)",  # scale
)

_TOKEN_RE = re.compile(
    "|".join(f"(?:{pattern})" for pattern in TOKEN_PATTERNS), re.IGNORECASE
)
_ZOOM_RE = re.compile(
    re.escape(OPTION_SIGIL) + r"(-?(?:[0-9]+(?:\.[0-9]{1,3})?|\.[0-9]{1,3}))"
)


@dataclass(frozen=True)
class OptionToken:
    key: str  # upper-cased leading letter
    payload: str  # text after the leading letter, case preserved
    start: int


def is_option_string(raw: str) -> bool:
    return raw.startswith(OPTION_SIGIL)


def match_zoom_directive(raw: str) -> tuple[float | None, int]:
    """Return the leading zoom value (or None) and the index scanning resumes at."""
    match = _ZOOM_RE.match(raw)
    if match is None:
        return None, len(OPTION_SIGIL)
    return float(match.group(1)), match.end()


def iter_tokens(raw: str, pos: int = 0) -> Iterator[OptionToken]:
    for match in _TOKEN_RE.finditer(raw, pos):
        text = match.group(0)
        yield OptionToken(key=text[0].upper(), payload=text[1:], start=match.start())
