"""Resolve option-string colour tokens to concrete colours."""

from __future__ import annotations

import re

import pygame

from .colors import PALETTE

HEX_PREFIX = "~"
_HEX_RE = re.compile(r"^~([0-9a-f]{6}|[0-9a-f]{3})$", re.IGNORECASE)


def _to_hex(color: pygame.Color) -> str:
    return f"#{color.r:02x}{color.g:02x}{color.b:02x}"


def parse_colour(token: str) -> str:
    """Return the ``#rrggbb`` colour for a palette mnemonic or ``~hex`` literal."""
    key = token.strip().upper()
    if key in PALETTE:
        return PALETTE[key]

    match = _HEX_RE.match(key)
    if not match:
        raise ValueError(f"Unrecognized colour token: {token!r}")
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return _to_hex(pygame.Color(f"#{digits}"))


def to_rgb(colour: str) -> tuple[int, int, int]:
    try:
        color = pygame.Color(colour)
    except ValueError as exc:
        raise ValueError(f"Invalid colour value: {colour!r}") from exc
    return color.r, color.g, color.b
