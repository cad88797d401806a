from __future__ import annotations

import os

# pygame prints a banner on import; keep stdout clean for the JSON output.
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

from .__about__ import __version__  # noqa: E402
from .colour_parser import parse_colour, to_rgb  # noqa: E402
from .options import BackgroundImage, ViewOptions, ViewRect  # noqa: E402

__all__ = [
    "__version__",
    "BackgroundImage",
    "ViewOptions",
    "ViewRect",
    "parse_colour",
    "to_rgb",
]
