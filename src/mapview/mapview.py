"""Decode view option strings and report the derived canvas measurements."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any, Sequence

try:
    from .__about__ import __version__
except Exception:  # pragma: no cover - fallback version
    __version__ = "0.0.0-unknown"
from .config import build_options, load_config, save_config


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mapview",
        description="Apply @-prefixed view option strings and print the result as JSON.",
    )
    parser.add_argument(
        "option_strings",
        nargs="*",
        metavar="OPTION_STRING",
        help="Option strings such as @1.5C80D, applied in order.",
    )
    parser.add_argument("--width", type=float, help="View width in cells.")
    parser.add_argument("--height", type=float, help="View height in cells.")
    parser.add_argument("--pan-x", type=float, help="Horizontal pan in percent.")
    parser.add_argument("--pan-y", type=float, help="Vertical pan in percent.")
    parser.add_argument(
        "--config",
        type=Path,
        help="Config file to read (defaults to the per-user config).",
    )
    parser.add_argument(
        "--save-default",
        action="store_true",
        help="Store the last option string as the default for future runs.",
    )
    parser.add_argument("--version", action="version", version=__version__)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    config: dict[str, Any]
    config, config_path = load_config(args.config)
    options = build_options(config)

    overrides = {
        field: value
        for field, value in (
            ("width", args.width),
            ("height", args.height),
            ("pan_x", args.pan_x),
            ("pan_y", args.pan_y),
        )
        if value is not None
    }
    if overrides:
        options.view = replace(options.view, **overrides)

    for raw in args.option_strings:
        if not options.apply_option_string(raw):
            print(f"error: invalid option string: {raw}", file=sys.stderr)
            return 1

    if args.save_default and args.option_strings:
        config["options"]["default"] = args.option_strings[-1]
        save_config(config, config_path)

    sys.stdout.write(f"{json.dumps(options.as_dict(), indent=2)}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
