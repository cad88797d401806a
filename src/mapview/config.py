import json
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Tuple

from platformdirs import user_config_dir

from .colors import DARK_COLOUR, LIGHT_COLOUR
from .options import ViewOptions, ViewRect

APP_NAME = "MapView"

# Defaults for all configurable options
DEFAULT_CONFIG: Dict[str, Any] = {
    "view": {"width": 10, "height": 10, "pan_x": 0, "pan_y": 0},
    "options": {"default": ""},
    "colours": {"light": LIGHT_COLOUR, "dark": DARK_COLOUR},
}


def user_config_path() -> Path:
    """Return the platform-specific config file path."""
    return Path(user_config_dir(APP_NAME, APP_NAME)) / "config.json"


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Deep-merge dictionaries, with override winning on conflicts."""
    merged: Dict[str, Any] = deepcopy(base)
    for key, val in override.items():
        if isinstance(merged.get(key), dict):
            # A section whose override is not an object keeps its defaults.
            if isinstance(val, dict):
                merged[key] = _deep_merge(merged[key], val)
        else:
            merged[key] = val
    return merged


def load_config(path: Path | None = None) -> Tuple[Dict[str, Any], Path]:
    """Load config from disk, falling back to defaults on errors."""
    config_path = path or user_config_path()
    config: Dict[str, Any] = deepcopy(DEFAULT_CONFIG)

    try:
        if config_path.exists():
            loaded = json.loads(config_path.read_text(encoding="utf-8"))
            if isinstance(loaded, dict):
                config = _deep_merge(config, loaded)
    except Exception as exc:  # noqa: BLE001
        print(f"Failed to load config ({config_path}): {exc}")

    return config, config_path


def save_config(config: Dict[str, Any], path: Path | None = None) -> None:
    """Persist config to disk, creating parent dirs as needed."""
    config_path = path or user_config_path()
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(json.dumps(config, indent=2), encoding="utf-8")
    except Exception as exc:  # noqa: BLE001
        print(f"Failed to save config ({config_path}): {exc}")


def build_options(config: Dict[str, Any]) -> ViewOptions:
    """Create view options from a loaded config, applying its default string."""
    colours = config.get("colours", {})
    options = ViewOptions(
        light_colour=colours.get("light", LIGHT_COLOUR),
        dark_colour=colours.get("dark", DARK_COLOUR),
    )
    view = config.get("view", {})
    defaults = DEFAULT_CONFIG["view"]
    options.view = ViewRect(
        width=view.get("width", defaults["width"]),
        height=view.get("height", defaults["height"]),
        pan_x=view.get("pan_x", defaults["pan_x"]),
        pan_y=view.get("pan_y", defaults["pan_y"]),
    )
    default_string = config.get("options", {}).get("default") or ""
    if default_string:
        options.apply_option_string(default_string)
    return options
