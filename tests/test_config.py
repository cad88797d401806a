import json
from pathlib import Path

from mapview import config
from mapview.colors import DARK_COLOUR, LIGHT_COLOUR


def test_deep_merge_handles_nested_dicts_without_mutating_inputs() -> None:
    base = {"view": {"width": 10, "height": 10}, "options": {"default": ""}}
    override = {
        "view": {"width": 20},
        "options": {"default": "@D"},
        "colours": {"light": "#ffffff"},
    }

    merged = config._deep_merge(base, override)

    assert merged["view"]["width"] == 20
    assert merged["view"]["height"] == 10
    assert merged["options"]["default"] == "@D"
    assert merged["colours"]["light"] == "#ffffff"

    assert base["view"]["width"] == 10
    assert base["options"]["default"] == ""


def test_load_config_merges_defaults_with_file(tmp_path: Path) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text(
        json.dumps(
            {
                "view": {"pan_x": 5},
                "new_option": {"enabled": True},
            }
        ),
        encoding="utf-8",
    )

    loaded, resolved_path = config.load_config(path=config_path)

    assert resolved_path == config_path
    assert loaded["view"]["pan_x"] == 5
    assert loaded["view"]["width"] == 10
    assert loaded["new_option"] == {"enabled": True}
    assert loaded is not config.DEFAULT_CONFIG


def test_load_config_falls_back_to_defaults_on_invalid_json(
    tmp_path: Path, capsys
) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text("not valid json", encoding="utf-8")

    loaded, resolved_path = config.load_config(path=config_path)

    assert resolved_path == config_path
    assert loaded == config.DEFAULT_CONFIG
    assert loaded["view"] is not config.DEFAULT_CONFIG["view"]
    assert "Failed to load config" in capsys.readouterr().out


def test_save_config_persists_to_disk(tmp_path: Path) -> None:
    config_path = tmp_path / "nested" / "config.json"
    payload = {"options": {"default": "@1.5C80D"}}

    config.save_config(payload, config_path)

    saved = json.loads(config_path.read_text(encoding="utf-8"))
    assert saved == payload


def test_build_options_from_defaults() -> None:
    options = config.build_options(config.DEFAULT_CONFIG)

    assert options.view.width == 10
    assert options.zoom == 1
    assert options.fg == DARK_COLOUR
    assert options.bg == LIGHT_COLOUR


def test_build_options_applies_view_tones_and_default_string() -> None:
    payload = config._deep_merge(
        config.DEFAULT_CONFIG,
        {
            "view": {"width": 40, "pan_x": 90},
            "options": {"default": "@2C50D"},
            "colours": {"light": "#ffffff", "dark": "#000000"},
        },
    )

    options = config.build_options(payload)

    assert options.view.width == 40
    assert options.view.pan_x == 60
    assert options.zoom == 2
    assert options.cell_size == 50
    assert options.fg == "#ffffff"
    assert options.bg == "#000000"


def test_load_config_keeps_default_section_when_override_is_not_an_object(
    tmp_path: Path,
) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text(
        json.dumps({"view": 5, "options": {"default": "@D"}}), encoding="utf-8"
    )

    loaded, _ = config.load_config(path=config_path)

    assert loaded["view"] == config.DEFAULT_CONFIG["view"]
    assert config.build_options(loaded).dark_mode is True
