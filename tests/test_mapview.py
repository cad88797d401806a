import json
import os
import subprocess
import sys
from pathlib import Path

from mapview import config
from mapview.mapview import main


def test_main_prints_derived_measurements(tmp_path: Path, capsys) -> None:
    config_path = tmp_path / "config.json"

    status = main(["@2C40", "@D", "--config", str(config_path)])

    assert status == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["cell_size_px"] == 80
    assert payload["width_px"] == 800
    assert payload["canvas_width"] == 960
    assert payload["dark_mode"] is True
    assert not config_path.exists()


def test_main_view_flags_respect_pan_bounds(tmp_path: Path, capsys) -> None:
    status = main(
        ["--width", "30", "--pan-x", "90", "--config", str(tmp_path / "c.json")]
    )

    assert status == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["view"]["width"] == 30
    assert payload["view"]["pan_x"] == 70


def test_main_rejects_invalid_option_string(tmp_path: Path, capsys) -> None:
    status = main(["C80", "--config", str(tmp_path / "c.json")])

    assert status == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "error: invalid option string: C80" in captured.err


def test_main_saves_default_string(tmp_path: Path, capsys) -> None:
    config_path = tmp_path / "config.json"

    assert main(["@1.5", "@C80D", "--save-default", "--config", str(config_path)]) == 0
    capsys.readouterr()

    loaded, _ = config.load_config(config_path)
    assert loaded["options"]["default"] == "@C80D"

    assert main(["--config", str(config_path)]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["cell_size"] == 80
    assert payload["dark_mode"] is True
    assert payload["zoom"] == 1


def test_module_entry_point_writes_only_json(tmp_path: Path) -> None:
    env = dict(os.environ)
    env.pop("PYGAME_HIDE_SUPPORT_PROMPT", None)

    result = subprocess.run(
        [sys.executable, "-m", "mapview", "@D", "--config", str(tmp_path / "c.json")],
        capture_output=True,
        text=True,
        env=env,
        check=True,
    )

    payload = json.loads(result.stdout)
    assert payload["dark_mode"] is True
