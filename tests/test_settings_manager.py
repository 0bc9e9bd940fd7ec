from __future__ import annotations

import json
from pathlib import Path

from svg_carousel import constants
from svg_carousel.settings_manager import SettingsManager


def test_missing_file_uses_defaults(tmp_path: Path) -> None:
    sm = SettingsManager(str(tmp_path / "settings.json"))

    assert sm.data == {}
    assert sm.svg_dir == constants.SVG_DIR
    assert sm.title == constants.TITLE
    assert sm.window_size == (constants.WINDOW_WIDTH, constants.WINDOW_HEIGHT)


def test_values_from_file_override_defaults(tmp_path: Path) -> None:
    settings_file = tmp_path / "settings.json"
    settings_file.write_text(
        json.dumps({"svg_dir": "/srv/art", "title": "Gallery", "window_width": 1024, "window_height": 700}),
        encoding="utf-8",
    )

    sm = SettingsManager(str(settings_file))

    assert sm.has("svg_dir")
    assert sm.svg_dir == "/srv/art"
    assert sm.title == "Gallery"
    assert sm.window_size == (1024, 700)


def test_corrupt_file_falls_back_to_defaults(tmp_path: Path) -> None:
    settings_file = tmp_path / "settings.json"
    settings_file.write_text("{not json", encoding="utf-8")

    sm = SettingsManager(str(settings_file))

    assert sm.data == {}
    assert sm.title == constants.TITLE


def test_non_object_json_falls_back_to_defaults(tmp_path: Path) -> None:
    settings_file = tmp_path / "settings.json"
    settings_file.write_text("[1, 2, 3]", encoding="utf-8")

    assert SettingsManager(str(settings_file)).data == {}


def test_invalid_values_fall_back(tmp_path: Path) -> None:
    settings_file = tmp_path / "settings.json"
    settings_file.write_text(
        json.dumps({"svg_dir": "  ", "title": 42, "window_width": "wide", "window_height": 10}),
        encoding="utf-8",
    )

    sm = SettingsManager(str(settings_file))

    assert sm.svg_dir == constants.SVG_DIR
    assert sm.title == constants.TITLE
    assert sm.window_size == (constants.WINDOW_WIDTH, constants.WINDOW_HEIGHT)


def test_window_size_is_clamped(tmp_path: Path) -> None:
    sm = SettingsManager(str(tmp_path / "settings.json"))
    sm.set("window_width", 20)
    sm.set("window_height", 900)
    assert sm.window_size == (100, 900)


def test_set_persists_and_reloads(tmp_path: Path) -> None:
    settings_file = tmp_path / "cfg" / "settings.json"
    sm = SettingsManager(str(settings_file))

    sm.set("title", "Saved")

    with open(settings_file, encoding="utf-8") as f:
        assert json.load(f) == {"title": "Saved"}
    assert SettingsManager(str(settings_file)).title == "Saved"


def test_update_sets_several_keys_with_one_write(tmp_path: Path, monkeypatch) -> None:
    settings_file = tmp_path / "settings.json"
    sm = SettingsManager(str(settings_file))
    writes: list[int] = []
    real_save = sm.save
    monkeypatch.setattr(sm, "save", lambda: (writes.append(1), real_save()))

    sm.update(window_width=640, window_height=480)

    assert len(writes) == 1
    assert SettingsManager(str(settings_file)).window_size == (640, 480)
