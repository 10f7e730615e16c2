import json

from harmonylab.settings import (
    Screen,
    Settings,
    default_path,
    load_settings,
    save_settings,
)
from harmonylab.theory import DEFAULT_COLORS


def test_defaults():
    s = Settings()
    assert s.screen is Screen.HOME
    assert s.palette == list(DEFAULT_COLORS)


def test_missing_file_gives_defaults(tmp_path):
    s = load_settings(tmp_path / "nope.json")
    assert s == Settings()


def test_round_trip(tmp_path):
    path = tmp_path / "sub" / "settings.json"
    palette = list(DEFAULT_COLORS)
    palette[3] = (1, 2, 3)
    save_settings(Settings(Screen.GUITAR, palette), path)
    loaded = load_settings(path)
    assert loaded.screen is Screen.GUITAR
    assert loaded.palette == palette


def test_corrupt_file_gives_defaults(tmp_path):
    path = tmp_path / "s.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_settings(path) == Settings()


def test_partial_file_keeps_valid_fields(tmp_path):
    path = tmp_path / "s.json"
    path.write_text(json.dumps({"screen": "Piano", "palette": [[1, 2]]}), encoding="utf-8")
    loaded = load_settings(path)
    assert loaded.screen is Screen.PIANO
    assert loaded.palette == list(DEFAULT_COLORS)


def test_unknown_screen_falls_back(tmp_path):
    path = tmp_path / "s.json"
    path.write_text(json.dumps({"screen": "Drums"}), encoding="utf-8")
    assert load_settings(path).screen is Screen.HOME


def test_default_path_is_json_file():
    p = default_path()
    assert p.name == "settings.json"
    assert "harmonylab" in str(p)