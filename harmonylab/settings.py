"""Persistent application settings: the open screen and the note palette."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from platformdirs import user_config_path

from harmonylab.theory import DEFAULT_COLORS, Color


class Screen(Enum):
    """The view that is shown."""

    HOME = "Home"
    PIANO = "Piano"
    GUITAR = "Guitar"


def _default_palette() -> list[Color]:
    return list(DEFAULT_COLORS)


@dataclass
class Settings:
    """What survives between runs."""

    screen: Screen = Screen.HOME
    palette: list[Color] = field(default_factory=_default_palette)


def default_path() -> Path:
    """Where settings are kept unless told otherwise."""
    return user_config_path("harmonylab") / "settings.json"


def _parse_palette(raw: object) -> list[Color] | None:
    if not isinstance(raw, list) or len(raw) != len(DEFAULT_COLORS):
        return None
    palette = []
    for entry in raw:
        if (not isinstance(entry, list) or len(entry) != 3
                or not all(isinstance(c, int) and 0 <= c <= 255 for c in entry)):
            return None
        palette.append((entry[0], entry[1], entry[2]))
    return palette


def load_settings(path: Path | str | None = None) -> Settings:
    """Read settings, falling back to defaults for anything missing or corrupt."""
    path = Path(path) if path is not None else default_path()
    settings = Settings()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return settings
    if not isinstance(data, dict):
        return settings
    try:
        settings.screen = Screen(data.get("screen"))
    except ValueError:
        pass
    palette = _parse_palette(data.get("palette"))
    if palette is not None:
        settings.palette = palette
    return settings


def save_settings(settings: Settings, path: Path | str | None = None) -> None:
    """Write settings as JSON, creating the directory if needed."""
    path = Path(path) if path is not None else default_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    data = {
        "screen": settings.screen.value,
        "palette": [list(c) for c in settings.palette],
    }
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")