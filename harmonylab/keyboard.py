"""Layout and colouring of an 88-key piano keyboard."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from harmonylab.selection import Selection
from harmonylab.theory import CHROMATIC_SCALE, NOTE_NAMES, Color

KEY_COUNT = 88
WHITE_KEY_COUNT = 52
WHITE_KEY_WIDTH = 48.0
WHITE_KEY_HEIGHT = 280.0
BLACK_WIDTH_RATIO = 0.6
BLACK_HEIGHT_RATIO = 0.65

WHITE_HOVER = 30
BLACK_HOVER = 50

_BLACK_CHROMAS = frozenset({1, 3, 6, 8, 10})


@dataclass(frozen=True)
class PianoKey:
    """One key: its name, pitch class, frequency and place on the keyboard."""

    name: str
    chroma: int
    freq: float
    is_black: bool
    white_index: int


def generate_keys() -> list[PianoKey]:
    """The 88 keys from A0 to C8 in order."""
    keys = []
    white_index = 0
    for i in range(KEY_COUNT):
        chroma = (i + 9) % 12
        black = chroma in _BLACK_CHROMAS
        keys.append(PianoKey(
            name=f"{NOTE_NAMES[chroma]}{(i + 9) // 12}",
            chroma=chroma,
            freq=27.5 * 2.0 ** (i / 12),
            is_black=black,
            white_index=white_index - 1 if black else white_index,
        ))
        if not black:
            white_index += 1
    return keys


def highlight(color: Color, amount: int) -> Color:
    """Brighten every channel by ``amount``, saturating at 255."""
    r, g, b = color
    return (min(255, r + amount), min(255, g + amount), min(255, b + amount))


def key_color(key: PianoKey, selection: Selection, palette: Sequence[Color]) -> Color:
    """Fill colour of a key under the current selection."""
    if selection.scale_idx == CHROMATIC_SCALE:
        return (25, 25, 25) if key.is_black else (245, 245, 245)
    if selection.is_active(key.chroma):
        return tuple(palette[key.chroma])
    if key.is_black:
        return (15, 15, 15)
    return (40, 40, 40) if selection.chord_degree is not None else (60, 60, 60)


def key_rect(key: PianoKey, white_width: float = WHITE_KEY_WIDTH,
             white_height: float = WHITE_KEY_HEIGHT) -> tuple[float, float, float, float]:
    """Rectangle ``(x, y, width, height)`` of a key relative to the keyboard's corner."""
    x = key.white_index * white_width
    if not key.is_black:
        return (x, 0.0, white_width, white_height)
    black_width = white_width * BLACK_WIDTH_RATIO
    black_height = white_height * BLACK_HEIGHT_RATIO
    return (x + (white_width - black_width / 2.0), 0.0, black_width, black_height)