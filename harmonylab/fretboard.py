"""Geometry and colouring of a 24-fret six-string guitar neck."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from harmonylab.selection import Selection
from harmonylab.theory import CHROMATIC_SCALE, NOTE_NAMES, Color

FRET_COUNT = 24
STRING_SPACING = 42.0
SCALE_LENGTH = 1600.0
OPEN_STRING_X = -20.0
OPEN_HIT_WIDTH = 24.0
NOTE_RADIUS = 12.0
HOVER_AMOUNT = 50

SINGLE_INLAYS = frozenset({3, 5, 7, 9, 15, 17, 19, 21})
DOUBLE_INLAYS = frozenset({12, 24})


@dataclass(frozen=True)
class GuitarString:
    """An open string: its pitch class, frequency and name."""

    open_chroma: int
    freq: float
    name: str


STRINGS: tuple[GuitarString, ...] = (
    GuitarString(4, 329.63, "E"),
    GuitarString(11, 246.94, "B"),
    GuitarString(7, 196.00, "G"),
    GuitarString(2, 146.83, "D"),
    GuitarString(9, 110.00, "A"),
    GuitarString(4, 82.41, "E"),
)


def fret_x(fret: int, scale_length: float = SCALE_LENGTH) -> float:
    """Distance of a fret from the nut on an equal-tempered neck."""
    return scale_length * (1.0 - 2.0 ** (-fret / 12))


BOARD_WIDTH = fret_x(FRET_COUNT) + 60.0
BOARD_HEIGHT = STRING_SPACING * (len(STRINGS) - 1)


@dataclass(frozen=True)
class FretNote:
    """A playable position, with coordinates relative to the top of the nut."""

    string_index: int
    fret: int
    chroma: int
    freq: float
    x: float
    y: float
    hit_width: float

    @property
    def name(self) -> str:
        return NOTE_NAMES[self.chroma]

    @property
    def hit_height(self) -> float:
        return STRING_SPACING * 0.8

    def contains(self, x: float, y: float) -> bool:
        """Whether a point relative to the nut falls in this note's click area."""
        return (abs(x - self.x) <= self.hit_width / 2
                and abs(y - self.y) <= self.hit_height / 2)


def fretboard_notes(selection: Selection) -> list[FretNote]:
    """Every position lit under ``selection``, string by string, fret by fret."""
    notes = []
    for string_index, string in enumerate(STRINGS):
        y = string_index * STRING_SPACING
        for fret in range(FRET_COUNT + 1):
            chroma = (string.open_chroma + fret) % 12
            if not selection.is_active(chroma):
                continue
            if fret == 0:
                x, hit_width = OPEN_STRING_X, OPEN_HIT_WIDTH
            else:
                x = (fret_x(fret - 1) + fret_x(fret)) / 2.0
                hit_width = (fret_x(fret) - fret_x(fret - 1)) * 0.8
            notes.append(FretNote(
                string_index=string_index,
                fret=fret,
                chroma=chroma,
                freq=string.freq * 2.0 ** (fret / 12),
                x=x,
                y=y,
                hit_width=hit_width,
            ))
    return notes


def note_color(note: FretNote, selection: Selection, palette: Sequence[Color]) -> Color:
    """Fill colour of a lit position."""
    if selection.scale_idx == CHROMATIC_SCALE:
        return (80, 80, 80)
    return tuple(palette[note.chroma])


def text_color(color: Color) -> Color:
    """Black on bright fills, white on dark ones."""
    return (0, 0, 0) if sum(color) > 400 else (255, 255, 255)