"""Note names, scales, chord patterns and diatonic chord analysis."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

Color = tuple[int, int, int]

NOTE_NAMES: tuple[str, ...] = (
    "C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B",
)

CIRCLE_OF_FIFTHS: tuple[int, ...] = (0, 7, 2, 9, 4, 11, 6, 1, 8, 3, 10, 5)

ACCIDENTALS: tuple[str, ...] = (
    "0", "1#", "2#", "3#", "4#", "5#", "6# / 6b", "5b", "4b", "3b", "2b", "1b",
)

DEFAULT_COLORS: tuple[Color, ...] = (
    (210, 43, 43),
    (129, 19, 49),
    (255, 127, 80),
    (184, 115, 51),
    (255, 191, 0),
    (175, 225, 175),
    (9, 121, 105),
    (100, 149, 237),
    (25, 25, 112),
    (218, 112, 214),
    (93, 63, 211),
    (204, 204, 255),
)


@dataclass(frozen=True)
class ScalePattern:
    """A named scale given as semitone offsets from its root."""

    name: str
    intervals: tuple[int, ...]


SCALES: tuple[ScalePattern, ...] = (
    ScalePattern("None (Standard)", (0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11)),
    ScalePattern("Major (Ionian)", (0, 2, 4, 5, 7, 9, 11)),
    ScalePattern("Dorian", (0, 2, 3, 5, 7, 9, 10)),
    ScalePattern("Phrygian", (0, 1, 3, 5, 7, 8, 10)),
    ScalePattern("Lydian", (0, 2, 4, 6, 7, 9, 11)),
    ScalePattern("Mixolydian", (0, 2, 4, 5, 7, 9, 10)),
    ScalePattern("Minor (Aeolian)", (0, 2, 3, 5, 7, 8, 10)),
    ScalePattern("Locrian", (0, 1, 3, 5, 6, 8, 10)),
    ScalePattern("Harmonic Minor", (0, 2, 3, 5, 7, 8, 11)),
    ScalePattern("Locrian Natural 6", (0, 1, 3, 5, 6, 9, 10)),
    ScalePattern("Ionian Augmented", (0, 2, 4, 5, 8, 9, 11)),
    ScalePattern("Dorian #4", (0, 2, 3, 6, 7, 9, 10)),
    ScalePattern("Phrygian Dominant", (0, 1, 4, 5, 7, 8, 10)),
    ScalePattern("Lydian #2", (0, 3, 4, 6, 7, 9, 11)),
    ScalePattern("Altered Diminished", (0, 1, 3, 4, 6, 8, 9)),
    ScalePattern("Melodic Minor", (0, 2, 3, 5, 7, 9, 11)),
    ScalePattern("Lydian b7 (Acoustic)", (0, 2, 4, 6, 7, 9, 10)),
    ScalePattern("Superlocrian (Altered)", (0, 1, 3, 4, 6, 8, 10)),
    ScalePattern("Diminished (W-H)", (0, 2, 3, 5, 6, 8, 9, 11)),
    ScalePattern("Whole Tone", (0, 2, 4, 6, 8, 10)),
    ScalePattern("Major Pentatonic", (0, 2, 4, 7, 9)),
    ScalePattern("Minor Pentatonic", (0, 3, 5, 7, 10)),
    ScalePattern("Japanese (Hirajoshi)", (0, 2, 3, 7, 8)),
)

CHROMATIC_SCALE = 0
MAJOR_SCALE = 1
MINOR_SCALE = 6


class ChordPattern(Enum):
    """Chord shapes given as scale-degree offsets from the chord root."""

    TRIAD = ("Triad (1-3-5)", (0, 2, 4))
    SEVENTH = ("Seventh (1-3-5-7)", (0, 2, 4, 6))
    NINTH = ("Ninth (1-3-5-7-9)", (0, 2, 4, 6, 1))
    ELEVENTH = ("Eleventh (1-3-5-7-9-11)", (0, 2, 4, 6, 1, 3))
    THIRTEENTH = ("Thirteenth (1-3-5-7-9-11-13)", (0, 2, 4, 6, 1, 3, 5))
    SUS2 = ("Sus2 (1-2-5)", (0, 1, 4))
    SUS4 = ("Sus4 (1-4-5)", (0, 3, 4))
    SEVEN_SUS2 = ("7Sus2 (1-2-5-7)", (0, 1, 4, 6))
    SEVEN_SUS4 = ("7Sus4 (1-4-5-7)", (0, 3, 4, 6))
    ADD9 = ("Add9 (1-3-5-9)", (0, 2, 4, 1))
    ADD11 = ("Add11 (1-3-5-11)", (0, 2, 4, 3))
    ADD13 = ("Add13 (1-3-5-13)", (0, 2, 4, 5))
    POWER_CHORD = ("Power Chord (1-5)", (0, 4))
    QUARTAL3 = ("Quartal 3-part (1-4-7)", (0, 3, 6))
    QUARTAL4 = ("Quartal 4-part (1-4-7-10)", (0, 3, 6, 2))
    CLUSTER = ("Cluster (1-2-3)", (0, 1, 2))

    def label(self) -> str:
        """Human-readable name of the pattern."""
        return self.value[0]

    def intervals(self) -> list[int]:
        """Scale-degree offsets that make up the chord."""
        return list(self.value[1])


CHORD_GROUPS: tuple[tuple[str, tuple[ChordPattern, ...]], ...] = (
    ("Built in Thirds", (
        ChordPattern.TRIAD, ChordPattern.SEVENTH, ChordPattern.NINTH,
        ChordPattern.ELEVENTH, ChordPattern.THIRTEENTH,
    )),
    ("Suspended", (
        ChordPattern.SUS2, ChordPattern.SUS4,
        ChordPattern.SEVEN_SUS2, ChordPattern.SEVEN_SUS4,
    )),
    ("Added", (ChordPattern.ADD9, ChordPattern.ADD11, ChordPattern.ADD13)),
    ("Alternative Structures", (
        ChordPattern.POWER_CHORD, ChordPattern.QUARTAL3,
        ChordPattern.QUARTAL4, ChordPattern.CLUSTER,
    )),
)


def _scale(scale_idx: int) -> ScalePattern:
    if not 0 <= scale_idx < len(SCALES):
        raise ValueError(f"unknown scale index: {scale_idx}")
    return SCALES[scale_idx]


def scale_notes(root: int, scale_idx: int) -> list[int]:
    """Chromatic indices (0-11) of the scale built on ``root``."""
    return [(root + i) % 12 for i in _scale(scale_idx).intervals]


def chord_notes(root: int, scale_idx: int, degree: int | None,
                pattern: ChordPattern) -> list[int]:
    """Chromatic indices of ``pattern`` built on a scale degree; empty if no degree."""
    if degree is None:
        return []
    scale = scale_notes(root, scale_idx)
    return [scale[(degree + offset) % len(scale)] for offset in pattern.intervals()]


_MAJOR_NUMERALS = ("I", "II", "III", "IV", "V", "VI", "VII")
_MINOR_NUMERALS = ("i", "ii", "iii", "iv", "v", "vi", "vii")
_DIM_NUMERALS = ("i°", "ii°", "iii°", "iv°", "v°", "vi°", "vii°")
_AUG_NUMERALS = ("I+", "II+", "III+", "IV+", "V+", "VI+", "VII+")


def roman(degree: int, third: int, fifth: int) -> tuple[str, str]:
    """Roman numeral and quality suffix for a chord with the given third and fifth."""
    r = min(degree, 6)
    match (third, fifth):
        case (4, 7):
            return _MAJOR_NUMERALS[r], "M"
        case (3, 7):
            return _MINOR_NUMERALS[r], "m"
        case (3, 6):
            return _DIM_NUMERALS[r], "dim"
        case (4, 8):
            return _AUG_NUMERALS[r], "aug"
        case _:
            return _MAJOR_NUMERALS[r], "?"


@dataclass(frozen=True)
class DegreeChord:
    """The chord stacked in thirds on one degree of a scale."""

    degree: int
    root_note: int
    numeral: str
    suffix: str

    @property
    def name(self) -> str:
        return f"{NOTE_NAMES[self.root_note]}{self.suffix}"

    @property
    def label(self) -> str:
        return f"{self.numeral}\n{self.name}"


def degree_chords(root: int, scale_idx: int) -> list[DegreeChord]:
    """Analyse every degree of a scale; the chromatic scale yields nothing."""
    scale = scale_notes(root, scale_idx)
    if scale_idx == CHROMATIC_SCALE:
        return []
    n = len(scale)
    chords = []
    for degree, note in enumerate(scale):
        third = (scale[(degree + 2) % n] + 12 - note) % 12
        fifth = (scale[(degree + 4) % n] + 12 - note) % 12
        numeral, suffix = roman(degree, third, fifth)
        chords.append(DegreeChord(degree, note, numeral, suffix))
    return chords