"""The musical selection shared by every instrument view."""

from __future__ import annotations

from dataclasses import dataclass

from harmonylab.theory import (
    CHROMATIC_SCALE,
    MAJOR_SCALE,
    SCALES,
    ChordPattern,
    chord_notes,
    scale_notes,
)


def _check_root(root: int) -> None:
    if not 0 <= root < 12:
        raise ValueError(f"root must be in 0..11, got {root}")


def _check_scale(scale_idx: int) -> None:
    if not 0 <= scale_idx < len(SCALES):
        raise ValueError(f"unknown scale index: {scale_idx}")


@dataclass
class Selection:
    """Root, scale, chord pattern and the chosen chord degree, if any."""

    root: int = 0
    scale_idx: int = MAJOR_SCALE
    pattern: ChordPattern = ChordPattern.TRIAD
    chord_degree: int | None = None

    def __post_init__(self) -> None:
        _check_root(self.root)
        _check_scale(self.scale_idx)

    def current_scale(self) -> list[int]:
        """Chromatic indices of the selected scale."""
        return scale_notes(self.root, self.scale_idx)

    def active_chord(self) -> list[int]:
        """Chromatic indices of the selected chord, empty if none is chosen."""
        return chord_notes(self.root, self.scale_idx, self.chord_degree, self.pattern)

    def set_root(self, root: int) -> None:
        """Change the root; a real change clears the chosen chord."""
        _check_root(root)
        if root != self.root:
            self.root = root
            self.chord_degree = None

    def set_scale(self, scale_idx: int) -> None:
        """Change the scale; a real change clears the chosen chord."""
        _check_scale(scale_idx)
        if scale_idx != self.scale_idx:
            self.scale_idx = scale_idx
            self.chord_degree = None

    def set_pattern(self, pattern: ChordPattern) -> None:
        """Change the chord pattern, keeping the chosen degree."""
        self.pattern = pattern

    def toggle_degree(self, degree: int) -> None:
        """Choose the chord on ``degree``, or clear it if it is already chosen."""
        if self.scale_idx == CHROMATIC_SCALE:
            raise ValueError("the chromatic scale has no chord degrees")
        if not 0 <= degree < len(self.current_scale()):
            raise ValueError(f"degree out of range: {degree}")
        self.chord_degree = None if self.chord_degree == degree else degree

    def pick_key(self, root: int, scale_idx: int) -> None:
        """Jump to a key from the circle of fifths, clearing the chosen chord."""
        _check_root(root)
        _check_scale(scale_idx)
        self.root = root
        self.scale_idx = scale_idx
        self.chord_degree = None

    def is_active(self, chroma: int) -> bool:
        """Whether a chromatic note is lit under the current selection."""
        if self.scale_idx == CHROMATIC_SCALE:
            return True
        if self.chord_degree is not None:
            return chroma in self.active_chord()
        return chroma in self.current_scale()