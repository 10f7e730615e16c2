"""Layout and hit testing of the circle of fifths."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from harmonylab.theory import (
    ACCIDENTALS,
    CIRCLE_OF_FIFTHS,
    MAJOR_SCALE,
    MINOR_SCALE,
    NOTE_NAMES,
)

MAJOR_RADIUS = 110.0
MINOR_RADIUS = 65.0
LABEL_RADIUS = 145.0
MAJOR_NODE_RADIUS = 18.0
MINOR_NODE_RADIUS = 14.0

Point = tuple[float, float]


@dataclass(frozen=True)
class CircleSlot:
    """One step of the circle: a major key, its relative minor and their places."""

    index: int
    major: int
    minor: int
    major_pos: Point
    minor_pos: Point
    label_pos: Point
    accidental: str

    @property
    def major_name(self) -> str:
        return NOTE_NAMES[self.major]

    @property
    def minor_name(self) -> str:
        return f"{NOTE_NAMES[self.minor]}m"


def circle_slots(cx: float, cy: float) -> list[CircleSlot]:
    """The twelve slots around centre ``(cx, cy)``, starting at the top, clockwise."""
    slots = []
    for i, major in enumerate(CIRCLE_OF_FIFTHS):
        angle = i * (math.pi / 6) - math.pi / 2
        dx, dy = math.cos(angle), math.sin(angle)
        slots.append(CircleSlot(
            index=i,
            major=major,
            minor=(major + 9) % 12,
            major_pos=(cx + dx * MAJOR_RADIUS, cy + dy * MAJOR_RADIUS),
            minor_pos=(cx + dx * MINOR_RADIUS, cy + dy * MINOR_RADIUS),
            label_pos=(cx + dx * LABEL_RADIUS, cy + dy * LABEL_RADIUS),
            accidental=ACCIDENTALS[i],
        ))
    return slots


def hit_test(slots: Sequence[CircleSlot], x: float, y: float) -> tuple[int, int] | None:
    """The ``(root, scale_idx)`` of the key under a click, or None."""
    hit = None
    for slot in slots:
        if math.dist((x, y), slot.major_pos) < MAJOR_NODE_RADIUS:
            hit = (slot.major, MAJOR_SCALE)
        if math.dist((x, y), slot.minor_pos) < MINOR_NODE_RADIUS:
            hit = (slot.minor, MINOR_SCALE)
    return hit