"""The home, piano and guitar views drawn with pygame."""

from __future__ import annotations

from collections.abc import Sequence

import pygame

from harmonylab.audio import GuitarWave, PianoWave
from harmonylab.circle import (
    MAJOR_NODE_RADIUS,
    MINOR_NODE_RADIUS,
    circle_slots,
    hit_test,
)
from harmonylab.fretboard import (
    BOARD_HEIGHT,
    DOUBLE_INLAYS,
    FRET_COUNT,
    HOVER_AMOUNT,
    NOTE_RADIUS,
    SINGLE_INLAYS,
    STRING_SPACING,
    STRINGS,
    fret_x,
    fretboard_notes,
    note_color,
    text_color,
)
from harmonylab.keyboard import (
    BLACK_HOVER,
    WHITE_HOVER,
    WHITE_KEY_COUNT,
    WHITE_KEY_HEIGHT,
    generate_keys,
    highlight,
    key_color,
    key_rect,
)
from harmonylab.selection import Selection
from harmonylab.settings import Screen, Settings
from harmonylab.theory import (
    CHROMATIC_SCALE,
    DEFAULT_COLORS,
    MAJOR_SCALE,
    MINOR_SCALE,
    NOTE_NAMES,
    SCALES,
    ChordPattern,
    Color,
    degree_chords,
)

DEFAULT_SIZE = (1400, 850)
NAV_HEIGHT = 40
CONTROLS_HEIGHT = 90
THEORY_HEIGHT = 380
CONTENT_TOP = NAV_HEIGHT + CONTROLS_HEIGHT
SWATCH_STEP = 32

_fonts: dict[int, pygame.font.Font] = {}


def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    if size not in _fonts:
        _fonts[size] = pygame.font.Font(None, size)
    return _fonts[size]


def _text(surface: pygame.Surface, text: str, size: int, color: Color,
          center: tuple[float, float]) -> None:
    lines = text.split("\n")
    font = _font(size)
    height = font.get_linesize()
    top = center[1] - height * len(lines) / 2
    for n, line in enumerate(lines):
        img = font.render(line, True, color)
        surface.blit(img, img.get_rect(center=(center[0], top + height * (n + 0.5))))


def _mouse() -> tuple[int, int] | None:
    try:
        return pygame.mouse.get_pos()
    except pygame.error:
        return None


def _inside(pos: tuple[float, float] | None, rect: tuple[float, float, float, float]) -> bool:
    if pos is None:
        return False
    x, y, w, h = rect
    return x <= pos[0] < x + w and y <= pos[1] < y + h


class HomeScreen:
    """Title, instrument choice and the palette editor.

    Each swatch is split in three bands; clicking the top, middle or bottom
    band raises the red, green or blue channel, wrapping past 255.
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.size = DEFAULT_SIZE
        self.hotspots: dict[str, pygame.Rect] = {}
        self._layout()

    def _layout(self) -> None:
        w, h = self.size
        cx = w // 2
        top = int(h * 0.2)
        by = top + 170
        self.hotspots = {
            "piano": pygame.Rect(cx - 240, by, 220, 60),
            "guitar": pygame.Rect(cx + 20, by, 220, 60),
        }
        sy = by + 60 + 140
        x0 = cx - (12 * 40 + 11 * 18) // 2
        for i in range(12):
            self.hotspots[f"swatch{i}"] = pygame.Rect(x0 + i * 58, sy, 40, 42)
        self.hotspots["reset"] = pygame.Rect(cx - 80, sy + 82, 160, 30)
        self._title_y = top + 36
        self._sub_y = top + 100

    def draw(self, surface: pygame.Surface) -> None:
        self.size = surface.get_size()
        self._layout()
        surface.fill((10, 10, 12))
        cx = self.size[0] / 2
        _text(surface, "Harmony by Ren", 96, (255, 255, 255), (cx, self._title_y))
        _text(surface, "Select an instrument", 26, (140, 140, 140), (cx, self._sub_y))
        mouse = _mouse()
        for name, label in (("piano", "P I A N O"), ("guitar", "G U I T A R")):
            rect = self.hotspots[name]
            fill = (30, 30, 36) if rect.collidepoint(mouse or (-1, -1)) else (18, 18, 22)
            pygame.draw.rect(surface, fill, rect, border_radius=30)
            pygame.draw.rect(surface, (60, 60, 60), rect, 1, border_radius=30)
            _text(surface, label, 26, (255, 255, 255), rect.center)
        first = self.hotspots["swatch0"]
        _text(surface, "C U S T O M   P A L E T T E", 20, (80, 80, 80), (cx, first.y - 40))
        for i, color in enumerate(self.settings.palette):
            rect = self.hotspots[f"swatch{i}"]
            _text(surface, NOTE_NAMES[i], 16, (120, 120, 120), (rect.centerx, rect.y - 10))
            pygame.draw.rect(surface, color, rect, border_radius=4)
            pygame.draw.rect(surface, (60, 60, 60), rect, 1, border_radius=4)
        reset = self.hotspots["reset"]
        pygame.draw.rect(surface, (40, 40, 40), reset, 1, border_radius=15)
        _text(surface, "RESET TO DEFAULT", 18, (140, 140, 140), reset.center)

    def handle_click(self, pos: tuple[int, int]) -> Screen | None:
        """React to a click; returns the screen to switch to, if any."""
        if self.hotspots["piano"].collidepoint(pos):
            return Screen.PIANO
        if self.hotspots["guitar"].collidepoint(pos):
            return Screen.GUITAR
        if self.hotspots["reset"].collidepoint(pos):
            self.settings.palette = list(DEFAULT_COLORS)
            return None
        for i in range(12):
            rect = self.hotspots[f"swatch{i}"]
            if rect.collidepoint(pos):
                channel = min(2, (pos[1] - rect.y) * 3 // rect.height)
                color = list(self.settings.palette[i])
                color[channel] = (color[channel] + SWATCH_STEP) % 256
                self.settings.palette[i] = (color[0], color[1], color[2])
                break
        return None


class _InstrumentScreen:
    """Navigation bar, selection controls and theory panel around an instrument."""

    def __init__(self, selection: Selection, player) -> None:
        self.selection = selection
        self.player = player
        self.size = DEFAULT_SIZE
        self.hotspots: dict[str, pygame.Rect] = {}
        self._layout()

    def _layout(self) -> None:
        w, h = self.size
        self.hotspots = {"home": pygame.Rect(8, 4, 120, NAV_HEIGHT - 8)}
        col = w // 3
        for n, name in enumerate(("root", "scale", "pattern")):
            cx = col * n + col // 2
            y = NAV_HEIGHT + 45
            self.hotspots[f"{name}-"] = pygame.Rect(cx - 150, y, 30, 30)
            self.hotspots[f"{name}+"] = pygame.Rect(cx + 120, y, 30, 30)
        panel_top = h - THEORY_HEIGHT
        self._circle_center = (w / 4, panel_top + THEORY_HEIGHT / 2)
        self._slots = circle_slots(*self._circle_center)
        x0 = w // 2 + 24
        x, y = x0, panel_top + 72
        for chord in degree_chords(self.selection.root, self.selection.scale_idx):
            if x + 75 > w - 24:
                x, y = x0, y + 87
            self.hotspots[f"degree{chord.degree}"] = pygame.Rect(x, y, 75, 75)
            x += 87

    def _values(self) -> dict[str, str]:
        return {
            "root": NOTE_NAMES[self.selection.root],
            "scale": SCALES[self.selection.scale_idx].name,
            "pattern": self.selection.pattern.label(),
        }

    def _draw_frame(self, surface: pygame.Surface, palette: Sequence[Color]) -> None:
        self.size = surface.get_size()
        self._layout()
        w, h = self.size
        surface.fill((10, 10, 12))
        pygame.draw.rect(surface, (15, 15, 18), (0, 0, w, NAV_HEIGHT))
        _text(surface, "<  HOME", 22, (200, 200, 200), self.hotspots["home"].center)
        pygame.draw.rect(surface, (22, 22, 26), (0, NAV_HEIGHT, w, CONTROLS_HEIGHT))
        titles = {"root": "Root", "scale": "Scale", "pattern": "Chord Pattern"}
        for name, value in self._values().items():
            left, right = self.hotspots[f"{name}-"], self.hotspots[f"{name}+"]
            cx = (left.x + right.right) / 2
            _text(surface, titles[name], 20, (160, 160, 160), (cx, NAV_HEIGHT + 22))
            box = pygame.Rect(left.right + 4, left.y, right.x - left.right - 8, 30)
            pygame.draw.rect(surface, (35, 35, 40), box, border_radius=4)
            _text(surface, value, 18, (230, 230, 230), box.center)
            for rect, glyph in ((left, "<"), (right, ">")):
                pygame.draw.rect(surface, (35, 35, 40), rect, border_radius=4)
                _text(surface, glyph, 22, (230, 230, 230), rect.center)
        self._draw_theory(surface, palette)

    def _draw_theory(self, surface: pygame.Surface, palette: Sequence[Color]) -> None:
        w, h = self.size
        top = h - THEORY_HEIGHT
        pygame.draw.rect(surface, (18, 18, 22), (0, top, w, THEORY_HEIGHT))
        slots = self._slots
        for i, slot in enumerate(slots):
            nxt = slots[(i + 1) % len(slots)]
            for a, b in ((slot.major_pos, nxt.major_pos), (slot.minor_pos, nxt.minor_pos),
                         (slot.major_pos, slot.minor_pos)):
                pygame.draw.line(surface, (40, 40, 40), a, b)
        _text(surface, "Circle of Fifths", 20, (120, 120, 120), self._circle_center)
        sel = self.selection
        for slot in slots:
            _text(surface, slot.accidental, 17, (100, 100, 100), slot.label_pos)
            bg = palette[slot.major] if (sel.root == slot.major
                                         and sel.scale_idx == MAJOR_SCALE) else (30, 30, 30)
            pygame.draw.circle(surface, bg, slot.major_pos, MAJOR_NODE_RADIUS)
            pygame.draw.circle(surface, (60, 60, 60), slot.major_pos, MAJOR_NODE_RADIUS, 1)
            _text(surface, slot.major_name, 20, (255, 255, 255), slot.major_pos)
            bg = palette[slot.minor] if (sel.root == slot.minor
                                         and sel.scale_idx == MINOR_SCALE) else (20, 20, 20)
            pygame.draw.circle(surface, bg, slot.minor_pos, MINOR_NODE_RADIUS)
            pygame.draw.circle(surface, (50, 50, 50), slot.minor_pos, MINOR_NODE_RADIUS, 1)
            _text(surface, slot.minor_name, 16, (255, 255, 255), slot.minor_pos)
        x0 = w // 2 + 24
        _text(surface, "Degrees and Chords", 30, (230, 230, 230), (x0 + 120, top + 40))
        if sel.scale_idx == CHROMATIC_SCALE:
            _text(surface, "Select a scale to calculate chords.", 20,
                  (150, 150, 150), (x0 + 150, top + 90))
            return
        for chord in degree_chords(sel.root, sel.scale_idx):
            rect = self.hotspots[f"degree{chord.degree}"]
            active = sel.chord_degree == chord.degree
            bg = palette[chord.root_note] if active else (30, 30, 35)
            pygame.draw.rect(surface, bg, rect, border_radius=12)
            _text(surface, chord.label, 22, (0, 0, 0) if active else (255, 255, 255),
                  rect.center)

    def _handle_frame_click(self, pos: tuple[int, int]) -> tuple[bool, Screen | None]:
        if self.hotspots["home"].collidepoint(pos):
            return True, Screen.HOME
        sel = self.selection
        patterns = list(ChordPattern)
        actions = {
            "root-": lambda: sel.set_root((sel.root - 1) % 12),
            "root+": lambda: sel.set_root((sel.root + 1) % 12),
            "scale-": lambda: sel.set_scale((sel.scale_idx - 1) % len(SCALES)),
            "scale+": lambda: sel.set_scale((sel.scale_idx + 1) % len(SCALES)),
            "pattern-": lambda: sel.set_pattern(
                patterns[(patterns.index(sel.pattern) - 1) % len(patterns)]),
            "pattern+": lambda: sel.set_pattern(
                patterns[(patterns.index(sel.pattern) + 1) % len(patterns)]),
        }
        for name, action in actions.items():
            if self.hotspots[name].collidepoint(pos):
                action()
                self._layout()
                return True, None
        if sel.scale_idx != CHROMATIC_SCALE:
            for degree in range(len(sel.current_scale())):
                rect = self.hotspots.get(f"degree{degree}")
                if rect is not None and rect.collidepoint(pos):
                    sel.toggle_degree(degree)
                    return True, None
        if pos[1] >= self.size[1] - THEORY_HEIGHT:
            hit = hit_test(self._slots, pos[0], pos[1])
            if hit is not None:
                sel.pick_key(*hit)
                self._layout()
                return True, None
        return False, None


class PianoScreen(_InstrumentScreen):
    """An 88-key keyboard lit by the current selection."""

    def __init__(self, selection: Selection, player) -> None:
        self.keys = generate_keys()
        super().__init__(selection, player)

    def _layout(self) -> None:
        super()._layout()
        self.hotspots["keyboard"] = pygame.Rect(
            24, CONTENT_TOP + 24, self.size[0] - 48, int(WHITE_KEY_HEIGHT))

    def _key_rects(self):
        kb = self.hotspots["keyboard"]
        white_width = kb.width / WHITE_KEY_COUNT
        for key in self.keys:
            x, y, w, h = key_rect(key, white_width, kb.height)
            yield key, (kb.x + x, kb.y + y, w, h)

    def draw(self, surface: pygame.Surface, palette: Sequence[Color]) -> None:
        self._draw_frame(surface, palette)
        rects = list(self._key_rects())
        mouse = _mouse()
        hovered = self._key_at(mouse) if mouse is not None else None
        for black in (False, True):
            for key, (x, y, w, h) in rects:
                if key.is_black != black:
                    continue
                color = key_color(key, self.selection, palette)
                if key is hovered:
                    color = highlight(color, BLACK_HOVER if black else WHITE_HOVER)
                if black:
                    rect = pygame.Rect(round(x), round(y), round(w), round(h))
                    pygame.draw.rect(surface, color, rect, border_bottom_left_radius=4,
                                     border_bottom_right_radius=4)
                    pygame.draw.rect(surface, (0, 0, 0), rect, 1)
                else:
                    rect = pygame.Rect(round(x) + 1, round(y) + 1, round(w) - 2, round(h) - 2)
                    pygame.draw.rect(surface, color, rect, border_radius=2,
                                     border_bottom_left_radius=6,
                                     border_bottom_right_radius=6)
                    pygame.draw.rect(surface, (20, 20, 20), rect, 1, border_radius=2)

    def _key_at(self, pos):
        rects = list(self._key_rects())
        for black in (True, False):
            for key, rect in rects:
                if key.is_black == black and _inside(pos, rect):
                    return key
        return None

    def handle_click(self, pos: tuple[int, int]) -> Screen | None:
        """React to a click; plays a key or changes the selection."""
        handled, screen = self._handle_frame_click(pos)
        if handled:
            return screen
        key = self._key_at(pos)
        if key is not None:
            self.player.play(PianoWave(key.freq))
        return None


class GuitarScreen(_InstrumentScreen):
    """A six-string, 24-fret neck lit by the current selection."""

    def __init__(self, selection: Selection, player) -> None:
        self.origin = (24 + 40, CONTENT_TOP + 24 + 20)
        super().__init__(selection, player)

    def _layout(self) -> None:
        super()._layout()
        self.origin = (24 + 40, CONTENT_TOP + 24 + 20)

    def draw(self, surface: pygame.Surface, palette: Sequence[Color]) -> None:
        self._draw_frame(surface, palette)
        ox, oy = self.origin
        end = ox + fret_x(FRET_COUNT)
        pygame.draw.rect(surface, (20, 20, 24), pygame.Rect(
            ox, oy - STRING_SPACING * 0.5, fret_x(FRET_COUNT), STRING_SPACING * 6))
        marker = (40, 40, 45)
        for fret in range(1, FRET_COUNT + 1):
            x = ox + fret_x(fret)
            cx = (x + ox + fret_x(fret - 1)) / 2
            pygame.draw.line(surface, (80, 80, 80), (x, oy), (x, oy + BOARD_HEIGHT), 2)
            if fret in SINGLE_INLAYS:
                pygame.draw.circle(surface, marker, (cx, oy + BOARD_HEIGHT / 2), 8)
            elif fret in DOUBLE_INLAYS:
                pygame.draw.circle(surface, marker, (cx, oy + STRING_SPACING * 1.5), 8)
                pygame.draw.circle(surface, marker, (cx, oy + STRING_SPACING * 3.5), 8)
        pygame.draw.line(surface, (120, 120, 120), (ox, oy), (ox, oy + BOARD_HEIGHT), 6)
        for s_idx in range(len(STRINGS)):
            y = oy + s_idx * STRING_SPACING
            pygame.draw.line(surface, (100, 100, 100), (ox - 30, y), (end, y),
                             max(1, round(1 + s_idx * 0.5)))
        mouse = _mouse()
        for note in fretboard_notes(self.selection):
            color = note_color(note, self.selection, palette)
            if mouse is not None and note.contains(mouse[0] - ox, mouse[1] - oy):
                color = highlight(color, HOVER_AMOUNT)
            pos = (ox + note.x, oy + note.y)
            pygame.draw.circle(surface, color, pos, NOTE_RADIUS)
            pygame.draw.circle(surface, (0, 0, 0), pos, NOTE_RADIUS, 1)
            _text(surface, note.name, 16, text_color(color), pos)

    def handle_click(self, pos: tuple[int, int]) -> Screen | None:
        """React to a click; plays a fretted note or changes the selection."""
        handled, screen = self._handle_frame_click(pos)
        if handled:
            return screen
        ox, oy = self.origin
        for note in fretboard_notes(self.selection):
            if note.contains(pos[0] - ox, pos[1] - oy):
                self.player.play(GuitarWave(note.freq))
                break
        return None