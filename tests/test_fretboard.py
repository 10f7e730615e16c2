import pytest

from harmonylab.fretboard import (
    FRET_COUNT,
    OPEN_STRING_X,
    SCALE_LENGTH,
    STRINGS,
    fret_x,
    fretboard_notes,
    note_color,
    text_color,
)
from harmonylab.selection import Selection
from harmonylab.theory import CHROMATIC_SCALE, DEFAULT_COLORS


def test_nut_is_at_zero():
    assert fret_x(0) == 0.0


def test_twelfth_fret_halves_the_string():
    assert fret_x(12) == pytest.approx(SCALE_LENGTH / 2)


def test_frets_move_towards_bridge_and_get_closer():
    xs = [fret_x(f) for f in range(FRET_COUNT + 1)]
    gaps = [b - a for a, b in zip(xs, xs[1:])]
    assert all(g > 0 for g in gaps)
    assert all(b < a for a, b in zip(gaps, gaps[1:]))


def test_open_strings_are_standard_tuning():
    notes = fretboard_notes(Selection(scale_idx=CHROMATIC_SCALE))
    open_notes = sorted(
        (n for n in notes if n.fret == 0), key=lambda n: n.string_index
    )
    assert "".join(n.name for n in open_notes) == "EBGDAE"
    assert open_notes[0].chroma == open_notes[-1].chroma
    assert open_notes[0].freq == pytest.approx(4 * open_notes[-1].freq, rel=1e-3)


def test_chromatic_lights_every_position():
    notes = fretboard_notes(Selection(scale_idx=CHROMATIC_SCALE))
    assert len(notes) == len(STRINGS) * (FRET_COUNT + 1)


def test_scale_positions_are_in_scale():
    sel = Selection(root=7)
    notes = fretboard_notes(sel)
    assert notes
    assert {n.chroma for n in notes} == set(sel.current_scale())


def test_chord_positions_are_in_chord():
    sel = Selection()
    sel.toggle_degree(4)
    assert {n.chroma for n in fretboard_notes(sel)} == set(sel.active_chord())


def test_twelfth_fret_doubles_frequency():
    notes = fretboard_notes(Selection(scale_idx=CHROMATIC_SCALE))
    by_pos = {(n.string_index, n.fret): n for n in notes}
    for s in range(len(STRINGS)):
        assert by_pos[(s, 12)].freq == pytest.approx(2 * by_pos[(s, 0)].freq)
        assert by_pos[(s, 12)].chroma == by_pos[(s, 0)].chroma


def test_positions_sit_between_frets():
    for n in fretboard_notes(Selection(scale_idx=CHROMATIC_SCALE)):
        if n.fret == 0:
            assert n.x == OPEN_STRING_X
        else:
            assert fret_x(n.fret - 1) < n.x < fret_x(n.fret)
        assert n.contains(n.x, n.y)


def test_note_color():
    chromatic = Selection(scale_idx=CHROMATIC_SCALE)
    major = Selection()
    note = fretboard_notes(major)[0]
    assert note_color(note, chromatic, DEFAULT_COLORS) == (80, 80, 80)
    assert note_color(note, major, DEFAULT_COLORS) == DEFAULT_COLORS[note.chroma]


def test_text_color():
    assert text_color((255, 255, 255)) == (0, 0, 0)
    assert text_color((0, 0, 0)) == (255, 255, 255)