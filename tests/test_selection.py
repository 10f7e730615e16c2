import pytest

from harmonylab.selection import Selection
from harmonylab.theory import (
    CHROMATIC_SCALE,
    MAJOR_SCALE,
    MINOR_SCALE,
    ChordPattern,
    chord_notes,
    scale_notes,
)


def test_defaults():
    sel = Selection()
    assert (sel.root, sel.scale_idx, sel.pattern, sel.chord_degree) == (
        0, MAJOR_SCALE, ChordPattern.TRIAD, None)


def test_current_scale_matches_theory():
    sel = Selection(root=5, scale_idx=MINOR_SCALE)
    assert sel.current_scale() == scale_notes(5, MINOR_SCALE)


def test_active_chord_empty_without_degree():
    assert Selection().active_chord() == []


def test_active_chord_tonic_triad_in_c_major():
    sel = Selection()
    sel.toggle_degree(0)
    assert sel.active_chord() == [0, 4, 7]


def test_active_chord_matches_theory():
    sel = Selection(root=2, pattern=ChordPattern.NINTH)
    sel.toggle_degree(4)
    assert sel.active_chord() == chord_notes(2, MAJOR_SCALE, 4, ChordPattern.NINTH)


def test_toggle_degree_twice_clears():
    sel = Selection()
    sel.toggle_degree(3)
    assert sel.chord_degree == 3
    sel.toggle_degree(3)
    assert sel.chord_degree is None


def test_toggle_other_degree_switches():
    sel = Selection()
    sel.toggle_degree(1)
    sel.toggle_degree(2)
    assert sel.chord_degree == 2


def test_toggle_degree_out_of_range():
    with pytest.raises(ValueError):
        Selection().toggle_degree(7)


def test_toggle_degree_on_chromatic_scale():
    with pytest.raises(ValueError):
        Selection(scale_idx=CHROMATIC_SCALE).toggle_degree(0)


def test_set_root_change_clears_chord():
    sel = Selection()
    sel.toggle_degree(2)
    sel.set_root(7)
    assert sel.root == 7
    assert sel.chord_degree is None


def test_set_same_root_keeps_chord():
    sel = Selection()
    sel.toggle_degree(2)
    sel.set_root(0)
    assert sel.chord_degree == 2


def test_set_scale_change_clears_chord():
    sel = Selection()
    sel.toggle_degree(1)
    sel.set_scale(MINOR_SCALE)
    assert sel.scale_idx == MINOR_SCALE
    assert sel.chord_degree is None


def test_set_same_scale_keeps_chord():
    sel = Selection()
    sel.toggle_degree(1)
    sel.set_scale(MAJOR_SCALE)
    assert sel.chord_degree == 1


def test_set_pattern_keeps_degree():
    sel = Selection()
    sel.toggle_degree(4)
    sel.set_pattern(ChordPattern.SEVENTH)
    assert sel.pattern is ChordPattern.SEVENTH
    assert sel.chord_degree == 4


def test_pick_key_resets_chord():
    sel = Selection()
    sel.toggle_degree(5)
    sel.pick_key(9, MINOR_SCALE)
    assert (sel.root, sel.scale_idx, sel.chord_degree) == (9, MINOR_SCALE, None)


@pytest.mark.parametrize("root", [-1, 12])
def test_invalid_root(root):
    with pytest.raises(ValueError):
        Selection().set_root(root)


def test_invalid_scale():
    with pytest.raises(ValueError):
        Selection(scale_idx=999)


def test_is_active_chromatic_lights_everything():
    sel = Selection(scale_idx=CHROMATIC_SCALE)
    assert all(sel.is_active(c) for c in range(12))


def test_is_active_follows_scale():
    sel = Selection(root=3)
    lit = {c for c in range(12) if sel.is_active(c)}
    assert lit == set(sel.current_scale())


def test_is_active_follows_chord():
    sel = Selection(pattern=ChordPattern.SEVENTH)
    sel.toggle_degree(4)
    lit = {c for c in range(12) if sel.is_active(c)}
    assert lit == set(sel.active_chord())