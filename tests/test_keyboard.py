import pytest

from harmonylab.keyboard import (
    KEY_COUNT,
    WHITE_KEY_COUNT,
    generate_keys,
    highlight,
    key_color,
    key_rect,
)
from harmonylab.selection import Selection
from harmonylab.theory import CHROMATIC_SCALE, DEFAULT_COLORS


@pytest.fixture
def keys():
    return generate_keys()


def test_key_count(keys):
    assert len(keys) == KEY_COUNT


def test_first_key_is_a0(keys):
    assert keys[0].name == "A0"
    assert keys[0].freq == pytest.approx(27.5)
    assert keys[0].chroma == 9


def test_last_key_is_c8(keys):
    assert keys[-1].name == "C8"
    assert keys[-1].chroma == 0


def test_white_keys_are_consecutive(keys):
    whites = [k.white_index for k in keys if not k.is_black]
    assert len(whites) == WHITE_KEY_COUNT
    assert whites == list(range(WHITE_KEY_COUNT))


def test_black_key_follows_its_white_neighbour(keys):
    for prev, key in zip(keys, keys[1:]):
        if key.is_black:
            assert not prev.is_black
            assert key.white_index == prev.white_index


def test_octaves_double_frequency(keys):
    for low, high in zip(keys, keys[12:]):
        assert high.freq == pytest.approx(2 * low.freq)
        assert high.chroma == low.chroma


def test_highlight_saturates():
    assert highlight((250, 10, 0), 30) == (255, 40, 30)


def test_highlight_never_darkens():
    for color in DEFAULT_COLORS:
        bright = highlight(color, 50)
        assert all(b >= c for b, c in zip(bright, color))
        assert all(b <= 255 for b in bright)


def test_chromatic_colors(keys):
    sel = Selection(scale_idx=CHROMATIC_SCALE)
    white = next(k for k in keys if not k.is_black)
    black = next(k for k in keys if k.is_black)
    assert key_color(white, sel, DEFAULT_COLORS) == (245, 245, 245)
    assert key_color(black, sel, DEFAULT_COLORS) == (25, 25, 25)


def test_scale_notes_take_palette_color(keys):
    sel = Selection()
    for key in keys:
        if key.chroma in sel.current_scale():
            assert key_color(key, sel, DEFAULT_COLORS) == DEFAULT_COLORS[key.chroma]


def test_out_of_scale_colors(keys):
    sel = Selection()
    black = next(k for k in keys if k.is_black)
    assert key_color(black, sel, DEFAULT_COLORS) == (15, 15, 15)


def test_out_of_chord_white_key(keys):
    sel = Selection()
    sel.toggle_degree(0)
    outside = next(k for k in keys
                   if not k.is_black and k.chroma not in sel.active_chord())
    assert key_color(outside, sel, DEFAULT_COLORS) == (40, 40, 40)


def test_white_rects_tile_the_keyboard(keys):
    whites = [key_rect(k, 10.0, 100.0) for k in keys if not k.is_black]
    for (x0, _, w0, _), (x1, _, _, _) in zip(whites, whites[1:]):
        assert x0 + w0 == pytest.approx(x1)


def test_black_rect_centred_on_boundary(keys):
    for key in keys:
        if key.is_black:
            x, y, w, h = key_rect(key)
            white = key_rect(next(k for k in keys if not k.is_black))
            assert x + w / 2 == pytest.approx((key.white_index + 1) * white[2])
            assert w < white[2] and h < white[3]
            assert y == 0.0