import pytest

from fractonica.framebuffer import FrameBufferMatrix
from fractonica.interfaces import Display, Vector2
from fractonica.lunar_glyph import GlyphState, LunarGlyph, QuadOp, apply_op, glyph_mask
from fractonica.lunar_time import LunarEvent, LunarTime

CELLS = [(x, y) for y in range(4) for x in range(4)]
MOMENT = 1700000000


class RecordingDisplay(Display):
    def __init__(self):
        self.rects = []

    def draw_pixel(self, x, y, color):
        pass

    def begin(self):
        return True

    def flush(self):
        pass

    def clear(self):
        pass

    def get_color(self, r, g, b):
        return (r << 16) | (g << 8) | b

    def get_color_hsv(self, h, s, v):
        return 0

    def print_text(self, msg, x, y, size):
        pass

    def log(self, msg):
        pass

    def log_error(self, msg):
        pass

    def draw_line(self, x1, y1, x2, y2, color):
        pass

    def draw_rect(self, x, y, w, h, color):
        self.rects.append((x, y, w, h, color))

    def draw_bitmap(self, x, y, width, height, bitmap):
        pass

    def update(self):
        pass

    def is_open(self):
        return True

    def size(self):
        return Vector2(0, 0)


def test_full_glyph_fills_the_square():
    assert glyph_mask(7) == 0xFFFF


def test_glyph_masks_grow_monotonically():
    masks = [glyph_mask(n) for n in range(8)]
    for smaller, larger in zip(masks, masks[1:]):
        assert smaller & larger == smaller
        assert bin(larger).count("1") > bin(smaller).count("1")


def test_glyph_mask_caps_at_seven():
    assert glyph_mask(12) == glyph_mask(7)


@pytest.mark.parametrize("op", list(QuadOp))
def test_every_op_is_a_permutation(op):
    assert sorted(apply_op(x, y, op) for x, y in CELLS) == sorted(CELLS)


def test_identity_keeps_cells():
    assert all(apply_op(x, y, QuadOp.IDENTITY) == (x, y) for x, y in CELLS)


def test_four_quarter_turns_are_identity():
    for x, y in CELLS:
        px, py = x, y
        for _ in range(4):
            px, py = apply_op(px, py, QuadOp.ROT90)
        assert (px, py) == (x, y)


def test_half_turn_is_two_quarter_turns():
    for x, y in CELLS:
        assert apply_op(*apply_op(x, y, QuadOp.ROT90), QuadOp.ROT90) == apply_op(
            x, y, QuadOp.ROT180
        )


@pytest.mark.parametrize(
    "op", [QuadOp.MIRROR_X, QuadOp.MIRROR_Y, QuadOp.MIRROR_DIAG, QuadOp.MIRROR_ANTI_DIAG]
)
def test_mirrors_are_involutions(op):
    assert all(apply_op(*apply_op(x, y, op), op) == (x, y) for x, y in CELLS)


def _expected_lit_count(timestamp):
    bin_ = LunarTime().event_info(timestamp, LunarEvent.NEW_MOON).bin
    digits = [(bin_ >> shift) % 8 for shift in (9, 6, 3, 0)]
    return sum(bin(glyph_mask(d)).count("1") for d in digits)


def test_draw_on_matrix_lights_glyph_cells_in_one_colour():
    matrix = FrameBufferMatrix(8, 8)
    matrix.begin()
    LunarGlyph().draw(MOMENT, matrix)
    assert matrix.frame is not None
    lit = [value for row in matrix.frame for value in row if value]
    assert len(lit) == _expected_lit_count(MOMENT)
    assert len(set(lit)) == 1


def test_draw_on_matrix_clears_previous_content():
    matrix = FrameBufferMatrix(8, 8)
    matrix.begin()
    glyph = LunarGlyph()
    glyph.draw(MOMENT, matrix)
    first = matrix.frame
    matrix.draw_pixel(0, 0, 0x00FF00)
    glyph.draw(MOMENT, matrix)
    assert matrix.frame == first


def test_draw_on_display_records_background_then_cells():
    display = RecordingDisplay()
    state = GlyphState()
    assert LunarGlyph().draw_on_display(state, MOMENT, 10, 20, 3, display) is True
    assert display.rects[0] == (10, 20, 24, 24, 0)
    cells = display.rects[1:]
    assert len(cells) == _expected_lit_count(MOMENT)
    apogee_bin = LunarTime().event_info(MOMENT, LunarEvent.APOGEE).bin
    assert all(c[4] == apogee_bin * 8 for c in cells)
    assert all(c[2] == c[3] == 3 for c in cells)


def test_draw_on_display_updates_state_and_skips_repeat():
    display = RecordingDisplay()
    state = GlyphState()
    glyph = LunarGlyph()
    glyph.draw_on_display(state, MOMENT, 0, 0, 2, display)
    lunar = LunarTime()
    assert state.new_moon == lunar.event_info(MOMENT, LunarEvent.NEW_MOON).bin
    assert state.node == lunar.event_info(MOMENT, LunarEvent.NODAL_ASCENDING).bin
    count = len(display.rects)
    assert glyph.draw_on_display(state, MOMENT, 0, 0, 2, display) is False
    assert len(display.rects) == count