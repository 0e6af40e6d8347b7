"""Tests for the RGBA render target."""

import pytest

from heartfield.canvas import Canvas

RED = (255, 0, 0)


def _pixel(canvas, x, y):
    return tuple(int(v) for v in canvas.pixels[y, x])


def _painted(canvas):
    alpha = canvas.pixels[:, :, 3]
    return {(int(x), int(y)) for y, x in zip(*alpha.nonzero())}


def test_new_canvas_is_transparent():
    canvas = Canvas(8, 4)
    assert len(canvas.buffer) == 8 * 4 * 4
    assert canvas.get_buffer() == bytes(8 * 4 * 4)
    assert canvas.center == (4, 2)


def test_invalid_size_rejected():
    with pytest.raises(ValueError):
        Canvas(0, 10)


def test_pixels_view_is_row_major_over_buffer():
    canvas = Canvas(4, 3)
    canvas.pixels[1, 2] = (1, 2, 3, 4)
    idx = (1 * 4 + 2) * 4
    assert canvas.buffer[idx:idx + 4] == bytes([1, 2, 3, 4])


class TestPolygon:

    SQUARE = [(2, 2), (6, 2), (6, 6), (2, 6)]

    def test_fills_pixel_centers_inside(self):
        canvas = Canvas(10, 10)
        canvas.polygon(self.SQUARE, RED)
        assert _painted(canvas) == {(x, y) for x in range(2, 6) for y in range(2, 6)}
        assert _pixel(canvas, 3, 3) == (255, 0, 0, 255)

    def test_repeated_closing_point_changes_nothing(self):
        a, b = Canvas(10, 10), Canvas(10, 10)
        a.polygon(self.SQUARE, RED)
        b.polygon(self.SQUARE + [self.SQUARE[0]], RED)
        assert a.get_buffer() == b.get_buffer()

    def test_clips_to_canvas(self):
        canvas = Canvas(6, 6)
        canvas.polygon([(-50, -50), (50, -50), (50, 50), (-50, 50)], RED)
        assert len(_painted(canvas)) == 36

    def test_later_shapes_overdraw(self):
        canvas = Canvas(10, 10)
        canvas.polygon([(0, 0), (10, 0), (10, 10), (0, 10)], (200, 0, 0))
        canvas.polygon(self.SQUARE, (50, 0, 0))
        assert _pixel(canvas, 0, 0)[0] == 200
        assert _pixel(canvas, 4, 4)[0] == 50

    def test_keeps_explicit_alpha(self):
        canvas = Canvas(10, 10)
        canvas.polygon(self.SQUARE, (1, 2, 3, 128))
        assert _pixel(canvas, 2, 2) == (1, 2, 3, 128)

    def test_needs_two_points(self):
        with pytest.raises(ValueError):
            Canvas(4, 4).polygon([(1, 1)], RED)

    def test_rejects_bad_color(self):
        with pytest.raises(ValueError):
            Canvas(10, 10).polygon(self.SQUARE, (1, 2))


class TestColorHelpers:

    @pytest.mark.parametrize("hue, expected", [(0, (255, 0, 0)), (120, (0, 255, 0)), (240, (0, 0, 255)), (360, (255, 0, 0))])
    def test_hsl_primaries(self, hue, expected):
        assert Canvas.hsl(hue, 100, 50) == expected

    def test_hex_unpacks(self):
        assert Canvas.hex(0x804020) == (0x80, 0x40, 0x20)
