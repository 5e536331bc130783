import math

import pytest

from arcadebox.engine import Canvas
from arcadebox.geometry import Hole, Line, Vector2


def test_add_sub_round_trip():
    a = Vector2(1.5, -2.0)
    b = Vector2(3.0, 4.0)
    assert a + b - b == a


def test_scale_and_divide_round_trip():
    a = Vector2(1.5, -2.0)
    assert (a * 4) / 4 == a
    assert 2 * a == a * 2
    assert -(-a) == a


def test_normalize_is_unit():
    v = Vector2(3.0, 4.0).normalize()
    assert v.mag() == pytest.approx(1.0)


def test_normalize_zero_vector():
    assert Vector2(0, 0).normalize() == Vector2(0, 0)


def test_dot_and_cross_properties():
    a = Vector2(2.0, 1.0)
    perp = Vector2(-1.0, 2.0)
    assert a.dot(perp) == 0
    assert a.cross(perp) == -perp.cross(a)
    assert a.cross(a) == 0


def test_line_normal_is_unit_and_perpendicular():
    line = Line(Vector2(0, 0), Vector2(10, 5))
    assert line.n.mag() == pytest.approx(1.0)
    assert line.n.dot(line.v) == pytest.approx(0.0)


def test_closest_inside_segment():
    line = Line(Vector2(0, 0), Vector2(10, 0))
    p = Vector2(4, 7)
    c = line.closest(p)
    assert c.x == pytest.approx(p.x)
    assert c.y == pytest.approx(0.0)


def test_closest_before_start_and_after_end():
    line = Line(Vector2(0, 0), Vector2(10, 0))
    assert line.closest(Vector2(-5, 3)) == line.sp
    assert line.closest(Vector2(15, 3)) == line.ep


def test_closest_is_nearest_point():
    line = Line(Vector2(1, 1), Vector2(6, 9))
    p = Vector2(7, 2)
    c = line.closest(p)
    samples = [line.sp + line.v * (i / 100) for i in range(101)]
    best = min((p - s).mag() for s in samples)
    assert (p - c).mag() <= best + 1e-9
    assert math.isfinite(c.x)


def test_line_draw():
    canvas = Canvas()
    Line(Vector2(1, 2), Vector2(3, 4)).draw(canvas)
    assert canvas.commands[-1] == ("line", (1, 2, 3, 4))


def test_hole_draw():
    canvas = Canvas()
    Hole(Vector2(8, 9)).draw(canvas)
    assert canvas.commands[-1] == ("point", (8, 9))