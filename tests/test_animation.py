import pytest

from vimcanvas.animation import (
    Point,
    ease,
    ease_in_cubic,
    ease_in_expo,
    ease_in_out_cubic,
    ease_in_out_quad,
    ease_in_quad,
    ease_linear,
    ease_out_cubic,
    ease_out_expo,
    ease_out_quad,
    ease_point,
    lerp,
)

F32 = 1e-6


def assert_point(actual, expected):
    assert actual.x == pytest.approx(expected.x, abs=F32)
    assert actual.y == pytest.approx(expected.y, abs=F32)


START = Point(0.0, 0.0)
END = Point(1.0, 1.0)


def test_lerp():
    assert lerp(1.0, 0.0, 1.0) == 0.0


def test_ease_linear():
    assert ease(ease_linear, 1.0, 0.0, 1.0) == 0.0


def test_ease_in_quad():
    assert ease(ease_in_quad, 1.0, 0.0, 1.0) == 0.0


def test_ease_out_quad():
    assert ease(ease_out_quad, 1.0, 0.0, 1.0) == 0.0


def test_ease_in_expo():
    assert ease(ease_in_expo, 1.0, 0.0, 1.0) == 0.0
    assert ease(ease_in_expo, 1.0, 0.0, 0.0) == 1.0


def test_ease_out_expo():
    assert ease(ease_out_expo, 1.0, 0.0, 1.0) == 0.0
    assert ease(ease_out_expo, 1.0, 0.0, 1.1) == pytest.approx(0.00048828125, abs=F32)


def test_ease_in_out_quad():
    assert ease(ease_in_out_quad, 1.0, 0.0, 1.0) == 0.0
    assert ease(ease_in_out_quad, 1.0, 0.0, 0.4) == pytest.approx(0.67999995, abs=F32)


def test_ease_in_cubic():
    assert ease(ease_in_cubic, 1.0, 0.0, 1.0) == 0.0


def test_ease_out_cubic():
    assert ease(ease_out_cubic, 1.0, 0.0, 1.0) == 0.0


def test_ease_in_out_cubic():
    assert ease(ease_in_out_cubic, 1.0, 0.0, 1.0) == 0.0
    assert ease(ease_in_out_cubic, 1.0, 0.0, 0.25) == pytest.approx(0.9375, abs=F32)


@pytest.mark.parametrize(
    "func",
    [ease_linear, ease_in_quad, ease_out_quad, ease_in_cubic, ease_out_cubic],
)
def test_ease_point_reaches_end(func):
    assert ease_point(func, START, END, 1.0) == END


def test_ease_point_in_out_quad():
    assert ease_point(ease_in_out_quad, START, END, 1.0) == END
    assert_point(ease_point(ease_in_out_quad, START, END, 1.4), Point(0.68000007, 0.68000007))


def test_ease_point_in_out_cubic():
    assert ease_point(ease_in_out_cubic, START, END, 1.0) == END
    assert_point(ease_point(ease_in_out_cubic, START, END, 0.25), Point(0.0625, 0.0625))


def test_ease_point_in_expo():
    assert ease_point(ease_in_expo, START, END, 1.0) == END
    assert ease_point(ease_in_expo, START, END, 0.0) == START


def test_ease_point_out_expo():
    assert ease_point(ease_out_expo, START, END, 1.0) == END
    assert_point(ease_point(ease_out_expo, START, END, 1.1), Point(0.9995117, 0.9995117))


def test_point_arithmetic():
    a = Point(1.0, 2.0)
    b = Point(3.0, 5.0)
    assert a + b == Point(4.0, 7.0)
    assert b - a == Point(2.0, 3.0)
    assert a * 2.0 == Point(2.0, 4.0)
    assert 2.0 * a == Point(2.0, 4.0)


def test_point_length_and_normalized():
    p = Point(3.0, 4.0)
    assert p.length() == 5.0
    n = p.normalized()
    assert n.length() == pytest.approx(1.0)
    assert n.x == pytest.approx(0.6)


def test_zero_point_normalizes_to_zero():
    assert Point(0.0, 0.0).normalized().is_zero()


def test_dot_and_is_zero():
    assert Point(1.0, 0.0).dot(Point(0.0, 1.0)) == 0.0
    assert Point(2.0, 3.0).dot(Point(2.0, 3.0)) == 13.0
    assert not Point(0.0, 1.0).is_zero()