import math

import pytest

from utils.vector2 import Vector2, normalized, rotated, right_of


def test_normalized_unit_length():
    v = normalized(Vector2(3, 4))
    assert v.length() == pytest.approx(1.0)
    assert v.x == pytest.approx(0.6)


def test_normalized_zero_vector_is_unchanged():
    v = normalized(Vector2(0, 0))
    assert v == Vector2(0, 0)


def test_rotated_quarter_turn():
    v = rotated(Vector2(1, 0), math.pi / 2)
    assert v.x == pytest.approx(0.0, abs=1e-12)
    assert v.y == pytest.approx(1.0)


def test_right_of_is_perpendicular():
    d = Vector2(-1, 0)
    r = right_of(d)
    assert r == Vector2(0, 1)
    assert d.dot(r) == 0


def test_rotation_preserves_perpendicularity():
    d = Vector2(-1, 0)
    p = right_of(d) * 0.66
    for _ in range(50):
        d = rotated(d, 0.37)
        p = rotated(p, 0.37)
    assert d.dot(p) == pytest.approx(0.0, abs=1e-9)
    assert p.length() == pytest.approx(0.66)
