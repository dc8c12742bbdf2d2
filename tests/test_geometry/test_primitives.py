"""Tests for point/vector/segment value types."""

from __future__ import annotations

import dataclasses
from fractions import Fraction

import pytest

from polymorph.geometry.primitives import Point2, Segment2, Vector2, distance, squared_distance


def test_point_difference_is_vector():
    v = Point2(3.0, 4.0) - Point2(1.0, 1.0)
    assert v == Vector2(2.0, 3.0)


def test_point_plus_scaled_vector():
    p = Point2(1.0, 0.0) + Vector2(0.0, 2.0) * 0.25
    assert p == Point2(1.0, 0.5)


def test_point_minus_vector():
    assert Point2(1.0, 1.0) - Vector2(1.0, 2.0) == Point2(0.0, -1.0)


def test_scalar_on_left():
    assert 2 * Vector2(1.5, -1.0) == Vector2(3.0, -2.0)


def test_points_are_immutable():
    p = Point2(1.0, 2.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.x = 5.0  # type: ignore[misc]


def test_points_are_hashable():
    assert len({Point2(1.0, 2.0), Point2(1.0, 2.0), Point2(2.0, 1.0)}) == 2


def test_distance():
    assert distance(Point2(0.0, 0.0), Point2(3.0, 4.0)) == pytest.approx(5.0)
    assert squared_distance(Point2(0.0, 0.0), Point2(3.0, 4.0)) == 25.0


def test_distance_with_fractions_is_float():
    d = distance(Point2(Fraction(0), Fraction(0)), Point2(Fraction(3), Fraction(4)))
    assert isinstance(d, float)
    assert d == 5.0


def test_segment_length_and_vector():
    s = Segment2(Point2(1.0, 1.0), Point2(0.0, 6.0))
    assert s.to_vector() == Vector2(-1.0, 5.0)
    assert s.squared_length() == 26.0
    assert s.length() == pytest.approx(5.0990195)


def test_as_tuple_converts_fractions():
    assert Point2(Fraction(1, 2), Fraction(3)).as_tuple() == (0.5, 3.0)


def test_length_of_large_vectors_is_finite():
    assert Vector2(3e200, 4e200).length() == pytest.approx(5e200)
    assert Vector2(Fraction(3e200), Fraction(4e200)).length() == pytest.approx(5e200)
    assert distance(Point2(0.0, 0.0), Point2(1e300, 1e300)) == pytest.approx(1.4142135623730951e300)
