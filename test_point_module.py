# test_point_module.py

import numpy as np
import pytest

from point_module import Point


def test_accessors():
    p = Point([3.5, -2])
    assert p.get(0) == 3.5
    assert p.get(1) == -2.0


def test_distance_is_euclidean_and_symmetric():
    a, b = Point([0, 0]), Point([3, 4])
    assert a.distance(b) == pytest.approx(5.0)
    assert b.distance(a) == pytest.approx(5.0)
    assert a.distance(a) == 0.0


@pytest.mark.parametrize("coords", [[1], [1, 2, 3], [[1, 2]], [np.nan, 0], [0, np.inf]])
def test_rejects_malformed_coordinates(coords):
    with pytest.raises(ValueError):
        Point(coords)


def test_bad_axis():
    with pytest.raises(IndexError):
        Point([1, 2]).get(2)


def test_coordinates_are_read_only():
    source = np.array([1.0, 2.0])
    p = Point(source)
    source[0] = 99.0
    assert p.get(0) == 1.0
    with pytest.raises(ValueError):
        p.x[0] = 5.0


def test_value_equality():
    assert Point([1, 2]) == Point([1.0, 2.0])
    assert Point([1, 2]) != Point([2, 1])
    assert len({Point([1, 2]), Point([1, 2]), Point([2, 1])}) == 2
