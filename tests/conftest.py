"""Спільні фікстури для тестів cgeom."""

import pytest

from cgeom import Point2


@pytest.fixture
def square():
    """Квадрат 10x10 з кутом у початку координат."""
    return [Point2(0, 0), Point2(10, 0), Point2(10, 10), Point2(0, 10)]


@pytest.fixture
def square_f():
    """Той самий квадрат у float координатах."""
    return [Point2(0.0, 0.0), Point2(10.0, 0.0), Point2(10.0, 10.0), Point2(0.0, 10.0)]
