"""Тести точок/векторів (cgeom.point)."""

import math

import numpy as np
import pytest

from cgeom import Point, Point2, Point3, Point4
from cgeom.numeric import traits_for


class TestConstruction:
    def test_default_is_null(self):
        assert Point2().is_null()
        assert Point2() == Point2.null()

    def test_trailing_coordinates_default_to_zero(self):
        p = Point3(1, 2)
        assert (p.x, p.y, p.z) == (1, 2, 0)

    def test_too_many_values(self):
        with pytest.raises(TypeError):
            Point2(1, 2, 3)

    def test_generic_requires_dimension(self):
        with pytest.raises(TypeError):
            Point(1, 2)
        p = Point(1, 2, 3, 4, 5, dim=5)
        assert p.dimension == 5
        assert list(p) == [1, 2, 3, 4, 5]

    def test_dim_mismatch_for_specialized(self):
        with pytest.raises(TypeError):
            Point2(1, 2, dim=3)

    def test_non_positive_dimension(self):
        with pytest.raises(ValueError):
            Point(dim=0)

    def test_type_inference(self):
        assert Point2(1, 2).dtype is int
        assert Point2(1, 2.5).dtype is float
        assert Point2(1, 2, dtype=np.float32).dtype is np.float32
        assert isinstance(Point2(1, 2, dtype=np.float32).x, np.float32)


class TestNull:
    """Будь-яка sentinel-координата робить null усю точку."""

    def test_any_sentinel_nulls_whole_point(self):
        p = Point3(1.0, math.inf, 3.0)
        assert p.is_null()
        assert p == Point3.null()
        assert all(math.isinf(v) for v in p)

    def test_int_sentinel(self):
        s = traits_for(int).sentinel
        p = Point2(s, 5)
        assert p.is_null()
        assert p.y == s

    def test_inf_to_int_point(self):
        assert Point2(math.inf, 1, dtype=int).is_null()

    def test_set_sentinel(self):
        p = Point2(1.0, 2.0)
        p.set(1, math.inf)
        assert p.is_null()

    def test_setter_sentinel(self):
        p = Point4(1, 2, 3, 4)
        p.w = traits_for(int).sentinel
        assert p == Point4.null(dtype=int)

    def test_null_vs_value(self):
        assert Point2.null() != Point2(0.0, 0.0)
        assert Point2(0.0, 0.0) != Point2.null()

    def test_null_equal_across_types(self):
        assert Point2.null(dtype=int) == Point2.null(dtype=float)


class TestAccess:
    def test_get_set(self):
        p = Point3(1, 2, 3)
        assert p.get(2) == 3
        assert p[0] == 1
        p.set(0, 7)
        assert p.x == 7
        p.y = 9
        assert p.get(1) == 9

    @pytest.mark.parametrize("i", [-1, 2, 10])
    def test_out_of_range(self, i):
        p = Point2(1, 2)
        with pytest.raises(IndexError):
            p.get(i)
        with pytest.raises(IndexError):
            p.set(i, 0)

    def test_named_accessors(self):
        p = Point4(1, 2, 3, 4)
        assert (p.x, p.y, p.z, p.w) == (1, 2, 3, 4)
        assert len(p) == 4

    def test_copy_is_independent(self):
        p = Point2(1, 2)
        q = p.copy()
        q.x = 5
        assert p.x == 1

    def test_to_array(self):
        arr = Point3(1.0, 2.0, 3.0).to_array()
        assert isinstance(arr, np.ndarray)
        np.testing.assert_array_equal(arr, [1.0, 2.0, 3.0])

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Point2(1, 2))


class TestArithmetic:
    def test_dot(self):
        assert Point3(1, 2, 3).dot(Point3(4, 5, 6)) == 32
        assert Point2(1, 2).inner(Point2(3, 4)) == 11

    def test_cross_2d_scalar(self):
        assert Point2(1, 0).cross(Point2(0, 1)) == 1
        assert Point2(0, 1).cross(Point2(1, 0)) == -1
        assert Point2(2, 4).cross(Point2(1, 2)) == 0

    def test_cross_3d_vector(self):
        assert Point3(1, 0, 0).cross(Point3(0, 1, 0)) == Point3(0, 0, 1)
        assert Point3(0, 0, 1).cross(Point3(1, 0, 0)) == Point3(0, 1, 0)
        assert Point3(1, 2, 3).cross(Point3(4, 5, 6)) == Point3(-3, 6, -3)

    def test_cross_2d_null_is_sentinel(self):
        assert Point2.null().cross(Point2(1.0, 2.0)) == math.inf
        assert Point2(1, 2).cross(Point2.null(dtype=int)) == traits_for(int).sentinel

    def test_cross_3d_null(self):
        assert Point3(1, 2, 3).cross(Point3.null(dtype=int)).is_null()

    def test_add_sub_neg_mul(self):
        a, b = Point2(1, 2), Point2(3, 5)
        assert a + b == Point2(4, 7)
        assert b - a == Point2(2, 3)
        assert -a == Point2(-1, -2)
        assert a * 3 == Point2(3, 6)
        assert 3 * a == Point2(3, 6)

    def test_null_propagates(self):
        assert (Point2(1.0, 2.0) + Point2.null()).is_null()
        assert (Point2.null() * 2).is_null()

    def test_norm(self):
        assert Point2(3, 4).norm() == pytest.approx(5.0)

    def test_dimension_mismatch(self):
        with pytest.raises(TypeError):
            Point2(1, 2).dot(Point3(1, 2, 3))


class TestEquality:
    def test_tolerant(self):
        assert Point2(0.1 + 0.2, 1.0) == Point2(0.3, 1.0)
        assert Point2(0.1, 1.0) != Point2(0.2, 1.0)

    def test_exact_ints(self):
        assert Point2(1, 2) == Point2(1, 2)
        assert Point2(1, 2) != Point2(1, 3)

    def test_dimension_differs(self):
        assert Point(1, 2, dim=2) != Point(1, 2, dim=3)

    def test_other_type(self):
        assert Point2(1, 2) != (1, 2)


class TestText:
    def test_repr_str(self):
        assert str(Point2(1, 2)) == "(1, 2)"
        assert repr(Point2(1, 2)) == "Point2(1, 2)"
        assert repr(Point2.null()) == "Point2.null()"
        assert repr(Point(1, dim=2)) == "Point(1, 0, dim=2)"

    def test_gnuplot(self):
        assert Point2(1.5, 2.0).gnuplot() == "1.5 2.0\n"
