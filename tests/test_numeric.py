"""Тести порівнянь з допуском (cgeom.numeric)."""

import math

import numpy as np
import pytest

from cgeom.numeric import (
    equal, greater_than, greater_than_eq, infer_type, less_than, less_than_eq,
    not_equal, traits_for,
)


class TestTraits:
    """Категорія точності, епсилон і sentinel для різних типів."""

    def test_python_int_is_exact(self):
        tr = traits_for(int)
        assert tr.exact
        assert tr.eps == 0.0
        assert tr.sentinel == np.iinfo(np.int64).max

    def test_python_float_is_inexact(self):
        tr = traits_for(float)
        assert not tr.exact
        assert tr.eps == np.finfo(np.float64).eps
        assert tr.sentinel == math.inf

    def test_numpy_types(self):
        assert traits_for(np.int32).sentinel == np.iinfo(np.int32).max
        assert traits_for(np.uint16).exact
        f32 = traits_for(np.float32)
        assert not f32.exact
        assert f32.eps == pytest.approx(float(np.finfo(np.float32).eps))
        assert math.isinf(f32.sentinel)

    def test_dtype_string(self):
        assert traits_for("float32").type is np.float32

    def test_cached_per_type(self):
        assert traits_for(float) is traits_for(float)

    @pytest.mark.parametrize("bad", [bool, str, object])
    def test_unsupported(self, bad):
        with pytest.raises(TypeError):
            traits_for(bad)

    def test_cast_inf_to_exact_sentinel(self):
        tr = traits_for(int)
        assert tr.cast(math.inf) == tr.sentinel
        assert tr.cast(3.0) == 3


class TestInferType:
    def test_ints(self):
        assert infer_type([1, 2]) is int

    def test_mixed(self):
        assert infer_type([1, 2.5]) is float

    def test_empty(self):
        assert infer_type([]) is float

    def test_common_numpy_type(self):
        assert infer_type([np.float32(1), np.float32(2)]) is np.float32

    def test_bool_is_not_integral(self):
        assert infer_type([True, 1]) is float


class TestComparisons:
    """equal/less_than та похідні."""

    @pytest.mark.parametrize("x", [0, 1, -7, 10**12, 0.0, 1e-300, -2.5, 1e300, 0.1 + 0.2])
    def test_equal_reflexive(self, x):
        assert equal(x, x)
        assert not less_than(x, x)
        assert less_than_eq(x, x) and greater_than_eq(x, x)

    def test_float_rounding_is_equal(self):
        assert equal(0.1 + 0.2, 0.3)
        assert not_equal(0.1, 0.2)

    def test_tolerance_near_zero(self):
        # +1 у допуску: біля нуля допуск не зникає
        assert equal(0.0, 1e-17)
        assert not equal(0.0, 1e-10)

    def test_tolerance_scales_with_magnitude(self):
        big = 1e16
        assert equal(big, big + 2.0)
        assert not equal(1.0, 1.0 + 1e-12)

    def test_less_than_float(self):
        assert less_than(1.0, 2.0)
        assert not less_than(0.3, 0.1 + 0.2)
        assert not less_than(0.1 + 0.2, 0.3)
        assert greater_than(2.0, 1.0)

    def test_exact_ints(self):
        assert less_than(1, 2)
        assert not equal(1, 2)
        assert greater_than(3, 2)
        assert less_than_eq(2, 2)
        assert greater_than_eq(2, 2)

    def test_sentinel_is_not_tolerantly_equal(self):
        # inf - inf = nan: толерантна рівність не працює для sentinel
        assert not traits_for(float).equal(math.inf, math.inf)

    def test_numpy_scalars(self):
        a = np.float32(0.1) + np.float32(0.2)
        assert traits_for(np.float32).equal(a, np.float32(0.3))
        assert less_than(np.int32(1), np.int32(2))
