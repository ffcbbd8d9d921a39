# cgeom/numeric.py
from __future__ import annotations
from dataclasses import dataclass
from functools import lru_cache
from math import isinf
from numbers import Integral
from typing import Any, Iterable

import numpy as np


@dataclass(frozen=True)
class NumericTraits:
    """
    Властивості типу координати T (аналог numeric_limits + категорії точності).

    type:     Python-тип значень (int, float або скалярний тип NumPy);
    exact:    True для цілих (порівняння через ==/<), False для float;
    eps:      машинний епсилон (0 для точних типів);
    sentinel: зарезервоване значення «немає значення» (+inf або max).
    """
    type: type
    exact: bool
    eps: float
    sentinel: Any

    # ---------- базові предикати ----------
    def equal(self, a, b) -> bool:
        if self.exact:
            return a == b
        return abs(a - b) <= self.eps * (abs(a) + abs(b) + 1.0)

    def less_than(self, a, b) -> bool:
        if self.exact:
            return a < b
        # окремий тест зі своїм допуском, а не «not equal and a < b»
        return b - a > self.eps * (abs(a) + abs(b) + 1.0)

    # ---------- похідні ----------
    def not_equal(self, a, b) -> bool:
        return not self.equal(a, b)

    def greater_than(self, a, b) -> bool:
        return self.less_than(b, a)

    def less_than_eq(self, a, b) -> bool:
        return not self.less_than(b, a)

    def greater_than_eq(self, a, b) -> bool:
        return not self.less_than(a, b)

    # ---------- значення ----------
    @property
    def zero(self):
        return self.type(0)

    def is_sentinel(self, v) -> bool:
        return v == self.sentinel

    def cast(self, v):
        """Привести значення до типу T; +inf для точного типу стає sentinel."""
        if self.exact and isinstance(v, (float, np.floating)) and isinf(v) and v > 0:
            return self.sentinel
        return self.type(v)

    def widen(self, v):
        """Python int/float для проміжної арифметики (без переповнень uint/int32)."""
        return int(v) if self.exact else float(v)


def _resolve(tp) -> type:
    if tp is int or tp is float:
        return tp
    if tp is bool or tp is np.bool_:
        raise TypeError("bool is not a coordinate type")
    try:
        return np.dtype(tp).type
    except TypeError as e:
        raise TypeError(f"Unsupported coordinate type: {tp!r}") from e


@lru_cache(maxsize=None)
def traits_for(tp) -> NumericTraits:
    """
    Traits для типу координати. Обчислюються один раз на тип і далі
    лише читаються (sentinel: процесна константа).
    """
    t = _resolve(tp)
    if t is int:
        # Python int необмежений: беремо максимум int64
        return NumericTraits(int, True, 0.0, int(np.iinfo(np.int64).max))
    if t is float:
        return NumericTraits(float, False, float(np.finfo(np.float64).eps), float("inf"))
    kind = np.dtype(t).kind
    if kind in "iu":
        return NumericTraits(t, True, 0.0, t(np.iinfo(t).max))
    if kind == "f":
        return NumericTraits(t, False, float(np.finfo(t).eps), t(np.inf))
    raise TypeError(f"Unsupported coordinate type: {tp!r}")


def infer_type(values: Iterable[Any]) -> type:
    """
    Тип координат за значеннями:
      - усі одного NumPy-типу -> цей тип;
      - усі цілі -> int;
      - інакше -> float.
    """
    vals = list(values)
    if not vals:
        return float
    first = type(vals[0])
    if issubclass(first, np.generic) and all(type(v) is first for v in vals):
        return traits_for(first).type
    for v in vals:
        if isinstance(v, bool) or not isinstance(v, Integral):
            return float
    return int


def _traits_of(a, b) -> NumericTraits:
    ta, tb = type(a), type(b)
    if ta is tb and ta is not bool:
        return traits_for(ta)
    if isinstance(a, Integral) and isinstance(b, Integral):
        return traits_for(int)
    return traits_for(float)


# ---------- вільні функції (тип виводиться з операндів) ----------
def equal(a, b) -> bool:
    return _traits_of(a, b).equal(a, b)

def not_equal(a, b) -> bool:
    return _traits_of(a, b).not_equal(a, b)

def less_than(a, b) -> bool:
    return _traits_of(a, b).less_than(a, b)

def greater_than(a, b) -> bool:
    return _traits_of(a, b).greater_than(a, b)

def less_than_eq(a, b) -> bool:
    return _traits_of(a, b).less_than_eq(a, b)

def greater_than_eq(a, b) -> bool:
    return _traits_of(a, b).greater_than_eq(a, b)
