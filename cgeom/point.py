# cgeom/point.py
from __future__ import annotations
from math import sqrt
from typing import Iterator, List, Optional

import numpy as np

from .numeric import NumericTraits, infer_type, traits_for


class Point:
    """
    Точка/вектор фіксованої розмірності D з координатами типу T.

    Інваріант: або всі координати дорівнюють sentinel («null-точка»),
    або жодна. Будь-яке присвоєння, що залишає sentinel хоча б в одній
    позиції, перетворює всю точку на null.

    Point()            -> null-точка;
    Point(1, 2, dim=3) -> (1, 2, 0), решта координат = 0.
    """
    DIM: Optional[int] = None
    __slots__ = ("_data", "_traits")
    __hash__ = None  # толерантна рівність несумісна з хешем

    def __init__(self, *values, dim: Optional[int] = None, dtype=None):
        d = self.DIM
        if d is None:
            if dim is None:
                raise TypeError("Point dimension is required: Point(..., dim=D)")
            d = dim
        elif dim is not None and dim != d:
            raise TypeError(f"{type(self).__name__} is {d}-D, got dim={dim}")
        if d < 1:
            raise ValueError(f"Point dimension must be positive, got {d}")
        if len(values) > d:
            raise TypeError(f"too many coordinates for a {d}-D point: {len(values)}")

        self._traits: NumericTraits = traits_for(dtype if dtype is not None else infer_type(values))
        if not values:
            self._data: List = [self._traits.sentinel] * d
            return
        zero = self._traits.zero
        self._data = [self._traits.cast(v) for v in values] + [zero] * (d - len(values))
        self._check_valid()

    @classmethod
    def null(cls, dim: Optional[int] = None, dtype=float) -> "Point":
        if cls.DIM is None:
            return cls(dim=dim, dtype=dtype)
        return cls(dtype=dtype)

    # ---------- доступ ----------
    @property
    def dimension(self) -> int:
        return len(self._data)

    @property
    def dtype(self) -> type:
        return self._traits.type

    @property
    def traits(self) -> NumericTraits:
        return self._traits

    def get(self, i: int):
        if not 0 <= i < len(self._data):
            raise IndexError(f"coordinate index {i} out of range for {len(self._data)}-D point")
        return self._data[i]

    def set(self, i: int, value) -> None:
        if not 0 <= i < len(self._data):
            raise IndexError(f"coordinate index {i} out of range for {len(self._data)}-D point")
        self._data[i] = self._traits.cast(value)
        self._check_valid()

    def is_null(self) -> bool:
        s = self._traits.sentinel
        return all(v == s for v in self._data)

    def copy(self) -> "Point":
        p = object.__new__(type(self))
        p._traits = self._traits
        p._data = self._data[:]
        return p

    def to_array(self) -> np.ndarray:
        return np.array(self._data, dtype=self._traits.type)

    # ---------- арифметика ----------
    def dot(self, other: "Point"):
        self._require_same_dim(other)
        total = self._traits.zero
        for a, b in zip(self._data, other._data):
            total += a * b
        return total

    inner = dot

    def norm(self) -> float:
        return sqrt(float(sum(self._traits.widen(v) ** 2 for v in self._data)))

    def _combine(self, other: "Point", op) -> "Point":
        self._require_same_dim(other)
        if self.is_null() or other.is_null():
            return self._like([])
        return self._like([op(a, b) for a, b in zip(self._data, other._data)])

    def __add__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self._combine(other, lambda a, b: a + b)

    def __sub__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self._combine(other, lambda a, b: a - b)

    def __neg__(self):
        if self.is_null():
            return self.copy()
        return self._like([-v for v in self._data])

    def __mul__(self, k):
        if isinstance(k, Point):
            return NotImplemented
        if self.is_null():
            return self.copy()
        return self._like([v * k for v in self._data])

    __rmul__ = __mul__

    # ---------- порівняння ----------
    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        if len(self._data) != len(other._data):
            return False
        tr = self._traits
        s, so = tr.sentinel, other._traits.sentinel
        for a, b in zip(self._data, other._data):
            a_null, b_null = a == s, b == so
            if a_null or b_null:
                # sentinel порівнюємо лише точним збігом
                if not (a_null and b_null):
                    return False
            elif not tr.equal(a, b):
                return False
        return True

    def __ne__(self, other):
        eq = self.__eq__(other)
        return eq if eq is NotImplemented else not eq

    # ---------- контейнерний протокол ----------
    def __getitem__(self, i: int):
        return self.get(i)

    def __iter__(self) -> Iterator:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    # ---------- текст ----------
    def __repr__(self) -> str:
        name = type(self).__name__
        if self.is_null():
            return f"{name}.null()"
        coords = ", ".join(repr(v) for v in self._data)
        if self.DIM is None:
            return f"{name}({coords}, dim={len(self._data)})"
        return f"{name}({coords})"

    def __str__(self) -> str:
        return "(" + ", ".join(str(v) for v in self._data) + ")"

    def gnuplot(self) -> str:
        return " ".join(str(v) for v in self._data) + "\n"

    # ---------- внутрішнє ----------
    def _check_valid(self) -> None:
        s = self._traits.sentinel
        if any(v == s for v in self._data):
            self._data = [s] * len(self._data)

    def _like(self, data: List) -> "Point":
        """Нова точка того ж класу/типу; порожній data -> null."""
        p = object.__new__(type(self))
        p._traits = self._traits
        if not data:
            p._data = [self._traits.sentinel] * len(self._data)
        else:
            p._data = [self._traits.cast(v) for v in data]
            p._check_valid()
        return p

    def _require_same_dim(self, other: "Point") -> None:
        if len(self._data) != len(other._data):
            raise TypeError(f"dimension mismatch: {len(self._data)} vs {len(other._data)}")


class Point2(Point):
    DIM = 2
    __slots__ = ()

    @property
    def x(self):
        return self._data[0]

    @x.setter
    def x(self, value) -> None:
        self.set(0, value)

    @property
    def y(self):
        return self._data[1]

    @y.setter
    def y(self, value) -> None:
        self.set(1, value)

    def cross(self, other: "Point2"):
        """Скалярний 2D векторний добуток x1*y2 - y1*x2; для null-операнда: sentinel."""
        if self.is_null() or other.is_null():
            return self._traits.sentinel
        return self._data[0] * other._data[1] - self._data[1] * other._data[0]


class Point3(Point):
    DIM = 3
    __slots__ = ()

    @property
    def x(self):
        return self._data[0]

    @x.setter
    def x(self, value) -> None:
        self.set(0, value)

    @property
    def y(self):
        return self._data[1]

    @y.setter
    def y(self, value) -> None:
        self.set(1, value)

    @property
    def z(self):
        return self._data[2]

    @z.setter
    def z(self, value) -> None:
        self.set(2, value)

    def cross(self, other: "Point3") -> "Point3":
        if self.is_null() or other.is_null():
            return self._like([])
        ax, ay, az = self._data
        bx, by, bz = other._data
        return self._like([ay*bz - az*by,
                           az*bx - ax*bz,
                           ax*by - ay*bx])


class Point4(Point):
    DIM = 4
    __slots__ = ()

    @property
    def x(self):
        return self._data[0]

    @x.setter
    def x(self, value) -> None:
        self.set(0, value)

    @property
    def y(self):
        return self._data[1]

    @y.setter
    def y(self, value) -> None:
        self.set(1, value)

    @property
    def z(self):
        return self._data[2]

    @z.setter
    def z(self, value) -> None:
        self.set(2, value)

    @property
    def w(self):
        return self._data[3]

    @w.setter
    def w(self, value) -> None:
        self.set(3, value)
