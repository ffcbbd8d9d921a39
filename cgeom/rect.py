# cgeom/rect.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Tuple

from .numeric import NumericTraits, infer_type, traits_for
from .point import Point2
from .segment import Segment


def _malformed(tr: NumericTraits, l, r, t, b) -> bool:
    """Null-предикат: будь-яка координата = sentinel, або l > r, або t > b (з допуском)."""
    if any(tr.is_sentinel(v) for v in (l, r, t, b)):
        return True
    return tr.greater_than(l, r) or tr.greater_than(t, b)


@dataclass(frozen=True, eq=False)
class Rect:
    """
    Осьовий прямокутник (left, right, top, bottom); початок: кут top/left,
    тобто top <= bottom.

    Після створення виконується перевірка інваріанта: зіпсований прямокутник
    (sentinel у будь-якій координаті, left > right чи top > bottom)
    стає канонічним null (усі чотири координати = sentinel).
    """
    left: Any
    right: Any
    top: Any
    bottom: Any
    dtype: Any = None

    def __post_init__(self):
        vals = (self.left, self.right, self.top, self.bottom)
        tr = traits_for(self.dtype if self.dtype is not None else infer_type(vals))
        l, r, t, b = (tr.cast(v) for v in vals)
        if _malformed(tr, l, r, t, b):
            l = r = t = b = tr.sentinel
        # frozen dataclass: нормалізуємо через object.__setattr__
        object.__setattr__(self, "left", l)
        object.__setattr__(self, "right", r)
        object.__setattr__(self, "top", t)
        object.__setattr__(self, "bottom", b)
        object.__setattr__(self, "dtype", tr.type)

    # ---------- конструктори ----------
    @classmethod
    def null(cls, dtype=float) -> "Rect":
        s = traits_for(dtype).sentinel
        return cls(s, s, s, s, dtype=dtype)

    @classmethod
    def from_corner(cls, location: Point2, width, height, dtype=None) -> "Rect":
        """Прямокутник із кутом top/left у location та розмірами width x height."""
        dt = dtype if dtype is not None else location.dtype
        if location.is_null():
            return cls.null(dt)
        return cls(location.x, location.x + width, location.y, location.y + height, dtype=dt)

    # ---------- похідні величини ----------
    @property
    def traits(self) -> NumericTraits:
        return traits_for(self.dtype)

    def is_null(self) -> bool:
        return _malformed(self.traits, self.left, self.right, self.top, self.bottom)

    def width(self):
        return self.right - self.left

    def height(self):
        return self.bottom - self.top

    def area(self):
        return self.width() * self.height()

    def perimeter(self):
        return 2 * self.width() + 2 * self.height()

    def tl(self) -> Point2:
        return Point2(self.left, self.top, dtype=self.dtype)

    def tr(self) -> Point2:
        return Point2(self.right, self.top, dtype=self.dtype)

    def br(self) -> Point2:
        return Point2(self.right, self.bottom, dtype=self.dtype)

    def bl(self) -> Point2:
        return Point2(self.left, self.bottom, dtype=self.dtype)

    def corners(self) -> Tuple[Point2, Point2, Point2, Point2]:
        return self.tl(), self.tr(), self.br(), self.bl()

    def left_edge(self) -> Segment:
        return Segment(self.tl(), self.bl())

    def right_edge(self) -> Segment:
        return Segment(self.tr(), self.br())

    def top_edge(self) -> Segment:
        return Segment(self.tl(), self.tr())

    def bottom_edge(self) -> Segment:
        return Segment(self.bl(), self.br())

    def contains(self, pt: Point2) -> bool:
        """Чи лежить точка в [left,right] x [top,bottom] (включно, з допуском)."""
        if self.is_null() or pt.is_null():
            return False
        tr = self.traits
        return (tr.less_than_eq(self.left, pt.x) and tr.less_than_eq(pt.x, self.right) and
                tr.less_than_eq(self.top, pt.y) and tr.less_than_eq(pt.y, self.bottom))

    def to_tuple(self) -> Tuple[Any, Any, Any, Any]:
        return (self.left, self.right, self.top, self.bottom)

    # ---------- порівняння ----------
    def __eq__(self, other):
        if not isinstance(other, Rect):
            return NotImplemented
        if self.to_tuple() == other.to_tuple():
            return True
        # обидва «зіпсовані» -> рівні, навіть якщо по-різному
        return self.is_null() and other.is_null()

    def __ne__(self, other):
        eq = self.__eq__(other)
        return eq if eq is NotImplemented else not eq

    def __hash__(self):
        # усі null уже нормалізовано до одного значення
        if self.is_null():
            return hash(("Rect.null",))
        return hash(self.to_tuple())

    # ---------- текст ----------
    def __str__(self) -> str:
        return f"{self.left} {self.right} {self.top} {self.bottom}"

    def gnuplot(self) -> str:
        """Замкнений контур tl -> tr -> br -> bl -> tl, завершений 'e'."""
        lines = [f"{p.x} {p.y}" for p in (self.tl(), self.tr(), self.br(), self.bl(), self.tl())]
        lines.append("e")
        return "\n".join(lines) + "\n"
