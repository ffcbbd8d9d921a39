# cgeom/polygon.py
from __future__ import annotations
import logging
from functools import cmp_to_key
from itertools import islice
from math import atan2, hypot
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union

import numpy as np

from .numeric import NumericTraits, traits_for
from .point import Point, Point2
from .rect import Rect

logger = logging.getLogger(__name__)

HULL_BATCH_SIZE = 100   # скільки вхідних точок обробляє один прохід Graham
MIN_VERTICES = 3        # менше: не многокутник

PointLike = Union[Point2, Sequence[float]]


class Polygon:
    """
    Опуклий многокутник, що зберігає лише вершини опуклої оболонки
    вставлених точок + кешований bounding box.

    Вершини йдуть проти годинникової стрілки, починаючи з опорної точки
    (найнижча, серед них: найлівіша). Порядок канонічний, тому два
    многокутники з однаковими множинами точок мають однакові вершини.

    Менше ніж 3 вершини після редукції -> null (порожня оболонка,
    bounding box = Rect.null()). Такі точки лишаються у внутрішньому
    буфері, доки наступні вставки не дадуть справжню оболонку.
    """

    def __init__(
        self,
        points: Optional[Iterable[PointLike]] = None,
        dtype=None,
        batch_size: int = HULL_BATCH_SIZE,
    ):
        if batch_size < 1:
            raise ValueError(f"batch_size must be positive, got {batch_size}")
        self.batch_size = batch_size
        self._explicit_dtype = dtype is not None
        self._traits: Optional[NumericTraits] = traits_for(dtype) if dtype is not None else None
        self._hull: List[Point2] = []     # поточний буфер вершин (після редукції)
        self._bbox: Rect = Rect.null(self.dtype)
        if points is not None:
            self.add_points(points)

    @classmethod
    def null(cls, dtype=None) -> "Polygon":
        return cls(dtype=dtype)

    # ---------------- Публічний API ----------------
    @property
    def dtype(self) -> type:
        return self._traits.type if self._traits is not None else float

    @property
    def bounding_box(self) -> Rect:
        return self._bbox

    @property
    def vertices(self) -> Tuple[Point2, ...]:
        if self.is_null():
            return ()
        return tuple(p.copy() for p in self._hull)

    def is_null(self) -> bool:
        return len(self._hull) < MIN_VERTICES

    def size(self) -> int:
        return 0 if self.is_null() else len(self._hull)

    def width(self):
        return self._bbox.width()

    def height(self):
        return self._bbox.height()

    def perimeter(self) -> float:
        if self.is_null():
            return 0.0
        w = self._traits.widen
        n = len(self._hull)
        perim = 0.0
        for i in range(n):
            a, b = self._hull[i], self._hull[(i + 1) % n]
            perim += hypot(w(b.x) - w(a.x), w(b.y) - w(a.y))
        return perim

    def area(self) -> float:
        """Площа за формулою шнурків (вершини вже у порядку обходу)."""
        if self.is_null():
            return 0.0
        w = self._traits.widen
        n = len(self._hull)
        s = 0
        for i in range(n):
            a, b = self._hull[i], self._hull[(i + 1) % n]
            s += w(a.x) * w(b.y) - w(b.x) * w(a.y)
        return abs(s) / 2.0

    def add_point(self, point: PointLike) -> None:
        self.add_points((point,))

    def add_points(self, points: Iterable[PointLike]) -> None:
        """
        Додати точки пачками по batch_size:
          1) відкинути null-точки пачки й дописати решту до буфера вершин;
          2) одразу перерахувати оболонку по ВСЬОМУ буферу (Graham);
          3) після останньої пачки: перерахувати bounding box.
        Вхід читається ліниво, тож генератори на мільйони точок не
        матеріалізуються цілком.
        """
        it = iter(points)
        batch_no = 0
        while True:
            batch = list(islice(it, self.batch_size))
            if not batch:
                break
            for p in batch:
                pt = self._coerce(p)
                if not pt.is_null():
                    self._hull.append(pt)
            before = len(self._hull)
            self._graham_hull()
            logger.debug("hull batch %d: %d raw, %d buffered -> %d vertices",
                         batch_no, len(batch), before, len(self._hull))
            batch_no += 1
        self._calc_bounding_box()

    def copy(self) -> "Polygon":
        poly = Polygon(batch_size=self.batch_size)
        poly._explicit_dtype = self._explicit_dtype
        poly._traits = self._traits
        poly._hull = [p.copy() for p in self._hull]
        poly._bbox = self._bbox
        return poly

    def to_array(self) -> np.ndarray:
        """Вершини оболонки як масив N x 2 (порожній для null)."""
        if self.is_null():
            return np.empty((0, 2), dtype=self.dtype)
        return np.array([(p.x, p.y) for p in self._hull], dtype=self.dtype)

    # ---------------- Внутрішні методи ----------------
    def _coerce(self, p: PointLike) -> Point2:
        """
        Привести вхід до Point2 типу многокутника.
        Явний dtype фіксований; виведений тип (з першої точки) лише
        розширюється: цілий многокутник, що отримав float-точку, стає float.
        """
        if isinstance(p, Point):
            if not isinstance(p, Point2):
                raise TypeError(f"Polygon takes 2-D points, got {p.dimension}-D")
            pt = p.copy()
        else:
            pt = Point2(*p, dtype=self._traits.type if self._explicit_dtype else None)
        if self._traits is None:
            self._traits = pt.traits
            self._bbox = Rect.null(self.dtype)
        elif (not self._explicit_dtype and self._traits.exact
              and not pt.traits.exact and not pt.is_null()):
            self._widen_to_float()
        if pt.dtype is self._traits.type:
            return pt
        if pt.is_null():
            return Point2.null(dtype=self._traits.type)
        return Point2(pt.x, pt.y, dtype=self._traits.type)

    def _widen_to_float(self) -> None:
        """Цілі координати -> float, без втрати вже накопичених вершин."""
        logger.debug("widening polygon coordinates %s -> float (%d buffered)",
                     self._traits.type.__name__, len(self._hull))
        self._traits = traits_for(float)
        self._hull = [Point2(float(q.x), float(q.y)) for q in self._hull]
        self._bbox = Rect.null(float)

    @staticmethod
    def _direction(tr: NumericTraits, p0: Point2, p1: Point2, p2: Point2):
        """>0: лівий поворот p0->p1->p2, <0: правий, 0: колінеарні."""
        w = tr.widen
        x0, y0 = w(p0.x), w(p0.y)
        return (w(p1.x) - x0) * (w(p2.y) - y0) - (w(p1.y) - y0) * (w(p2.x) - x0)

    @staticmethod
    def _dist2(tr: NumericTraits, a: Point2, b: Point2):
        w = tr.widen
        dx, dy = w(b.x) - w(a.x), w(b.y) - w(a.y)
        return dx * dx + dy * dy

    def _find_pivot(self) -> Point2:
        """Найнижча точка; при рівних y: найлівіша."""
        tr = self._traits
        best = self._hull[0]
        for p in self._hull[1:]:
            if tr.less_than(p.y, best.y):
                best = p
            elif tr.equal(p.y, best.y) and tr.less_than(p.x, best.x):
                best = p
        return best

    def _sort_by_angle(self, pivot: Point2) -> List[Point2]:
        """
        Сортування за полярним кутом навколо pivot (pivot: першим).
        Рівні кути: менший y раніше, при рівних y: менший x.
        """
        tr = self._traits
        angle_eq = traits_for(float).equal
        w = tr.widen
        px, py = w(pivot.x), w(pivot.y)
        keyed = []
        for p in self._hull:
            if p == pivot:
                keyed.append((p, True, 0.0))
            else:
                keyed.append((p, False, atan2(w(p.y) - py, w(p.x) - px)))

        def cmp(lhs, rhs) -> int:
            l, l_piv, ang1 = lhs
            r, r_piv, ang2 = rhs
            if l_piv or r_piv:
                return int(r_piv) - int(l_piv)
            if angle_eq(ang1, ang2):
                if tr.equal(l.y, r.y):
                    if tr.equal(l.x, r.x):
                        return 0
                    return -1 if tr.greater_than(r.x, l.x) else 1
                return -1 if tr.greater_than(r.y, l.y) else 1
            return -1 if ang2 > ang1 else 1

        keyed.sort(key=cmp_to_key(cmp))
        return [p for p, _, _ in keyed]

    def _graham_hull(self) -> None:
        """
        Graham scan над усім буфером вершин.
        Колінеарний кандидат: якщо він не далі від stack[-2], ніж вершина
        стеку (дублікат або точка на ребрі): відкидаємо; інакше знімаємо
        вершину стеку й пробуємо того ж кандидата знову.
        """
        if len(self._hull) < MIN_VERTICES:
            return
        tr = self._traits
        zero = 0 if tr.exact else 0.0
        pivot = self._find_pivot()
        pts = self._sort_by_angle(pivot)

        # ці дві точки точно в оболонці (стартові)
        stack: List[Point2] = [pts[0], pts[1]]
        i = 2
        while i < len(pts):
            cand = pts[i]
            if len(stack) < 2:
                stack.append(cand)
                i += 1
                continue
            d = self._direction(tr, stack[-2], stack[-1], cand)
            if tr.greater_than(d, zero):
                # лівий поворот
                stack.append(cand)
                i += 1
            elif tr.equal(d, zero):
                # прямо
                if tr.greater_than(self._dist2(tr, stack[-2], cand),
                                   self._dist2(tr, stack[-2], stack[-1])):
                    stack.pop()
                else:
                    i += 1
            else:
                # правий поворот
                stack.pop()

        self._hull = stack

    def _calc_bounding_box(self) -> None:
        if self.is_null():
            if self._hull:
                logger.debug("polygon is null: %d vertices after hull reduction", len(self._hull))
            self._bbox = Rect.null(self.dtype)
            return
        tr = self._traits
        first = self._hull[0]
        l = r = first.x
        t = b = first.y
        for p in self._hull[1:]:
            if tr.less_than(p.x, l):
                l = p.x
            if tr.greater_than(p.x, r):
                r = p.x
            if tr.less_than(p.y, t):
                t = p.y
            if tr.greater_than(p.y, b):
                b = p.y
        self._bbox = Rect(l, r, t, b, dtype=self.dtype)

    # ---------------- Порівняння / контейнер ----------------
    def __eq__(self, other):
        if not isinstance(other, Polygon):
            return NotImplemented
        # швидка відмова
        if self._bbox != other._bbox:
            return False
        self_null, other_null = self.is_null(), other.is_null()
        if self_null and other_null:
            return True
        if self_null or other_null:
            return False
        if len(self._hull) != len(other._hull):
            return False
        # _graham_hull() дає однаковий канонічний порядок
        return all(a == b for a, b in zip(self._hull, other._hull))

    def __ne__(self, other):
        eq = self.__eq__(other)
        return eq if eq is NotImplemented else not eq

    __hash__ = None

    def __len__(self) -> int:
        return self.size()

    def __getitem__(self, index: int) -> Point2:
        if self.is_null():
            raise IndexError("null polygon has no vertices")
        return self._hull[index].copy()

    def __iter__(self) -> Iterator[Point2]:
        return iter(self.vertices)

    # ---------------- Текст ----------------
    def __str__(self) -> str:
        verts = self.vertices
        return f"Polygon: size = {len(verts)}\n  " + "->".join(str(p) for p in verts)

    def __repr__(self) -> str:
        if self.is_null():
            return "Polygon.null()"
        return f"Polygon({[p for p in self.vertices]!r})"

    def gnuplot(self) -> str:
        """Вершини по рядку, перша: ще раз (замкнений контур), потім 'e'."""
        verts = self.vertices
        if not verts:
            return "e\n"
        return "".join(p.gnuplot() for p in verts) + verts[0].gnuplot() + "e\n"
