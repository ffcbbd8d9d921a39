# cgeom/segment.py
from __future__ import annotations
from dataclasses import dataclass
from math import hypot
from typing import Iterator

from .point import Point2


@dataclass(frozen=True)
class Segment:
    """Відрізок pt1 -> pt2 (ребро прямокутника). Решта лінійної геометрії: поза ядром."""
    pt1: Point2
    pt2: Point2

    def __iter__(self) -> Iterator[Point2]:
        yield self.pt1; yield self.pt2

    def is_null(self) -> bool:
        return self.pt1.is_null() or self.pt2.is_null()

    def length(self) -> float:
        if self.is_null():
            return float("inf")
        w = self.pt1.traits.widen
        return hypot(w(self.pt2.x) - w(self.pt1.x), w(self.pt2.y) - w(self.pt1.y))
