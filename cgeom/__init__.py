"""
cgeom: невелике ядро 2D/3D обчислювальної геометрії.
Точки/вектори з null-значенням (sentinel), осьові прямокутники,
опуклі многокутники (пакетний Graham scan) і порівняння з допуском,
коректні як для цілих, так і для float координат.
"""

__version__ = "0.1.0"

from cgeom.numeric import (
    NumericTraits, traits_for,
    equal, not_equal, less_than, greater_than, less_than_eq, greater_than_eq,
)
from cgeom.point import Point, Point2, Point3, Point4
from cgeom.segment import Segment
from cgeom.rect import Rect
from cgeom.polygon import Polygon, HULL_BATCH_SIZE
from cgeom.pipeline import convex_hull, unique_points, random_points

__all__ = [
    "NumericTraits", "traits_for",
    "equal", "not_equal", "less_than", "greater_than", "less_than_eq", "greater_than_eq",
    "Point", "Point2", "Point3", "Point4", "Segment", "Rect",
    "Polygon", "HULL_BATCH_SIZE",
    "convex_hull", "unique_points", "random_points", "__version__",
]
