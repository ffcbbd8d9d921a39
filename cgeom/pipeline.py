from __future__ import annotations
import logging
from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np

from .point import Point2
from .polygon import HULL_BATCH_SIZE, Polygon, PointLike

logger = logging.getLogger(__name__)

DEFAULT_BACKEND = "graham"
QUANTIZE_SCALE = 1e9


def unique_points(points: Iterable[PointLike], scale: float = QUANTIZE_SCALE, dtype=None) -> List[Point2]:
    """
    Список Point2 без повторів, у порядку першої появи.

    Вхід: Point2 або пари (x, y). Дві точки вважаються однією, якщо їхні
    координати, помножені на scale і округлені, збігаються (крок сітки 1/scale).
    Null-точки (sentinel у будь-якій координаті) відкидаються.
    dtype=None лишає тип кожної точки як є (Polygon сам розширить int до float);
    явний dtype переводить усі точки в цей тип до квантування.
    """
    seen: Dict[Tuple[int, int], Point2] = {}
    for p in points:
        if not isinstance(p, Point2):
            p = Point2(*p, dtype=dtype)
        elif dtype is not None and p.dtype is not dtype:
            p = Point2(p.x, p.y, dtype=dtype) if not p.is_null() else Point2.null(dtype=dtype)
        if p.is_null():
            continue
        w = p.traits.widen
        key = (int(round(w(p.x) * scale)), int(round(w(p.y) * scale)))
        if key not in seen:
            seen[key] = p
    return list(seen.values())


def convex_hull(
    points: Iterable[PointLike],
    backend: str = DEFAULT_BACKEND,
    dtype=None,
    batch_size: int = HULL_BATCH_SIZE,
) -> Polygon:
    """
    Повний пайплайн:
      - прибирає дублікати та null-точки;
      - будує опуклу оболонку обраним backend:
          "graham" -> власний пакетний Graham scan (Polygon);
          "scipy"  -> вершини вибирає Qhull (scipy.spatial.ConvexHull),
                     далі вони йдуть у Polygon заради канонічного порядку та bbox.
    Вироджений вхід (менше 3 точок, усі колінеарні) дає Polygon.null().
    """
    pts = unique_points(points, dtype=dtype)
    name = backend.lower()
    logger.debug("convex_hull: %d unique points, backend=%s", len(pts), name)

    if name == "graham":
        return Polygon(pts, dtype=dtype, batch_size=batch_size)

    elif name == "scipy":
        try:
            from scipy.spatial import ConvexHull, QhullError
        except ImportError as e:
            raise RuntimeError(
                "backend='scipy', but SciPy is not installed. "
                "Install scipy or use backend='graham'."
            ) from e

        if len(pts) < 3:
            return Polygon.null(dtype=dtype or (pts[0].dtype if pts else None))
        arr = np.array([(float(p.x), float(p.y)) for p in pts], dtype=float)
        try:
            hull = ConvexHull(arr)
        except QhullError as e:
            # колінеарний / вироджений вхід -> null, а не помилка
            logger.debug("qhull rejected input (%s): returning null polygon", str(e).splitlines()[0])
            return Polygon.null(dtype=dtype or pts[0].dtype)
        return Polygon([pts[int(i)] for i in hull.vertices], dtype=dtype, batch_size=batch_size)

    else:
        raise ValueError(f"Unknown backend: {backend}")


def random_points(n: int, upper: float = 10.0, seed: Optional[int] = None, dtype=float) -> List[Point2]:
    """n випадкових точок, рівномірно в [0, upper)^2 (seed: щоб відтворити результат)."""
    rng = np.random.default_rng(seed)
    xy = rng.uniform(0.0, upper, size=(n, 2))
    return [Point2(float(x), float(y), dtype=dtype) for x, y in xy]
