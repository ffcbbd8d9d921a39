# examples/demo_hull.py
from __future__ import annotations

import logging
import sys
import time

import matplotlib
matplotlib.use("Agg")
from matplotlib.figure import Figure

from cgeom import Point2, Polygon, Rect, random_points
from cgeom.pipeline import convex_hull

import numpy as np


def draw_polygon(ax, poly: Polygon, color: str, label: str) -> None:
    """Оболонка (замкнений контур) + її bounding box пунктиром."""
    if poly.is_null():
        return
    arr = poly.to_array()
    closed = np.vstack([arr, arr[:1]])
    ax.plot(closed[:, 0], closed[:, 1], "-o", color=color, label=label)
    draw_rect(ax, poly.bounding_box, color, linestyle=":")


def draw_rect(ax, rect: Rect, color: str, linestyle: str = "-") -> None:
    if rect.is_null():
        return
    xs = [p.x for p in rect.corners()] + [rect.left]
    ys = [p.y for p in rect.corners()] + [rect.top]
    ax.plot(xs, ys, linestyle=linestyle, color=color)


def write_gnuplot(path: str, seed: int, upper: float, polys, rects) -> None:
    """Скрипт для gnuplot на основі текстових хуків ядра."""
    lines = [
        f"set xrange [{-1.5 * upper}:{1.5 * upper}]",
        f"set yrange [{-1.5 * upper}:{1.5 * upper}]",
        "unset mouse", "set size square",
        f"set title 'seed = {seed}' font 'Arial,12'",
    ]
    blocks = [p.gnuplot() for p in polys] + [r.gnuplot() for r in rects]
    lines.append("plot " + ", ".join("'-' with linespoints notitle" for _ in blocks))
    with open(path, "w", encoding="utf-8") as f:
        f.write("\n".join(lines) + "\n")
        f.write("".join(blocks))
        f.write("pause -1 'press enter to continue'\n")


def main():
    # необов'язковий seed першим аргументом: щоб відтворити результат
    seed = int(sys.argv[1]) if len(sys.argv) > 1 else int(time.time())
    logging.basicConfig(level=logging.DEBUG if "-v" in sys.argv else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")
    upper = 10.0
    rng = np.random.default_rng(seed)

    # --- 1) два випадкові многокутники ---
    poly1 = Polygon()
    for p in random_points(10, upper, seed=seed):
        poly1.add_point(p)       # по одній точці, як у «живому» введенні
    poly2 = convex_hull(random_points(10, upper, seed=seed + 1), backend="scipy")

    # --- 2) два випадкові прямокутники ---
    rects = [
        Rect.from_corner(Point2(*(rng.uniform(0, upper / 2, 2).tolist())),
                         *(rng.uniform(0, upper / 2, 2).tolist()))
        for _ in range(2)
    ]

    print(poly1)
    print(poly2)
    print("poly1 bbox:", poly1.bounding_box, " area:", poly1.area())
    print("poly2 bbox:", poly2.bounding_box, " area:", poly2.area())

    # --- 3) картинка ---
    fig = Figure(figsize=(6, 6))
    ax = fig.add_subplot(111)
    draw_polygon(ax, poly1, "red", "poly1")
    draw_polygon(ax, poly2, "green", "poly2")
    for r in rects:
        draw_rect(ax, r, "black")
    ax.set_xlim(-1.5 * upper, 1.5 * upper)
    ax.set_ylim(-1.5 * upper, 1.5 * upper)
    ax.set_aspect("equal")
    ax.set_title(f"seed = {seed}")
    ax.legend()
    fig.savefig("hull.png")
    print("hull.png записано.")

    # --- 4) те саме для gnuplot ---
    write_gnuplot("plot.out", seed, upper, [poly1, poly2], rects)
    print("plot.out записано (gnuplot plot.out).")


if __name__ == "__main__":
    main()
