"""Circular arcs and affine transforms on `svgelements.Path`.

Arcs are appended as `svgelements.Arc` segments; shape constructors call
`Path.approximate_arcs_with_cubics()` once they are done, so every consumer,
including QPainterPath, receives only Move/Line/CubicBezier/Close.
"""

from __future__ import annotations

import math
from typing import Tuple

from svgelements import Arc, Close, Matrix, Path, Point

PointXY = Tuple[float, float]

_EPS = 1e-12


def _needs_move(path: Path) -> bool:
    return len(path) == 0 or isinstance(path[-1], Close)


def connect_to(path: Path, pt) -> None:
    """Move to `pt` if no subpath is open, otherwise line to it (unless already there)."""
    if _needs_move(path):
        path.move(pt)
        return
    cur = path.current_point
    if cur is None or abs(cur.x - pt[0]) > _EPS or abs(cur.y - pt[1]) > _EPS:
        path.line(pt)


def append_arc(path: Path, centre: PointXY, radius: float, start: float, end: float) -> Path:
    """Append a circular arc from angle `start` to `end` (radians).

    end > start sweeps with increasing angle, end < start the other way.
    The arc is joined to the current point with a line when needed.
    """
    first = Point.polar(centre, start, radius)
    connect_to(path, first)
    sweep = end - start
    if abs(sweep) <= _EPS:
        return path
    path.append(Arc(start=path.current_point, center=centre, rx=radius, ry=radius, sweep=sweep))
    return path


def append_circle(path: Path, centre: PointXY, radius: float) -> Path:
    """Append a closed circle as its own subpath."""
    path.move(Point.polar(centre, 0.0, radius))
    append_arc(path, centre, radius, 0.0, 2 * math.pi)
    path.closed()
    return path


def append_polyline(path: Path, points, *, close: bool = False) -> Path:
    """Append points as a new subpath, skipping consecutive duplicates."""
    first = True
    last: PointXY | None = None
    for pt in points:
        if last is not None and abs(pt[0] - last[0]) <= _EPS and abs(pt[1] - last[1]) <= _EPS:
            continue
        if first:
            path.move(pt)
            first = False
        else:
            path.line(pt)
        last = pt
    if close and not first:
        path.closed()
    return path


def apply_matrix(path: Path, matrix: Matrix) -> Path:
    """Apply `matrix` to the path in place (reified) and return it."""
    path *= matrix
    path.reify()
    return path
