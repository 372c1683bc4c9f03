"""Bounding boxes for shape paths.

`svgelements` computes exact cubic extrema, so a path bbox is tight even
for the arc approximations used by the constructors.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Optional

from svgelements import Path


@dataclass(frozen=True)
class BBoxXYXY:
    x0: float
    y0: float
    x1: float
    y1: float

    @property
    def w(self) -> float:
        return float(self.x1 - self.x0)

    @property
    def h(self) -> float:
        return float(self.y1 - self.y0)

    def as_list(self) -> List[float]:
        return [float(self.x0), float(self.y0), float(self.x1), float(self.y1)]

    def union(self, other: "BBoxXYXY") -> "BBoxXYXY":
        return BBoxXYXY(
            min(self.x0, other.x0),
            min(self.y0, other.y0),
            max(self.x1, other.x1),
            max(self.y1, other.y1),
        )

    def inflate(self, d: float) -> "BBoxXYXY":
        return BBoxXYXY(self.x0 - d, self.y0 - d, self.x1 + d, self.y1 + d)


def bbox_from_xyxy_tuple(xyxy: Any) -> Optional[BBoxXYXY]:
    """Coerce (x0,y0,x1,y1) to BBoxXYXY."""

    if xyxy is None:
        return None
    if isinstance(xyxy, (list, tuple)) and len(xyxy) == 4:
        x0, y0, x1, y1 = xyxy
        return BBoxXYXY(float(x0), float(y0), float(x1), float(y1))
    return None


def path_bbox(path: Path) -> Optional[BBoxXYXY]:
    """Geometry bbox of `path` (no stroke), or None for an empty path."""
    if path is None or len(path) == 0:
        return None
    return bbox_from_xyxy_tuple(path.bbox(transformed=True, with_stroke=False))


def union_bbox(paths: Iterable[Path]) -> Optional[BBoxXYXY]:
    out: Optional[BBoxXYXY] = None
    for p in paths:
        b = path_bbox(p)
        if b is None:
            continue
        out = b if out is None else out.union(b)
    return out
