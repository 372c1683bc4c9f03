# File: rfs/svg/qpath_render.py
# Project: RusticFormasSvg (RFS)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Conversión de trazados svgelements -> QPainterPath para el renderer Qt.
# Notes:
#   - No necesita QApplication (QPainterPath es sólo geometría).
#   - Los constructores de formas sólo emiten Move/Line/CubicBezier/Close;
#     Quadratic y Arc se soportan igual por si el path viene de otro lado.
from __future__ import annotations

from typing import Tuple

from PySide6.QtGui import QPainterPath
from svgelements import Arc, Close, CubicBezier, Line, Move, Path, QuadraticBezier


def _xy(pt, sx: float, sy: float) -> Tuple[float, float]:
    return float(pt.x) * sx, float(pt.y) * sy


def path_to_qpath(sp: Path, *, scale: float = 1.0) -> QPainterPath:
    """Convierte un svgelements.Path a QPainterPath (escala uniforme opcional).

    Un path vacío devuelve un QPainterPath vacío.
    """
    q = QPainterPath()
    s = float(scale)
    current_set = False

    if any(isinstance(seg, Arc) for seg in sp):
        sp = Path(sp)
        sp.approximate_arcs_with_cubics()

    for seg in sp:
        # Move
        if isinstance(seg, Move):
            ex, ey = _xy(seg.end, s, s)
            q.moveTo(ex, ey)
            current_set = True
            continue

        # si no hubo move previo, anclamos en el start
        if not current_set and seg.start is not None:
            sx0, sy0 = _xy(seg.start, s, s)
            q.moveTo(sx0, sy0)
            current_set = True

        if isinstance(seg, Close):
            q.closeSubpath()
        elif isinstance(seg, Line):
            ex, ey = _xy(seg.end, s, s)
            q.lineTo(ex, ey)
        elif isinstance(seg, CubicBezier):
            c1x, c1y = _xy(seg.control1, s, s)
            c2x, c2y = _xy(seg.control2, s, s)
            ex, ey = _xy(seg.end, s, s)
            q.cubicTo(c1x, c1y, c2x, c2y, ex, ey)
        elif isinstance(seg, QuadraticBezier):
            cx, cy = _xy(seg.control, s, s)
            ex, ey = _xy(seg.end, s, s)
            q.quadTo(cx, cy, ex, ey)
        else:
            raise TypeError(f"Segmento no soportado: {type(seg).__name__}")

    return q
