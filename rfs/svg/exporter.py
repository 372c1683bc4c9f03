# File: rfs/svg/exporter.py
# Project: RusticFormasSvg (RFS)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Export SVG en mm (contours-only) de uno o más trazados de formas.
# Notes: El viewBox se ajusta a la bbox geométrica (sin stroke) + margen.
from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Iterable, Sequence, Tuple
from xml.etree.ElementTree import Element, SubElement, tostring

from svgelements import Path as SvgPath

from rfs.core.settings import export_defaults
from rfs.core.version import APP_NAME, APP_VERSION
from rfs.geom.bbox import BBoxXYXY, union_bbox
from rfs.utils.errors import RfsIOError, RfsValidationError

log = logging.getLogger(__name__)


def _fmt(v: float) -> str:
    return f"{v:.6g}"


def _viewbox_outward(x0: float, y0: float, w: float, h: float) -> Tuple[str, str, str, str]:
    """viewBox con 6 cifras significativas, redondeado hacia afuera (origen floor, extremo ceil)."""
    span = max(abs(x0), abs(y0), abs(x0 + w), abs(y0 + h))
    exp = math.floor(math.log10(span)) - 5 if span > 0 else -6
    q = 10.0 ** exp
    tol = 1e-6  # ruido de coma flotante, en unidades de q
    vx0 = math.floor(x0 / q + tol)
    vy0 = math.floor(y0 / q + tol)
    vx1 = math.ceil((x0 + w) / q - tol)
    vy1 = math.ceil((y0 + h) / q - tol)
    dec = max(0, -exp)

    def s(n: int) -> str:
        t = f"{n * q:.{dec}f}"
        return t.rstrip("0").rstrip(".") if "." in t else t

    return s(vx0), s(vy0), s(vx1 - vx0), s(vy1 - vy0)


def build_svg_element(
    paths: Sequence[SvgPath],
    *,
    margin_mm: float | None = None,
    stroke_width_mm: float | None = None,
) -> Element:
    """Arma el árbol <svg> (sin escribir a disco).

    Lanza RfsValidationError si no hay geometría (lista vacía o trazados vacíos).
    """
    defaults = export_defaults()
    margin = defaults.margin_mm if margin_mm is None else float(margin_mm)
    stroke = defaults.stroke_width_mm if stroke_width_mm is None else float(stroke_width_mm)
    if margin < 0:
        raise RfsValidationError(f"Margen inválido: {margin}")
    if stroke <= 0:
        raise RfsValidationError(f"Grosor de trazo inválido: {stroke}")

    drawn = [p for p in paths if p is not None and len(p) > 0]
    bb: BBoxXYXY | None = union_bbox(drawn)
    if bb is None:
        raise RfsValidationError("No hay geometría para exportar.")

    vb = bb.inflate(margin)
    # Una forma degenerada (p.ej. un solo tick de crop mark sin margen) tiene ancho 0.
    w = max(vb.w, stroke)
    h = max(vb.h, stroke)

    vx, vy, vw, vh = _viewbox_outward(vb.x0, vb.y0, w, h)

    svg = Element(
        "svg",
        {
            "xmlns": "http://www.w3.org/2000/svg",
            "version": "1.1",
            "width": f"{vw}mm",
            "height": f"{vh}mm",
            "viewBox": f"{vx} {vy} {vw} {vh}",
        },
    )
    SubElement(svg, "desc").text = f"{APP_NAME} {APP_VERSION}"

    # Regla dura (contornos-only): no rellenar.
    g = SubElement(
        svg,
        "g",
        {"id": "RFS_EXPORT", "fill": "none", "stroke": "black", "stroke-width": _fmt(stroke)},
    )
    for i, p in enumerate(drawn):
        SubElement(g, "path", {"id": f"shape{i}", "d": p.d()})
    return svg


def export_paths_svg(
    paths: Iterable[SvgPath] | SvgPath,
    out_path: str | Path,
    *,
    margin_mm: float | None = None,
    stroke_width_mm: float | None = None,
) -> Path:
    """Exporta uno o más trazados a un SVG en mm y devuelve el Path escrito."""
    if isinstance(paths, SvgPath):
        paths = [paths]
    svg = build_svg_element(list(paths), margin_mm=margin_mm, stroke_width_mm=stroke_width_mm)

    p = Path(out_path)
    if p.suffix.lower() != ".svg":
        p = p.with_suffix(".svg")

    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        xml = tostring(svg, encoding="unicode")
        p.write_text(xml, encoding="utf-8")
    except OSError as e:
        raise RfsIOError(f"No se pudo exportar SVG: {p}") from e
    log.info("SVG exportado: %s", p)
    return p
