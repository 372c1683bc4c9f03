# File: rfs/app.py
# Project: RusticFormasSvg (RFS)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Entry-point de línea de comandos: genera una forma y la exporta a SVG.
# Notes: Códigos de salida: 0 ok, 2 error de validación/E/S.
from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Callable, Dict, List, Optional

from svgelements import Path as SvgPath

from rfs.core.options import coerce_options
from rfs.core.settings import ENV_LOG_LEVEL, apply_project_settings
from rfs.core.version import APP_SHORT, APP_VERSION
from rfs.geom import shapes
from rfs.svg.exporter import export_paths_svg
from rfs.utils.errors import RfsError
from rfs.utils.log import get_logger, parse_level, set_level, setup_logging

log = get_logger(__name__)


def _chain_link(a: argparse.Namespace) -> SvgPath:
    return shapes.chain_link_between((a.x0, a.y0), (a.x1, a.y1))


def _sprocket(a: argparse.Namespace) -> SvgPath:
    return shapes.sprocket(a.pitch, a.teeth)


def _threaded_bar(a: argparse.Namespace) -> SvgPath:
    return shapes.threaded_bar(a.length, a.diameter, a.pitch, coerce_options(a.option))


def _thread_lines(a: argparse.Namespace) -> SvgPath:
    return shapes.thread_lines(a.length, a.diameter, a.pitch)


def _hex_head(a: argparse.Namespace) -> SvgPath:
    return shapes.hex_head_side_view(a.height, a.diameter, coerce_options(a.option))


def _bolt(a: argparse.Namespace) -> SvgPath:
    return shapes.bolt(
        a.length,
        a.thread_diameter,
        a.thread_pitch,
        a.head_diameter,
        a.head_height,
        a.shank,
        coerce_options(a.option),
    )


def _crop_marks(a: argparse.Namespace) -> SvgPath:
    rect = (a.x, a.y, a.width, a.height)
    if a.length is None:
        return shapes.crop_marks_default(rect, a.extension)
    return shapes.crop_marks(rect, a.length, a.extension)


_BUILDERS: Dict[str, Callable[[argparse.Namespace], SvgPath]] = {
    "chain-link": _chain_link,
    "sprocket": _sprocket,
    "threaded-bar": _threaded_bar,
    "thread-lines": _thread_lines,
    "hex-head": _hex_head,
    "bolt": _bolt,
    "crop-marks": _crop_marks,
}


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="rfs",
        description="Genera trazados de formas de ingeniería y los exporta a SVG (mm).",
    )
    ap.add_argument("--version", action="version", version=f"{APP_SHORT} {APP_VERSION}")
    ap.add_argument("-o", "--out", default="shape.svg", help="SVG de salida (default: shape.svg)")
    ap.add_argument("--margin", type=float, default=None, help="Margen en mm alrededor de la forma")
    ap.add_argument("--stroke", type=float, default=None, help="Grosor de trazo en mm")
    ap.add_argument("--log-dir", default=None, help="Carpeta para rfs.log (default: sólo consola)")
    ap.add_argument("-v", "--verbose", action="store_true", help="Logging DEBUG")

    sub = ap.add_subparsers(dest="shape", required=True)

    p = sub.add_parser("chain-link", help="Eslabón de cadena entre dos puntos")
    for name in ("x0", "y0", "x1", "y1"):
        p.add_argument(name, type=float)

    p = sub.add_parser("sprocket", help="Piñón para cadena")
    p.add_argument("pitch", type=float)
    p.add_argument("teeth", type=int)

    def _with_options(sp: argparse.ArgumentParser) -> None:
        sp.add_argument(
            "--option",
            action="append",
            default=[],
            metavar="NAME",
            help="Flag de forma (p.ej. left-end-capped, thread-lines-drawn); repetible",
        )

    p = sub.add_parser("threaded-bar", help="Barra roscada")
    p.add_argument("length", type=float)
    p.add_argument("diameter", type=float)
    p.add_argument("pitch", type=float)
    _with_options(p)

    p = sub.add_parser("thread-lines", help="Sólo las líneas de rosca")
    p.add_argument("length", type=float)
    p.add_argument("diameter", type=float)
    p.add_argument("pitch", type=float)

    p = sub.add_parser("hex-head", help="Cabeza hexagonal (vista lateral)")
    p.add_argument("height", type=float)
    p.add_argument("diameter", type=float)
    _with_options(p)

    p = sub.add_parser("bolt", help="Bulón con cabeza")
    p.add_argument("length", type=float)
    p.add_argument("thread_diameter", type=float)
    p.add_argument("thread_pitch", type=float)
    p.add_argument("head_diameter", type=float)
    p.add_argument("head_height", type=float)
    p.add_argument("--shank", type=float, default=0.0, help="Largo sin rosca bajo la cabeza")
    _with_options(p)

    p = sub.add_parser("crop-marks", help="Marcas de corte para un rectángulo")
    for name in ("x", "y", "width", "height"):
        p.add_argument(name, type=float)
    p.add_argument("--length", type=float, default=None, help="Largo de cada marca (default 10)")
    p.add_argument("--extension", type=float, default=0.0, help="Separación desde la esquina")

    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # Logging primero, para que los avisos de settings tengan handler.
    setup_logging(args.log_dir, level=logging.DEBUG if args.verbose else parse_level(os.environ.get(ENV_LOG_LEVEL)))

    # Project-level defaults (repo-local): rfs_settings.json
    apply_project_settings(prefer_env=True)
    if not args.verbose:
        # log.level del proyecto (si no lo pisó el entorno)
        set_level(parse_level(os.environ.get(ENV_LOG_LEVEL)))

    try:
        path = _BUILDERS[args.shape](args)
        out = export_paths_svg(path, args.out, margin_mm=args.margin, stroke_width_mm=args.stroke)
    except (RfsError, ValueError) as e:
        # ValueError: opción desconocida en coerce_options.
        log.error("%s", e)
        return 2

    log.info("%s %s: %s -> %s", APP_SHORT, APP_VERSION, args.shape, out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
