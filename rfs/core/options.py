# File: rfs/core/options.py
# Project: RusticFormasSvg (RFS)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Flags de opciones para barras roscadas, bulones y cabezas hexagonales.
# Notes: Los valores de bit son estables (se guardan como int en settings/CLI).

from __future__ import annotations

from enum import IntFlag
from typing import Iterable


class ShapeOption(IntFlag):
    """Opciones combinables con `|`.

    - LEFT_END_CAPPED / RIGHT_END_CAPPED: chaflán en ese extremo de la barra.
    - THREAD_LINES_DRAWN: agrega las líneas de rosca (subpaths abiertos).
    - CENTRE_LINE: agrega la línea de eje del sujetador.
    - HAS_CAP_HEAD: cabeza cilíndrica (tipo Allen) en lugar de hexagonal.
    - HEX_FACE_CURVES_DRAWN: curvas de chaflán en las caras del hexágono.

    Cada constructor ignora los flags que no consume.
    """

    NONE = 0
    LEFT_END_CAPPED = 1 << 0
    RIGHT_END_CAPPED = 1 << 1
    THREAD_LINES_DRAWN = 1 << 2
    CENTRE_LINE = 1 << 3
    HAS_CAP_HEAD = 1 << 4
    HEX_FACE_CURVES_DRAWN = 1 << 5


# Alias con los nombres del toolkit original de trazados (camel case).
_ALIASES = {
    "leftendcapped": ShapeOption.LEFT_END_CAPPED,
    "rightendcapped": ShapeOption.RIGHT_END_CAPPED,
    "threadlinesdrawn": ShapeOption.THREAD_LINES_DRAWN,
    "centreline": ShapeOption.CENTRE_LINE,
    "centerline": ShapeOption.CENTRE_LINE,
    "hascaphead": ShapeOption.HAS_CAP_HEAD,
    "hexfacecurvesdrawn": ShapeOption.HEX_FACE_CURVES_DRAWN,
}


def _option_from_name(name: str) -> ShapeOption:
    key = name.strip().lower().replace("-", "").replace("_", "")
    try:
        return _ALIASES[key]
    except KeyError:
        raise ValueError(f"Opción desconocida: {name!r}") from None


def coerce_options(v: object) -> ShapeOption:
    """Normaliza int / ShapeOption / nombre / iterable de nombres a ShapeOption.

    Un nombre desconocido o un bit fuera de rango lanza ValueError.
    """
    if v is None:
        return ShapeOption.NONE
    if isinstance(v, ShapeOption):
        return v
    if isinstance(v, bool):
        raise ValueError(f"Opciones inválidas: {v!r}")
    if isinstance(v, int):
        if v < 0 or v & ~int(_all_options()):
            raise ValueError(f"Bits de opción fuera de rango: {v:#x}")
        return ShapeOption(v)
    if isinstance(v, str):
        parts: Iterable[str] = [p for p in v.replace("|", ",").split(",") if p.strip()]
    else:
        parts = v  # type: ignore[assignment]

    out = ShapeOption.NONE
    for p in parts:
        out |= coerce_options(p) if not isinstance(p, str) else _option_from_name(p)
    return out


def _all_options() -> ShapeOption:
    out = ShapeOption.NONE
    for m in ShapeOption:
        out |= m
    return out
