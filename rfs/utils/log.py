# File: rfs/utils/log.py
# Project: RusticFormasSvg (RFS)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Logging centralizado (con archivo) y helpers.
# Notes: La librería no configura logging; sólo el CLI llama a setup_logging.
from __future__ import annotations

import logging
import os
from pathlib import Path

_LOGGER_CONFIGURED = False
_HANDLERS: list[logging.Handler] = []


def setup_logging(log_dir: str | os.PathLike | None = "logs", level: int = logging.INFO) -> None:
    """Configura logging en consola + archivo.

    Nota:
        - No lanza excepción si no puede escribir el archivo; cae a consola.
        - `log_dir=None` deja sólo la consola.
    """
    global _LOGGER_CONFIGURED
    if _LOGGER_CONFIGURED:
        return

    logger = logging.getLogger()
    logger.setLevel(level)

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Consola
    ch = logging.StreamHandler()
    ch.setLevel(level)
    ch.setFormatter(fmt)
    logger.addHandler(ch)
    _HANDLERS.append(ch)

    # Archivo
    if log_dir is not None:
        try:
            d = Path(log_dir)
            d.mkdir(parents=True, exist_ok=True)
            fh = logging.FileHandler(d / "rfs.log", encoding="utf-8")
            fh.setLevel(level)
            fh.setFormatter(fmt)
            logger.addHandler(fh)
            _HANDLERS.append(fh)
        except OSError as e:
            logging.getLogger(__name__).warning("No se pudo inicializar FileHandler: %s", e)

    _LOGGER_CONFIGURED = True


def parse_level(value: object, default: int = logging.INFO) -> int:
    """Traduce "debug"/"INFO"/20 a un nivel de logging; si no se reconoce, `default`."""
    if isinstance(value, int):
        return value
    name = str(value or "").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else default


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def set_level(level: int) -> None:
    """Cambia el nivel del root logger y de los handlers de setup_logging (p.ej. tras leer rfs_settings.json)."""
    logging.getLogger().setLevel(level)
    for h in _HANDLERS:
        h.setLevel(level)
