# File: rfs/core/settings.py
# Project: RusticFormasSvg (RFS)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Defaults por proyecto (rfs_settings.json) aplicados vía variables de entorno.
# Notes: No depende de Qt. Los constructores de formas no leen settings (son puros).
from __future__ import annotations

import json
import logging
import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from rfs.core.version import DEFAULT_EXPORT_MARGIN_MM, DEFAULT_EXPORT_STROKE_MM

log = logging.getLogger(__name__)


# ------------------------------
# Project settings (repo-local)
# ------------------------------
# Archivo esperado: rfs_settings.json en la raíz del proyecto (o en un padre del CWD).
PROJECT_SETTINGS_FILENAME = "rfs_settings.json"

ENV_EXPORT_MARGIN = "RFS_EXPORT_MARGIN_MM"
ENV_EXPORT_STROKE = "RFS_EXPORT_STROKE_MM"
ENV_LOG_LEVEL = "RFS_LOG_LEVEL"


def find_project_settings_path(start: Path | None = None) -> Path | None:
    """Busca rfs_settings.json subiendo desde start (o CWD)."""
    start = (start or Path.cwd()).resolve()
    for p in (start, *start.parents):
        candidate = p / PROJECT_SETTINGS_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_project_settings(start: Path | None = None, *, logger: logging.Logger | None = None) -> Dict[str, Any]:
    """Carga el JSON de project settings. Devuelve {} si no existe o es inválido."""
    _log = logger or log
    p = find_project_settings_path(start)
    if not p:
        return {}
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
        return data if isinstance(data, dict) else {}
    except (OSError, ValueError) as e:
        _log.warning("No se pudo leer %s: %s", p, e)
        return {}


def _deep_get(d: Dict[str, Any], path: str, default: Any = None) -> Any:
    cur: Any = d
    for part in path.split("."):
        if not isinstance(cur, dict) or part not in cur:
            return default
        cur = cur[part]
    return cur


def apply_project_settings(
    start: Path | None = None,
    *,
    logger: logging.Logger | None = None,
    prefer_env: bool = True,
) -> Dict[str, Any]:
    """Carga rfs_settings.json (si existe) y aplica overrides vía variables de entorno.

    - Si `prefer_env=True`, una env var ya seteada NO se pisa (ganan los overrides manuales).
    - Si `prefer_env=False`, el JSON pisa la env var.

    Devuelve un dict con los valores *aplicados desde JSON* (útil para logging/debug).
    """
    _log = logger or log
    data = load_project_settings(start, logger=_log)
    if not data:
        return {}

    applied: Dict[str, Any] = {}

    def _set_env(key: str, value: Any) -> None:
        if prefer_env and os.environ.get(key):
            return
        os.environ[key] = str(value)

    margin = _deep_get(data, "export.margin_mm")
    if isinstance(margin, (int, float)) and not isinstance(margin, bool):
        if 0.0 <= float(margin) <= 1000.0:
            applied["export.margin_mm"] = float(margin)
            _set_env(ENV_EXPORT_MARGIN, float(margin))
        else:
            _log.warning("export.margin_mm fuera de rango: %s", margin)

    stroke = _deep_get(data, "export.stroke_width_mm")
    if isinstance(stroke, (int, float)) and not isinstance(stroke, bool):
        if 0.0 < float(stroke) <= 50.0:
            applied["export.stroke_width_mm"] = float(stroke)
            _set_env(ENV_EXPORT_STROKE, float(stroke))
        else:
            _log.warning("export.stroke_width_mm fuera de rango: %s", stroke)

    level = _deep_get(data, "log.level")
    if isinstance(level, str):
        level = level.strip().upper()
        if level in ("DEBUG", "INFO", "WARNING", "ERROR"):
            applied["log.level"] = level
            _set_env(ENV_LOG_LEVEL, level)

    if applied:
        _log.info("Project settings aplicados: %s", applied)
    return applied


@dataclass(frozen=True)
class ExportDefaults:
    margin_mm: float = DEFAULT_EXPORT_MARGIN_MM
    stroke_width_mm: float = DEFAULT_EXPORT_STROKE_MM


def _env_float(key: str, default: float, *, minimum: float, allow_min: bool) -> float:
    raw = os.environ.get(key)
    if not raw:
        return default
    try:
        v = float(raw)
    except ValueError:
        log.warning("%s inválido (%r); se usa %s", key, raw, default)
        return default
    if not math.isfinite(v) or v < minimum or (v == minimum and not allow_min):
        log.warning("%s fuera de rango (%r); se usa %s", key, raw, default)
        return default
    return v


def export_defaults() -> ExportDefaults:
    """Defaults de export leídos de env vars (ver apply_project_settings)."""
    return ExportDefaults(
        margin_mm=_env_float(ENV_EXPORT_MARGIN, DEFAULT_EXPORT_MARGIN_MM, minimum=0.0, allow_min=True),
        stroke_width_mm=_env_float(ENV_EXPORT_STROKE, DEFAULT_EXPORT_STROKE_MM, minimum=0.0, allow_min=False),
    )
