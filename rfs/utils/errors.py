# File: rfs/utils/errors.py
# Project: RusticFormasSvg (RFS)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Errores tipados del proyecto.
# Notes: Los constructores de formas sólo lanzan RfsGeometryError.
from __future__ import annotations


class RfsError(Exception):
    """Error base del proyecto."""


class RfsValidationError(RfsError):
    """Error de validación (input/archivo/estructura)."""


class RfsGeometryError(RfsValidationError):
    """Parámetro geométrico inválido (no finito, no positivo o inconsistente)."""


class RfsIOError(RfsError):
    """Error de E/S (lectura/escritura)."""
