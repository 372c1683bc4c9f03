"""Geometry helpers.

Shape constructors build `svgelements.Path` objects from plain scalar
dimensions; no rendering happens here. Adapters to other path types live
under `rfs.svg`.
"""

from __future__ import annotations
