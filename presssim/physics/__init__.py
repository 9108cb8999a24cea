"""Пакет физики пресса (геометрия цилиндра, соотношения насоса)."""

from __future__ import annotations

from .geometry import CylinderForces, resolve_geometry

__all__ = [
    "CylinderForces",
    "resolve_geometry",
]
