"""Core utilities: units, validation, errors."""

from __future__ import annotations

__all__ = [
    "units",
    "validation",
    "errors",
]
