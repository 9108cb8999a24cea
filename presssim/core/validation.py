"""presssim.core.validation

Базовые проверки, чтобы ловить физически невозможные значения как можно раньше.
"""

from __future__ import annotations

import math
import numbers


def ensure_finite(value: float, name: str) -> None:
    # bool является подклассом int; строки из JSON не должны проходить через float()
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValueError(f"{name} must be a real number, got {value!r}")
    if not math.isfinite(float(value)):
        raise ValueError(f"{name} must be a finite number, got {value}")


def ensure_non_negative(value: float, name: str) -> None:
    ensure_finite(value, name)
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")


def ensure_positive(value: float, name: str) -> None:
    ensure_finite(value, name)
    if value <= 0:
        raise ValueError(f"{name} must be > 0, got {value}")


def clamp(x: float, lo: float, hi: float) -> float:
    return float(max(lo, min(hi, x)))
