"""presssim.core.units

Минимальный слой единиц измерения для пресса.

Принцип: параметры приходят в «цеховых» единицах (см, мм, тонны, бар, л/мин),
внутри формул площади считаются в м², силы в Н. Переводы — только через эти множители.
"""

from __future__ import annotations

import math

# Base units (conceptual SI multipliers)
METER: float = 1.0
KILOGRAM: float = 1.0
SECOND: float = 1.0

# Length
CM: float = 1e-2 * METER
MM: float = 1e-3 * METER

# Mass / force
TON: float = 1000.0 * KILOGRAM
G: float = 9.81 * METER / (SECOND**2)

# Pressure: bar -> Pa
PA_PER_BAR: float = 1e5

# Flow: m^3/s -> L/min
LPM_PER_M3_S: float = 60.0 * 1000.0

# bar * L/min -> kW  (1e5 Pa * 1e-3/60 m^3/s = 1/600 kW)
BAR_LPM_PER_KW: float = 600.0


def circle_area(diameter_m: float) -> float:
    """Площадь круга по диаметру (м²)."""

    r = float(diameter_m) / 2.0
    return math.pi * r * r
