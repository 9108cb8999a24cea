"""Соотношения насоса: расход, мощности, угол наклонной шайбы.

Все функции скалярные и чистые; генератор вызывает их на каждом шаге.
"""

from __future__ import annotations

import math

from presssim.core.units import BAR_LPM_PER_KW, LPM_PER_M3_S, MM
from presssim.core.validation import clamp

# Характеристика насоса: максимальный угол шайбы и коэффициент «недогруза».
SWASHPLATE_MAX_DEG: float = 25.0
SWASHPLATE_DERATING: float = 0.95


def cylinder_flow_lpm(area_m2: float, speed_mm_s: float) -> float:
    """Расход, вытесняемый площадью area при скорости штока (л/мин)."""

    return float(area_m2) * abs(float(speed_mm_s) * MM) * LPM_PER_M3_S


def hydraulic_power_kw(pressure_bar: float, flow_lpm: float) -> float:
    return float(pressure_bar) * float(flow_lpm) / BAR_LPM_PER_KW


def swashplate_argument(flow_lpm: float, motor_rpm: float) -> float:
    """Аргумент arcsin до clamp'а; |arg| > 1 означает насыщение насоса."""

    return (
        float(flow_lpm)
        * 1000.0
        * math.sin(math.radians(SWASHPLATE_MAX_DEG))
        / (SWASHPLATE_MAX_DEG * SWASHPLATE_DERATING * float(motor_rpm))
    )


def swashplate_angle_deg(flow_lpm: float, motor_rpm: float) -> float:
    """Угол шайбы (градусы, модуль, 0..90).

    Если требуемый расход больше паспортной подачи, аргумент arcsin выходит за [-1, 1];
    это штатное насыщение насоса, поэтому clamp, а не ошибка.
    """

    arg = clamp(swashplate_argument(flow_lpm, motor_rpm), -1.0, 1.0)
    return abs(math.degrees(math.asin(arg)))
