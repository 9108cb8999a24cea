"""Параметры одного цикла пресса.

Модуль data-only: замороженные dataclass'ы, которые прогон получает как снимок.
Здесь проверяется только «здравый смысл» отдельных полей (конечность, знак).
Кросс-проверки (шток vs поршень, длительности фаз, КПД) делает движок перед прогоном,
чтобы отказ был типизированным (см. presssim.core.errors).

Единицы — как в цеху:
- bore: см, rod: мм;
- нагрузки: тонны;
- скорость: мм/с, ход: мм, время: с;
- system_losses: бар.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Literal, Tuple

from presssim.core.validation import ensure_finite, ensure_non_negative, ensure_positive


def _store_floats(obj: object, *names: str) -> None:
    """Привести уже проверенные поля к float (numpy-скаляры, int из JSON)."""

    for name in names:
        object.__setattr__(obj, name, float(getattr(obj, name)))


PhaseName = Literal["fast_down", "working", "holding", "fast_up"]

PHASE_ORDER: Tuple[PhaseName, ...] = ("fast_down", "working", "holding", "fast_up")


@dataclass(frozen=True)
class MotorSystemParams:
    motor_rpm: int = 1800
    pump_efficiency: float = 0.9
    system_losses: float = 10.0  # bar

    def __post_init__(self) -> None:
        ensure_positive(self.motor_rpm, "motor_rpm")
        if isinstance(self.motor_rpm, bool) or int(self.motor_rpm) != self.motor_rpm:
            raise ValueError(f"motor_rpm must be an integer, got {self.motor_rpm}")
        ensure_finite(self.pump_efficiency, "pump_efficiency")
        ensure_non_negative(self.system_losses, "system_losses")
        object.__setattr__(self, "motor_rpm", int(self.motor_rpm))
        _store_floats(self, "pump_efficiency", "system_losses")


@dataclass(frozen=True)
class CylinderParams:
    bore: float = 25.0          # cm
    rod: float = 60.0           # mm
    dead_load: float = 2.0      # ton
    holding_load: float = 8.0   # ton

    def __post_init__(self) -> None:
        ensure_finite(self.bore, "bore")
        ensure_finite(self.rod, "rod")
        ensure_non_negative(self.dead_load, "dead_load")
        ensure_non_negative(self.holding_load, "holding_load")
        _store_floats(self, "bore", "rod", "dead_load", "holding_load")


@dataclass(frozen=True)
class CyclePhaseParams:
    speed: float   # mm/s
    stroke: float  # mm
    time: float    # s

    def __post_init__(self) -> None:
        ensure_non_negative(self.speed, "speed")
        ensure_non_negative(self.stroke, "stroke")
        ensure_finite(self.time, "time")
        _store_floats(self, "speed", "stroke", "time")


@dataclass(frozen=True)
class HoldingPhaseParams:
    """Выдержка: ход не меняется, задаётся только время."""

    time: float = 1.0

    def __post_init__(self) -> None:
        ensure_finite(self.time, "time")
        _store_floats(self, "time")


@dataclass(frozen=True)
class CyclePhases:
    fast_down: CyclePhaseParams = CyclePhaseParams(speed=200.0, stroke=300.0, time=2.0)
    working: CyclePhaseParams = CyclePhaseParams(speed=3.0, stroke=100.0, time=4.0)
    holding: HoldingPhaseParams = HoldingPhaseParams(time=1.0)
    fast_up: CyclePhaseParams = CyclePhaseParams(speed=200.0, stroke=400.0, time=2.0)

    def durations(self) -> Dict[str, float]:
        return {name: float(getattr(self, name).time) for name in PHASE_ORDER}

    @property
    def total_cycle_time(self) -> float:
        return float(sum(self.durations().values()))


@dataclass(frozen=True)
class SimulationParams:
    """Снимок всех трёх групп параметров для одного прогона."""

    motor: MotorSystemParams = field(default_factory=MotorSystemParams)
    cylinder: CylinderParams = field(default_factory=CylinderParams)
    phases: CyclePhases = field(default_factory=CyclePhases)


# Заводские значения пресса (совпадают с тем, что видит оператор при первом запуске).
DEFAULT_PARAMS = SimulationParams()
