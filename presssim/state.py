from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Dict, Iterator, Tuple

import numpy as np

from presssim.config.models import PhaseName


@dataclass(frozen=True, slots=True)
class SimulationDataPoint:
    time: float               # s
    stroke: float             # mm, накопленное положение, >= 0
    speed: float              # mm/s, модуль
    flow: float               # L/min
    pressure: float           # bar, уже с потерями системы
    hydraulic_power: float    # kW
    motor_power: float        # kW
    ideal_motor_power: float  # kW
    swashplate_angle: float   # deg, 0..90
    phase: PhaseName


NUMERIC_FIELDS: Tuple[str, ...] = tuple(f.name for f in fields(SimulationDataPoint) if f.name != "phase")


@dataclass(frozen=True)
class SimulationResult:
    """Упорядоченный ряд точек одного прогона.

    has_run=False — состояние «симуляцию ещё не запускали» (пустой ряд).
    """

    points: Tuple[SimulationDataPoint, ...] = ()
    has_run: bool = False

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[SimulationDataPoint]:
        return iter(self.points)

    def __getitem__(self, idx: int) -> SimulationDataPoint:
        return self.points[idx]

    def column(self, name: str) -> np.ndarray:
        if name not in NUMERIC_FIELDS:
            raise KeyError(f"Unknown sample field: {name}")
        return np.array([getattr(p, name) for p in self.points], dtype=np.float64)

    def phases(self) -> Tuple[PhaseName, ...]:
        return tuple(p.phase for p in self.points)

    def timeline(self) -> Dict[str, np.ndarray]:
        """Все числовые поля как массивы (формат для логгера/графиков)."""

        return {name: self.column(name) for name in NUMERIC_FIELDS}
