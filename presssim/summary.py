"""Сводка по завершённому ряду: максимумы, средние, КПД, энергия цикла.

Это единственное, что читает отчётный коллаборатор и payload для ML-сервиса.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass

import numpy as np

from presssim.state import SimulationResult


@dataclass(frozen=True)
class CycleSummary:
    max_pressure: float      # bar
    max_flow: float          # L/min
    max_speed: float         # mm/s
    max_motor_power: float   # kW
    avg_motor_power: float   # kW
    efficiency: float        # mean(ideal / motor), 0..1
    cycle_time: float        # s
    energy_kj: float         # энергия мотора за цикл

    def as_dict(self) -> dict:
        return asdict(self)


def mean_efficiency(ideal_kw: np.ndarray, motor_kw: np.ndarray) -> float:
    """Среднее ideal/motor по точкам с motor > 0.

    Точки с нулевой мощностью мотора (выдержка, нулевой расход) исключаются,
    а не дают inf/NaN. Если таких точек нет совсем — 0.0.
    """

    mask = motor_kw > 0.0
    if not np.any(mask):
        return 0.0
    return float(np.mean(ideal_kw[mask] / motor_kw[mask]))


def summarize(result: SimulationResult) -> CycleSummary:
    if len(result) == 0:
        raise ValueError("cannot summarize an empty simulation result")

    t = result.column("time")
    motor = result.column("motor_power")

    # трапеции: кВт * с = кДж
    energy = float(0.5 * np.sum((motor[1:] + motor[:-1]) * np.diff(t))) if len(t) > 1 else 0.0

    return CycleSummary(
        max_pressure=float(np.max(result.column("pressure"))),
        max_flow=float(np.max(result.column("flow"))),
        max_speed=float(np.max(result.column("speed"))),
        max_motor_power=float(np.max(motor)),
        avg_motor_power=float(np.mean(motor)),
        efficiency=mean_efficiency(result.column("ideal_motor_power"), motor),
        cycle_time=float(t[-1]),
        energy_kj=energy,
    )
