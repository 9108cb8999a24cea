"""Генератор ряда одного цикла пресса.

Прогон — чистая функция от снимка параметров: никакого состояния между прогонами,
никакого I/O. Все проверки выполняются до первой точки, частичный ряд не возвращается.
"""

from __future__ import annotations

import logging
import math
from typing import List

from presssim.config.models import SimulationParams
from presssim.core.errors import InvalidEfficiency, InvalidPhaseDuration
from presssim.phases import PhaseTable
from presssim.physics.geometry import CylinderForces, resolve_geometry
from presssim.physics.pump import (
    cylinder_flow_lpm,
    hydraulic_power_kw,
    swashplate_angle_deg,
    swashplate_argument,
)
from presssim.state import SimulationDataPoint, SimulationResult

logger = logging.getLogger(__name__)

TIME_STEP: float = 0.1  # s


def sample_count(total_cycle_time: float, dt: float = TIME_STEP) -> int:
    return int(math.floor(total_cycle_time / dt)) + 1


class CycleSimulator:
    def __init__(self, params: SimulationParams) -> None:
        self.params = params

        motor = params.motor
        if not (0.0 < motor.pump_efficiency <= 1.0):
            raise InvalidEfficiency(f"pump_efficiency must be in (0, 1], got {motor.pump_efficiency}")

        self.forces: CylinderForces = resolve_geometry(params.cylinder)
        self.table: PhaseTable = PhaseTable.from_phases(params.phases)

        self.total_cycle_time = params.phases.total_cycle_time
        if not self.total_cycle_time > 0.0:
            raise InvalidPhaseDuration(f"total cycle time must be > 0 s, got {self.total_cycle_time}")

    def sample(self, t: float) -> SimulationDataPoint:
        motor = self.params.motor
        span, progress = self.table.locate(t)

        speed = span.speed_mm_s
        pressure = self.forces.pressure_for(span.name)
        stroke = max(0.0, span.stroke_at(progress))

        flow = cylinder_flow_lpm(self.forces.area_for(span.name), speed)
        hydraulic = hydraulic_power_kw(pressure + motor.system_losses, flow)

        return SimulationDataPoint(
            time=t,
            stroke=stroke,
            speed=abs(speed),
            flow=flow,
            pressure=pressure + motor.system_losses,
            hydraulic_power=hydraulic,
            motor_power=hydraulic / motor.pump_efficiency,
            ideal_motor_power=hydraulic_power_kw(pressure, flow),
            swashplate_angle=swashplate_angle_deg(flow, motor.motor_rpm),
            phase=span.name,
        )

    def run(self) -> SimulationResult:
        n = sample_count(self.total_cycle_time)
        logger.debug("Simulating press cycle: %.3f s, %d samples", self.total_cycle_time, n)

        points: List[SimulationDataPoint] = []
        saturated = 0
        for i in range(n):
            p = self.sample(i * TIME_STEP)
            if abs(swashplate_argument(p.flow, self.params.motor.motor_rpm)) > 1.0:
                saturated += 1
            points.append(p)

        if saturated:
            logger.warning(
                "Pump saturated in %d/%d samples: demanded flow exceeds rated delivery at %d rpm",
                saturated,
                n,
                self.params.motor.motor_rpm,
            )

        return SimulationResult(points=tuple(points), has_run=True)


def simulate_cycle(params: SimulationParams) -> SimulationResult:
    """Один прогон цикла: снимок параметров -> ряд точек.

    Raises:
        InvalidGeometry, InvalidPhaseDuration, InvalidEfficiency
    """

    return CycleSimulator(params).run()
