"""Геометрия цилиндра пресса и базовые давления фаз.

Считается один раз на прогон:
- площадь поршня A и штока Ar -> площадь штоковой полости Aret = A - Ar;
- силы от «мёртвого» груза (оснастка/ползун) и от усилия выдержки;
- базовые давления по фазам.

Единицы:
- Площадь: м²
- Сила: Н
- Давление: бар

Квазистатика: в медленных перемещениях давление в линии определяется нагрузкой,
поэтому давление фазы — константа. На ход вниз работает поршневая полость, на ход
вверх — штоковая, отсюда разные эффективные площади.
"""

from __future__ import annotations

from dataclasses import dataclass

from presssim.config.models import CylinderParams, PhaseName
from presssim.core.errors import InvalidGeometry
from presssim.core.units import CM, G, MM, PA_PER_BAR, TON, circle_area


@dataclass(frozen=True)
class CylinderForces:
    area_piston_m2: float
    area_rod_m2: float
    area_return_m2: float

    force_dead_N: float
    force_hold_N: float

    p_dead_bar: float
    p_hold_bar: float
    p_up_bar: float

    def pressure_for(self, phase: PhaseName) -> float:
        """Базовое давление фазы (бар), без потерь системы."""

        if phase == "fast_down":
            return self.p_dead_bar
        if phase in ("working", "holding"):
            return self.p_hold_bar
        if phase == "fast_up":
            return self.p_up_bar
        raise ValueError(f"Unknown cycle phase: {phase}")

    def area_for(self, phase: PhaseName) -> float:
        """Площадь, объём под которой вытесняется в фазе (м²)."""

        if phase == "fast_up":
            return self.area_return_m2
        if phase in ("fast_down", "working", "holding"):
            return self.area_piston_m2
        raise ValueError(f"Unknown cycle phase: {phase}")


def resolve_geometry(cyl: CylinderParams) -> CylinderForces:
    """Площади, силы и давления фаз для заданного цилиндра.

    Raises:
        InvalidGeometry: диаметр поршня <= 0, отрицательный шток
            или шток не меньше поршня (Aret <= 0).
    """

    if cyl.bore <= 0.0:
        raise InvalidGeometry(f"bore must be > 0 cm, got {cyl.bore}")
    if cyl.rod < 0.0:
        raise InvalidGeometry(f"rod must be >= 0 mm, got {cyl.rod}")

    A = circle_area(cyl.bore * CM)
    Ar = circle_area(cyl.rod * MM)
    Aret = A - Ar
    if Aret <= 0.0:
        raise InvalidGeometry(
            f"rod ({cyl.rod} mm) must be smaller than bore ({cyl.bore} cm): return area {Aret:.3e} m^2"
        )

    F_dead = float(cyl.dead_load) * TON * G
    F_hold = float(cyl.holding_load) * TON * G

    return CylinderForces(
        area_piston_m2=A,
        area_rod_m2=Ar,
        area_return_m2=Aret,
        force_dead_N=F_dead,
        force_hold_N=F_hold,
        p_dead_bar=F_dead / (A * PA_PER_BAR),
        p_hold_bar=F_hold / (A * PA_PER_BAR),
        p_up_bar=F_dead / (Aret * PA_PER_BAR),
    )
