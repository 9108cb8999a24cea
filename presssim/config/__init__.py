"""Конфиги пресса.

- `presssim.config.models` — замороженные параметры прогона;
- `presssim.config.io` — чтение/запись этих параметров в JSON.
"""

from __future__ import annotations

from .io import load_params, params_from_dict, params_to_dict, save_params
from .models import (
    DEFAULT_PARAMS,
    PHASE_ORDER,
    CyclePhaseParams,
    CyclePhases,
    CylinderParams,
    HoldingPhaseParams,
    MotorSystemParams,
    PhaseName,
    SimulationParams,
)

__all__ = [
    "MotorSystemParams",
    "CylinderParams",
    "CyclePhaseParams",
    "HoldingPhaseParams",
    "CyclePhases",
    "SimulationParams",
    "PhaseName",
    "PHASE_ORDER",
    "DEFAULT_PARAMS",
    "load_params",
    "save_params",
    "params_from_dict",
    "params_to_dict",
]
