"""Чтение/запись параметров пресса в JSON.

Формат файла:

    {
      "motor": {"motor_rpm": 1800, "pump_efficiency": 0.9, "system_losses": 10},
      "cylinder": {"bore": 25, "rod": 60, "dead_load": 2, "holding_load": 8},
      "phases": {
        "fast_down": {"speed": 200, "stroke": 300, "time": 2},
        "working": {"speed": 3, "stroke": 100, "time": 4},
        "holding": {"time": 1},
        "fast_up": {"speed": 200, "stroke": 400, "time": 2}
      }
    }

Отсутствующие ключи берутся из DEFAULT_PARAMS, неизвестные ключи — ошибка
(опечатка в имени поля не должна молча превращаться в дефолт).
"""

from __future__ import annotations

import json
from dataclasses import asdict, fields, replace
from pathlib import Path
from typing import Any, Mapping

from .models import (
    DEFAULT_PARAMS,
    CyclePhaseParams,
    CyclePhases,
    CylinderParams,
    HoldingPhaseParams,
    MotorSystemParams,
    SimulationParams,
)


def _merge(default: Any, data: Mapping[str, Any] | None, section: str) -> Any:
    if data is None:
        return default
    if not isinstance(data, Mapping):
        raise ValueError(f"{section}: expected an object, got {type(data).__name__}")

    known = {f.name for f in fields(default)}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"{section}: unknown keys {sorted(unknown)}")
    return replace(default, **dict(data))


def params_from_dict(data: Mapping[str, Any]) -> SimulationParams:
    unknown = set(data) - {"motor", "cylinder", "phases"}
    if unknown:
        raise ValueError(f"unknown sections {sorted(unknown)}")

    d = DEFAULT_PARAMS
    motor: MotorSystemParams = _merge(d.motor, data.get("motor"), "motor")
    cylinder: CylinderParams = _merge(d.cylinder, data.get("cylinder"), "cylinder")

    phases_raw = data.get("phases") or {}
    if not isinstance(phases_raw, Mapping):
        raise ValueError("phases: expected an object")
    unknown = set(phases_raw) - {f.name for f in fields(CyclePhases)}
    if unknown:
        raise ValueError(f"phases: unknown keys {sorted(unknown)}")

    fast_down: CyclePhaseParams = _merge(d.phases.fast_down, phases_raw.get("fast_down"), "phases.fast_down")
    working: CyclePhaseParams = _merge(d.phases.working, phases_raw.get("working"), "phases.working")
    holding: HoldingPhaseParams = _merge(d.phases.holding, phases_raw.get("holding"), "phases.holding")
    fast_up: CyclePhaseParams = _merge(d.phases.fast_up, phases_raw.get("fast_up"), "phases.fast_up")

    return SimulationParams(
        motor=motor,
        cylinder=cylinder,
        phases=CyclePhases(fast_down=fast_down, working=working, holding=holding, fast_up=fast_up),
    )


def params_to_dict(params: SimulationParams) -> dict:
    return asdict(params)


def load_params(path: str | Path) -> SimulationParams:
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: top-level JSON value must be an object")
    return params_from_dict(raw)


def save_params(params: SimulationParams, path: str | Path) -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(params_to_dict(params), ensure_ascii=False, indent=2), encoding="utf-8")
    return p
