"""Экспорт результата прогона: DataFrame, CSV-таблица, payload для ML-сервиса.

Ничего здесь не мутирует SimulationResult: только читает точки.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

import pandas as pd

from presssim.config.models import SimulationParams
from presssim.state import NUMERIC_FIELDS, SimulationResult
from presssim.summary import CycleSummary, summarize

# Колонки CSV -> поле точки (порядок колонок фиксирован).
CSV_COLUMNS: Dict[str, str] = {
    "Time": "time",
    "Stroke": "stroke",
    "Speed": "speed",
    "Flow": "flow",
    "Pressure": "pressure",
    "HydraulicPower": "hydraulic_power",
    "MotorPower": "motor_power",
    "IdealMotorPower": "ideal_motor_power",
    "SwashplateAngle": "swashplate_angle",
}

# Имена полей точки в payload (так их ждёт сервис классификации).
PAYLOAD_SAMPLE_KEYS: Dict[str, str] = {
    "time": "time",
    "stroke": "stroke",
    "speed": "speed",
    "flow": "flow",
    "pressure": "pressure",
    "hydraulic_power": "hydraulicPower",
    "motor_power": "motorPower",
    "ideal_motor_power": "idealMotorPower",
    "swashplate_angle": "swashplateAngle",
}


def to_dataframe(result: SimulationResult, *, include_phase: bool = False) -> pd.DataFrame:
    df = pd.DataFrame({col: result.column(name) for col, name in CSV_COLUMNS.items()})
    if include_phase:
        df["Phase"] = list(result.phases())
    return df


def format_csv(result: SimulationResult) -> str:
    """Текстовая таблица Time,Stroke,...,SwashplateAngle с двумя знаками после запятой."""

    return to_dataframe(result).to_csv(index=False, float_format="%.2f", lineterminator="\n")


def write_csv(result: SimulationResult, path: str | Path) -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(format_csv(result), encoding="utf-8")
    return p


def _sample_records(result: SimulationResult) -> List[Dict[str, float]]:
    return [
        {PAYLOAD_SAMPLE_KEYS[name]: float(getattr(p, name)) for name in NUMERIC_FIELDS}
        for p in result
    ]


def build_ml_payload(
    params: SimulationParams,
    result: SimulationResult,
    summary: CycleSummary | None = None,
) -> Dict[str, Any]:
    """JSON-совместимый payload для внешнего сервиса аномалий/классификации.

    Содержит полный набор параметров, максимумы и весь сырой ряд.
    """

    if summary is None:
        summary = summarize(result)

    ph = params.phases
    return {
        "bore_cm": params.cylinder.bore,
        "rod_mm": params.cylinder.rod,
        "dead_load_ton": params.cylinder.dead_load,
        "hold_load_ton": params.cylinder.holding_load,
        "motor_rpm": params.motor.motor_rpm,
        "pump_eff": params.motor.pump_efficiency,
        "system_loss_bar": params.motor.system_losses,
        "fast_down": {"speed": ph.fast_down.speed, "stroke": ph.fast_down.stroke, "time": ph.fast_down.time},
        "working": {"speed": ph.working.speed, "stroke": ph.working.stroke, "time": ph.working.time},
        "holding": {"time": ph.holding.time},
        "fast_up": {"speed": ph.fast_up.speed, "stroke": ph.fast_up.stroke, "time": ph.fast_up.time},
        "max_pressure_bar": summary.max_pressure,
        "max_flow_lpm": summary.max_flow,
        "max_speed_mms": summary.max_speed,
        "max_power_kw": summary.max_motor_power,
        "simulation_data": _sample_records(result),
    }


def write_ml_payload(payload: Dict[str, Any], path: str | Path) -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
    return p
