"""Графики цикла: по одному PNG на величину + мультиплот.

Ось X — время, по одной числовой величине на график. Результат только читается.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Tuple

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402

from presssim.state import SimulationResult  # noqa: E402

# поле -> (заголовок, единица)
CHARTS: Dict[str, Tuple[str, str]] = {
    "stroke": ("Stroke", "mm"),
    "speed": ("Speed", "mm/s"),
    "flow": ("Flow", "L/min"),
    "pressure": ("Pressure", "bar"),
    "hydraulic_power": ("Hydraulic Power", "kW"),
    "motor_power": ("Motor Power", "kW"),
    "ideal_motor_power": ("Ideal Motor Input Power", "kW"),
    "swashplate_angle": ("Swashplate Angle", "deg"),
}


def plot_cycle(result: SimulationResult, out_dir: str | Path, prefix: str = "cycle") -> List[Path]:
    if len(result) == 0:
        raise ValueError("nothing to plot: simulation result is empty")

    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)

    t = result.column("time")
    written: List[Path] = []

    # 1) по одному PNG на величину
    for name, (title, unit) in CHARTS.items():
        y = result.column(name)
        plt.figure(figsize=(10, 3))
        plt.plot(t, y, linewidth=1)
        plt.title(f"{title} vs Time [{unit}]")
        plt.xlabel("t, s")
        plt.grid(True, alpha=0.3)
        plt.tight_layout()
        path = out / f"{prefix}_{name}.png"
        plt.savefig(path, dpi=150)
        plt.close()
        written.append(path)

    # 2) мультиплот
    n = len(CHARTS)
    cols = 2
    rows = int(np.ceil(n / cols))
    fig, axes = plt.subplots(rows, cols, figsize=(14, 2.2 * rows), sharex=True)
    axes = np.array(axes).reshape(-1)

    for ax, (name, (title, unit)) in zip(axes, CHARTS.items()):
        ax.plot(t, result.column(name), linewidth=0.8)
        ax.set_title(f"{title} [{unit}]")
        ax.grid(True, alpha=0.3)

    for ax in axes[n:]:
        ax.axis("off")

    fig.suptitle(f"{prefix}: press cycle", y=1.002)
    plt.tight_layout()
    path = out / f"{prefix}_ALL.png"
    fig.savefig(path, dpi=150)
    plt.close(fig)
    written.append(path)

    return written
