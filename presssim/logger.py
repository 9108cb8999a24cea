from __future__ import annotations

from dataclasses import dataclass
from typing import Dict
from pathlib import Path
import json
import h5py
import numpy as np

from .config.io import params_to_dict
from .config.models import SimulationParams
from .state import SimulationResult
from .summary import CycleSummary, summarize


@dataclass
class CycleMeta:
    cycle_id: int
    label: str
    n_samples: int
    total_cycle_time_s: float
    params: Dict
    summary: Dict[str, float]


class CycleLogger:
    """Журнал прогонов: dataset.h5 (ряды) + cycles_meta.jsonl (параметры и сводки)."""

    def __init__(self, out_dir: str | Path, mode: str = "w"):
        self.out_dir = Path(out_dir)
        self.out_dir.mkdir(parents=True, exist_ok=True)

        self.h5_path = self.out_dir / "dataset.h5"
        self.meta_path = self.out_dir / "cycles_meta.jsonl"

        self.h5 = h5py.File(self.h5_path, mode)
        self.grp = self.h5.require_group("cycles")
        self._next_id = len(self.grp)

        self._meta_f = open(self.meta_path, "a" if mode == "a" else "w", encoding="utf-8")

    def log_cycle(
        self,
        params: SimulationParams,
        result: SimulationResult,
        label: str = "",
        summary: CycleSummary | None = None,
    ) -> CycleMeta:
        if not result.has_run:
            raise ValueError("refusing to log a simulation result that has not been run")
        if summary is None:
            summary = summarize(result)

        meta = CycleMeta(
            cycle_id=self._next_id,
            label=label,
            n_samples=len(result),
            total_cycle_time_s=params.phases.total_cycle_time,
            params=params_to_dict(params),
            summary=summary.as_dict(),
        )

        cid = f"cycle_{meta.cycle_id:06d}"
        g = self.grp.create_group(cid)

        try:
            self._fill_group(g, meta, result)
        except Exception:
            # недописанная группа заняла бы имя cycle_NNNNNN для следующего вызова
            del self.grp[cid]
            raise

        self._meta_f.write(json.dumps(meta.__dict__, ensure_ascii=False) + "\n")
        self._meta_f.flush()

        self._next_id += 1
        return meta

    def _fill_group(self, g: h5py.Group, meta: CycleMeta, result: SimulationResult) -> None:
        for k, arr in result.timeline().items():
            g.create_dataset(k, data=np.asarray(arr, dtype=np.float32), compression="gzip", compression_opts=5)
        g.create_dataset("phase", data=list(result.phases()), dtype=h5py.string_dtype())

        g.attrs["label"] = meta.label
        g.attrs["n_samples"] = meta.n_samples
        g.attrs["total_cycle_time_s"] = meta.total_cycle_time_s
        g.attrs["params_json"] = json.dumps(meta.params, ensure_ascii=False)
        g.attrs["summary_json"] = json.dumps(meta.summary, ensure_ascii=False)

    def close(self):
        self._meta_f.close()
        self.h5.close()

    def __enter__(self) -> "CycleLogger":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
