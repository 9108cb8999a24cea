"""presssim package.

Важно: пакет не должен иметь побочных эффектов при импорте.
Поэтому здесь нет eager-import'ов модулей с тяжёлыми зависимостями
(pandas/h5py/matplotlib подтягиваются только экспортом, логгером и графиками).

Импортируй нужное напрямую:
- from presssim.generator import simulate_cycle
- from presssim.config import SimulationParams
"""

from __future__ import annotations

__all__: list[str] = []
