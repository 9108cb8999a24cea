"""Фазы цикла пресса как упорядоченная таблица с накопленными границами.

FastDown -> Working -> Holding -> FastUp, строго по порядку, без ветвлений.
Границы t1..t4 — накопленные суммы длительностей. Поиск активной фазы —
бинарный поиск по верхним границам, так что таблица не привязана к четырём строкам.

Правило границ:
- фаза активна на полуинтервале [start, end): точка ровно на границе
  принадлежит СЛЕДУЮЩЕЙ фазе (t=0 -> fast_down, t=t1 -> working);
- последняя фаза включает конец цикла;
- время за концом цикла остаётся в последней фазе с progress=1.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

from presssim.config.models import PHASE_ORDER, CyclePhases, PhaseName
from presssim.core.errors import InvalidPhaseDuration


@dataclass(frozen=True)
class PhaseSpan:
    name: PhaseName
    start_s: float
    end_s: float

    speed_mm_s: float        # со знаком: < 0 — ход вверх
    stroke_start_mm: float   # накопленный ход на входе в фазу
    stroke_delta_mm: float   # смещение за фазу (со знаком)

    @property
    def duration_s(self) -> float:
        return self.end_s - self.start_s

    def progress(self, t: float) -> float:
        """Доля пройденной фазы в [0, 1]."""

        p = (float(t) - self.start_s) / self.duration_s
        return max(0.0, min(1.0, p))

    def stroke_at(self, progress: float) -> float:
        return self.stroke_start_mm + self.stroke_delta_mm * float(progress)


class PhaseTable:
    def __init__(self, spans: Sequence[PhaseSpan]) -> None:
        spans = tuple(spans)
        if not spans:
            raise InvalidPhaseDuration("phase table must contain at least one phase")
        for span in spans:
            if not span.duration_s > 0.0:
                raise InvalidPhaseDuration(f"{span.name}: duration must be > 0 s, got {span.duration_s}")

        # таблица обязана покрывать [0, T] без дыр и перекрытий, иначе bisect врёт
        if spans[0].start_s != 0.0:
            raise InvalidPhaseDuration(f"first phase must start at 0 s, got {spans[0].start_s}")
        for prev, span in zip(spans, spans[1:]):
            if span.start_s != prev.end_s:
                raise InvalidPhaseDuration(
                    f"{span.name} starts at {span.start_s} s but {prev.name} ends at {prev.end_s} s"
                )

        self._spans: Tuple[PhaseSpan, ...] = spans
        self._ends: List[float] = [s.end_s for s in self._spans]

    @classmethod
    def from_phases(cls, phases: CyclePhases) -> "PhaseTable":
        """Таблица для стандартного цикла из четырёх фаз."""

        durations = phases.durations()
        for name in PHASE_ORDER:
            if not durations[name] > 0.0:
                raise InvalidPhaseDuration(f"{name}.time must be > 0 s, got {durations[name]}")

        kinematics = {
            "fast_down": (phases.fast_down.speed, phases.fast_down.stroke),
            "working": (phases.working.speed, phases.working.stroke),
            "holding": (0.0, 0.0),
            "fast_up": (-phases.fast_up.speed, -phases.fast_up.stroke),
        }

        spans: List[PhaseSpan] = []
        t = 0.0
        stroke = 0.0
        for name in PHASE_ORDER:
            speed, delta = kinematics[name]
            end = t + durations[name]
            spans.append(
                PhaseSpan(
                    name=name,
                    start_s=t,
                    end_s=end,
                    speed_mm_s=float(speed),
                    stroke_start_mm=stroke,
                    stroke_delta_mm=float(delta),
                )
            )
            t = end
            stroke += float(delta)
        return cls(spans)

    def __len__(self) -> int:
        return len(self._spans)

    def __iter__(self) -> Iterator[PhaseSpan]:
        return iter(self._spans)

    @property
    def spans(self) -> Tuple[PhaseSpan, ...]:
        return self._spans

    @property
    def boundaries(self) -> Tuple[float, ...]:
        """Накопленные верхние границы t1..tn."""

        return tuple(self._ends)

    @property
    def total_time(self) -> float:
        return self._ends[-1]

    def locate(self, t: float) -> Tuple[PhaseSpan, float]:
        """Активная фаза и прогресс внутри неё в момент t."""

        t = float(t)
        if t < 0.0:
            raise ValueError(f"time must be >= 0, got {t}")

        idx = bisect_right(self._ends, t)
        if idx >= len(self._spans):
            return self._spans[-1], 1.0
        span = self._spans[idx]
        return span, span.progress(t)

    def phase_at(self, t: float) -> PhaseName:
        return self.locate(t)[0].name
