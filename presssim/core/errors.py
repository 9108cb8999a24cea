"""presssim.core.errors

Типизированные отказы прогона. Все они обнаруживаются ДО генерации первой точки:
частичный ряд никогда не возвращается.

Наследуются от ValueError, чтобы код, ловящий «плохой конфиг» по-старому, продолжал работать.
"""

from __future__ import annotations


class SimulationError(ValueError):
    """Базовая ошибка конфигурации прогона."""


class InvalidGeometry(SimulationError):
    """Площадь штоковой полости <= 0 (шток не меньше поршня) или неположительный диаметр."""


class InvalidPhaseDuration(SimulationError):
    """Длительность какой-либо фазы (или всего цикла) <= 0."""


class InvalidEfficiency(SimulationError):
    """КПД насоса вне (0, 1]."""
