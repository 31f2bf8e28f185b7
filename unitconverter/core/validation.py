"""unitconverter.core.validation

Базовые проверки статических таблиц: ошибка в таблице единиц должна
проявляться при импорте, а не при первой конвертации.
"""

from __future__ import annotations

import math
from typing import Iterable


def ensure_positive(value: float, name: str) -> None:
    if value <= 0:
        raise ValueError(f"{name} must be > 0, got {value}")


def ensure_finite(value: float, name: str) -> None:
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value}")


def ensure_non_zero(value: float, name: str) -> None:
    if value == 0:
        raise ValueError(f"{name} must be != 0, got {value}")


def ensure_unit_name(name: str, field: str) -> None:
    """Имя единицы: непустая строка в нижнем регистре."""

    if not isinstance(name, str) or not name:
        raise ValueError(f"{field} must be a non-empty string, got {name!r}")
    if name != name.lower():
        raise ValueError(f"{field} must be lowercase, got {name!r}")


def ensure_contains(items: Iterable[str], item: str, name: str) -> None:
    if item not in set(items):
        raise ValueError(f"{name} must contain {item!r}")
