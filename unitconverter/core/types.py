"""unitconverter.core.types

Минимальные типы данных: правило пересчёта и результат конвертации.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, TypeVar

import numpy as np
from numpy.typing import NDArray

from .validation import ensure_finite, ensure_non_zero

Number = TypeVar("Number", float, NDArray[np.float64])


@dataclass(frozen=True, slots=True)
class AffineRule:
    """Правило пересчёта вида f(v) = (v + shift) * scale / divisor + offset.

    Линейные категории используют только scale (отношение коэффициентов),
    для температуры нужны сдвиги: у шкал нет общего нуля.
    Деление хранится отдельно от scale, чтобы (68 - 32) / 1.8 давало ровно 20.0.
    """

    shift: float = 0.0
    scale: float = 1.0
    divisor: float = 1.0
    offset: float = 0.0

    def __post_init__(self) -> None:
        for field_name in ("shift", "scale", "divisor", "offset"):
            ensure_finite(getattr(self, field_name), field_name)
        ensure_non_zero(self.divisor, "divisor")

    @property
    def is_identity(self) -> bool:
        return self.shift == 0.0 and self.scale == 1.0 and self.divisor == 1.0 and self.offset == 0.0

    @property
    def slope(self) -> float:
        """Итоговый множитель df/dv."""

        return self.scale / self.divisor

    def apply(self, value: Number) -> Number:
        """Применить правило к числу или поэлементно к массиву numpy."""

        if self.is_identity:
            return value
        return (value + self.shift) * self.scale / self.divisor + self.offset


IDENTITY = AffineRule()


@dataclass(frozen=True, slots=True)
class ConversionResult:
    """Результат конвертации.

    Атрибуты:
        value: Пересчитанное значение; имеет смысл только при success=True.
        success: Удалось ли выполнить конвертацию.
        message: Диагностика; заполняется только при неудаче.
    """

    value: float | NDArray[np.float64]
    success: bool
    message: Optional[str] = None
