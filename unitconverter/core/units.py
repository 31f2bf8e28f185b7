"""unitconverter.core.units

Категории единиц, канонические имена единиц и коэффициенты пересчёта.

Принцип: имя единицы сравнивается только после нормализации на границе
(normalize_unit_name), коэффициенты задаются здесь один раз.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class Category(Enum):
    """Закрытый набор категорий взаимно конвертируемых единиц."""

    LENGTH = "length"
    WEIGHT = "weight"
    TEMPERATURE = "temperature"

    @property
    def is_linear(self) -> bool:
        """True, если пересчёт внутри категории - чистое умножение."""

        return self is not Category.TEMPERATURE

    @property
    def units(self) -> frozenset[str]:
        """Допустимые имена единиц категории (в нижнем регистре)."""

        # Registry imports Category, so resolve it lazily.
        from unitconverter.registry import DEFAULT_REGISTRY

        return DEFAULT_REGISTRY.units(self)


# Length (base: meters)
METERS: str = "meters"
FEET: str = "feet"
YARDS: str = "yards"
INCHES: str = "inches"

# Weight (base: kilograms)
KILOGRAMS: str = "kilograms"
POUNDS: str = "pounds"
GRAMS: str = "grams"
OUNCES: str = "ounces"

# Temperature
CELSIUS: str = "celsius"
FAHRENHEIT: str = "fahrenheit"
KELVIN: str = "kelvin"

# Units per 1 base unit
FEET_PER_METER: float = 3.28084
YARDS_PER_METER: float = 1.09361
INCHES_PER_METER: float = 39.3701

POUNDS_PER_KILOGRAM: float = 2.20462
GRAMS_PER_KILOGRAM: float = 1000.0
OUNCES_PER_KILOGRAM: float = 35.274

# Temperature constants
KELVIN_OFFSET: float = 273.15  # 0 °C in K
FAHRENHEIT_OFFSET: float = 32.0  # 0 °C in °F
FAHRENHEIT_PER_CELSIUS: float = 1.8


def normalize_unit_name(name: Any) -> str:
    """Привести имя единицы к каноническому виду (нижний регистр).

    Не-строка превращается в пустое имя, которого нет ни в одной категории:
    неверное имя единицы - это ошибка пользовательского ввода, а не исключение.
    """

    if not isinstance(name, str):
        return ""
    return name.lower()
