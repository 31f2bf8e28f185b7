"""unitconverter package.

Конвертация числовых значений между единицами одной категории
(длина, масса, температура).

Основная точка входа:
- from unitconverter import convert, Category
- convert(10.0, "meters", "feet", Category.LENGTH)

Импорт пакета не имеет побочных эффектов, кроме однократного построения
статических таблиц единиц.
"""

from __future__ import annotations

from .conversion import convert, convert_array
from .core.types import AffineRule, ConversionResult
from .core.units import Category
from .fluent import (
    UnitValue,
    celsius,
    fahrenheit,
    feet,
    grams,
    inches,
    kelvin,
    kilograms,
    meters,
    ounces,
    pounds,
    to_unit,
    yards,
)

__version__ = "1.0.0"

__all__ = [
    "Category",
    "AffineRule",
    "ConversionResult",
    "convert",
    "convert_array",
    # Fluent
    "UnitValue",
    "to_unit",
    "meters",
    "feet",
    "yards",
    "inches",
    "kilograms",
    "pounds",
    "grams",
    "ounces",
    "celsius",
    "fahrenheit",
    "kelvin",
]
