"""Конвертация значения между единицами одной категории.

Неверная пара единиц - ожидаемая ошибка пользовательского ввода:
она возвращается как ConversionResult(success=False), а не выбрасывается.
Исключения остаются только для ошибок программиста (category не Category).
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np
from numpy.typing import ArrayLike

from unitconverter.core.types import ConversionResult
from unitconverter.core.units import Category, normalize_unit_name
from unitconverter.registry import DEFAULT_REGISTRY, CategoryRegistry

logger = logging.getLogger(__name__)


def _invalid_message(from_unit: Any, to_unit: Any, category: Category) -> str:
    return f"Invalid unit conversion: {from_unit} to {to_unit} in {category.name}"


def convert(
    value: float,
    from_unit: str,
    to_unit: str,
    category: Category,
    *,
    registry: CategoryRegistry = DEFAULT_REGISTRY,
) -> ConversionResult:
    """Convert ``value`` from ``from_unit`` to ``to_unit`` within ``category``.

    Unit names are matched case-insensitively. A unit converted to itself
    returns ``value`` unchanged.

    Returns:
        ConversionResult: ``success=True`` with the converted value, or
        ``success=False`` with ``value=0.0`` and a message naming both units
        (as passed by the caller) and the category.

    Raises:
        TypeError: If ``category`` is not a :class:`Category`.
    """

    rule = registry.get_rule(category, normalize_unit_name(from_unit), normalize_unit_name(to_unit))
    if rule is None:
        message = _invalid_message(from_unit, to_unit, category)
        logger.debug(message)
        return ConversionResult(0.0, False, message)

    return ConversionResult(rule.apply(float(value)), True)


def convert_array(
    values: ArrayLike,
    from_unit: str,
    to_unit: str,
    category: Category,
    *,
    registry: CategoryRegistry = DEFAULT_REGISTRY,
) -> ConversionResult:
    """Поэлементный вариант convert для массивов (float64).

    При неудаче value - массив нулей той же формы.
    """

    arr = np.asarray(values, dtype=np.float64)
    rule = registry.get_rule(category, normalize_unit_name(from_unit), normalize_unit_name(to_unit))
    if rule is None:
        message = _invalid_message(from_unit, to_unit, category)
        logger.debug(message)
        return ConversionResult(np.zeros_like(arr), False, message)

    return ConversionResult(np.array(rule.apply(arr), dtype=np.float64), True)
