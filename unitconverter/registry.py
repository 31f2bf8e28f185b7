"""Реестр категорий: какие единицы допустимы и как пересчитать пару.

Для LENGTH/WEIGHT правило строится из отношения коэффициентов,
для TEMPERATURE берётся явное правило пары. Отсутствие правила (опечатка,
единица из другой категории) сигнализируется через None, а не исключением.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

from unitconverter.config.tables import (
    DEFAULT_REGISTRY_CONFIG,
    LinearTableConfig,
    RegistryConfig,
    TemperatureTableConfig,
)
from unitconverter.core.types import IDENTITY, AffineRule
from unitconverter.core.units import Category


class CategoryRegistry:
    """Неизменяемый реестр: Category -> таблица единиц."""

    def __init__(self, config: RegistryConfig = DEFAULT_REGISTRY_CONFIG) -> None:
        self._config = config
        self._linear: Mapping[Category, LinearTableConfig] = MappingProxyType(
            {
                Category.LENGTH: config.length,
                Category.WEIGHT: config.weight,
            }
        )
        self._temperature: TemperatureTableConfig = config.temperature
        self._units: Mapping[Category, frozenset[str]] = MappingProxyType(
            {
                Category.LENGTH: config.length.units,
                Category.WEIGHT: config.weight.units,
                Category.TEMPERATURE: config.temperature.units,
            }
        )

    @property
    def config(self) -> RegistryConfig:
        return self._config

    @staticmethod
    def _check_category(category: Category) -> None:
        if not isinstance(category, Category):
            raise TypeError(f"category must be a Category, got {category!r}")

    def units(self, category: Category) -> frozenset[str]:
        self._check_category(category)
        return self._units[category]

    def base_unit(self, category: Category) -> Optional[str]:
        """Базовая единица линейной категории; у температуры её нет."""

        self._check_category(category)
        table = self._linear.get(category)
        return table.base_unit if table is not None else None

    def get_rule(self, category: Category, from_unit: str, to_unit: str) -> Optional[AffineRule]:
        """Правило пересчёта from_unit -> to_unit или None.

        Имена должны быть уже нормализованы (нижний регистр).
        """

        self._check_category(category)
        valid = self._units[category]
        if from_unit not in valid or to_unit not in valid:
            return None
        if from_unit == to_unit:
            return IDENTITY

        if category.is_linear:
            factors = self._linear[category].factors
            return AffineRule(scale=factors[to_unit] / factors[from_unit])
        return self._temperature.rules.get((from_unit, to_unit))


DEFAULT_REGISTRY = CategoryRegistry()
