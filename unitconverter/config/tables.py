"""Таблицы единиц (data-only конфиг).

Модуль только описывает данные и проверяет их инварианты:
- линейные категории (длина, масса): коэффициент = сколько единиц X
  содержится в одной базовой единице; у базовой единицы коэффициент 1.0;
- температура: явное правило для каждой упорядоченной пары разных единиц.

Пересчёт по этим данным выполняет unitconverter.registry.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import permutations
from types import MappingProxyType
from typing import Mapping, Tuple

from unitconverter.core import units as u
from unitconverter.core.types import AffineRule
from unitconverter.core.validation import (
    ensure_contains,
    ensure_finite,
    ensure_positive,
    ensure_unit_name,
)

UnitPair = Tuple[str, str]


@dataclass(frozen=True)
class LinearTableConfig:
    """Мультипликативная таблица: unit -> единиц на одну базовую."""

    base_unit: str
    factors: Mapping[str, float]

    def __post_init__(self) -> None:
        ensure_contains(self.factors, self.base_unit, "factors")
        for name, factor in self.factors.items():
            ensure_unit_name(name, "factors key")
            ensure_finite(factor, f"factors[{name!r}]")
            ensure_positive(factor, f"factors[{name!r}]")
        if self.factors[self.base_unit] != 1.0:
            raise ValueError(
                f"base unit {self.base_unit!r} must have factor 1.0, got {self.factors[self.base_unit]}"
            )
        # Freeze the caller's mapping.
        object.__setattr__(self, "factors", MappingProxyType(dict(self.factors)))

    @property
    def units(self) -> frozenset[str]:
        return frozenset(self.factors)


@dataclass(frozen=True)
class TemperatureTableConfig:
    """Аффинные правила для каждой упорядоченной пары (from, to)."""

    rules: Mapping[UnitPair, AffineRule]

    def __post_init__(self) -> None:
        for src, dst in self.rules:
            ensure_unit_name(src, "rule source")
            ensure_unit_name(dst, "rule target")
            if src == dst:
                raise ValueError(f"same-unit rule {src!r} -> {dst!r} is implicit identity")
        # Each unordered pair needs both directions.
        for pair in permutations(self.units, 2):
            if pair not in self.rules:
                raise ValueError(f"missing temperature rule {pair[0]!r} -> {pair[1]!r}")
        object.__setattr__(self, "rules", MappingProxyType(dict(self.rules)))

    @property
    def units(self) -> frozenset[str]:
        return frozenset(name for pair in self.rules for name in pair)


def _default_length() -> LinearTableConfig:
    return LinearTableConfig(
        base_unit=u.METERS,
        factors={
            u.METERS: 1.0,
            u.FEET: u.FEET_PER_METER,
            u.YARDS: u.YARDS_PER_METER,
            u.INCHES: u.INCHES_PER_METER,
        },
    )


def _default_weight() -> LinearTableConfig:
    return LinearTableConfig(
        base_unit=u.KILOGRAMS,
        factors={
            u.KILOGRAMS: 1.0,
            u.POUNDS: u.POUNDS_PER_KILOGRAM,
            u.GRAMS: u.GRAMS_PER_KILOGRAM,
            u.OUNCES: u.OUNCES_PER_KILOGRAM,
        },
    )


def _default_temperature() -> TemperatureTableConfig:
    c, f, k = u.CELSIUS, u.FAHRENHEIT, u.KELVIN
    return TemperatureTableConfig(
        rules={
            # v * 1.8 + 32
            (c, f): AffineRule(scale=u.FAHRENHEIT_PER_CELSIUS, offset=u.FAHRENHEIT_OFFSET),
            # (v - 32) / 1.8
            (f, c): AffineRule(shift=-u.FAHRENHEIT_OFFSET, divisor=u.FAHRENHEIT_PER_CELSIUS),
            # v + 273.15
            (c, k): AffineRule(offset=u.KELVIN_OFFSET),
            # v - 273.15
            (k, c): AffineRule(offset=-u.KELVIN_OFFSET),
            # (v - 32) * (5/9) + 273.15
            (f, k): AffineRule(shift=-u.FAHRENHEIT_OFFSET, scale=5.0 / 9.0, offset=u.KELVIN_OFFSET),
            # (v - 273.15) * 1.8 + 32
            (k, f): AffineRule(
                shift=-u.KELVIN_OFFSET, scale=u.FAHRENHEIT_PER_CELSIUS, offset=u.FAHRENHEIT_OFFSET
            ),
        }
    )


@dataclass(frozen=True)
class RegistryConfig:
    length: LinearTableConfig = field(default_factory=_default_length)
    weight: LinearTableConfig = field(default_factory=_default_weight)
    temperature: TemperatureTableConfig = field(default_factory=_default_temperature)


DEFAULT_REGISTRY_CONFIG = RegistryConfig()
