"""Fluent wrapper over convert: value paired with its unit and category.

    celsius(25.0).convert_to("fahrenheit")  # ConversionResult(value=77.0, ...)
"""

from __future__ import annotations

from dataclasses import dataclass

from unitconverter.conversion import convert
from unitconverter.core import units as u
from unitconverter.core.types import ConversionResult
from unitconverter.core.units import Category


@dataclass(frozen=True, slots=True)
class UnitValue:
    value: float
    unit: str
    category: Category

    def convert_to(self, to_unit: str) -> ConversionResult:
        return convert(self.value, self.unit, to_unit, self.category)


def to_unit(value: float, unit: str, category: Category) -> UnitValue:
    return UnitValue(float(value), unit.lower(), category)


def meters(value: float) -> UnitValue:
    return to_unit(value, u.METERS, Category.LENGTH)


def feet(value: float) -> UnitValue:
    return to_unit(value, u.FEET, Category.LENGTH)


def yards(value: float) -> UnitValue:
    return to_unit(value, u.YARDS, Category.LENGTH)


def inches(value: float) -> UnitValue:
    return to_unit(value, u.INCHES, Category.LENGTH)


def kilograms(value: float) -> UnitValue:
    return to_unit(value, u.KILOGRAMS, Category.WEIGHT)


def pounds(value: float) -> UnitValue:
    return to_unit(value, u.POUNDS, Category.WEIGHT)


def grams(value: float) -> UnitValue:
    return to_unit(value, u.GRAMS, Category.WEIGHT)


def ounces(value: float) -> UnitValue:
    return to_unit(value, u.OUNCES, Category.WEIGHT)


def celsius(value: float) -> UnitValue:
    return to_unit(value, u.CELSIUS, Category.TEMPERATURE)


def fahrenheit(value: float) -> UnitValue:
    return to_unit(value, u.FAHRENHEIT, Category.TEMPERATURE)


def kelvin(value: float) -> UnitValue:
    return to_unit(value, u.KELVIN, Category.TEMPERATURE)
