"""Core: категории и имена единиц, типы правил/результатов, проверки таблиц."""

from __future__ import annotations

from .types import IDENTITY, AffineRule, ConversionResult
from .units import Category, normalize_unit_name

__all__ = [
    "Category",
    "AffineRule",
    "ConversionResult",
    "IDENTITY",
    "normalize_unit_name",
]
