"""Конфиги таблиц единиц.

Таблицы неизменяемы: расширение набора единиц - это правка статических
данных в `unitconverter.config.tables`, а не runtime-API.
"""

from __future__ import annotations

from .tables import (  # noqa: F401
    DEFAULT_REGISTRY_CONFIG,
    LinearTableConfig,
    RegistryConfig,
    TemperatureTableConfig,
)

__all__ = [
    "LinearTableConfig",
    "TemperatureTableConfig",
    "RegistryConfig",
    "DEFAULT_REGISTRY_CONFIG",
]
