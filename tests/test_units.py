import pytest

from unitconverter.core.units import Category, normalize_unit_name


class TestCategory:
    def test_exactly_three_members(self) -> None:
        assert [c.name for c in Category] == ["LENGTH", "WEIGHT", "TEMPERATURE"]

    @pytest.mark.parametrize(
        "category,expected",
        [
            (Category.LENGTH, {"meters", "feet", "yards", "inches"}),
            (Category.WEIGHT, {"kilograms", "pounds", "grams", "ounces"}),
            (Category.TEMPERATURE, {"celsius", "fahrenheit", "kelvin"}),
        ],
    )
    def test_units(self, category: Category, expected: set[str]) -> None:
        assert category.units == frozenset(expected)

    def test_is_linear(self) -> None:
        assert Category.LENGTH.is_linear
        assert Category.WEIGHT.is_linear
        assert not Category.TEMPERATURE.is_linear


class TestNormalizeUnitName:
    @pytest.mark.parametrize("raw", ["meters", "METERS", "Meters", "mEtErS"])
    def test_lowercases(self, raw: str) -> None:
        assert normalize_unit_name(raw) == "meters"

    @pytest.mark.parametrize("raw", [None, 1, 2.5])
    def test_non_string_is_never_a_unit(self, raw) -> None:
        name = normalize_unit_name(raw)
        assert all(name not in c.units for c in Category)
