import pytest

from unitconverter import fluent
from unitconverter.conversion import convert
from unitconverter.core.units import Category
from unitconverter.fluent import UnitValue, celsius, meters, to_unit


class TestUnitValue:
    def test_convert_to_delegates(self) -> None:
        res = meters(5.0).convert_to("feet")
        assert res == convert(5.0, "meters", "feet", Category.LENGTH)
        assert round(res.value) == 16

    def test_celsius_to_fahrenheit(self) -> None:
        assert celsius(25.0).convert_to("fahrenheit").value == 77.0

    def test_to_unit_lowercases(self) -> None:
        uv = to_unit(3, "KeLvIn", Category.TEMPERATURE)
        assert uv == UnitValue(3.0, "kelvin", Category.TEMPERATURE)

    def test_invalid_target_fails(self) -> None:
        res = meters(1.0).convert_to("pounds")
        assert not res.success
        assert res.message == "Invalid unit conversion: meters to pounds in LENGTH"

    @pytest.mark.parametrize(
        "factory,unit,category",
        [
            ("meters", "meters", Category.LENGTH),
            ("feet", "feet", Category.LENGTH),
            ("yards", "yards", Category.LENGTH),
            ("inches", "inches", Category.LENGTH),
            ("kilograms", "kilograms", Category.WEIGHT),
            ("pounds", "pounds", Category.WEIGHT),
            ("grams", "grams", Category.WEIGHT),
            ("ounces", "ounces", Category.WEIGHT),
            ("celsius", "celsius", Category.TEMPERATURE),
            ("fahrenheit", "fahrenheit", Category.TEMPERATURE),
            ("kelvin", "kelvin", Category.TEMPERATURE),
        ],
    )
    def test_shorthands(self, factory: str, unit: str, category: Category) -> None:
        uv = getattr(fluent, factory)(2.0)
        assert uv.unit == unit
        assert uv.category is category
        assert uv.convert_to(unit).value == 2.0
