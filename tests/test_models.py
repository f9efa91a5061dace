"""
tests/test_models.py: Country record and the enums.
"""

import dataclasses

import pytest

from clima.models import Country, DataType, Region, SortOption
from conftest import KE, TV


class TestCountry:
    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            KE.name = "Other"  # type: ignore[misc]

    def test_value_equality(self):
        assert KE == Country("ke", "Kenya", 9.0, 40.0, -0.02, 37.91)
        assert KE != Country("ke", "Kenya", 9.0, 41.0, -0.02, 37.91)

    def test_coordinate(self):
        assert KE.coordinate() == (-0.02, 37.91)
        assert TV.coordinate() is None


class TestSortOption:
    @pytest.mark.parametrize("field, descending, expected", [
        ("name", False, SortOption.NAME_A_TO_Z),
        ("name", True, SortOption.NAME_Z_TO_A),
        ("justice", True, SortOption.CLIMA_JUSTICE_SCORE_HIGH_TO_LOW),
        ("cjs", False, SortOption.CLIMA_JUSTICE_SCORE_LOW_TO_HIGH),
        ("gain", True, SortOption.ND_GAIN_SCORE_HIGH_TO_LOW),
        ("ndgain", False, SortOption.ND_GAIN_SCORE_LOW_TO_HIGH),
        ("co2", True, SortOption.TERRITORIAL_MT_CO2_HIGH_TO_LOW),
        ("MtCO2", False, SortOption.TERRITORIAL_MT_CO2_LOW_TO_HIGH),
    ])
    def test_from_field(self, field, descending, expected):
        option = SortOption.from_field(field, descending)
        assert option is expected
        assert option.descending is descending

    def test_eight_options(self):
        assert len(SortOption) == 8

    def test_unknown_field(self):
        with pytest.raises(ValueError, match="field must be"):
            SortOption.from_field("population", True)


class TestEnums:
    def test_six_regions(self):
        assert [r.label for r in Region] == [
            "Africa", "Asia", "Europe", "North America", "South America", "Oceania",
        ]

    def test_direction_of_metrics(self):
        assert DataType.CLIMA_JUSTICE_SCORE.higher_is_better
        assert DataType.ND_GAIN_SCORE.higher_is_better
        assert not DataType.TERRITORIAL_MT_CO2.higher_is_better

    def test_unknown_metric(self):
        with pytest.raises(ValueError):
            DataType.from_name("gdp")
