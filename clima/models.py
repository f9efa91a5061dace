"""
Data model (Country + enums)
============================

Each entry of the bundled JSON payload becomes one `Country` object.
Countries are immutable (`frozen=True`):
- the collection is loaded once and never edited afterwards, and
- searches/sorts build new lists instead of touching the records.

The enums describe the closed sets the rest of the package works with:
regions, sort orderings and the three metrics.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


@dataclass(frozen=True)
class Country:
    """One nation's identity and raw climate metrics."""
    id: str
    name: str
    # annual territorial CO2 emissions, megatonnes
    territorial_mt_co2: float
    # ND-GAIN readiness score, nominally 0..100
    nd_gain_score: float
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    def coordinate(self) -> Optional[Tuple[float, float]]:
        """Return `(latitude, longitude)`, or None if either is missing."""
        if self.latitude is None or self.longitude is None:
            return None
        return (self.latitude, self.longitude)


class Region(Enum):
    AFRICA = "Africa"
    ASIA = "Asia"
    EUROPE = "Europe"
    NORTH_AMERICA = "North America"
    SOUTH_AMERICA = "South America"
    OCEANIA = "Oceania"

    @property
    def label(self) -> str:
        return self.value


class DataType(Enum):
    """The three metrics shown for every country."""
    CLIMA_JUSTICE_SCORE = "Clima Justice Score"
    TERRITORIAL_MT_CO2 = "Territorial MtCO2"
    ND_GAIN_SCORE = "ND-Gain Score"

    @property
    def label(self) -> str:
        return self.value

    @property
    def higher_is_better(self) -> bool:
        # lower emissions compare as "better"
        return self is not DataType.TERRITORIAL_MT_CO2

    @classmethod
    def from_name(cls, name: str) -> "DataType":
        key = name.lower().strip()
        if key in ("justice", "cjs", "score", "clima_justice_score"):
            return cls.CLIMA_JUSTICE_SCORE
        if key in ("co2", "mtco2", "emissions", "territorial_mt_co2"):
            return cls.TERRITORIAL_MT_CO2
        if key in ("gain", "ndgain", "nd_gain", "nd_gain_score"):
            return cls.ND_GAIN_SCORE
        raise ValueError("metric must be: justice, co2, gain")


class SortOption(Enum):
    NAME_A_TO_Z = "name_a_to_z"
    NAME_Z_TO_A = "name_z_to_a"
    CLIMA_JUSTICE_SCORE_HIGH_TO_LOW = "clima_justice_score_high_to_low"
    CLIMA_JUSTICE_SCORE_LOW_TO_HIGH = "clima_justice_score_low_to_high"
    ND_GAIN_SCORE_HIGH_TO_LOW = "nd_gain_score_high_to_low"
    ND_GAIN_SCORE_LOW_TO_HIGH = "nd_gain_score_low_to_high"
    TERRITORIAL_MT_CO2_HIGH_TO_LOW = "territorial_mt_co2_high_to_low"
    TERRITORIAL_MT_CO2_LOW_TO_HIGH = "territorial_mt_co2_low_to_high"

    @property
    def descending(self) -> bool:
        return self in (
            SortOption.NAME_Z_TO_A,
            SortOption.CLIMA_JUSTICE_SCORE_HIGH_TO_LOW,
            SortOption.ND_GAIN_SCORE_HIGH_TO_LOW,
            SortOption.TERRITORIAL_MT_CO2_HIGH_TO_LOW,
        )

    @classmethod
    def from_field(cls, field: str, descending: bool) -> "SortOption":
        """Map a user-facing field name and direction to a sort option.

        `name` sorts alphabetically; every other field is a metric name
        accepted by `DataType.from_name`.
        """
        if field.lower().strip() == "name":
            return cls.NAME_Z_TO_A if descending else cls.NAME_A_TO_Z
        try:
            dtype = DataType.from_name(field)
        except ValueError:
            raise ValueError("field must be: name, justice, gain, co2") from None
        pairs = {
            DataType.CLIMA_JUSTICE_SCORE: (cls.CLIMA_JUSTICE_SCORE_HIGH_TO_LOW, cls.CLIMA_JUSTICE_SCORE_LOW_TO_HIGH),
            DataType.ND_GAIN_SCORE: (cls.ND_GAIN_SCORE_HIGH_TO_LOW, cls.ND_GAIN_SCORE_LOW_TO_HIGH),
            DataType.TERRITORIAL_MT_CO2: (cls.TERRITORIAL_MT_CO2_HIGH_TO_LOW, cls.TERRITORIAL_MT_CO2_LOW_TO_HIGH),
        }
        high_to_low, low_to_high = pairs[dtype]
        return high_to_low if descending else low_to_high
