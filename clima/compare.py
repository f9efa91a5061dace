"""
Side-by-side comparison of two countries.

For every metric we report the absolute difference, the difference as a
percentage of the smaller value, and which side is better given the
metric's direction (lower emissions win, higher scores win).
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
from .models import Country, DataType, Region
from .regions import region_of
from .scoring import clima_justice_score


@dataclass(frozen=True)
class MetricComparison:
    data_type: DataType
    left: float
    right: float
    difference: float
    # None when the values are equal or the smaller value is <= 0
    percent_difference: Optional[float]
    # "left", "right" or None on a tie
    winner: Optional[str]


@dataclass(frozen=True)
class CountryComparison:
    left: Country
    right: Country
    left_region: Region
    right_region: Region
    justice: MetricComparison
    nd_gain: MetricComparison
    mt_co2: MetricComparison

    def metrics(self):
        return [self.justice, self.nd_gain, self.mt_co2]


def compare_metric(data_type: DataType, left: float, right: float) -> MetricComparison:
    difference = abs(left - right)
    smaller = min(left, right)
    percent = None
    if left != right and smaller > 0:
        percent = difference / smaller * 100.0

    winner = None
    if left != right:
        left_wins = left > right if data_type.higher_is_better else left < right
        winner = "left" if left_wins else "right"

    return MetricComparison(
        data_type=data_type,
        left=left,
        right=right,
        difference=difference,
        percent_difference=percent,
        winner=winner,
    )


def compare_countries(left: Country, right: Country, min_log: float, range_log: float) -> CountryComparison:
    """Compare two countries; justice scores use the given collection scaling."""
    return CountryComparison(
        left=left,
        right=right,
        left_region=region_of(left),
        right_region=region_of(right),
        justice=compare_metric(
            DataType.CLIMA_JUSTICE_SCORE,
            clima_justice_score(left, min_log, range_log),
            clima_justice_score(right, min_log, range_log),
        ),
        nd_gain=compare_metric(DataType.ND_GAIN_SCORE, left.nd_gain_score, right.nd_gain_score),
        mt_co2=compare_metric(DataType.TERRITORIAL_MT_CO2, left.territorial_mt_co2, right.territorial_mt_co2),
    )
