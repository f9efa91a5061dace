"""
Clima Justice Score
===================

The score combines two normalised components with a harmonic mean:

    CJS = 2 * C * G / (C + G) * 100

- C (emissions component): 1 - (log10(MtCO2 + 1) - min_log) / range_log.
  High when a country emits little compared to the rest of the collection.
- G (readiness component): 1 - ND-GAIN / 100.
  High when a country is poorly prepared, i.e. more vulnerable.

The harmonic mean punishes imbalance: a country only scores high when it is
*both* a low emitter *and* highly vulnerable.

`min_log` / `range_log` depend on the whole collection, so callers compute
them once with `log_co2_scaling` and pass them in explicitly.
"""

from __future__ import annotations
import math
from typing import Iterable, Tuple
from .models import Country

EMPTY_SCALING: Tuple[float, float] = (0.0, 1.0)


def log_co2(mt_co2: float) -> float:
    return math.log10(mt_co2 + 1.0)


def log_co2_scaling(countries: Iterable[Country]) -> Tuple[float, float]:
    """Return `(min_log, range_log)` of log10(MtCO2 + 1) over `countries`.

    An empty collection gives `(0.0, 1.0)` so the scorer never divides by zero.
    """
    logs = [log_co2(c.territorial_mt_co2) for c in countries]
    if not logs:
        return EMPTY_SCALING
    lo = min(logs)
    return lo, max(logs) - lo


def emissions_component(country: Country, min_log: float, range_log: float) -> float:
    if range_log <= 0:
        return 0.0
    return 1.0 - (log_co2(country.territorial_mt_co2) - min_log) / range_log


def readiness_component(country: Country) -> float:
    # ND-GAIN outside 0..100 is passed through unclamped
    return 1.0 - country.nd_gain_score / 100.0


def clima_justice_score(country: Country, min_log: float, range_log: float) -> float:
    """Compute the 0..100 climate justice score of one country."""
    c = emissions_component(country, min_log, range_log)
    g = readiness_component(country)
    if c + g == 0:
        return 0.0
    return 2.0 * c * g / (c + g) * 100.0


# ---------------- Interpretation bands ----------------

_JUSTICE_BANDS = [
    (80.0, "Very high vulnerability with very low emissions"),
    (60.0, "High vulnerability with low to moderate emissions"),
    (40.0, "Moderate vulnerability and emissions balance"),
    (20.0, "Lower vulnerability with moderate to high emissions"),
    (float("-inf"), "Low vulnerability with very high emissions"),
]

_EMISSIONS_TIERS = [
    (1000.0, "Major emitter"),
    (100.0, "Significant emitter"),
    (10.0, "Moderate emitter"),
    (1.0, "Low emitter"),
    (float("-inf"), "Minimal emitter"),
]

_READINESS_TIERS = [
    (70.0, "High readiness, low vulnerability"),
    (50.0, "Moderate readiness and vulnerability"),
    (30.0, "Lower readiness, higher vulnerability"),
    (float("-inf"), "Low readiness, high vulnerability"),
]


def _band(value: float, bands) -> str:
    for lower, label in bands:
        if value >= lower:
            return label
    return bands[-1][1]


def justice_band(score: float) -> str:
    return _band(score, _JUSTICE_BANDS)


def emissions_tier(mt_co2: float) -> str:
    # ">1000 MtCO2" is a major emitter, exactly 1000 is still "significant"
    if mt_co2 > 1000.0:
        return _EMISSIONS_TIERS[0][1]
    return _band(mt_co2, _EMISSIONS_TIERS[1:])


def readiness_tier(nd_gain_score: float) -> str:
    return _band(nd_gain_score, _READINESS_TIERS)
