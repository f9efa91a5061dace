"""
Chart data series
=================

Clima does not draw charts. This module produces the numbers a chart
renderer needs, as pandas DataFrames:

- "Top N" charts      -> columns: id, name, value (highest first)
- "... by Region"     -> columns: region, value, countries
- "X vs Y" charts     -> columns: id, name, x, y
- bubble chart        -> columns: id, name, x, y, size

Region aggregates: emissions are summed, ND-GAIN and justice scores are
averaged. Regions without countries are left out.
"""

from __future__ import annotations
from enum import Enum
from typing import Sequence
import pandas as pd
from .models import Country, DataType, Region
from .regions import region_of
from .scoring import clima_justice_score, log_co2_scaling


class ChartType(Enum):
    TOP_COUNTRIES_BY_TERRITORIAL_MT_CO2 = "Top Countries by Territorial MtCO2"
    TERRITORIAL_MT_CO2_BY_REGION = "Territorial MtCO2 by Region"
    TOP_COUNTRIES_BY_ND_GAIN_SCORE = "Top Countries by ND Gain Score"
    ND_GAIN_SCORE_BY_REGION = "ND Gain Score by Region"
    TOP_COUNTRIES_BY_CLIMA_JUSTICE_SCORE = "Top Countries by Clima Justice Score"
    CLIMA_JUSTICE_SCORE_BY_REGION = "Clima Justice Score by Region"
    TERRITORIAL_MT_CO2_VS_ND_GAIN_SCORE = "Territorial MtCO2 vs ND Gain Score"
    TERRITORIAL_MT_CO2_VS_CLIMA_JUSTICE_SCORE = "Territorial MtCO2 vs Clima Justice Score"
    ND_GAIN_SCORE_VS_CLIMA_JUSTICE_SCORE = "ND Gain Score vs Clima Justice Score"
    BUBBLE_CHART = "Climate Justice Bubble Chart"

    @classmethod
    def from_name(cls, name: str) -> "ChartType":
        """Accept the enum member name in any case, or the display title."""
        key = name.strip()
        for ct in cls:
            if key.upper() == ct.name or key.lower() == ct.value.lower():
                return ct
        raise ValueError(f"Unknown chart: {name!r}")


_TOP = {
    ChartType.TOP_COUNTRIES_BY_TERRITORIAL_MT_CO2: DataType.TERRITORIAL_MT_CO2,
    ChartType.TOP_COUNTRIES_BY_ND_GAIN_SCORE: DataType.ND_GAIN_SCORE,
    ChartType.TOP_COUNTRIES_BY_CLIMA_JUSTICE_SCORE: DataType.CLIMA_JUSTICE_SCORE,
}

_BY_REGION = {
    ChartType.TERRITORIAL_MT_CO2_BY_REGION: ("territorial_mt_co2", "sum"),
    ChartType.ND_GAIN_SCORE_BY_REGION: ("nd_gain_score", "mean"),
    ChartType.CLIMA_JUSTICE_SCORE_BY_REGION: ("clima_justice_score", "mean"),
}

_VERSUS = {
    ChartType.TERRITORIAL_MT_CO2_VS_ND_GAIN_SCORE: ("territorial_mt_co2", "nd_gain_score"),
    ChartType.TERRITORIAL_MT_CO2_VS_CLIMA_JUSTICE_SCORE: ("territorial_mt_co2", "clima_justice_score"),
    ChartType.ND_GAIN_SCORE_VS_CLIMA_JUSTICE_SCORE: ("nd_gain_score", "clima_justice_score"),
}

_REGION_ORDER = [r.value for r in Region]


def countries_frame(countries: Sequence[Country]) -> pd.DataFrame:
    """One row per country with raw metrics, region and justice score."""
    min_log, range_log = log_co2_scaling(countries)
    return pd.DataFrame(
        {
            "id": [c.id for c in countries],
            "name": [c.name for c in countries],
            "region": [region_of(c).value for c in countries],
            "territorial_mt_co2": [float(c.territorial_mt_co2) for c in countries],
            "nd_gain_score": [float(c.nd_gain_score) for c in countries],
            "clima_justice_score": [clima_justice_score(c, min_log, range_log) for c in countries],
        },
        columns=["id", "name", "region", "territorial_mt_co2", "nd_gain_score", "clima_justice_score"],
    )


def _in_region_order(df: pd.DataFrame) -> pd.DataFrame:
    df = df.copy()
    df["_order"] = df["region"].map(_REGION_ORDER.index)
    return df.sort_values("_order", kind="stable").drop(columns="_order").reset_index(drop=True)


def region_summary(countries: Sequence[Country]) -> pd.DataFrame:
    """Per-region count, total MtCO2, mean ND-GAIN and mean justice score."""
    df = countries_frame(countries)
    if df.empty:
        return pd.DataFrame(columns=["region", "countries", "total_mt_co2", "mean_nd_gain_score", "mean_clima_justice_score"])
    out = (
        df.groupby("region", sort=False)
        .agg(
            countries=("id", "count"),
            total_mt_co2=("territorial_mt_co2", "sum"),
            mean_nd_gain_score=("nd_gain_score", "mean"),
            mean_clima_justice_score=("clima_justice_score", "mean"),
        )
        .reset_index()
    )
    return _in_region_order(out)


def chart_series(chart_type: ChartType, countries: Sequence[Country], top_n: int = 10) -> pd.DataFrame:
    """Build the data behind one chart."""
    df = countries_frame(countries)

    if chart_type in _TOP:
        col = {
            DataType.TERRITORIAL_MT_CO2: "territorial_mt_co2",
            DataType.ND_GAIN_SCORE: "nd_gain_score",
            DataType.CLIMA_JUSTICE_SCORE: "clima_justice_score",
        }[_TOP[chart_type]]
        top = df.sort_values(col, ascending=False, kind="stable").head(top_n)
        return top[["id", "name", col]].rename(columns={col: "value"}).reset_index(drop=True)

    if chart_type in _BY_REGION:
        col, how = _BY_REGION[chart_type]
        if df.empty:
            return pd.DataFrame(columns=["region", "value", "countries"])
        out = (
            df.groupby("region", sort=False)
            .agg(value=(col, how), countries=("id", "count"))
            .reset_index()
        )
        return _in_region_order(out)

    if chart_type in _VERSUS:
        x, y = _VERSUS[chart_type]
        return df[["id", "name", x, y]].rename(columns={x: "x", y: "y"})

    if chart_type is ChartType.BUBBLE_CHART:
        return df[["id", "name", "territorial_mt_co2", "nd_gain_score", "clima_justice_score"]].rename(
            columns={"territorial_mt_co2": "x", "nd_gain_score": "y", "clima_justice_score": "size"}
        )

    raise ValueError(f"Unsupported chart: {chart_type}")
