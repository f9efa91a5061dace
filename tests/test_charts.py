"""
tests/test_charts.py: chart data series and the region summary.
"""

import pytest

from clima.charts import ChartType, chart_series, countries_frame, region_summary
from conftest import make_country


class TestChartType:
    def test_ten_charts(self):
        assert len(ChartType) == 10

    @pytest.mark.parametrize("name", ["bubble_chart", "BUBBLE_CHART", "Climate Justice Bubble Chart"])
    def test_from_name(self, name):
        assert ChartType.from_name(name) is ChartType.BUBBLE_CHART

    def test_unknown(self):
        with pytest.raises(ValueError, match="Unknown chart"):
            ChartType.from_name("pie")


class TestSeries:
    def test_frame_columns(self, five):
        df = countries_frame(five)
        assert list(df.columns) == [
            "id", "name", "region", "territorial_mt_co2", "nd_gain_score", "clima_justice_score",
        ]
        assert len(df) == 5

    def test_top_justice(self, five):
        df = chart_series(ChartType.TOP_COUNTRIES_BY_CLIMA_JUSTICE_SCORE, five, top_n=2)
        assert list(df.columns) == ["id", "name", "value"]
        assert df["id"].tolist() == ["tv", "ke"]
        assert df["value"].iloc[0] == pytest.approx(75.0)

    def test_top_emissions(self, five):
        df = chart_series(ChartType.TOP_COUNTRIES_BY_TERRITORIAL_MT_CO2, five, top_n=1)
        assert df["id"].tolist() == ["us"]

    def test_emissions_summed_by_region(self, five):
        df = chart_series(ChartType.TERRITORIAL_MT_CO2_BY_REGION, five)
        assert df["region"].tolist() == ["Africa", "Asia", "Europe", "North America", "Oceania"]
        assert df["value"].tolist() == pytest.approx([9.0, 99.0, 99.0, 999.0, 0.0])
        assert df["countries"].tolist() == [1, 1, 1, 1, 1]

    def test_gain_averaged_by_region(self, five):
        more = five + [make_country("ng", "Nigeria", 131.0, 36.0)]
        df = chart_series(ChartType.ND_GAIN_SCORE_BY_REGION, more)
        africa = df[df["region"] == "Africa"].iloc[0]
        assert africa["value"] == pytest.approx(38.0)
        assert africa["countries"] == 2

    def test_versus(self, five):
        df = chart_series(ChartType.ND_GAIN_SCORE_VS_CLIMA_JUSTICE_SCORE, five)
        assert list(df.columns) == ["id", "name", "x", "y"]
        tv = df[df["id"] == "tv"].iloc[0]
        assert tv["x"] == 40.0
        assert tv["y"] == pytest.approx(75.0)

    def test_bubble(self, five):
        df = chart_series(ChartType.BUBBLE_CHART, five)
        assert list(df.columns) == ["id", "name", "x", "y", "size"]
        us = df[df["id"] == "us"].iloc[0]
        assert (us["x"], us["y"], us["size"]) == (999.0, 67.0, 0.0)

    def test_empty_collection_by_region(self):
        df = chart_series(ChartType.CLIMA_JUSTICE_SCORE_BY_REGION, [])
        assert df.empty


class TestRegionSummary:
    def test_summary(self, five):
        df = region_summary(five)
        assert list(df.columns) == [
            "region", "countries", "total_mt_co2", "mean_nd_gain_score", "mean_clima_justice_score",
        ]
        oceania = df[df["region"] == "Oceania"].iloc[0]
        assert oceania["mean_clima_justice_score"] == pytest.approx(75.0)
        assert "South America" not in df["region"].tolist()

    def test_empty(self):
        assert region_summary([]).empty
