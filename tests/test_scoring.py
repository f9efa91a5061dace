"""
tests/test_scoring.py: log-CO2 scaling, the climate justice score and the
interpretation bands.
"""

import math

import pytest

from clima.scoring import (
    EMPTY_SCALING,
    clima_justice_score,
    emissions_component,
    emissions_tier,
    justice_band,
    log_co2_scaling,
    readiness_component,
    readiness_tier,
)
from conftest import KE, NO, TR, TV, US, make_country


# ---------------------------------------------------------------------------
# Log-CO2 scaling
# ---------------------------------------------------------------------------

class TestLogCO2Scaling:
    def test_empty_collection_is_exactly_zero_one(self):
        assert log_co2_scaling([]) == (0.0, 1.0)
        assert EMPTY_SCALING == (0.0, 1.0)

    def test_min_and_range(self, five):
        min_log, range_log = log_co2_scaling(five)
        assert min_log == 0.0
        assert range_log == 3.0

    def test_single_country_has_zero_range(self):
        min_log, range_log = log_co2_scaling([KE])
        assert min_log == pytest.approx(1.0)
        assert range_log == 0.0

    def test_accepts_any_iterable(self, five):
        assert log_co2_scaling(iter(five)) == log_co2_scaling(five)

    def test_depends_only_on_contents(self, five):
        assert log_co2_scaling(list(reversed(five))) == log_co2_scaling(five)


# ---------------------------------------------------------------------------
# Climate justice score
# ---------------------------------------------------------------------------

class TestClimaJusticeScore:
    @pytest.mark.parametrize("country, expected", [
        (KE, 2 * (2 / 3) * 0.6 / (2 / 3 + 0.6) * 100),
        (NO, 2 / 7 * 100),
        (TV, 75.0),
        (US, 0.0),
        (TR, 40.0),
    ])
    def test_hand_derived_scores(self, five, country, expected):
        min_log, range_log = log_co2_scaling(five)
        assert clima_justice_score(country, min_log, range_log) == pytest.approx(expected)

    def test_alpha_beta_both_score_zero(self, alpha_beta):
        """Polar opposites both score 0: the score needs low emissions AND high vulnerability."""
        alpha, beta = alpha_beta
        min_log, range_log = log_co2_scaling(alpha_beta)
        assert min_log == 0.0
        assert range_log == pytest.approx(math.log10(1001))
        assert range_log == pytest.approx(3.0004, abs=1e-4)

        assert emissions_component(alpha, min_log, range_log) == 1.0
        assert readiness_component(alpha) == 0.0
        assert clima_justice_score(alpha, min_log, range_log) == 0.0

        assert emissions_component(beta, min_log, range_log) == pytest.approx(0.0)
        assert readiness_component(beta) == 1.0
        assert clima_justice_score(beta, min_log, range_log) == pytest.approx(0.0)

    def test_full_readiness_and_lowest_emissions_is_zero(self, five):
        best_prepared = make_country("zz", "Zed", 0.0, 100.0)
        min_log, range_log = log_co2_scaling(five + [best_prepared])
        assert clima_justice_score(best_prepared, min_log, range_log) == pytest.approx(0.0)

    def test_single_country_emissions_component_is_zero(self):
        min_log, range_log = log_co2_scaling([KE])
        assert emissions_component(KE, min_log, range_log) == 0.0
        assert clima_justice_score(KE, min_log, range_log) == 0.0

    def test_both_components_zero(self):
        c = make_country("x", "X", 5.0, 100.0)
        min_log, range_log = log_co2_scaling([c])
        assert clima_justice_score(c, min_log, range_log) == 0.0

    def test_zero_emissions_is_valid(self):
        c = make_country("x", "X", 0.0, 0.0)
        assert clima_justice_score(c, 0.0, 1.0) == 100.0

    def test_scores_within_bounds(self, five):
        min_log, range_log = log_co2_scaling(five)
        for c in five:
            assert 0.0 <= clima_justice_score(c, min_log, range_log) <= 100.0

    def test_deterministic(self, five):
        min_log, range_log = log_co2_scaling(five)
        first = [clima_justice_score(c, min_log, range_log) for c in five]
        second = [clima_justice_score(c, min_log, range_log) for c in five]
        assert first == second

    def test_gain_above_100_is_not_clamped(self):
        c = make_country("x", "X", 0.0, 120.0)
        # C = 1, G = -0.2 -> 2 * 1 * -0.2 / 0.8 = -0.5
        assert clima_justice_score(c, 0.0, 1.0) == pytest.approx(-50.0)

    def test_gain_below_0_is_not_clamped(self):
        c = make_country("x", "X", 0.0, -20.0)
        assert clima_justice_score(c, 0.0, 1.0) > 100.0

    def test_readiness_inverts_gain(self):
        assert readiness_component(make_country("x", "X", 1.0, 25.0)) == 0.75


# ---------------------------------------------------------------------------
# Interpretation bands
# ---------------------------------------------------------------------------

class TestBands:
    @pytest.mark.parametrize("score, prefix", [
        (100.0, "Very high"),
        (80.0, "Very high"),
        (79.5, "High"),
        (60.0, "High"),
        (45.0, "Moderate"),
        (20.0, "Lower"),
        (19.99, "Low vulnerability"),
        (0.0, "Low vulnerability"),
    ])
    def test_justice_band(self, score, prefix):
        assert justice_band(score).startswith(prefix)

    @pytest.mark.parametrize("co2, label", [
        (11397.0, "Major emitter"),
        (1000.0, "Significant emitter"),
        (100.0, "Significant emitter"),
        (40.0, "Moderate emitter"),
        (1.4, "Low emitter"),
        (0.01, "Minimal emitter"),
    ])
    def test_emissions_tier(self, co2, label):
        assert emissions_tier(co2) == label

    @pytest.mark.parametrize("gain, prefix", [
        (75.1, "High readiness"),
        (52.2, "Moderate"),
        (30.0, "Lower"),
        (27.0, "Low readiness"),
    ])
    def test_readiness_tier(self, gain, prefix):
        assert readiness_tier(gain).startswith(prefix)
