"""Tests for composite WQI calculation."""

import math

import pytest

from src.utils.config import DEFAULT_PARAMETERS, WQI_WEIGHTS
from src.wqi.calculator import (
    assess_water_quality,
    calculate_sub_indices,
    calculate_wqi,
    round_half_away_from_zero,
)
from src.wqi.classification import WQICategory
from src.wqi.parameters import WaterParameters, merge_parameters


class TestMergeParameters:
    """Tests for merge_parameters function."""

    def test_empty_input_uses_defaults(self) -> None:
        """No readings yields the documented defaults."""
        merged = merge_parameters({})
        assert merged.to_dict() == DEFAULT_PARAMETERS

    def test_none_uses_defaults(self) -> None:
        """None behaves like an empty mapping."""
        assert merge_parameters(None) == merge_parameters({})

    def test_supplied_values_win(self) -> None:
        """Numeric readings override defaults."""
        merged = merge_parameters({"do": 4.0, "coliform": 1200})
        assert merged.do == 4.0
        assert merged.coliform == 1200.0
        assert merged.ph == DEFAULT_PARAMETERS["ph"]

    @pytest.mark.parametrize("bad", [None, "7.0", float("nan"), True, [7.0]])
    def test_unusable_values_fall_back(self, bad: object) -> None:
        """Non-numeric, boolean and NaN values are replaced by the default."""
        merged = merge_parameters({"ph": bad})
        assert merged.ph == DEFAULT_PARAMETERS["ph"]

    def test_zero_is_honored(self) -> None:
        """Zero is a real reading, not a missing one."""
        assert merge_parameters({"turbidity": 0}).turbidity == 0.0

    def test_unknown_keys_ignored(self) -> None:
        """Extra keys do not end up in the record."""
        merged = merge_parameters({"salinity": 3.0})
        assert not hasattr(merged, "salinity")

    def test_merged_record_is_immutable(self) -> None:
        """The merged record is frozen."""
        merged = merge_parameters({})
        with pytest.raises(AttributeError):
            merged.do = 1.0  # type: ignore[misc]

    def test_input_mapping_not_modified(self) -> None:
        """Caller's mapping is left untouched."""
        supplied = {"do": 6.0}
        merge_parameters(supplied)
        assert supplied == {"do": 6.0}


class TestCalculateWQI:
    """Tests for calculate_wqi function."""

    def test_defaults_baseline(self) -> None:
        """All-default readings give a fixed regression baseline."""
        assert calculate_wqi({}) == 80.4

    def test_sample_station_1(self, sample_station_1_params: dict[str, float]) -> None:
        """Sample Station 1 readings score 79.8."""
        assert calculate_wqi(sample_station_1_params) == 79.8

    def test_accepts_water_parameters(self, sample_station_1_params: dict[str, float]) -> None:
        """A complete WaterParameters scores the same as the mapping."""
        params = WaterParameters(**sample_station_1_params)
        assert calculate_wqi(params) == calculate_wqi(sample_station_1_params)

    def test_idempotent(self, sample_station_1_params: dict[str, float]) -> None:
        """Repeated calls with the same input agree."""
        first = calculate_wqi(sample_station_1_params)
        second = calculate_wqi(sample_station_1_params)
        assert first == second

    def test_pristine_water_scores_high(self, pristine_params: dict[str, float]) -> None:
        """Near-ideal readings score 100."""
        assert calculate_wqi(pristine_params) == 100.0

    def test_rounded_to_one_decimal(self, sample_station_1_params: dict[str, float]) -> None:
        """Result has at most one decimal place."""
        wqi = calculate_wqi({**sample_station_1_params, "do": 6.37})
        assert wqi == round(wqi, 1)

    def test_weighted_mean_of_sub_indices(
        self, sample_station_1_params: dict[str, float]
    ) -> None:
        """WQI is the weight-normalized mean of the sub-indices."""
        subs = calculate_sub_indices(sample_station_1_params).to_dict()
        expected = sum(subs[k] * WQI_WEIGHTS[k] for k in subs) / sum(WQI_WEIGHTS.values())
        assert calculate_wqi(sample_station_1_params) == pytest.approx(expected, abs=0.05)

    def test_custom_weights(self) -> None:
        """Custom weights change the aggregation."""
        only_ph = {name: 0.0 for name in WQI_WEIGHTS}
        only_ph["ph"] = 1.0
        assert calculate_wqi({"ph": 4.0}, weights=only_ph) == 40.0

    def test_weights_normalized_by_total(self) -> None:
        """Scaling every weight leaves the result unchanged."""
        doubled = {name: w * 2 for name, w in WQI_WEIGHTS.items()}
        assert calculate_wqi({}, weights=doubled) == calculate_wqi({})

    @pytest.mark.parametrize(
        "overrides",
        [
            {"do": 0.0, "ph": 1.0, "bod": 50, "nitrates": 200, "conductivity": 5000,
             "coliform": 1e7, "temperature": 35, "turbidity": 500, "phosphates": 20},
            {"do": 20.0, "ph": 7.5, "bod": 0, "nitrates": 0, "conductivity": 0,
             "coliform": 1, "temperature": 20, "turbidity": 0, "phosphates": 0},
            {"temperature": 5.0},
            {"coliform": 0.0},
            {"ph": 14.0, "turbidity": 99.9},
        ],
    )
    def test_in_domain_output_within_0_100(self, overrides: dict[str, float]) -> None:
        """Non-negative readings always score within [0, 100]."""
        wqi = calculate_wqi(overrides)
        assert 0.0 <= wqi <= 100.0

    def test_worst_case_floor(self) -> None:
        """Uniformly terrible water bottoms out at the temperature override."""
        wqi = calculate_wqi({
            "do": 0.0, "ph": 1.0, "bod": 50, "nitrates": 200, "conductivity": 5000,
            "coliform": 1e7, "temperature": 35, "turbidity": 500, "phosphates": 20,
        })
        # Only temperature contributes: 50 * 0.10
        assert wqi == 5.0

    def test_negative_do_can_push_below_zero(self) -> None:
        """The unfloored DO sub-index is a known exception to the 0-100 range."""
        wqi = calculate_wqi({
            "do": -100.0, "ph": 1.0, "bod": 50, "nitrates": 200, "conductivity": 5000,
            "coliform": 1e7, "temperature": 35, "turbidity": 500, "phosphates": 20,
        })
        assert wqi < 0

    def test_zero_coliform_is_finite(self) -> None:
        """Zero coliform does not poison the score with NaN or infinity."""
        assert math.isfinite(calculate_wqi({"coliform": 0}))

    def test_never_raises_for_finite_input(self) -> None:
        """Odd but finite readings still produce a number."""
        wqi = calculate_wqi({name: -1.0 for name in WQI_WEIGHTS})
        assert math.isfinite(wqi)


class TestAssessWaterQuality:
    """Tests for assess_water_quality function."""

    def test_assessment_matches_score(self, sample_station_1_params: dict[str, float]) -> None:
        """Assessment carries the same WQI and its category."""
        assessment = assess_water_quality(sample_station_1_params)
        assert assessment.wqi == 79.8
        assert assessment.category == WQICategory.FAIR
        assert assessment.color == "#fbbf24"
        assert assessment.text_color == "#000000"

    def test_breakdown_included(self) -> None:
        """Merged readings and sub-indices are exposed."""
        assessment = assess_water_quality({"ph": 7.5})
        assert assessment.parameters.ph == 7.5
        assert assessment.sub_indices.ph == 100.0


class TestRoundHalfAwayFromZero:
    """Tests for round_half_away_from_zero."""

    def test_half_rounds_up(self) -> None:
        """Ties at the hundredths digit round away from zero."""
        assert round_half_away_from_zero(0.25) == 0.3
        assert round_half_away_from_zero(2.5, digits=0) == 3.0

    def test_negative_half_rounds_down(self) -> None:
        """Negative ties round away from zero too."""
        assert round_half_away_from_zero(-0.25) == -0.3

    def test_non_finite_passthrough(self) -> None:
        """NaN is returned unchanged."""
        assert math.isnan(round_half_away_from_zero(float("nan")))
