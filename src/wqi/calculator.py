"""Composite Water Quality Index calculation."""

import math
from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any

from src.utils.config import WQI_WEIGHTS
from src.wqi.classification import (
    WQICategory,
    get_wqi_category,
    get_wqi_color,
    get_wqi_text_color,
)
from src.wqi.parameters import WaterParameters, merge_parameters
from src.wqi.sub_indices import (
    calculate_bod_sub_index,
    calculate_coliform_sub_index,
    calculate_conductivity_sub_index,
    calculate_do_sub_index,
    calculate_nitrates_sub_index,
    calculate_ph_sub_index,
    calculate_phosphates_sub_index,
    calculate_temperature_sub_index,
    calculate_turbidity_sub_index,
)

ParameterInput = Mapping[str, Any] | WaterParameters | None


@dataclass(frozen=True)
class SubIndices:
    """Per-parameter sub-index scores (nominally 0-100)."""

    do: float
    ph: float
    bod: float
    nitrates: float
    conductivity: float
    coliform: float
    temperature: float
    turbidity: float
    phosphates: float

    def to_dict(self) -> dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class WQIAssessment:
    """A WQI score with its classification and breakdown."""

    wqi: float
    category: WQICategory
    color: str
    text_color: str
    parameters: WaterParameters
    sub_indices: SubIndices


def round_half_away_from_zero(value: float, digits: int = 1) -> float:
    """Round to ``digits`` decimals, with ties going away from zero."""
    if not math.isfinite(value):
        return value
    factor = 10 ** digits
    return math.copysign(math.floor(abs(value) * factor + 0.5) / factor, value)


def calculate_sub_indices(params: ParameterInput = None) -> SubIndices:
    """Compute all nine sub-indices from (possibly partial) readings."""
    p = merge_parameters(params)
    return SubIndices(
        do=calculate_do_sub_index(p.do, p.temperature),
        ph=calculate_ph_sub_index(p.ph),
        bod=calculate_bod_sub_index(p.bod),
        nitrates=calculate_nitrates_sub_index(p.nitrates),
        conductivity=calculate_conductivity_sub_index(p.conductivity),
        coliform=calculate_coliform_sub_index(p.coliform),
        temperature=calculate_temperature_sub_index(p.temperature),
        turbidity=calculate_turbidity_sub_index(p.turbidity),
        phosphates=calculate_phosphates_sub_index(p.phosphates),
    )


def weighted_index(
    sub_indices: SubIndices,
    weights: Mapping[str, float] | None = None,
) -> float:
    """Weighted mean of sub-indices, normalized by the total weight.

    Args:
        sub_indices: Sub-index scores
        weights: Optional custom weights keyed by parameter name

    Returns:
        Unrounded composite score
    """
    weights = weights or WQI_WEIGHTS

    weighted_sum = 0.0
    total_weight = 0.0
    for name, score in sub_indices.to_dict().items():
        weight = weights[name]
        weighted_sum += score * weight
        total_weight += weight

    return weighted_sum / total_weight


def calculate_wqi(
    params: ParameterInput = None,
    weights: Mapping[str, float] | None = None,
) -> float:
    """Calculate the Water Quality Index for a set of readings.

    Missing or non-numeric readings are replaced with defaults before
    scoring. The function is pure and never raises for finite input.

    Args:
        params: Any subset of the nine readings
        weights: Optional custom weights (must cover all nine parameters)

    Returns:
        WQI rounded to one decimal place
    """
    return round_half_away_from_zero(weighted_index(calculate_sub_indices(params), weights))


def assess_water_quality(
    params: ParameterInput = None,
    weights: Mapping[str, float] | None = None,
) -> WQIAssessment:
    """Score readings and attach category, colors and sub-index breakdown.

    Args:
        params: Any subset of the nine readings
        weights: Optional custom weights

    Returns:
        WQIAssessment for display surfaces
    """
    merged = merge_parameters(params)
    sub_indices = calculate_sub_indices(merged)
    wqi = round_half_away_from_zero(weighted_index(sub_indices, weights))

    return WQIAssessment(
        wqi=wqi,
        category=get_wqi_category(wqi),
        color=get_wqi_color(wqi),
        text_color=get_wqi_text_color(wqi),
        parameters=merged,
        sub_indices=sub_indices,
    )
