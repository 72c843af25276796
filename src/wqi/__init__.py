"""Water Quality Index scoring engine."""

from src.wqi.calculator import (
    SubIndices,
    WQIAssessment,
    assess_water_quality,
    calculate_sub_indices,
    calculate_wqi,
    round_half_away_from_zero,
)
from src.wqi.classification import (
    WQICategory,
    get_wqi_category,
    get_wqi_color,
    get_wqi_text_color,
)
from src.wqi.parameters import PartialWaterParameters, WaterParameters, merge_parameters

__all__ = [
    # Parameters
    "PartialWaterParameters",
    "WaterParameters",
    "merge_parameters",
    # Scoring
    "SubIndices",
    "WQIAssessment",
    "calculate_sub_indices",
    "calculate_wqi",
    "assess_water_quality",
    "round_half_away_from_zero",
    # Classification
    "WQICategory",
    "get_wqi_category",
    "get_wqi_color",
    "get_wqi_text_color",
]
