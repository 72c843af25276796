"""Per-parameter sub-index curves for the NSF-style Water Quality Index.

Each function maps a single reading onto a 0-100 scale where 100 is the
ideal condition for that parameter. The curves are simplified linear or
logarithmic approximations of the NSF rating curves. Out-of-domain readings
are not rejected here; see ``src.ingest.range_validator`` for that.
"""

import math

from src.utils.config import (
    BOD_ZERO_POINT,
    COLIFORM_LOG_SPAN,
    COLIFORM_ZERO_POINT,
    CONDUCTIVITY_ZERO_POINT,
    DO_SATURATION_COEFFICIENTS,
    NITRATES_ZERO_POINT,
    PH_IDEAL_RANGE,
    PH_LIMITS,
    PHOSPHATES_ZERO_POINT,
    TEMPERATURE_IDEAL,
    TEMPERATURE_OUT_OF_RANGE_SCORE,
    TEMPERATURE_PENALTY_PER_DEGREE,
    TEMPERATURE_RANGE,
    TURBIDITY_ZERO_POINT,
)


def do_saturation_percent(do_mg_l: float, temperature: float) -> float:
    """Convert dissolved oxygen from mg/L to percent saturation.

    Uses a quadratic fit of oxygen solubility in fresh water against
    temperature in °C.
    """
    a, b, c = DO_SATURATION_COEFFICIENTS
    solubility = a - b * temperature + c * temperature * temperature
    return do_mg_l / solubility * 100


def calculate_do_sub_index(do_mg_l: float, temperature: float) -> float:
    """Sub-index for dissolved oxygen.

    Percent saturation capped at 100. There is no lower floor: a negative
    reading yields a negative sub-index.
    """
    return min(do_saturation_percent(do_mg_l, temperature), 100.0)


def calculate_ph_sub_index(ph: float) -> float:
    """Sub-index for pH: flat at 100 between 7 and 8.5, linear to 0 at 2 and 12."""
    low_limit, high_limit = PH_LIMITS
    ideal_low, ideal_high = PH_IDEAL_RANGE

    if ph < low_limit or ph > high_limit:
        return 0.0
    if ideal_low <= ph <= ideal_high:
        return 100.0
    if ph < ideal_low:
        return 100 - (ideal_low - ph) / (ideal_low - low_limit) * 100
    return 100 - (ph - ideal_high) / (high_limit - ideal_high) * 100


def _linear_decline(value: float, zero_point: float) -> float:
    """100 at zero, falling linearly to 0 at ``zero_point`` and 0 beyond it."""
    if value > zero_point:
        return 0.0
    return 100 - (value / zero_point) * 100


def calculate_bod_sub_index(bod: float) -> float:
    """Sub-index for biochemical oxygen demand (0 at 30 mg/L)."""
    return _linear_decline(bod, BOD_ZERO_POINT)


def calculate_nitrates_sub_index(nitrates: float) -> float:
    """Sub-index for nitrates (0 at 100 mg/L)."""
    return _linear_decline(nitrates, NITRATES_ZERO_POINT)


def calculate_conductivity_sub_index(conductivity: float) -> float:
    """Sub-index for conductivity (0 at 2000 μS/cm)."""
    return _linear_decline(conductivity, CONDUCTIVITY_ZERO_POINT)


def calculate_coliform_sub_index(coliform: float) -> float:
    """Sub-index for fecal coliform, logarithmic in the count.

    One MPN/100ml or less scores 100; above 100,000 scores 0. The cap covers
    zero and negative counts, where the logarithm is undefined, and also
    fractional counts in (0, 1), where the bare log curve would climb past
    100.
    """
    if coliform > COLIFORM_ZERO_POINT:
        return 0.0
    if coliform <= 1:
        return 100.0
    return 100 - (math.log10(coliform) / COLIFORM_LOG_SPAN) * 100


def calculate_temperature_sub_index(temperature: float) -> float:
    """Sub-index for water temperature.

    Loses 5 points per °C away from 20°C. Readings strictly below 10°C or
    strictly above 30°C are forced to 50, a step rather than a continuation
    of the linear curve.
    """
    low, high = TEMPERATURE_RANGE
    if temperature < low or temperature > high:
        return TEMPERATURE_OUT_OF_RANGE_SCORE
    return 100 - abs(temperature - TEMPERATURE_IDEAL) * TEMPERATURE_PENALTY_PER_DEGREE


def calculate_turbidity_sub_index(turbidity: float) -> float:
    """Sub-index for turbidity, one point lost per NTU."""
    if turbidity > TURBIDITY_ZERO_POINT:
        return 0.0
    return 100 - turbidity


def calculate_phosphates_sub_index(phosphates: float) -> float:
    """Sub-index for total phosphates (0 at 10 mg/L)."""
    return _linear_decline(phosphates, PHOSPHATES_ZERO_POINT)
