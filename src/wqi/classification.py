"""WQI category and color classification."""

from enum import Enum

from src.utils.config import WQI_CATEGORY_BANDS, CategoryBand


class WQICategory(str, Enum):
    """Qualitative water quality category."""

    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    MARGINAL = "Marginal"
    POOR = "Poor"


def _band_for(wqi: float) -> CategoryBand:
    """Find the first band whose inclusive lower bound the score reaches."""
    for band in WQI_CATEGORY_BANDS:
        if wqi >= band.min_wqi:
            return band
    # NaN fails every comparison
    return WQI_CATEGORY_BANDS[-1]


def get_wqi_category(wqi: float) -> WQICategory:
    """Classify a WQI value.

    Applies to computed, predicted and manually entered values alike.
    """
    return WQICategory(_band_for(wqi).label)


def get_wqi_color(wqi: float) -> str:
    """Hex fill color for a WQI value's category."""
    return _band_for(wqi).color


def get_wqi_text_color(wqi: float) -> str:
    """Hex text color that contrasts with ``get_wqi_color``."""
    return _band_for(wqi).text_color
