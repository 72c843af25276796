"""Utility modules for configuration and logging."""

from src.utils.config import (
    CSV_COLUMN_ALIASES,
    DEFAULT_PARAMETERS,
    PARAMETER_NAMES,
    RANGE_THRESHOLDS,
    WQI_CATEGORY_BANDS,
    WQI_WEIGHTS,
    CategoryBand,
)
from src.utils.logging_config import configure_logging, get_logger

__all__ = [
    "CategoryBand",
    "PARAMETER_NAMES",
    "DEFAULT_PARAMETERS",
    "WQI_WEIGHTS",
    "WQI_CATEGORY_BANDS",
    "CSV_COLUMN_ALIASES",
    "RANGE_THRESHOLDS",
    "configure_logging",
    "get_logger",
]
