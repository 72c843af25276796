"""Water chemistry parameter records and default merging."""

import math
from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields
from numbers import Real
from typing import Any, TypedDict

from src.utils.config import DEFAULT_PARAMETERS


class PartialWaterParameters(TypedDict, total=False):
    """Any subset of the nine readings, as supplied by callers."""

    do: float
    ph: float
    bod: float
    nitrates: float
    conductivity: float
    coliform: float
    temperature: float
    turbidity: float
    phosphates: float


@dataclass(frozen=True)
class WaterParameters:
    """A fully populated set of water chemistry readings."""

    do: float            # Dissolved oxygen (mg/L)
    ph: float            # pH
    bod: float           # Biochemical oxygen demand (mg/L)
    nitrates: float      # Nitrates (mg/L)
    conductivity: float  # Conductivity (μS/cm)
    coliform: float      # Fecal coliform (MPN/100ml)
    temperature: float   # Water temperature (°C)
    turbidity: float     # Turbidity (NTU)
    phosphates: float    # Total phosphates (mg/L)

    def to_dict(self) -> dict[str, float]:
        """Return the readings as a plain dict."""
        return asdict(self)


def is_usable_reading(value: Any) -> bool:
    """Return True if a value is a real number that is not NaN."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return not math.isnan(value)


def merge_parameters(
    params: "Mapping[str, Any] | WaterParameters | None" = None,
) -> WaterParameters:
    """Merge supplied readings over the defaults.

    Supplied values win only when they are numeric and not NaN; anything
    else (absent keys, None, strings, booleans, NaN) falls back to the
    default for that parameter. Unknown keys are ignored.

    Args:
        params: Partial readings, a complete WaterParameters, or None

    Returns:
        A new fully populated WaterParameters
    """
    if isinstance(params, WaterParameters):
        return params

    supplied = params or {}
    merged: dict[str, float] = {}
    for f in fields(WaterParameters):
        value = supplied.get(f.name)
        merged[f.name] = float(value) if is_usable_reading(value) else DEFAULT_PARAMETERS[f.name]

    return WaterParameters(**merged)
