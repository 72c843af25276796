"""Station records and the pydantic model used to coerce raw CSV rows."""

import math
import re
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, Field, model_validator

from src.utils.config import (
    DEFAULT_LATITUDE,
    DEFAULT_LONGITUDE,
    DEFAULT_PARAMETERS,
    DEFAULT_STATE,
    PARAMETER_NAMES,
)
from src.wqi.parameters import WaterParameters

_LEADING_NUMBER = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

NUMERIC_FIELDS = ("latitude", "longitude", *PARAMETER_NAMES)


@dataclass
class StationRecord:
    """A monitoring station with its location and computed WQI."""

    station: str
    location: str
    state: str
    latitude: float
    longitude: float
    wqi: float


@dataclass
class StationDataset:
    """Stations together with the readings each WQI was computed from."""

    stations: list[StationRecord] = field(default_factory=list)
    parameters: dict[str, WaterParameters] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.stations)


def parse_float(raw: Any) -> float | None:
    """Parse a reading leniently.

    Accepts the leading number of a string ("7.2 mg/L" -> 7.2). Returns None
    for blanks, text without a leading number, NaN and infinities, including
    "Infinity" and overflowing exponents such as "1e999".
    """
    if raw is None:
        return None
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        value = float(raw)
    else:
        match = _LEADING_NUMBER.match(str(raw))
        if not match:
            return None
        value = float(match.group(0))

    if not math.isfinite(value):
        return None
    return value


class StationRow(BaseModel):
    """One CSV data row after column aliasing."""

    station: str = Field(..., min_length=1, description="Station name")
    location: str = Field(default="", description="Water body or place")
    state: str = Field(default=DEFAULT_STATE, description="State or region")
    latitude: float = Field(default=DEFAULT_LATITUDE)
    longitude: float = Field(default=DEFAULT_LONGITUDE)

    do: float = Field(default=DEFAULT_PARAMETERS["do"], description="Dissolved oxygen (mg/L)")
    ph: float = Field(default=DEFAULT_PARAMETERS["ph"])
    bod: float = Field(default=DEFAULT_PARAMETERS["bod"], description="BOD (mg/L)")
    nitrates: float = Field(default=DEFAULT_PARAMETERS["nitrates"], description="mg/L")
    conductivity: float = Field(default=DEFAULT_PARAMETERS["conductivity"], description="μS/cm")
    coliform: float = Field(default=DEFAULT_PARAMETERS["coliform"], description="MPN/100ml")
    temperature: float = Field(default=DEFAULT_PARAMETERS["temperature"], description="°C")
    turbidity: float = Field(default=DEFAULT_PARAMETERS["turbidity"], description="NTU")
    phosphates: float = Field(default=DEFAULT_PARAMETERS["phosphates"], description="mg/L")

    @model_validator(mode="before")
    @classmethod
    def drop_blank_and_unparsable(cls, data: Any) -> Any:
        """Remove empty or non-numeric cells so field defaults apply."""
        if not isinstance(data, dict):
            return data

        cleaned: dict[str, Any] = {}
        for key, raw in data.items():
            if key in NUMERIC_FIELDS:
                value = parse_float(raw)
                if value is not None:
                    cleaned[key] = value
            elif isinstance(raw, str):
                text = raw.strip()
                if text or key == "station":
                    cleaned[key] = text
            elif raw is not None:
                cleaned[key] = raw

        if not cleaned.get("location") and cleaned.get("station"):
            cleaned["location"] = cleaned["station"]
        return cleaned

    def water_parameters(self) -> WaterParameters:
        """Readings from this row as a complete WaterParameters."""
        return WaterParameters(**{name: getattr(self, name) for name in PARAMETER_NAMES})
