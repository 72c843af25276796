"""Configuration constants for the Water Quality Index Monitor."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CategoryBand:
    """A WQI category with its inclusive lower bound and display colors."""

    label: str
    min_wqi: float
    color: str
    text_color: str


# Ordered parameter names used throughout the engine
PARAMETER_NAMES: tuple[str, ...] = (
    "do",
    "ph",
    "bod",
    "nitrates",
    "conductivity",
    "coliform",
    "temperature",
    "turbidity",
    "phosphates",
)

# Default readings used when a parameter is missing or unparsable
DEFAULT_PARAMETERS: dict[str, float] = {
    "do": 7.5,             # mg/L
    "ph": 7.2,
    "bod": 2.5,            # mg/L
    "nitrates": 15.0,      # mg/L
    "conductivity": 350.0, # μS/cm
    "coliform": 500.0,     # MPN/100ml
    "temperature": 25.0,   # °C
    "turbidity": 10.0,     # NTU
    "phosphates": 0.5,     # mg/L
}

# NSF WQI weight factors (sum to 1.0)
WQI_WEIGHTS: dict[str, float] = {
    "do": 0.17,
    "ph": 0.11,
    "bod": 0.11,
    "nitrates": 0.10,
    "conductivity": 0.08,
    "coliform": 0.16,
    "temperature": 0.10,
    "turbidity": 0.08,
    "phosphates": 0.09,
}

# Category bands, highest first. Every classifier reads from this table.
WQI_CATEGORY_BANDS: tuple[CategoryBand, ...] = (
    CategoryBand(label="Excellent", min_wqi=95.0, color="#10b981", text_color="#000000"),
    CategoryBand(label="Good", min_wqi=80.0, color="#34d399", text_color="#000000"),
    CategoryBand(label="Fair", min_wqi=65.0, color="#fbbf24", text_color="#000000"),
    CategoryBand(label="Marginal", min_wqi=45.0, color="#f97316", text_color="#ffffff"),
    CategoryBand(label="Poor", min_wqi=float("-inf"), color="#ef4444", text_color="#ffffff"),
)

# Sub-index curve constants
DO_SATURATION_COEFFICIENTS = (14.652, 0.41022, 0.007991)  # a - b*T + c*T^2 (mg/L)
PH_IDEAL_RANGE = (7.0, 8.5)
PH_LIMITS = (2.0, 12.0)
BOD_ZERO_POINT = 30.0            # mg/L
NITRATES_ZERO_POINT = 100.0      # mg/L
CONDUCTIVITY_ZERO_POINT = 2000.0 # μS/cm
COLIFORM_ZERO_POINT = 100_000.0  # MPN/100ml
COLIFORM_LOG_SPAN = 5.0          # log10 decades from 1 to 100,000
TEMPERATURE_IDEAL = 20.0         # °C
TEMPERATURE_PENALTY_PER_DEGREE = 5.0
TEMPERATURE_RANGE = (10.0, 30.0)
TEMPERATURE_OUT_OF_RANGE_SCORE = 50.0
TURBIDITY_ZERO_POINT = 100.0     # NTU
PHOSPHATES_ZERO_POINT = 10.0     # mg/L

# CSV ingestion: standard field -> accepted header aliases (first match wins)
CSV_COLUMN_ALIASES: dict[str, list[str]] = {
    "station": ["station", "station_name", "station_id", "name", "id"],
    "location": ["location", "loc", "place", "water_body", "river", "lake"],
    "state": ["state", "province", "region", "area"],
    "latitude": ["latitude", "lat", "y"],
    "longitude": ["longitude", "long", "lon", "lng", "x"],
    "do": ["do", "dissolved_oxygen", "oxygen"],
    "ph": ["ph", "ph_value"],
    "bod": ["bod", "biochemical_oxygen_demand"],
    "nitrates": ["nitrates", "nitrate", "no3", "nitrogen"],
    "coliform": ["coliform", "fecal_coliform", "bacteria"],
    "conductivity": ["conductivity", "cond", "ec"],
    "temperature": ["temperature", "temp", "water_temperature"],
    "turbidity": ["turbidity", "turb", "clarity"],
    "phosphates": ["phosphates", "phosphate", "po4", "phosphorus"],
}
CSV_REQUIRED_COLUMNS = ["station", "do", "ph"]

# Fallbacks for station metadata (geographic center of India)
DEFAULT_STATE = "Unknown"
DEFAULT_LATITUDE = 20.5937
DEFAULT_LONGITUDE = 78.9629

# Physical range thresholds for readings
# Each parameter has: min (critical), max (critical), warn_min, warn_max
RANGE_THRESHOLDS: dict[str, dict[str, float]] = {
    "do": {
        "min": 0.0,
        "max": 50.0,
        "warn_min": 2.0,
        "warn_max": 20.0,
    },
    "ph": {
        "min": 0.0,
        "max": 14.0,
        "warn_min": 4.0,
        "warn_max": 10.5,
    },
    "bod": {
        "min": 0.0,
        "max": 1000.0,
        "warn_min": 0.0,
        "warn_max": 30.0,
    },
    "nitrates": {
        "min": 0.0,
        "max": 1000.0,
        "warn_min": 0.0,
        "warn_max": 100.0,
    },
    "conductivity": {
        "min": 0.0,
        "max": 100_000.0,
        "warn_min": 0.0,
        "warn_max": 2000.0,
    },
    "coliform": {
        "min": 1e-9,  # log scale, must be strictly positive
        "max": 1e9,
        "warn_min": 1.0,
        "warn_max": 100_000.0,
    },
    "temperature": {
        "min": -5.0,
        "max": 100.0,
        "warn_min": 0.0,
        "warn_max": 40.0,
    },
    "turbidity": {
        "min": 0.0,
        "max": 10_000.0,
        "warn_min": 0.0,
        "warn_max": 100.0,
    },
    "phosphates": {
        "min": 0.0,
        "max": 1000.0,
        "warn_min": 0.0,
        "warn_max": 10.0,
    },
}

# Anomaly detection settings
ZSCORE_THRESHOLD = 2.0  # Standard deviations from mean
IQR_MULTIPLIER = 1.5    # IQR multiplier for outlier detection

# Stations at or below this category are reported as needing attention
ATTENTION_CATEGORIES = ("Marginal", "Poor")
