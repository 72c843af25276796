"""Station data ingestion and reading validation."""

from src.ingest.csv_loader import (
    IngestError,
    detect_delimiter,
    load_station_csv,
    map_columns,
    parse_station_csv,
)
from src.ingest.range_validator import (
    RangeCheckResult,
    RangeSeverity,
    calculate_range_validity_score,
    check_parameter_range,
    validate_parameters,
)
from src.ingest.sample_data import SAMPLE_CSV, load_sample_dataset
from src.ingest.stations import StationDataset, StationRecord, StationRow, parse_float

__all__ = [
    # Station models
    "StationRecord",
    "StationDataset",
    "StationRow",
    "parse_float",
    # CSV ingestion
    "IngestError",
    "detect_delimiter",
    "map_columns",
    "parse_station_csv",
    "load_station_csv",
    "SAMPLE_CSV",
    "load_sample_dataset",
    # Range validation
    "RangeCheckResult",
    "RangeSeverity",
    "check_parameter_range",
    "validate_parameters",
    "calculate_range_validity_score",
]
