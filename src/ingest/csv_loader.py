"""CSV ingestion of user station data."""

import csv
import io
from pathlib import Path

import pandas as pd
from pydantic import ValidationError

from src.ingest.range_validator import RangeSeverity, validate_parameters
from src.ingest.stations import StationDataset, StationRecord, StationRow
from src.utils.config import CSV_COLUMN_ALIASES, CSV_REQUIRED_COLUMNS
from src.utils.logging_config import get_logger
from src.wqi.calculator import calculate_wqi

logger = get_logger(__name__)

_QUOTE_CHARS = "\"'"


class IngestError(Exception):
    """Raised when a CSV file cannot be turned into station data."""

    def __init__(self, message: str, source: str | None = None) -> None:
        super().__init__(message)
        self.source = source


def detect_delimiter(header_line: str) -> str:
    """Comma if the header contains one, otherwise semicolon."""
    return "," if "," in header_line else ";"


def map_columns(header: list[str]) -> dict[str, str]:
    """Map standard field names to the first matching alias in the header.

    Args:
        header: Normalized (stripped, lower-cased) column names

    Returns:
        Dict of standard name -> actual column name
    """
    column_map: dict[str, str] = {}
    for standard_name, aliases in CSV_COLUMN_ALIASES.items():
        found = next((alias for alias in aliases if alias in header), None)
        if found:
            column_map[standard_name] = found
    return column_map


def _read_frame(lines: list[str], delimiter: str) -> tuple[pd.DataFrame, int]:
    """Read non-blank CSV lines as strings.

    Data lines whose field count differs from the header's are dropped
    before parsing.
    """
    expected = len(lines[0].split(delimiter))
    kept = [lines[0]]
    skipped = 0
    for line_number, line in enumerate(lines[1:], start=2):
        found = len(line.split(delimiter))
        if found != expected:
            logger.warning(
                "Skipping line with column count mismatch",
                line=line_number,
                expected=expected,
                found=found,
            )
            skipped += 1
            continue
        kept.append(line)

    frame = pd.read_csv(
        io.StringIO("\n".join(kept)),
        sep=delimiter,
        header=None,
        dtype=str,
        keep_default_na=False,
        quoting=csv.QUOTE_NONE,
        index_col=False,
    )
    frame = frame.fillna("")

    # Repeated normalized names keep the last column.
    positions: dict[str, int] = {}
    for position, name in enumerate(frame.iloc[0]):
        positions[str(name).strip().lower()] = position
    frame = frame.iloc[1:, list(positions.values())].reset_index(drop=True)
    frame.columns = list(positions)
    for column in frame.columns:
        frame[column] = frame[column].str.strip().str.strip(_QUOTE_CHARS)

    return frame, skipped


def parse_station_csv(text: str) -> StationDataset:
    """Parse station readings from CSV text and score each row.

    The header decides the delimiter (comma, else semicolon). Columns are
    matched through ``CSV_COLUMN_ALIASES``; station, do and ph are required.
    Unparsable numeric cells fall back to parameter defaults. Rows whose
    field count differs from the header, or with no station name, are
    skipped and logged.

    Args:
        text: Raw CSV content

    Returns:
        StationDataset with one record per valid row

    Raises:
        IngestError: If the file is empty, lacks required columns or has no
            valid data rows
    """
    if not text or not text.strip():
        raise IngestError("The CSV file is empty")

    lines = [line for line in text.splitlines() if line.strip()]
    if len(lines) < 2:
        raise IngestError("CSV file must contain at least a header row and one data row")

    delimiter = detect_delimiter(lines[0])
    frame, skipped = _read_frame(lines, delimiter)

    column_map = map_columns(list(frame.columns))
    missing = [col for col in CSV_REQUIRED_COLUMNS if col not in column_map]
    if missing:
        raise IngestError(
            f"CSV file is missing minimum required columns: {', '.join(missing)}. "
            "At minimum, your CSV must include columns for station name, "
            "dissolved oxygen (DO), and pH."
        )

    dataset = StationDataset()

    for row_number, record in enumerate(frame.to_dict(orient="records"), start=1):
        values = {name: record.get(column, "") for name, column in column_map.items()}

        if not values.get("station"):
            logger.warning("Skipping row with missing station name", row=row_number)
            skipped += 1
            continue

        try:
            row = StationRow.model_validate(values)
        except ValidationError as e:
            logger.warning("Skipping invalid row", row=row_number, error=str(e))
            skipped += 1
            continue

        params = row.water_parameters()
        results, _ = validate_parameters(params)
        for result in results:
            if result.severity != RangeSeverity.OK:
                logger.warning(
                    "Reading outside expected range",
                    station=row.station,
                    parameter=result.parameter,
                    value=result.value,
                    severity=result.severity.value,
                )

        dataset.stations.append(
            StationRecord(
                station=row.station,
                location=row.location,
                state=row.state,
                latitude=row.latitude,
                longitude=row.longitude,
                wqi=calculate_wqi(params),
            )
        )
        dataset.parameters[row.station] = params

    if not dataset.stations:
        raise IngestError("No valid data rows found in CSV file")

    logger.info(
        "Parsed station CSV",
        stations=len(dataset.stations),
        skipped_rows=skipped,
        delimiter=delimiter,
    )
    return dataset


def load_station_csv(path: str | Path) -> StationDataset:
    """Load and parse a station CSV file.

    Args:
        path: Path to a ``.csv`` file

    Returns:
        Parsed StationDataset

    Raises:
        IngestError: If the file is not a CSV or cannot be parsed
    """
    path = Path(path)
    if path.suffix.lower() != ".csv":
        raise IngestError("Please upload a CSV file", source=str(path))

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise IngestError(f"Failed to read file: {e}", source=str(path)) from e

    try:
        return parse_station_csv(text)
    except IngestError as e:
        e.source = str(path)
        raise
