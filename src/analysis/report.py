"""Station-level WQI views and network summaries."""

from collections.abc import Mapping

import pandas as pd

from src.ingest.stations import StationDataset, StationRecord
from src.utils.config import ATTENTION_CATEGORIES
from src.wqi.calculator import (
    assess_water_quality,
    calculate_wqi,
    round_half_away_from_zero,
)
from src.wqi.classification import get_wqi_category, get_wqi_color, get_wqi_text_color
from src.wqi.parameters import WaterParameters


def calculate_station_wqi(
    station: str,
    parameters: Mapping[str, WaterParameters],
) -> float | None:
    """Compute the WQI for one station on demand.

    Args:
        station: Station name
        parameters: Readings keyed by station name

    Returns:
        WQI, or None if the station has no readings
    """
    params = parameters.get(station)
    if params is None:
        return None
    return calculate_wqi(params)


def stations_to_dataframe(dataset: StationDataset) -> pd.DataFrame:
    """Convert a dataset to a pandas DataFrame, one row per station.

    Args:
        dataset: Parsed stations and readings

    Returns:
        DataFrame with location, WQI, category, colors and readings
    """
    rows = []
    for s in dataset.stations:
        row = {
            "station": s.station,
            "location": s.location,
            "state": s.state,
            "latitude": s.latitude,
            "longitude": s.longitude,
            "wqi": s.wqi,
            "category": get_wqi_category(s.wqi).value,
            "color": get_wqi_color(s.wqi),
            "text_color": get_wqi_text_color(s.wqi),
        }
        params = dataset.parameters.get(s.station)
        if params is not None:
            row.update(params.to_dict())
        rows.append(row)

    return pd.DataFrame(rows)


def generate_network_summary(stations: list[StationRecord]) -> dict:
    """Summarize WQI across a set of stations.

    Args:
        stations: Station records

    Returns:
        Dictionary with network-wide metrics
    """
    if not stations:
        return {
            "total_stations": 0,
            "average_wqi": 0.0,
            "min_wqi": None,
            "max_wqi": None,
            "category_distribution": {},
            "stations_needing_attention": 0,
        }

    category_dist: dict[str, int] = {}
    for s in stations:
        label = get_wqi_category(s.wqi).value
        category_dist[label] = category_dist.get(label, 0) + 1

    wqis = [s.wqi for s in stations]
    return {
        "total_stations": len(stations),
        "average_wqi": round_half_away_from_zero(sum(wqis) / len(wqis)),
        "min_wqi": min(wqis),
        "max_wqi": max(wqis),
        "category_distribution": category_dist,
        "stations_needing_attention": sum(
            category_dist.get(label, 0) for label in ATTENTION_CATEGORIES
        ),
    }


def format_station_summary(record: StationRecord, params: WaterParameters | None = None) -> str:
    """Format a station as human-readable text.

    Args:
        record: Station record
        params: Readings to break down by sub-index, if available

    Returns:
        Formatted string summary
    """
    lines = [
        f"Station: {record.station}",
        f"Location: {record.location}, {record.state}",
        f"Coordinates: {record.latitude:.4f}, {record.longitude:.4f}",
        "",
        f"WQI: {record.wqi:.1f} ({get_wqi_category(record.wqi).value})",
    ]

    if params is not None:
        assessment = assess_water_quality(params)
        readings = params.to_dict()
        lines.append("")
        lines.append("Sub-indices:")
        for name, score in assessment.sub_indices.to_dict().items():
            lines.append(f"  {name}: {score:.1f} (reading {readings[name]:g})")

    return "\n".join(lines)
