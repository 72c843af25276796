"""Station reporting and WQI series analysis."""

from src.analysis.anomaly_detector import (
    Anomaly,
    AnomalyMethod,
    AnomalySeverity,
    calculate_anomaly_rate,
    detect_all_anomalies,
    detect_iqr_anomalies,
    detect_zscore_anomalies,
)
from src.analysis.report import (
    calculate_station_wqi,
    format_station_summary,
    generate_network_summary,
    stations_to_dataframe,
)

__all__ = [
    # Reports
    "calculate_station_wqi",
    "stations_to_dataframe",
    "generate_network_summary",
    "format_station_summary",
    # Anomaly detection
    "Anomaly",
    "AnomalyMethod",
    "AnomalySeverity",
    "detect_zscore_anomalies",
    "detect_iqr_anomalies",
    "detect_all_anomalies",
    "calculate_anomaly_rate",
]
