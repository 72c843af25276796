"""Statistical anomaly detection for WQI series."""

from dataclasses import dataclass
from enum import Enum

import numpy as np

from src.utils.config import IQR_MULTIPLIER, ZSCORE_THRESHOLD


class AnomalyMethod(str, Enum):
    """Detection method used to identify anomaly."""

    ZSCORE = "zscore"
    IQR = "iqr"


class AnomalySeverity(str, Enum):
    """Severity of detected anomaly."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass
class Anomaly:
    """An anomalous point in a WQI series."""

    index: int
    label: str  # e.g. the year
    value: float
    method: AnomalyMethod
    severity: AnomalySeverity
    message: str
    deviation: float  # z-score or IQR multiple


def detect_zscore_anomalies(
    values: list[float],
    labels: list[str],
    threshold: float = ZSCORE_THRESHOLD,
) -> list[Anomaly]:
    """Flag points whose absolute z-score exceeds a threshold.

    Uses the population standard deviation of the whole series.

    Args:
        values: WQI values in series order
        labels: Corresponding labels (years)
        threshold: Z-score threshold for anomaly detection

    Returns:
        List of detected anomalies
    """
    if not values:
        return []

    arr = np.array(values, dtype=float)
    mean = np.mean(arr)
    std = np.std(arr)
    if std == 0:
        return []

    anomalies: list[Anomaly] = []
    z_scores = np.abs((arr - mean) / std)
    for i, z in enumerate(z_scores):
        if z > threshold:
            direction = "above" if arr[i] > mean else "below"
            anomalies.append(
                Anomaly(
                    index=i,
                    label=labels[i],
                    value=values[i],
                    method=AnomalyMethod.ZSCORE,
                    severity=_zscore_to_severity(z),
                    message=f"WQI {values[i]} is {z:.1f} std devs {direction} the mean {mean:.1f}",
                    deviation=float(z),
                )
            )

    return anomalies


def detect_iqr_anomalies(
    values: list[float],
    labels: list[str],
    multiplier: float = IQR_MULTIPLIER,
) -> list[Anomaly]:
    """Detect anomalies using IQR (Interquartile Range) method.

    Args:
        values: WQI values in series order
        labels: Corresponding labels (years)
        multiplier: IQR multiplier for outlier bounds

    Returns:
        List of detected anomalies
    """
    if len(values) < 4:
        return []

    arr = np.array(values, dtype=float)
    q1 = np.percentile(arr, 25)
    q3 = np.percentile(arr, 75)
    iqr = q3 - q1

    lower_bound = q1 - (multiplier * iqr)
    upper_bound = q3 + (multiplier * iqr)

    anomalies: list[Anomaly] = []
    for i, val in enumerate(values):
        if val < lower_bound:
            deviation = (q1 - val) / iqr if iqr > 0 else 0.0
            message = f"WQI {val} is below IQR lower bound {lower_bound:.2f}"
        elif val > upper_bound:
            deviation = (val - q3) / iqr if iqr > 0 else 0.0
            message = f"WQI {val} is above IQR upper bound {upper_bound:.2f}"
        else:
            continue

        anomalies.append(
            Anomaly(
                index=i,
                label=labels[i],
                value=val,
                method=AnomalyMethod.IQR,
                severity=_iqr_deviation_to_severity(deviation),
                message=message,
                deviation=float(deviation),
            )
        )

    return anomalies


def detect_all_anomalies(
    values: list[float],
    labels: list[str],
    methods: list[AnomalyMethod] | None = None,
) -> list[Anomaly]:
    """Run the requested detection methods over a WQI series.

    When several methods flag the same point, the one with the higher
    severity is kept.

    Args:
        values: WQI values in series order
        labels: Corresponding labels (years)
        methods: List of methods to use (default: all)

    Returns:
        Anomalies in series order, one per flagged point
    """
    if len(values) != len(labels):
        raise ValueError(
            f"values and labels differ in length ({len(values)} != {len(labels)})"
        )

    if methods is None:
        methods = list(AnomalyMethod)

    found: list[Anomaly] = []
    if AnomalyMethod.ZSCORE in methods:
        found.extend(detect_zscore_anomalies(values, labels))
    if AnomalyMethod.IQR in methods:
        found.extend(detect_iqr_anomalies(values, labels))

    rank = {AnomalySeverity.LOW: 0, AnomalySeverity.MEDIUM: 1, AnomalySeverity.HIGH: 2}
    by_index: dict[int, Anomaly] = {}
    for anomaly in found:
        current = by_index.get(anomaly.index)
        if current is None or rank[anomaly.severity] > rank[current.severity]:
            by_index[anomaly.index] = anomaly

    return [by_index[i] for i in sorted(by_index)]


def calculate_anomaly_rate(anomalies: list[Anomaly], total_points: int) -> float:
    """Percentage of series points flagged as anomalous."""
    if total_points == 0:
        return 0.0
    return (len(anomalies) / total_points) * 100


def _zscore_to_severity(z: float) -> AnomalySeverity:
    """Map z-score to severity level."""
    if z > 3:
        return AnomalySeverity.HIGH
    elif z > 2.5:
        return AnomalySeverity.MEDIUM
    return AnomalySeverity.LOW


def _iqr_deviation_to_severity(deviation: float) -> AnomalySeverity:
    """Map IQR deviation to severity level."""
    if deviation > 3:
        return AnomalySeverity.HIGH
    elif deviation > 2:
        return AnomalySeverity.MEDIUM
    return AnomalySeverity.LOW
