"""Metric direction policy: which evaluation metrics W&B should summarize as min or max."""

from enum import Enum

from .constants import MAXIMIZE_METRICS, MINIMIZE_METRICS
from .protocols import TrackingSession


class MetricDirection(Enum):
    """Summary reduction declared for a metric; ``value`` is W&B's ``summary`` argument."""
    MINIMIZE = "min"
    MAXIMIZE = "max"
    UNDECLARED = None


def metric_key(split: str, metric: str) -> str:
    """Logged key for a metric of one evaluation split, e.g. ``train-rmse``."""
    return f"{split}-{metric}"


def classify(metric_name: str) -> MetricDirection:
    """Classify an XGBoost metric name (case-insensitive).

    Parameterized metrics such as ``error@0.7`` or ``ndcg@5`` are looked up by
    their base name.
    """
    name = metric_name.lower()
    base = name.split("@", 1)[0]
    if "loss" in name or base in MINIMIZE_METRICS:
        return MetricDirection.MINIMIZE
    if base in MAXIMIZE_METRICS:
        return MetricDirection.MAXIMIZE
    return MetricDirection.UNDECLARED


def declare(session: TrackingSession, split: str, metric: str) -> MetricDirection:
    """Declare the summary direction of ``{split}-{metric}``; unknown metrics make no call."""
    direction = classify(metric)
    if direction is not MetricDirection.UNDECLARED:
        session.define_metric(metric_key(split, metric), summary=direction.value)
    return direction
