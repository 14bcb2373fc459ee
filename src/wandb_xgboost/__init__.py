"""Weights & Biases telemetry for XGBoost training.

Attach ``WandbCallback`` to ``xgboost.train`` to stream hyperparameters,
sampled evaluation metrics, feature importance and the trained model to a
W&B run.
"""

__version__ = "0.3.0"

from .artifacts import ModelArtifactExporter
from .callback import WandbCallback
from .config import ConfigurationError, RunConfig, load_config
from .constants import ImportanceType
from .importance import FeatureImportanceReporter
from .metrics import MetricDirection, classify
from .protocols import ModelSnapshot, TrackingClient, TrackingSession
from .sampling import logging_stride, should_log
from .tracking import WandbClient

__all__ = [
    "__version__",
    "WandbCallback",
    "RunConfig",
    "ConfigurationError",
    "load_config",
    "ImportanceType",
    "MetricDirection",
    "classify",
    "logging_stride",
    "should_log",
    "FeatureImportanceReporter",
    "ModelArtifactExporter",
    "WandbClient",
    "ModelSnapshot",
    "TrackingClient",
    "TrackingSession",
]
