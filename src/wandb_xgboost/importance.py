"""Feature importance extraction and W&B bar-chart reporting."""

from typing import Any

from .constants import FEATURE_COLUMNS, FEATURE_IMPORTANCE_KEY, ImportanceType
from .protocols import ImportanceScores, ModelSnapshot, TrackingClient, TrackingSession
from .utils.logging import get_logger

logger = get_logger(__name__)


def normalize(scores: ImportanceScores) -> ImportanceScores:
    """Rescale scores to sum to 1.0. A zero total leaves them unchanged."""
    total = sum(scores.values())
    if total == 0:
        logger.warning("Feature importance sums to zero; skipping normalization")
        return dict(scores)
    return {feature: score / total for feature, score in scores.items()}


class FeatureImportanceReporter:
    """Extracts per-feature importance from a booster and logs it as a table + bar plot."""

    def __init__(
        self,
        client: TrackingClient,
        importance_type: str = ImportanceType.GAIN,
        normalize: bool = True,
    ):
        self.client = client
        self.importance_type = importance_type
        self.normalize = normalize

    def compute(self, model: ModelSnapshot) -> ImportanceScores:
        scores = {
            str(feature): float(score)
            for feature, score in model.get_score(importance_type=self.importance_type).items()
        }
        return normalize(scores) if self.normalize else scores

    def report(self, model: ModelSnapshot, session: TrackingSession) -> Any:
        """Log ``Feature Importance`` to the session and return the bar plot."""
        scores = self.compute(model)
        feature_col, importance_col = FEATURE_COLUMNS

        table = self.client.table(data=[[f, s] for f, s in scores.items()], columns=list(FEATURE_COLUMNS))
        bar_plot = self.client.bar(table, feature_col, importance_col, title=FEATURE_IMPORTANCE_KEY)
        session.log({FEATURE_IMPORTANCE_KEY: bar_plot})

        logger.debug(f"Logged {self.importance_type} importance for {len(scores)} features")
        return bar_plot
