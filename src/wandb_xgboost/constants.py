"""Centralized constants for the W&B XGBoost integration."""

from typing import Final


# Credentials
API_KEY_ENV_VAR: Final[str] = "WANDB_API_KEY"

# Metric direction lookup (lower-case, XGBoost eval_metric names)
MINIMIZE_METRICS: Final[frozenset[str]] = frozenset({
    "rmse", "rmsle", "mae", "mape", "mphe", "logloss", "mlogloss", "error", "merror",
    "poisson-nloglik", "gamma-nloglik", "cox-nloglik", "gamma-deviance", "tweedie-nloglik",
})
MAXIMIZE_METRICS: Final[frozenset[str]] = frozenset({
    "auc", "aucpr", "accuracy", "map", "ndcg", "pre",
})

# Logged keys
EPOCH_KEY: Final[str] = "epoch"
BEST_SCORE_KEY: Final[str] = "best_score"
BEST_ITERATION_KEY: Final[str] = "best_iteration"
FEATURE_IMPORTANCE_KEY: Final[str] = "Feature Importance"
FEATURE_COLUMNS: Final[tuple[str, str]] = ("Feature", "Importance")

# Model artifact
MODEL_ARTIFACT_NAME: Final[str] = "model.json"
MODEL_ARTIFACT_TYPE: Final[str] = "model"
MODEL_TMPDIR_PREFIX: Final[str] = "wandb_xgboost_model"


class ImportanceType:
    """Feature importance schemes understood by ``Booster.get_score``."""
    WEIGHT: Final[str] = "weight"
    GAIN: Final[str] = "gain"
    COVER: Final[str] = "cover"
    TOTAL_GAIN: Final[str] = "total_gain"
    TOTAL_COVER: Final[str] = "total_cover"

    ALL: Final[tuple[str, ...]] = (WEIGHT, GAIN, COVER, TOTAL_GAIN, TOTAL_COVER)
