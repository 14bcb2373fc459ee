"""XGBoost training callback that streams telemetry to Weights & Biases."""

import json
from typing import Any, Mapping

from xgboost.callback import TrainingCallback

from .artifacts import ModelArtifactExporter
from .config import RunConfig
from .constants import BEST_ITERATION_KEY, BEST_SCORE_KEY, EPOCH_KEY
from .importance import FeatureImportanceReporter
from .metrics import declare, metric_key
from .protocols import IterationHistory, ModelSnapshot, TrackingClient, TrackingSession
from .sampling import should_log
from .tracking import WandbClient
from .utils.logging import get_logger

logger = get_logger(__name__)


class WandbCallback(TrainingCallback):
    """Logs hyperparameters, sampled eval metrics, feature importance and the model to W&B.

    Usage:
        callback = WandbCallback(project_name="my-project", log_model=True)
        xgb.train(params, dtrain, evals=[(dtrain, "train"), (dvalid, "eval")], callbacks=[callback])

    Metric directions are declared at most once per ``(split, metric)`` pair for
    the lifetime of the callback, whatever order iterations arrive in.
    """

    def __init__(
        self,
        config: RunConfig | None = None,
        *,
        client: TrackingClient | None = None,
        session: TrackingSession | None = None,
        **options: Any,
    ):
        super().__init__()
        if config is not None and options:
            raise TypeError(f"Pass either config or keyword options, not both: {sorted(options)}")
        self.config = config if config is not None else RunConfig(**options)
        self.client = client if client is not None else WandbClient()
        self._session = session
        self._declared: set[tuple[str, str]] = set()
        self.exporter = ModelArtifactExporter(self.client)
        self.importance = FeatureImportanceReporter(
            self.client,
            importance_type=self.config.importance_type,
            normalize=self.config.normalize_feature_importance,
        )

    @property
    def session(self) -> TrackingSession:
        if self._session is None:
            raise RuntimeError("No active W&B run: on_training_start() has not been called")
        return self._session

    @property
    def declared_metrics(self) -> frozenset[tuple[str, str]]:
        """``(split, metric)`` pairs whose direction has been declared."""
        return frozenset(self._declared)

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def on_training_start(self, model: ModelSnapshot) -> TrackingSession:
        """Open (or resume) the run and record the booster's hyperparameters."""
        if self._session is None:
            self.client.login(self.config.api_key)
            self._session = self.client.init(
                self.config.project_name,
                name=self.config.run_name,
                tags=list(self.config.tags) or None,
            )
            logger.info(f"Started W&B run for project '{self.config.project_name}'")

        params = _model_params(model)
        run_config = getattr(self._session, "config", None)
        if run_config is not None and hasattr(run_config, "update"):
            run_config.update(params)
        self._session.log(params)
        return self._session

    def on_iteration_start(self, model: ModelSnapshot, epoch: int, history: IterationHistory) -> bool:
        return False

    def on_iteration_end(self, model: ModelSnapshot, epoch: int, history: IterationHistory) -> bool:
        if should_log(epoch, self.config.sample_rate):
            values = {
                (split, metric): scores[epoch]
                for split, metric_scores in history.items()
                for metric, scores in metric_scores.items()
            }
            if self.config.define_metric:
                for split, metric in values:
                    self._declare_once(split, metric)
            for (split, metric), value in values.items():
                self.session.log({metric_key(split, metric): value})
            self.session.log({EPOCH_KEY: epoch})

        for custom_logger in self.config.custom_loggers:
            custom_logger(model, epoch, history)
        return False

    def on_training_end(self, model: ModelSnapshot) -> ModelSnapshot:
        session = self.session
        try:
            if self.config.log_model:
                self.exporter.export(model, session)
            if self.config.log_feature_importance:
                self.importance.report(model, session)

            best_score = getattr(model, "best_score", None)
            if best_score is not None:
                session.log({
                    BEST_SCORE_KEY: float(best_score),
                    BEST_ITERATION_KEY: int(model.best_iteration),
                })
        finally:
            self._finish()
        return model

    # -------------------------------------------------------------------------
    # xgboost.callback.TrainingCallback hooks
    # -------------------------------------------------------------------------

    def before_training(self, model):
        self.on_training_start(model)
        return model

    def before_iteration(self, model, epoch: int, evals_log) -> bool:
        return self.on_iteration_start(model, epoch, evals_log)

    def after_iteration(self, model, epoch: int, evals_log) -> bool:
        return self.on_iteration_end(model, epoch, evals_log)

    def after_training(self, model):
        return self.on_training_end(model)

    # -------------------------------------------------------------------------

    def _declare_once(self, split: str, metric: str) -> None:
        if (split, metric) in self._declared:
            return
        self._declared.add((split, metric))
        declare(self.session, split, metric)

    def _finish(self) -> None:
        session, self._session = self._session, None
        session.finish()
        logger.info("Finished W&B run")


def _model_params(model: ModelSnapshot) -> dict[str, Any]:
    """Flat hyperparameters from ``save_config()``.

    XGBoost returns nested learner JSON with every value as a string; the
    settings live in the ``*_param`` sections (``tree_train_param`` holds
    ``eta`` and ``max_depth``). Those are flattened to the top level and
    numeric strings converted. A mapping without ``*_param`` sections is
    taken as already flat.
    """
    raw = model.save_config()
    if isinstance(raw, (str, bytes)):
        raw = json.loads(raw)
    if not isinstance(raw, Mapping):
        raise TypeError(f"save_config() must return a mapping or JSON object, got {type(raw).__name__}")

    params: dict[str, Any] = {}
    _collect_params(raw, params)
    if not params:
        params = {key: _to_number(value) for key, value in raw.items()}
    return params


def _collect_params(node: Mapping[str, Any], params: dict[str, Any]) -> None:
    for key, value in node.items():
        if not isinstance(value, Mapping):
            continue
        if key.endswith("_param"):
            for name, setting in value.items():
                if not isinstance(setting, (Mapping, list)):
                    params.setdefault(name, _to_number(setting))
        else:
            _collect_params(value, params)


def _to_number(value: Any) -> Any:
    if not isinstance(value, str):
        return value
    for cast in (int, float):
        try:
            return cast(value)
        except ValueError:
            pass
    return value
