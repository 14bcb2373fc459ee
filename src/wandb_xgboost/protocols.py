"""Protocol definitions for the training loop and tracking service boundaries."""

from typing import Any, Callable, Mapping, Protocol, Sequence, runtime_checkable


@runtime_checkable
class ModelSnapshot(Protocol):
    """Trained-model surface exposed by the boosting loop (e.g. ``xgboost.Booster``).

    ``best_score`` and ``best_iteration`` are optional: XGBoost only sets them
    when early stopping is active, so callers read them with ``getattr``.
    """

    def save_config(self) -> str | Mapping[str, Any]:
        ...

    def get_score(self, importance_type: str = "gain") -> Mapping[str, float]:
        ...

    def save_model(self, fname: str) -> None:
        ...

    def num_boosted_rounds(self) -> int:
        ...


@runtime_checkable
class TrackingArtifact(Protocol):
    """Named blob registered against a run."""

    def add_file(self, local_path: str) -> Any:
        ...


@runtime_checkable
class TrackingSession(Protocol):
    """One tracked run (``wandb.sdk.wandb_run.Run``)."""

    def log(self, data: Mapping[str, Any]) -> None:
        ...

    def define_metric(self, name: str, summary: str | None = None) -> Any:
        ...

    def log_artifact(self, artifact: Any) -> Any:
        ...

    def finish(self) -> None:
        ...


@runtime_checkable
class TrackingClient(Protocol):
    """Entry points of the experiment-tracking service."""

    def login(self, api_key: str) -> Any:
        ...

    def init(self, project: str, **kwargs: Any) -> TrackingSession:
        ...

    def artifact(self, name: str, type: str) -> TrackingArtifact:
        ...

    def table(self, data: list[list[Any]], columns: Sequence[str]) -> Any:
        ...

    def bar(self, table: Any, x: str, y: str, title: str) -> Any:
        ...


# Type aliases for the boosting loop's evaluation log
IterationHistory = Mapping[str, Mapping[str, Sequence[float]]]
ImportanceScores = dict[str, float]
CustomLogger = Callable[[Any, int, IterationHistory], Any]
