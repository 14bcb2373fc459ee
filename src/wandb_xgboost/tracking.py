"""W&B-backed tracking client."""

from typing import Any, Sequence

import wandb


class WandbClient:
    """Thin adapter exposing the ``wandb`` module as a ``TrackingClient``.

    Runs are returned to the caller rather than read back from ``wandb.run``,
    so several callbacks in one process never share the global active run.
    """

    def login(self, api_key: str) -> bool:
        return wandb.login(key=api_key)

    def init(self, project: str, **kwargs: Any) -> Any:
        return wandb.init(project=project, **kwargs)

    def artifact(self, name: str, type: str) -> wandb.Artifact:
        return wandb.Artifact(name=name, type=type)

    def table(self, data: list[list[Any]], columns: Sequence[str]) -> wandb.Table:
        return wandb.Table(data=data, columns=list(columns))

    def bar(self, table: wandb.Table, x: str, y: str, title: str) -> Any:
        return wandb.plot.bar(table, x, y, title=title)
