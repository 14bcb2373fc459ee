"""Trained-model export as a W&B artifact."""

import tempfile
from pathlib import Path

from .constants import MODEL_ARTIFACT_NAME, MODEL_ARTIFACT_TYPE, MODEL_TMPDIR_PREFIX
from .protocols import ModelSnapshot, TrackingArtifact, TrackingClient, TrackingSession
from .utils.logging import get_logger

logger = get_logger(__name__)


class ModelArtifactExporter:
    """Serializes a booster into a scratch directory and registers it as a ``model`` artifact.

    The scratch directory only lives for the duration of ``export``; it is
    removed whether or not saving or uploading succeeds.
    """

    def __init__(self, client: TrackingClient, file_name: str = MODEL_ARTIFACT_NAME):
        self.client = client
        self.file_name = file_name

    def export(self, model: ModelSnapshot, session: TrackingSession) -> TrackingArtifact:
        with tempfile.TemporaryDirectory(prefix=MODEL_TMPDIR_PREFIX) as tmp_dir:
            model_path = str(Path(tmp_dir) / self.file_name)
            model.save_model(model_path)

            artifact = self.client.artifact(name=self.file_name, type=MODEL_ARTIFACT_TYPE)
            artifact.add_file(model_path)
            session.log_artifact(artifact)

        logger.info(f"Logged model artifact '{self.file_name}'")
        return artifact
