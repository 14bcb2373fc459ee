"""
Pytest configuration and fixtures for wandb_xgboost tests.
"""

import json
import sys
from pathlib import Path

# Make the src layout importable without an editable install
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

import pytest
from unittest.mock import MagicMock


@pytest.fixture(autouse=True)
def api_key(monkeypatch):
    """Credentials come from the environment unless a test says otherwise."""
    monkeypatch.setenv("WANDB_API_KEY", "test-api-key")
    return "test-api-key"


@pytest.fixture
def session():
    """Fake W&B run."""
    return MagicMock(name="session")


@pytest.fixture
def client(session):
    """Fake tracking client whose init() opens ``session``."""
    client = MagicMock(name="client")
    client.init.return_value = session
    return client


@pytest.fixture
def model_params():
    """Trimmed ``Booster.save_config()`` output: nested, every value a string."""
    return {
        "learner": {
            "generic_param": {"nthread": "0", "seed": "42"},
            "gradient_booster": {
                "name": "gbtree",
                "tree_train_param": {"eta": "0.300000012", "max_depth": "6", "subsample": "1"},
                "updater": [{"name": "grow_quantile_histmaker"}],
            },
            "learner_train_param": {"booster": "gbtree", "objective": "reg:squarederror"},
            "metrics": [{"name": "rmse"}],
        },
        "version": [2, 1, 0],
    }


@pytest.fixture
def flat_params():
    return {
        "nthread": 0,
        "seed": 42,
        "eta": 0.300000012,
        "max_depth": 6,
        "subsample": 1,
        "booster": "gbtree",
        "objective": "reg:squarederror",
    }


@pytest.fixture
def model(model_params):
    """Fake booster with early-stopping results."""
    model = MagicMock(name="model")
    model.save_config.return_value = json.dumps(model_params)
    model.get_score.return_value = {"f1": 0.5, "f2": 0.3}
    model.num_boosted_rounds.return_value = 101
    model.best_score = 0.95
    model.best_iteration = 100
    return model


@pytest.fixture
def history():
    return {"train": {"rmse": [0.1, 0.2]}, "eval": {"rmse": [0.9, 1.0]}}
