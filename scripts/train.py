#!/usr/bin/env python
"""
Train a booster with W&B telemetry
==================================
Fits an XGBoost regressor on a synthetic dataset and streams the run to
Weights & Biases through ``WandbCallback``.

Usage:
    WANDB_API_KEY=... python scripts/train.py --config configs/default.yaml
"""

import argparse
import sys
import time
from dataclasses import replace
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import numpy as np
import xgboost as xgb

from wandb_xgboost import WandbCallback, load_config
from wandb_xgboost.config import load_yaml_section
from wandb_xgboost.utils.logging import format_time, print_best, print_eval_round, print_header, print_options, setup_logging


def make_dataset(n_samples: int, n_features: int, noise: float, eval_ratio: float, seed: int):
    """Linear target with a couple of non-linear terms, split into train/eval DMatrix."""
    rng = np.random.default_rng(seed)
    X = rng.normal(size=(n_samples, n_features))
    weights = rng.uniform(-1.0, 1.0, size=n_features)
    y = X @ weights + 0.5 * np.sin(X[:, 0]) + 0.25 * X[:, 1] ** 2 + rng.normal(scale=noise, size=n_samples)

    n_eval = int(n_samples * eval_ratio)
    feature_names = [f"f{i}" for i in range(n_features)]
    dtrain = xgb.DMatrix(X[n_eval:], label=y[n_eval:], feature_names=feature_names)
    deval = xgb.DMatrix(X[:n_eval], label=y[:n_eval], feature_names=feature_names)
    return dtrain, deval


def log_round_progress(model, epoch, history):
    """Side-channel logger: prints the eval scores every 25 rounds."""
    if epoch % 25 == 0:
        print_eval_round(epoch, history)


def main():
    parser = argparse.ArgumentParser(description="Train XGBoost with W&B telemetry")
    parser.add_argument("--config", type=str, default="configs/default.yaml")
    args = parser.parse_args()

    setup_logging()
    print_header("XGBoost + W&B")

    wandb_config = load_config(args.config)
    data_config = load_yaml_section(args.config, "data")
    training_config = load_yaml_section(args.config, "training")
    print_options(wandb_config.to_dict())

    dtrain, deval = make_dataset(**data_config)
    print(f"  train={dtrain.num_row()} eval={deval.num_row()} features={dtrain.num_col()}")

    callback = WandbCallback(replace(wandb_config, custom_loggers=(log_round_progress,)))

    start = time.time()
    booster = xgb.train(
        training_config["params"],
        dtrain,
        num_boost_round=training_config["num_boost_round"],
        evals=[(dtrain, "train"), (deval, "eval")],
        early_stopping_rounds=training_config.get("early_stopping_rounds"),
        callbacks=[callback],
        verbose_eval=False,
    )

    print(f"  trained {booster.num_boosted_rounds()} rounds in {format_time(time.time() - start)}")
    print_best(
        getattr(booster, "best_score", None),
        getattr(booster, "best_iteration", None),
        booster.num_boosted_rounds(),
    )


if __name__ == "__main__":
    main()
