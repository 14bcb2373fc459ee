"""
Configuration Management
========================
Options for the W&B XGBoost callback, loaded from keyword arguments,
dictionaries or YAML files.

- Frozen dataclass, never mutated after construction
- Validation on load
- Clear error messages
"""

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Iterable

import yaml

from .constants import API_KEY_ENV_VAR, ImportanceType
from .protocols import CustomLogger


class ConfigurationError(Exception):
    """Raised when configuration is invalid."""
    pass


@dataclass(frozen=True)
class RunConfig:
    """What the callback logs and where it logs it."""
    project_name: str | None = None
    api_key: str | None = field(default=None, repr=False)
    log_model: bool = False
    log_feature_importance: bool = True
    importance_type: str = ImportanceType.GAIN
    normalize_feature_importance: bool = True
    define_metric: bool = True
    sample_rate: float = 1.0
    custom_loggers: tuple[CustomLogger, ...] = ()
    run_name: str | None = None
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.api_key is None:
            object.__setattr__(self, "api_key", os.environ.get(API_KEY_ENV_VAR))
        object.__setattr__(self, "custom_loggers", tuple(self.custom_loggers))
        tags = (self.tags,) if isinstance(self.tags, str) else tuple(self.tags or ())
        object.__setattr__(self, "tags", tags)

        if not self.api_key:
            raise ConfigurationError(f"{API_KEY_ENV_VAR} required: pass api_key or set the environment variable")
        if not self.project_name:
            raise ConfigurationError("project_name required")

        errors = []
        if self.importance_type not in ImportanceType.ALL:
            errors.append(f"importance_type='{self.importance_type}' not in {ImportanceType.ALL}")
        if isinstance(self.sample_rate, bool) or not isinstance(self.sample_rate, (int, float)):
            errors.append(f"sample_rate={self.sample_rate!r}")
        elif not 0.0 < self.sample_rate <= 1.0:
            errors.append(f"sample_rate={self.sample_rate} not in (0, 1]")
        uncallable = [c for c in self.custom_loggers if not callable(c)]
        if uncallable:
            errors.append(f"custom_loggers not callable: {uncallable}")
        if errors:
            raise ConfigurationError(f"Invalid callback config: {', '.join(errors)}")

    @classmethod
    def from_dict(cls, d: dict[str, Any], custom_loggers: Iterable[CustomLogger] = ()) -> "RunConfig":
        """Create and validate RunConfig from dictionary."""
        known = {f.name for f in fields(cls)} - {"custom_loggers"}
        unknown = set(d) - known
        if unknown:
            raise ConfigurationError(f"Unknown options: {unknown}. Available: {sorted(known)}")
        try:
            return cls(**d, custom_loggers=tuple(custom_loggers))
        except TypeError as e:
            raise ConfigurationError(f"Invalid value: {e}")

    @classmethod
    def from_yaml(cls, path: str | Path, section: str | None = None, **kwargs: Any) -> "RunConfig":
        """Load and validate configuration from a YAML file (optionally one section of it)."""
        return cls.from_dict(_read_yaml(path, section), **kwargs)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for display. Credentials are left out."""
        return {
            "project_name": self.project_name,
            "run_name": self.run_name,
            "tags": list(self.tags),
            "log_model": self.log_model,
            "log_feature_importance": self.log_feature_importance,
            "importance_type": self.importance_type,
            "normalize_feature_importance": self.normalize_feature_importance,
            "define_metric": self.define_metric,
            "sample_rate": self.sample_rate,
            "custom_loggers": len(self.custom_loggers),
        }


def _read_yaml(path: str | Path, section: str | None = None) -> dict[str, Any]:
    path = Path(path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        with open(path) as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}")

    if raw is None:
        raise ConfigurationError(f"Empty configuration file: {path}")
    if section is not None:
        if section not in raw:
            raise ConfigurationError(f"Missing section '{section}' in {path}")
        raw = raw[section] or {}
    if not isinstance(raw, dict):
        raise ConfigurationError(f"Expected a mapping in {path}, got {type(raw).__name__}")
    return raw


def load_config(path: str | Path = "configs/default.yaml", section: str = "wandb") -> RunConfig:
    """Load callback configuration from the ``wandb`` section of a YAML file."""
    return RunConfig.from_yaml(path, section=section)


def load_yaml_section(path: str | Path, section: str) -> dict[str, Any]:
    """Read a raw section (e.g. ``training``) from a YAML config file."""
    return _read_yaml(path, section)
