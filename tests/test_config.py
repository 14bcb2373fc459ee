"""Unit tests for RunConfig loading and validation."""

import dataclasses

import pytest

from wandb_xgboost.config import ConfigurationError, RunConfig, load_config, load_yaml_section


class TestRunConfigDefaults:
    """Tests for default option values."""

    def test_defaults(self):
        config = RunConfig(project_name="my-great-project")
        assert config.log_model is False
        assert config.log_feature_importance is True
        assert config.importance_type == "gain"
        assert config.normalize_feature_importance is True
        assert config.define_metric is True
        assert config.sample_rate == 1.0
        assert config.custom_loggers == ()

    def test_custom_values(self):
        config = RunConfig(
            project_name="my-great-project",
            log_model=True,
            log_feature_importance=False,
            importance_type="weight",
            define_metric=False,
            sample_rate=0.1,
        )
        assert config.log_model is True
        assert config.log_feature_importance is False
        assert config.importance_type == "weight"
        assert config.define_metric is False
        assert config.sample_rate == 0.1

    def test_is_immutable(self):
        config = RunConfig(project_name="p")
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.sample_rate = 0.5

    def test_single_string_tag_kept_whole(self):
        assert RunConfig(project_name="p", tags="synthetic").tags == ("synthetic",)

    def test_null_tags(self):
        assert RunConfig(project_name="p", tags=None).tags == ()

    def test_custom_loggers_stored_as_tuple(self):
        config = RunConfig(project_name="p", custom_loggers=[print])
        assert config.custom_loggers == (print,)


class TestRunConfigCredentials:
    """Tests for required project name and API key."""

    def test_api_key_falls_back_to_environment(self):
        assert RunConfig(project_name="p").api_key == "test-api-key"

    def test_explicit_api_key_wins(self):
        assert RunConfig(project_name="p", api_key="explicit").api_key == "explicit"

    def test_missing_api_key_raises(self, monkeypatch):
        monkeypatch.delenv("WANDB_API_KEY")
        with pytest.raises(ConfigurationError, match="WANDB_API_KEY required"):
            RunConfig(project_name="p")

    def test_missing_project_name_raises(self):
        with pytest.raises(ConfigurationError, match="project_name required"):
            RunConfig()

    def test_api_key_not_in_repr_or_dict(self):
        config = RunConfig(project_name="p", api_key="secret")
        assert "secret" not in repr(config)
        assert "api_key" not in config.to_dict()


class TestRunConfigValidation:
    """Tests for value validation."""

    @pytest.mark.parametrize("rate", [0, 0.0, -0.5, 1.5])
    def test_sample_rate_out_of_range(self, rate):
        with pytest.raises(ConfigurationError, match="sample_rate"):
            RunConfig(project_name="p", sample_rate=rate)

    def test_sample_rate_must_be_number(self):
        with pytest.raises(ConfigurationError, match="sample_rate"):
            RunConfig(project_name="p", sample_rate="all")

    def test_unknown_importance_type(self):
        with pytest.raises(ConfigurationError, match="importance_type"):
            RunConfig(project_name="p", importance_type="shap")

    def test_uncallable_custom_logger(self):
        with pytest.raises(ConfigurationError, match="custom_loggers"):
            RunConfig(project_name="p", custom_loggers=["not callable"])


class TestRunConfigLoading:
    """Tests for dict and YAML loading."""

    def test_from_dict(self):
        config = RunConfig.from_dict({"project_name": "p", "tags": ["a", "b"]}, custom_loggers=[print])
        assert config.tags == ("a", "b")
        assert config.custom_loggers == (print,)

    def test_yaml_scalar_tag(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("wandb:\n  project_name: p\n  tags: synthetic\n")
        assert load_config(path).tags == ("synthetic",)

    def test_from_dict_unknown_key(self):
        with pytest.raises(ConfigurationError, match="Unknown options"):
            RunConfig.from_dict({"project_name": "p", "log_everything": True})

    def test_load_config_reads_wandb_section(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("wandb:\n  project_name: from-yaml\n  sample_rate: 0.5\ntraining:\n  num_boost_round: 10\n")
        config = load_config(path)
        assert config.project_name == "from-yaml"
        assert config.sample_rate == 0.5
        assert load_yaml_section(path, "training") == {"num_boost_round": 10}

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_config(tmp_path / "missing.yaml")

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        with pytest.raises(ConfigurationError, match="Empty"):
            load_config(path)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("wandb: [unclosed\n")
        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_config(path)

    def test_missing_section(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("training:\n  num_boost_round: 10\n")
        with pytest.raises(ConfigurationError, match="Missing section"):
            load_config(path)
