"""Tests for randseq.config module."""

from __future__ import annotations

import pytest

from randseq.config import (
    CONFIG_FILENAME,
    DEFAULT_MAX_COUNT,
    LOCAL_CONFIG_FILENAME,
    ServiceConfig,
    deep_merge,
    find_config_file,
)
from randseq.samplers import DISTRIBUTION_NAMES

# ---------------------------------------------------------------------------
# deep_merge
# ---------------------------------------------------------------------------


class TestDeepMerge:
    def test_basic(self):
        base = {"a": 1, "b": {"c": 2, "d": 3}}
        override = {"b": {"c": 99, "e": 5}}
        assert deep_merge(base, override) == {"a": 1, "b": {"c": 99, "d": 3, "e": 5}}

    def test_does_not_mutate_inputs(self):
        base = {"b": {"c": 2}}
        override = {"b": {"c": 99}}
        deep_merge(base, override)
        assert base == {"b": {"c": 2}}
        assert override == {"b": {"c": 99}}

    def test_override_dict_with_scalar(self):
        assert deep_merge({"a": {"nested": 1}}, {"a": "scalar"}) == {"a": "scalar"}


# ---------------------------------------------------------------------------
# find_config_file
# ---------------------------------------------------------------------------


class TestFindConfigFile:
    def test_finds_in_parent(self, tmp_path):
        (tmp_path / CONFIG_FILENAME).write_text("[service]\n")
        child = tmp_path / "a" / "b"
        child.mkdir(parents=True)
        assert find_config_file(child) == (tmp_path / CONFIG_FILENAME).resolve()

    def test_nothing_found_below_start(self, tmp_path):
        found = find_config_file(tmp_path)
        assert found is None or tmp_path.resolve() not in found.parents


# ---------------------------------------------------------------------------
# ServiceConfig
# ---------------------------------------------------------------------------


class TestServiceConfig:
    def test_defaults(self):
        config = ServiceConfig()
        assert config.max_count == DEFAULT_MAX_COUNT == 2_000_000
        assert config.distributions == DISTRIBUTION_NAMES
        assert config.default_count == 10
        assert config.default_type == "general"
        assert config.default_distribution == "uniform"

    def test_from_dict_normalizes_names(self):
        config = ServiceConfig.from_dict(
            {
                "distributions": ["Uniform", "BETA"],
                "default_type": "SECURE",
                "default_distribution": "Beta",
            }
        )
        assert config.distributions == ("uniform", "beta")
        assert config.default_type == "secure"
        assert config.default_distribution == "beta"

    def test_unknown_key_rejected(self):
        with pytest.raises(ValueError, match="max_cnt"):
            ServiceConfig.from_dict({"max_cnt": 5})

    @pytest.mark.parametrize("max_count", [0, -1, 1.5, True, "10"])
    def test_invalid_max_count(self, max_count):
        with pytest.raises(ValueError):
            ServiceConfig(max_count=max_count)

    @pytest.mark.parametrize(
        "data",
        [
            {"default_count": "5"},
            {"default_count": 2.0},
            {"default_count": True},
            {"default_distribution": 5},
            {"default_type": 1},
            {"distributions": "uniform"},
            {"distributions": ["uniform", 3]},
        ],
    )
    def test_wrong_value_types_are_value_errors(self, data):
        with pytest.raises(ValueError):
            ServiceConfig.from_dict(data)

    def test_load_rejects_non_table_service(self, tmp_path):
        path = tmp_path / "custom.toml"
        path.write_text("service = 5\n")
        with pytest.raises(ValueError, match="table"):
            ServiceConfig.load(path=path)

    def test_unknown_distribution_rejected(self):
        with pytest.raises(ValueError, match="poisson"):
            ServiceConfig(distributions=("uniform", "poisson"))

    def test_default_distribution_must_be_enabled(self):
        with pytest.raises(ValueError):
            ServiceConfig(distributions=("gamma",))

    def test_default_count_within_max(self):
        with pytest.raises(ValueError):
            ServiceConfig(max_count=5, default_count=10)

    def test_invalid_default_type(self):
        with pytest.raises(ValueError):
            ServiceConfig(default_type="fast")

    def test_to_dict(self):
        data = ServiceConfig(max_count=100).to_dict()
        assert data["max_count"] == 100
        assert data["distributions"] == list(DISTRIBUTION_NAMES)

    def test_load_without_file_returns_defaults(self, tmp_path, monkeypatch):
        monkeypatch.setattr("randseq.config.find_config_file", lambda start_dir=None: None)
        assert ServiceConfig.load(tmp_path) == ServiceConfig()

    def test_load_from_file_with_local_overrides(self, tmp_path):
        (tmp_path / CONFIG_FILENAME).write_text(
            '[service]\nmax_count = 500\ndistributions = ["uniform", "gamma"]\n'
        )
        (tmp_path / LOCAL_CONFIG_FILENAME).write_text("[service]\nmax_count = 50\n")
        config = ServiceConfig.load(tmp_path)
        assert config.max_count == 50
        assert config.distributions == ("uniform", "gamma")

    def test_load_explicit_path(self, tmp_path):
        path = tmp_path / "custom.toml"
        path.write_text("[service]\ndefault_count = 3\n")
        assert ServiceConfig.load(path=path).default_count == 3

    def test_load_explicit_path_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ServiceConfig.load(path=tmp_path / "missing.toml")
