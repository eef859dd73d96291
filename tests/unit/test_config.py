"""
Runtime Configuration Unit Tests
Tests for smt/config/runtime.py
"""
import logging

import pytest

from smt.config.runtime import (
    LoggingConfig,
    RuntimeConfig,
    TreeConfig,
    configure_logging,
    get_default_config,
    set_default_config,
)
from smt.merkle.sparse_tree import SparseMerkleTree
from smt.schemas.errors import ConfigurationException

_ENV_VARS = [
    "SMT_TREE_HEIGHT",
    "SMT_LEAF_WIDTH",
    "SMT_HASHER",
    "SMT_FIELD",
    "SMT_LOG_LEVEL",
    "SMT_DEBUG",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestDefaults:
    """Tests for default values."""

    def test_tree_defaults(self):
        config = RuntimeConfig()

        assert config.tree.height == 32
        assert config.tree.leaf_width == 4
        assert config.tree.hasher == "sha256"
        assert config.tree.field == "goldilocks"

    def test_logging_defaults(self):
        assert RuntimeConfig().logging.effective_level == logging.WARNING

    def test_from_env_without_vars(self):
        assert RuntimeConfig.from_env().to_dict() == RuntimeConfig().to_dict()


class TestFromDict:
    """Tests for from_dict()."""

    def test_partial(self):
        config = RuntimeConfig.from_dict({"tree": {"height": 8}})

        assert config.tree.height == 8
        assert config.tree.leaf_width == 4

    def test_to_dict_round_trip(self):
        data = {
            "tree": {"height": 10, "leaf_width": 2, "hasher": "blake2b", "field": "goldilocks"},
            "logging": {"level": "INFO", "debug": False},
            "extra": {"note": "x"},
        }

        assert RuntimeConfig.from_dict(data).to_dict() == data

    def test_unknown_key_rejected(self):
        with pytest.raises(TypeError):
            RuntimeConfig.from_dict({"tree": {"depth": 8}})


class TestFromYaml:
    """Tests for from_yaml()."""

    def test_load(self, tmp_path):
        path = tmp_path / "smt.yaml"
        path.write_text("tree:\n  height: 12\n  hasher: blake2b\nlogging:\n  level: DEBUG\n")

        config = RuntimeConfig.from_yaml(path)

        assert config.tree.height == 12
        assert config.tree.hasher == "blake2b"
        assert config.logging.effective_level == logging.DEBUG

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert RuntimeConfig.from_yaml(path).tree.height == 32

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            RuntimeConfig.from_yaml(tmp_path / "nope.yaml")


class TestEnvOverrides:
    """Tests for environment variable handling."""

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("SMT_TREE_HEIGHT", "20")
        monkeypatch.setenv("SMT_HASHER", "blake2b")
        monkeypatch.setenv("SMT_DEBUG", "true")

        config = RuntimeConfig.from_env()

        assert config.tree.height == 20
        assert config.tree.hasher == "blake2b"
        assert config.logging.debug is True

    def test_with_env_overrides(self, monkeypatch):
        base = RuntimeConfig.from_dict({"tree": {"height": 8, "leaf_width": 2}})
        monkeypatch.setenv("SMT_LEAF_WIDTH", "6")

        config = base.with_env_overrides()

        assert config.tree.height == 8
        assert config.tree.leaf_width == 6
        assert base.tree.leaf_width == 2

    def test_no_overrides_returns_self(self):
        base = RuntimeConfig()

        assert base.with_env_overrides() is base

    def test_bad_integer(self, monkeypatch):
        monkeypatch.setenv("SMT_TREE_HEIGHT", "tall")

        with pytest.raises(ConfigurationException, match="SMT_TREE_HEIGHT"):
            RuntimeConfig.from_env()


class TestDefaultConfig:
    """Tests for the process-wide default."""

    def test_get_is_cached(self):
        assert get_default_config() is get_default_config()

    def test_set(self):
        config = RuntimeConfig.from_dict({"tree": {"height": 3}})
        set_default_config(config)

        assert get_default_config() is config


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_debug_flag(self):
        logger = logging.getLogger("smt")
        previous = logger.level
        try:
            configure_logging(RuntimeConfig(logging=LoggingConfig(debug=True)))
            assert logger.level == logging.DEBUG
        finally:
            logger.setLevel(previous)

    def test_unknown_level_falls_back(self):
        assert LoggingConfig(level="chatty").effective_level == logging.WARNING


def test_tree_from_config():
    tree = SparseMerkleTree.from_config(TreeConfig(height=6))

    assert tree.height == 6
    assert tree.get_root() == tree.zero_hashes[0]


def test_tree_from_config_unknown_hasher():
    with pytest.raises(ConfigurationException):
        SparseMerkleTree.from_config(TreeConfig(hasher="whirlpool"))
