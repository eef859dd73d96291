"""
Runtime Configuration

Central configuration for tree construction and logging.
"""

from __future__ import annotations

import copy
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from smt.schemas.errors import ConfigurationException

load_dotenv()


def _env_int(name: str) -> int:
    raw = os.getenv(name, "")
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationException(
            f"{name} must be an integer, got {raw!r}",
            setting=name,
        ) from None


@dataclass
class TreeConfig:
    """Shape and capabilities of a sparse Merkle tree."""
    height: int = 32
    leaf_width: int = 4
    hasher: str = "sha256"
    field: str = "goldilocks"


@dataclass
class LoggingConfig:
    """Configuration for the smt logger."""
    level: str = "WARNING"
    debug: bool = False

    @property
    def effective_level(self) -> int:
        if self.debug:
            return logging.DEBUG
        level = logging.getLevelName(self.level.upper())
        return level if isinstance(level, int) else logging.WARNING


@dataclass
class RuntimeConfig:
    """
    Complete runtime configuration.

    Can be loaded from:
    - Environment variables
    - YAML file
    - Programmatic construction
    """
    tree: TreeConfig = field(default_factory=TreeConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    extra: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - SMT_TREE_HEIGHT: tree height (int)
        - SMT_LEAF_WIDTH: field elements per leaf (int)
        - SMT_HASHER: hasher name (sha256, blake2b)
        - SMT_FIELD: field name (goldilocks)
        - SMT_LOG_LEVEL: logging level name
        - SMT_DEBUG: enable debug logging (true/false)
        """
        overrides: dict[str, Any] = {}

        if os.getenv("SMT_TREE_HEIGHT"):
            overrides.setdefault("tree", {})["height"] = _env_int("SMT_TREE_HEIGHT")
        if os.getenv("SMT_LEAF_WIDTH"):
            overrides.setdefault("tree", {})["leaf_width"] = _env_int("SMT_LEAF_WIDTH")
        if os.getenv("SMT_HASHER"):
            overrides.setdefault("tree", {})["hasher"] = os.getenv("SMT_HASHER")
        if os.getenv("SMT_FIELD"):
            overrides.setdefault("tree", {})["field"] = os.getenv("SMT_FIELD")

        if os.getenv("SMT_LOG_LEVEL"):
            overrides.setdefault("logging", {})["level"] = os.getenv("SMT_LOG_LEVEL")
        if os.getenv("SMT_DEBUG"):
            overrides.setdefault("logging", {})["debug"] = (
                os.getenv("SMT_DEBUG", "false").lower() == "true"
            )

        return overrides

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        """
        Load configuration purely from environment variables.

        Uses defaults for any values not specified in env vars.
        """
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_yaml(cls, path: str | Path) -> "RuntimeConfig":
        """Load configuration from a YAML file."""
        import yaml
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f)

        return cls.from_dict(data or {})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RuntimeConfig":
        """Load configuration from a dictionary (supports partial data)."""
        tree_data = data.get("tree", {})
        logging_data = data.get("logging", {})

        tree = TreeConfig(**tree_data) if tree_data else TreeConfig()
        log = LoggingConfig(**logging_data) if logging_data else LoggingConfig()

        return cls(
            tree=tree,
            logging=log,
            extra=data.get("extra", {}),
        )

    def with_env_overrides(self) -> "RuntimeConfig":
        """
        Return a new config with environment variable overrides applied.

        This allows loading from a config file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        new_config = copy.deepcopy(self)

        for key, value in overrides.get("tree", {}).items():
            setattr(new_config.tree, key, value)
        for key, value in overrides.get("logging", {}).items():
            setattr(new_config.logging, key, value)

        return new_config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "tree": {
                "height": self.tree.height,
                "leaf_width": self.tree.leaf_width,
                "hasher": self.tree.hasher,
                "field": self.tree.field,
            },
            "logging": {
                "level": self.logging.level,
                "debug": self.logging.debug,
            },
            "extra": self.extra,
        }


def configure_logging(config: Optional[RuntimeConfig] = None) -> logging.Logger:
    """Apply the configured level to the package logger and return it."""
    config = config or get_default_config()
    logger = logging.getLogger("smt")
    logger.setLevel(config.logging.effective_level)
    return logger


# Global default configuration
_default_config: Optional[RuntimeConfig] = None


def get_default_config() -> RuntimeConfig:
    """Get the default runtime configuration."""
    global _default_config
    if _default_config is None:
        _default_config = RuntimeConfig.from_env()
    return _default_config


def set_default_config(config: Optional[RuntimeConfig]) -> None:
    """Set (or with None, reset) the default runtime configuration."""
    global _default_config
    _default_config = config
