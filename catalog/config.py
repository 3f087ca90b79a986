"""
Runner configuration with YAML and environment support.

This module provides the dataclass holding runner settings and utilities
for loading it from YAML files or from environment variables (optionally
backed by a .env file).
"""

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from dotenv import dotenv_values, find_dotenv

from catalog.entropy import DEFAULT_SEED

ENV_PREFIX = "CATALOG_"

_TRUE_VALUES = {"1", "true", "yes", "on"}

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _require_type(name: str, value: Any, expected: Any) -> None:
    """Raise ValueError unless value is an instance of expected (bools only count as bool)."""
    allowed = expected if isinstance(expected, tuple) else (expected,)
    if isinstance(value, bool) and bool not in allowed:
        ok = False
    else:
        ok = isinstance(value, allowed)
    if not ok:
        names = " or ".join(t.__name__ for t in allowed)
        raise ValueError(f"{name} must be {names}, got {type(value).__name__} {value!r}")


@dataclass
class RunnerConfig:
    """Configuration for the example runner.

    Attributes:
        seed: Seed for each example's entropy source
        max_workers: Parallel workers for run-all (1 runs sequentially)
        timeout_seconds: Wall-clock budget per example (None disables it)
        fixtures_path: Default fixture file for regression comparison
        log_level: Minimum log level for the catalog loggers
        json_logs: Whether logs are emitted as JSON
    """

    seed: int = DEFAULT_SEED
    max_workers: int = 1
    timeout_seconds: Optional[float] = None
    fixtures_path: Optional[str] = None
    log_level: str = "WARNING"
    json_logs: bool = False

    def __post_init__(self) -> None:
        _require_type("seed", self.seed, int)
        _require_type("max_workers", self.max_workers, int)
        if self.timeout_seconds is not None:
            _require_type("timeout_seconds", self.timeout_seconds, (int, float))
        if self.fixtures_path is not None:
            _require_type("fixtures_path", self.fixtures_path, str)
        _require_type("log_level", self.log_level, str)
        _require_type("json_logs", self.json_logs, bool)

        if self.max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {self.max_workers}")
        if self.timeout_seconds is not None and self.timeout_seconds <= 0:
            raise ValueError(f"timeout_seconds must be positive, got {self.timeout_seconds}")
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(_LOG_LEVELS)}, got {self.log_level!r}"
            )

    @classmethod
    def from_yaml(cls, path: Path | str) -> "RunnerConfig":
        """Load runner configuration from a YAML file.

        Args:
            path: Path to the YAML configuration file

        Returns:
            RunnerConfig instance with values from the file

        Raises:
            FileNotFoundError: If the YAML file doesn't exist
            ValueError: If the file is not valid UTF-8 YAML or holds bad values
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Runner config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            try:
                data: Any = yaml.safe_load(f)
            except (yaml.YAMLError, UnicodeDecodeError) as e:
                raise ValueError(f"{path}: invalid YAML: {e}") from e

        return cls.from_dict(data or {})

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RunnerConfig":
        """Create runner configuration from a dictionary.

        Raises:
            ValueError: If data is not a mapping, has unknown keys or bad values
        """
        if not isinstance(data, dict):
            raise ValueError(
                f"Runner config must be a mapping of settings, got {type(data).__name__}"
            )
        unknown = set(data) - set(cls.__dataclass_fields__)
        if unknown:
            raise ValueError(f"Unknown runner config keys: {', '.join(sorted(unknown))}")
        return cls(**data)

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        env_file: Optional[Path | str] = None,
    ) -> "RunnerConfig":
        """Create runner configuration from CATALOG_* environment variables.

        When no mapping is given, values from a .env file (the given one, or
        the nearest one found from the working directory) are used as
        defaults underneath the process environment.

        Args:
            environ: Variables to read instead of the process environment
            env_file: Explicit .env file path

        Returns:
            RunnerConfig instance
        """
        if environ is None:
            dotenv_path = env_file or find_dotenv(usecwd=True)
            file_values = (
                {k: v for k, v in dotenv_values(dotenv_path).items() if v is not None}
                if dotenv_path
                else {}
            )
            environ = {**file_values, **os.environ}

        def value(name: str) -> Optional[str]:
            raw = environ.get(f"{ENV_PREFIX}{name}")
            return raw if raw not in (None, "") else None

        data: Dict[str, Any] = {}
        if value("SEED") is not None:
            data["seed"] = int(value("SEED"))
        if value("MAX_WORKERS") is not None:
            data["max_workers"] = int(value("MAX_WORKERS"))
        if value("TIMEOUT") is not None:
            data["timeout_seconds"] = float(value("TIMEOUT"))
        if value("FIXTURES") is not None:
            data["fixtures_path"] = value("FIXTURES")
        if value("LOG_LEVEL") is not None:
            data["log_level"] = value("LOG_LEVEL").upper()
        if value("JSON_LOGS") is not None:
            data["json_logs"] = value("JSON_LOGS").lower() in _TRUE_VALUES

        return cls(**data)

    def merged(self, **overrides: Any) -> "RunnerConfig":
        """Return a copy with the non-None overrides applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to a dictionary.

        Returns:
            Dictionary representation of the configuration
        """
        return {
            "seed": self.seed,
            "max_workers": self.max_workers,
            "timeout_seconds": self.timeout_seconds,
            "fixtures_path": self.fixtures_path,
            "log_level": self.log_level,
            "json_logs": self.json_logs,
        }

    def to_yaml(self, path: Path | str) -> None:
        """Save configuration to a YAML file.

        Args:
            path: Path where the YAML file will be saved
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)
