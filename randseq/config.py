"""
ServiceConfig: startup configuration for the sequence service.

This module provides:

- find_config_file: Walk up directories to locate .randseq.toml
- deep_merge: Recursively merge two dicts (override wins for leaf values)
- ServiceConfig: Limits and defaults applied to every request

Configuration is read once at startup from the ``[service]`` table of
``.randseq.toml``, with optional ``.randseq.local.toml`` overrides in the same
directory. When no file is found the built-in defaults apply.

Example:
    >>> config = ServiceConfig.load()
    >>> config.max_count
    2000000

    # .randseq.toml
    [service]
    max_count = 100000
    distributions = ["uniform", "gaussian", "beta"]
"""

from __future__ import annotations

import tomllib
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

from randseq.samplers.registry import DISTRIBUTION_NAMES, normalize_name
from randseq.sources.base import SourceType

CONFIG_FILENAME = ".randseq.toml"
LOCAL_CONFIG_FILENAME = ".randseq.local.toml"

DEFAULT_MAX_COUNT = 2_000_000


# ---------------------------------------------------------------------------
# Utility helpers
# ---------------------------------------------------------------------------


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Return the nearest ``.randseq.toml`` at or above *start_dir* (default: cwd)."""
    start = (start_dir or Path.cwd()).resolve()
    for directory in (start, *start.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """
    Merge *override* into a copy of *base*, recursing into nested tables.

    Used to apply ``.randseq.local.toml`` over ``.randseq.toml``.
    """
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ServiceConfig:
    """
    Limits and request defaults, fixed for the lifetime of a service.

    Attributes:
        max_count: Largest sequence length a request may ask for.
        distributions: Distribution names the service accepts.
        default_count: Count used by transports when the caller omits it.
        default_type: Source type used by transports when the caller omits it.
        default_distribution: Distribution used by transports when omitted.
    """

    max_count: int = DEFAULT_MAX_COUNT
    distributions: tuple[str, ...] = DISTRIBUTION_NAMES
    default_count: int = 10
    default_type: str = SourceType.GENERAL.value
    default_distribution: str = "uniform"

    def __post_init__(self) -> None:
        if isinstance(self.max_count, bool) or not isinstance(self.max_count, int):
            raise ValueError(f"max_count must be an integer, got {self.max_count!r}")
        if self.max_count < 1:
            raise ValueError(f"max_count must be positive, got {self.max_count}")

        if not isinstance(self.distributions, (list, tuple)):
            raise ValueError(
                f"distributions must be a list of names, got {self.distributions!r}"
            )
        for name in self.distributions:
            if not isinstance(name, str):
                raise ValueError(f"distributions entries must be strings, got {name!r}")
        for field_name in ("default_type", "default_distribution"):
            value = getattr(self, field_name)
            if not isinstance(value, str):
                raise ValueError(f"{field_name} must be a string, got {value!r}")
        if isinstance(self.default_count, bool) or not isinstance(self.default_count, int):
            raise ValueError(f"default_count must be an integer, got {self.default_count!r}")

        names = tuple(normalize_name(n) for n in self.distributions)
        unknown = [n for n in names if n not in DISTRIBUTION_NAMES]
        if unknown:
            raise ValueError(
                f"Unknown distributions in config: {', '.join(unknown)}. "
                f"Known distributions: {', '.join(DISTRIBUTION_NAMES)}"
            )
        if not names:
            raise ValueError("distributions must not be empty")
        object.__setattr__(self, "distributions", names)

        if not 1 <= self.default_count <= self.max_count:
            raise ValueError(
                f"default_count must be between 1 and {self.max_count}, "
                f"got {self.default_count}"
            )
        # Raises UnknownSourceType (a ValueError) for bad values
        object.__setattr__(self, "default_type", SourceType.parse(self.default_type).value)

        default_distribution = normalize_name(self.default_distribution)
        if default_distribution not in names:
            raise ValueError(
                f"default_distribution {self.default_distribution!r} is not enabled"
            )
        object.__setattr__(self, "default_distribution", default_distribution)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def load(
        cls,
        start_dir: Path | None = None,
        path: Path | None = None,
    ) -> ServiceConfig:
        """
        Find and load service configuration.

        Uses *path* when given; otherwise walks up from *start_dir* (default:
        cwd) to locate ``.randseq.toml``. A ``.randseq.local.toml`` beside the
        config file is deep-merged over it.

        Returns:
            The loaded config, or the defaults when no file is found.

        Raises:
            FileNotFoundError: If *path* is given but does not exist.
            ValueError: If the config contains unknown keys or invalid values.
        """
        if path is not None:
            config_path: Path | None = Path(path)
            if not config_path.is_file():
                raise FileNotFoundError(f"Config file not found: {config_path}")
        else:
            config_path = find_config_file(start_dir)
        if config_path is None:
            return cls()

        with open(config_path, "rb") as f:
            data = tomllib.load(f)

        local_path = config_path.parent / LOCAL_CONFIG_FILENAME
        if local_path.is_file():
            with open(local_path, "rb") as f:
                data = deep_merge(data, tomllib.load(f))

        service = data.get("service", {})
        if not isinstance(service, dict):
            raise ValueError(f"[service] in {config_path} must be a table")
        return cls.from_dict(service)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ServiceConfig:
        """
        Create a ServiceConfig from the parsed ``[service]`` table.

        Raises:
            ValueError: If *data* contains unknown keys or invalid values.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(
                f"Unknown [service] keys: {', '.join(unknown)}. "
                f"Allowed keys: {', '.join(sorted(known))}"
            )
        values = dict(data)
        if isinstance(values.get("distributions"), list):
            values["distributions"] = tuple(values["distributions"])
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        """Return a TOML/JSON-friendly dict of this config."""
        data = asdict(self)
        data["distributions"] = list(self.distributions)
        return data
