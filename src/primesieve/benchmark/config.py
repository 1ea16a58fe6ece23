"""Benchmark configuration.

A `SieveConfig` is built from dataclass defaults, optionally replaced by a
YAML file, then by command-line options.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path

import yaml


class ConfigError(ValueError):
    """Raised when a benchmark configuration is unusable."""


# Key spellings accepted in YAML files besides the field names themselves
_KEY_ALIASES = {
    "sieveSize": "sieve_size",
    "timeLimitSeconds": "time_limit_seconds",
    "maxShowPrimes": "max_show_primes",
}


@dataclass(frozen=True)
class SieveConfig:
    """Configuration for a timed sieve benchmark.

    Attributes:
        sieve_size: Limit to sieve below.
        time_limit_seconds: Wall-clock budget for repeated passes.
        verbose: Print primes and timing details after the result line.
        max_show_primes: How many primes to list in verbose mode.
        label: First field of the machine-readable result line.
    """

    sieve_size: int = 1_000_000
    time_limit_seconds: float = 5.0
    verbose: bool = False
    max_show_primes: int = 100
    label: str = "primesieve"

    def validate(self) -> SieveConfig:
        """Check value ranges. Returns self.

        Raises:
            ConfigError: If any field is out of range.
        """
        if self.sieve_size < 0:
            raise ConfigError(f"sieve_size must be non-negative, got {self.sieve_size}")
        if self.time_limit_seconds <= 0:
            raise ConfigError(
                f"time_limit_seconds must be positive, got {self.time_limit_seconds}"
            )
        if self.max_show_primes < 0:
            raise ConfigError(
                f"max_show_primes must be non-negative, got {self.max_show_primes}"
            )
        return self

    def with_overrides(self, **values: object) -> SieveConfig:
        """Return a copy with every non-None value replaced."""
        changes = {key: value for key, value in values.items() if value is not None}
        return replace(self, **changes)


def config_from_mapping(data: dict) -> SieveConfig:
    """Build a configuration from a plain mapping.

    Unknown keys are ignored. Sizes and counts must be integers, the time
    limit a number and verbose a boolean; anything else raises ConfigError.
    """
    known = {f.name for f in fields(SieveConfig)}
    values: dict[str, object] = {}
    for key, value in data.items():
        name = _KEY_ALIASES.get(key, key)
        if name in known:
            values[name] = value

    for name in ("sieve_size", "max_show_primes"):
        if name in values:
            value = values[name]
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{name} must be an integer, got {value!r}")

    if "time_limit_seconds" in values:
        value = values["time_limit_seconds"]
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigError(f"time_limit_seconds must be a number, got {value!r}")
        values["time_limit_seconds"] = float(value)

    if "verbose" in values and not isinstance(values["verbose"], bool):
        raise ConfigError(f"verbose must be true or false, got {values['verbose']!r}")
    if "label" in values:
        values["label"] = str(values["label"])

    return SieveConfig(**values).validate()


def load_config(config_path: Path | str) -> SieveConfig:
    """Load benchmark configuration from YAML.

    Args:
        config_path: Path to a YAML file holding a single mapping.

    Returns:
        SieveConfig with file values over the defaults.
    """
    with Path(config_path).open() as f:
        data = yaml.safe_load(f)

    if data is None:
        return SieveConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping in {config_path}")

    return config_from_mapping(data)
