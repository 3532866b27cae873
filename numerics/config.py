"""Configuration for the numerics library."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

import structlog

from numerics.constants import (
    DEFAULT_DIVISION_SCALE,
    ENV_CONVERSION_DIGIT_LIMIT,
    ENV_DIVISION_SCALE,
    MAX_CONVERSION_DIGITS,
)

logger = structlog.get_logger()


@dataclass(frozen=True)
class NumericsConfig:
    """Defaults applied when an operation is called without an explicit scale.

    The configuration is read once at import time (see DEFAULT_NUMERICS_CONFIG)
    and never mutated afterwards. Callers that need different behavior pass
    an explicit ``scale`` or ``digit_limit`` to the operation instead.

    Attributes:
        division_scale: Digits kept after the decimal point by divide and
            sqrt (default: 50)
        conversion_digit_limit: Maximum number of fractional digits the exact
            float/Decimal conversion will search before giving up with
            PrecisionOverflow (default: 1000)
    """

    division_scale: int = DEFAULT_DIVISION_SCALE
    conversion_digit_limit: int = MAX_CONVERSION_DIGITS

    def __post_init__(self) -> None:
        if self.division_scale < 0:
            raise ValueError(f"division_scale must be non-negative, got {self.division_scale}")
        if self.conversion_digit_limit < 0:
            raise ValueError(
                f"conversion_digit_limit must be non-negative, got {self.conversion_digit_limit}"
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> NumericsConfig:
        """Build a config from environment variables with sensible defaults.

        Configuration via environment variables:
        - NUMERICS_DIVISION_SCALE: default divide/sqrt scale (default: 50)
        - NUMERICS_CONVERSION_DIGIT_LIMIT: exact conversion ceiling (default: 1000)

        Malformed or negative values are logged and replaced by the default.

        Args:
            environ: Mapping to read from. Uses os.environ if not provided.
        """
        env = os.environ if environ is None else environ
        return cls(
            division_scale=_read_non_negative_int(env, ENV_DIVISION_SCALE, DEFAULT_DIVISION_SCALE),
            conversion_digit_limit=_read_non_negative_int(
                env, ENV_CONVERSION_DIGIT_LIMIT, MAX_CONVERSION_DIGITS
            ),
        )


def _read_non_negative_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("config_invalid_env_value", name=name, value=raw, default=default)
        return default
    if value < 0:
        logger.warning("config_negative_env_value", name=name, value=value, default=default)
        return default
    return value


# Default configuration instance
DEFAULT_NUMERICS_CONFIG = NumericsConfig.from_env()
