"""Runtime configuration for bignum."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from bignum.constants import DEFAULT_BUFFER_SIZE

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class BigNumConfig:
    """Centralized settings for text output and the command-line calculator.

    Attributes:
        buffer_size: Characters a BufferedWriter holds before flushing
            (default: 65,536)
        default_precision: Fractional digits used by the CLI when rendering
            rationals; 0 renders them as n/d (default: 0)
        log_level: Minimum structlog level name for the CLI (default: WARNING)
    """

    buffer_size: int = DEFAULT_BUFFER_SIZE
    default_precision: int = 0
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {self.buffer_size}")
        if self.default_precision < 0:
            raise ValueError(f"default_precision cannot be negative, got {self.default_precision}")
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level!r}")

    @property
    def log_level_number(self) -> int:
        """The stdlib logging level number for log_level."""
        return int(getattr(logging, self.log_level.upper()))

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> BigNumConfig:
        """Build a config from environment variables.

        Reads:
        - BIGNUM_BUFFER_SIZE: Writer buffer size in characters
        - BIGNUM_PRECISION: Default rational precision for the CLI
        - BIGNUM_LOG_LEVEL: Log level name

        Raises:
            ValueError: If a variable holds an invalid value
        """
        env = os.environ if environ is None else environ
        return cls(
            buffer_size=int(env.get("BIGNUM_BUFFER_SIZE", DEFAULT_BUFFER_SIZE)),
            default_precision=int(env.get("BIGNUM_PRECISION", "0")),
            log_level=env.get("BIGNUM_LOG_LEVEL", "WARNING"),
        )


# Default configuration instance
DEFAULT_CONFIG = BigNumConfig()
