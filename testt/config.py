"""Configuration dataclass for testt.

Provides TesttConfig for the few knobs the harness exposes. Programmatic
users construct it directly; the pytest plugin loads it from environment
variables via from_env().

Environment Variables:
    TESTT_THREAD_NAME_PREFIX: Name prefix for parallel worker threads
        (default: testt-parallel)
    TESTT_LOG_LEVEL: Level for the ``testt`` logger hierarchy (default: WARNING)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# User config directory (stores .env)
USER_CONFIG_DIR = Path.home() / ".config" / "testt"

DEFAULT_THREAD_NAME_PREFIX = "testt-parallel"
DEFAULT_LOG_LEVEL = "WARNING"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class ConfigurationError(Exception):
    """Raised when configuration validation fails."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        message = "Configuration validation failed:\n" + "\n".join(
            f"  - {e}" for e in errors
        )
        super().__init__(message)


@dataclass(frozen=True)
class TesttConfig:
    """Centralized configuration for testt.

    Attributes:
        thread_name_prefix: Prefix for worker thread names used by
            parallel_fatal. Env: TESTT_THREAD_NAME_PREFIX
        log_level: Level name applied to the ``testt`` logger by
            configure_logging. Env: TESTT_LOG_LEVEL

    Example:
        config = TesttConfig(thread_name_prefix="my-suite")
        parallel_fatal(tb, check_a, check_b, config=config)
    """

    thread_name_prefix: str = DEFAULT_THREAD_NAME_PREFIX
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, *, validate: bool = True) -> TesttConfig:
        """Create TesttConfig from environment variables.

        Empty values fall back to the defaults.

        Args:
            validate: If True (default), raise ConfigurationError on any
                validation errors.

        Raises:
            ConfigurationError: If validate=True and configuration is invalid.
        """
        config = cls(
            thread_name_prefix=os.environ.get("TESTT_THREAD_NAME_PREFIX")
            or DEFAULT_THREAD_NAME_PREFIX,
            log_level=(
                os.environ.get("TESTT_LOG_LEVEL") or DEFAULT_LOG_LEVEL
            ).upper(),
        )

        if validate:
            errors = config.validate()
            if errors:
                raise ConfigurationError(errors)

        return config

    def validate(self) -> list[str]:
        """Return a list of validation errors (empty if valid)."""
        errors: list[str] = []
        if self.log_level.upper() not in _LOG_LEVELS:
            errors.append(
                f"log_level must be one of {', '.join(_LOG_LEVELS)}, "
                f"got: {self.log_level!r}"
            )
        if not self.thread_name_prefix.strip():
            errors.append("thread_name_prefix must not be blank")
        return errors


def load_user_env() -> None:
    """Load environment from ${USER_CONFIG_DIR}/.env (~/.config/testt/.env).

    Existing environment variables take precedence over the file.
    """
    load_dotenv(dotenv_path=USER_CONFIG_DIR / ".env")


def configure_logging(config: TesttConfig) -> None:
    """Apply config.log_level to the ``testt`` logger hierarchy.

    No handlers are installed; records propagate to whatever the host
    (usually pytest's logging capture) has configured.
    """
    logging.getLogger("testt").setLevel(config.log_level.upper())
