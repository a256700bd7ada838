# -*- coding: utf-8 -*-
"""
metricconv Configuration

Settings for the interactive driver. The conversion core reads nothing from
here; it is a pure function library.

All settings can be overridden via environment variables with the
``METRICCONV_`` prefix (e.g. ``METRICCONV_QUIT_TOKEN``).

Example:
    >>> from metricconv.config import get_config
    >>> cfg = get_config()
    >>> print(cfg.quit_token, cfg.log_level)
"""

from __future__ import annotations

import logging
import os
import threading
from dataclasses import dataclass
from typing import Any, Optional

logger = logging.getLogger(__name__)

_ENV_PREFIX = "METRICCONV_"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class MetricConverterConfig:
    """Configuration for the metricconv command-line driver.

    Attributes:
        quit_token: Line that ends the interactive loop.
        prompt: Prompt shown before each line is read.
        show_instructions: Whether to print the query format help on start.
        log_level: Logging level, empty to leave logging unconfigured.
    """

    quit_token: str = "q"
    prompt: str = "> "
    show_instructions: bool = True
    log_level: str = ""

    @classmethod
    def from_env(cls) -> MetricConverterConfig:
        """Build a MetricConverterConfig from environment variables.

        Every field can be overridden via ``METRICCONV_<FIELD_UPPER>``.
        Boolean values accept ``true/1/yes`` (case-insensitive).

        Returns:
            Populated MetricConverterConfig instance.
        """
        prefix = _ENV_PREFIX

        def _env(name: str, default: Any = None) -> Optional[str]:
            return os.environ.get(f"{prefix}{name}", default)

        def _bool(name: str, default: bool) -> bool:
            val = _env(name)
            if val is None:
                return default
            return val.lower() in ("true", "1", "yes")

        def _str(name: str, default: str) -> str:
            val = _env(name)
            if val is None:
                return default
            return val

        quit_token = _str("QUIT_TOKEN", cls.quit_token).strip()
        if not quit_token or " " in quit_token:
            logger.warning(
                "Invalid quit token %s%s=%r, using default %r",
                prefix, "QUIT_TOKEN", quit_token, cls.quit_token,
            )
            quit_token = cls.quit_token

        log_level = _str("LOG_LEVEL", cls.log_level).upper()
        if log_level and log_level not in _LOG_LEVELS:
            logger.warning(
                "Invalid log level %s%s=%s, logging left unconfigured",
                prefix, "LOG_LEVEL", log_level,
            )
            log_level = cls.log_level

        config = cls(
            quit_token=quit_token,
            prompt=_str("PROMPT", cls.prompt),
            show_instructions=_bool("SHOW_INSTRUCTIONS", cls.show_instructions),
            log_level=log_level,
        )

        logger.debug(
            "MetricConverterConfig loaded: quit_token=%r, prompt=%r, "
            "show_instructions=%s, log_level=%s",
            config.quit_token,
            config.prompt,
            config.show_instructions,
            config.log_level or "<unset>",
        )
        return config


# ---------------------------------------------------------------------------
# Thread-safe singleton accessor
# ---------------------------------------------------------------------------

_config_instance: Optional[MetricConverterConfig] = None
_config_lock = threading.Lock()


def get_config() -> MetricConverterConfig:
    """Return the singleton MetricConverterConfig, creating from env if needed."""
    global _config_instance
    if _config_instance is None:
        with _config_lock:
            if _config_instance is None:
                _config_instance = MetricConverterConfig.from_env()
    return _config_instance


def set_config(config: MetricConverterConfig) -> None:
    """Replace the singleton MetricConverterConfig (useful for testing).

    Args:
        config: New configuration to install.
    """
    global _config_instance
    with _config_lock:
        _config_instance = config
    logger.debug("MetricConverterConfig replaced programmatically")


def reset_config() -> None:
    """Reset the singleton (primarily for test teardown)."""
    global _config_instance
    with _config_lock:
        _config_instance = None


__all__ = [
    "MetricConverterConfig",
    "get_config",
    "set_config",
    "reset_config",
]
