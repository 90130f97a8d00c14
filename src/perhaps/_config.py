"""Library configuration: PerhapsConfig, init() and environment detection."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from perhaps._logging import configure_logging

__all__ = [
    'PerhapsConfig',
    'get_config',
    'init',
    'reset',
]

_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass(frozen=True)
class PerhapsConfig:
    """Configuration for perhaps.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_logs: Emit JSON logs instead of console output.
        log_absorbed_errors: Report failures swallowed by invoke_safe().
    """

    log_level: str | None = None
    json_logs: bool = True
    log_absorbed_errors: bool = True


# Global configuration (set by init())
_config: PerhapsConfig | None = None


def _detect_log_level() -> str | None:
    """Read the log level from PERHAPS_LOG_LEVEL, None if unset or unknown."""
    env_level = os.environ.get('PERHAPS_LOG_LEVEL', '').upper()
    if not env_level:
        return None
    if env_level not in _LEVELS:
        logging.warning("Unknown PERHAPS_LOG_LEVEL value '%s', logging disabled", env_level)
        return None
    return env_level


def init(
    log_level: str | None = None,
    *,
    json_logs: bool = True,
    log_absorbed_errors: bool = True,
) -> PerhapsConfig:
    """Initialize perhaps with the specified configuration.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). Read from
            PERHAPS_LOG_LEVEL if None; silent when neither is set.
        json_logs: Emit JSON logs instead of console output.
        log_absorbed_errors: Report failures swallowed by invoke_safe().

    Returns:
        The PerhapsConfig that was set.

    Example:
        ```python
        import perhaps

        perhaps.init(log_level='DEBUG', json_logs=False)
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level.upper() if log_level is not None else _detect_log_level()

    _config = PerhapsConfig(
        log_level=resolved_level,
        json_logs=json_logs,
        log_absorbed_errors=log_absorbed_errors,
    )

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=json_logs)

    return _config


def get_config() -> PerhapsConfig:
    """Get the current configuration.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'perhaps not initialized. Call perhaps.init() first.'
        raise RuntimeError(msg)
    return _config


def reset() -> None:
    """Forget the current configuration."""
    global _config  # noqa: PLW0603
    _config = None


def _should_log_absorbed() -> bool:
    return _config is not None and _config.log_level is not None and _config.log_absorbed_errors
