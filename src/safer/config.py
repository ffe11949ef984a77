"""Library configuration: SaferConfig, init() and environment detection."""

from __future__ import annotations

import os
from dataclasses import dataclass

from safer._logging import configure_logging, get_logger

__all__ = [
    'SaferConfig',
    'get_config',
    'init',
    'reset_config',
]

_TRUE_VALUES = frozenset({'1', 'true', 'yes', 'on'})
_FALSE_VALUES = frozenset({'0', 'false', 'no', 'off', ''})

_logger = get_logger(__name__)


@dataclass(frozen=True)
class SaferConfig:
    """Configuration for safer.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_logs: Emit JSON logs when logging is configured, else console output.
        trace_effects: Emit a debug event every time an IO is run.
    """

    log_level: str | None = None
    json_logs: bool = True
    trace_effects: bool = False


# Global configuration (set by init() or resolved lazily by get_config())
_config: SaferConfig | None = None


def _env_flag(name: str, default: bool) -> bool:
    """Read a boolean flag from the environment.

    Unknown values log a warning and fall back to ``default``.
    """
    raw = os.environ.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    _logger.warning('Unknown boolean environment value, using default', variable=name, value=raw, default=default)
    return default


def _detect_log_level() -> str | None:
    """Detect log level from SAFER_LOG_LEVEL (unset or empty = None)."""
    level = os.environ.get('SAFER_LOG_LEVEL', '').strip()
    return level.upper() or None


def _from_env() -> SaferConfig:
    return SaferConfig(
        log_level=_detect_log_level(),
        json_logs=_env_flag('SAFER_JSON_LOGS', True),
        trace_effects=_env_flag('SAFER_TRACE_EFFECTS', False),
    )


def init(
    log_level: str | None = None,
    *,
    json_logs: bool | None = None,
    trace_effects: bool | None = None,
) -> SaferConfig:
    """Initialize safer with the specified configuration.

    Arguments left as None are resolved from the environment:
    ``SAFER_LOG_LEVEL``, ``SAFER_JSON_LOGS`` and ``SAFER_TRACE_EFFECTS``.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = no logging setup.
        json_logs: JSON output if True, console output if False.
        trace_effects: Log each IO.run() at debug level.

    Returns:
        The SaferConfig that was set.

    Example:
        ```python
        import safer

        safer.init(log_level='DEBUG', trace_effects=True)
        ```
    """
    global _config  # noqa: PLW0603

    env = _from_env()
    _config = SaferConfig(
        log_level=log_level.upper() if log_level is not None else env.log_level,
        json_logs=json_logs if json_logs is not None else env.json_logs,
        trace_effects=trace_effects if trace_effects is not None else env.trace_effects,
    )

    if _config.log_level is not None:
        configure_logging(_config.log_level, json_output=_config.json_logs)

    return _config


def get_config() -> SaferConfig:
    """Get the current configuration.

    If init() has not been called, the configuration is resolved from the
    environment once and cached. Logging is not configured in that case.
    """
    global _config  # noqa: PLW0603

    if _config is None:
        _config = _from_env()
    return _config


def reset_config() -> None:
    """Forget the current configuration so the next get_config() re-reads the environment."""
    global _config  # noqa: PLW0603
    _config = None
