"""Library configuration: ToolkitConfig and initialization."""

from __future__ import annotations

import os
from dataclasses import dataclass

from fp_toolkit._logging import configure_logging, get_logger

__all__ = [
    'ToolkitConfig',
    'get_config',
    'init',
]

logger = get_logger(__name__)

_TRUTHY = frozenset({'1', 'true', 'yes', 'on'})
_FALSY = frozenset({'0', 'false', 'no', 'off'})


@dataclass(frozen=True)
class ToolkitConfig:
    """Configuration for fp-toolkit.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_logs: Render logs as JSON (True) or for the console (False).
        parallel_limit: Default cap on concurrently running producers in
            ``parallel``. None = unlimited.
    """

    log_level: str | None = None
    json_logs: bool = True
    parallel_limit: int | None = None

    def __post_init__(self) -> None:
        if self.parallel_limit is not None and self.parallel_limit < 1:
            raise ValueError(f'parallel_limit must be >= 1, got {self.parallel_limit}')


_config: ToolkitConfig | None = None


def _env_parallel_limit(*, strict: bool = True) -> int | None:
    raw = os.environ.get('FP_TOOLKIT_PARALLEL_LIMIT', '').strip()
    if not raw:
        return None
    try:
        limit = int(raw)
    except ValueError:
        limit = 0
    if limit >= 1:
        return limit
    if strict:
        raise ValueError(f'FP_TOOLKIT_PARALLEL_LIMIT must be a positive integer, got {raw!r}')
    logger.warning('invalid_parallel_limit_ignored', value=raw)
    return None


def _env_json_logs() -> bool:
    raw = os.environ.get('FP_TOOLKIT_JSON_LOGS', '').strip().lower()
    if raw in _FALSY:
        return False
    if raw and raw not in _TRUTHY:
        logger.warning('unknown_json_logs_value', value=raw)
    return True


def init(
    *,
    log_level: str | None = None,
    json_logs: bool | None = None,
    parallel_limit: int | None = None,
) -> ToolkitConfig:
    """Initialize fp-toolkit configuration.

    Explicit arguments win over environment variables
    (``FP_TOOLKIT_LOG_LEVEL``, ``FP_TOOLKIT_JSON_LOGS``,
    ``FP_TOOLKIT_PARALLEL_LIMIT``). Logging is configured only when a level
    is set.

    Returns:
        The stored ToolkitConfig.

    Raises:
        ValueError: If the parallel limit is not a positive integer.
    """
    global _config

    config = ToolkitConfig(
        log_level=log_level or os.environ.get('FP_TOOLKIT_LOG_LEVEL') or None,
        json_logs=json_logs if json_logs is not None else _env_json_logs(),
        parallel_limit=parallel_limit if parallel_limit is not None else _env_parallel_limit(),
    )

    if config.log_level is not None:
        configure_logging(config.log_level, json_output=config.json_logs)

    _config = config
    logger.debug('fp_toolkit_initialized', parallel_limit=config.parallel_limit)
    return config


def get_config() -> ToolkitConfig:
    """Return the current configuration.

    Without a prior ``init()`` the configuration is read from the environment
    once and stored. This path never configures logging, and an unusable
    ``FP_TOOLKIT_PARALLEL_LIMIT`` is ignored with a warning instead of
    failing the caller.
    """
    global _config

    if _config is None:
        _config = ToolkitConfig(
            log_level=os.environ.get('FP_TOOLKIT_LOG_LEVEL') or None,
            json_logs=_env_json_logs(),
            parallel_limit=_env_parallel_limit(strict=False),
        )
    return _config


def _reset() -> None:
    """Forget the stored configuration (test helper)."""
    global _config
    _config = None
