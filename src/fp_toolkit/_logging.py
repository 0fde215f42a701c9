"""Structured logging for fp-toolkit.

The library only ever obtains loggers; nothing is configured on import. An
application that wants to see the library's debug events calls
``configure_logging`` (directly or through ``fp_toolkit.init``).

structlog events and plain stdlib records are rendered by one
``ProcessorFormatter``, so both come out in the same format.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Any

import structlog

__all__ = [
    'configure_logging',
    'get_logger',
]

# Applied to structlog events and to records from stdlib loggers alike.
_PRE_CHAIN: tuple[Any, ...] = (
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt='iso'),
    structlog.stdlib.ExtraAdder(),
)


def _renderer(json_output: bool, stream: IO[str]) -> Any:
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=stream.isatty())


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
    stream: IO[str] | None = None,
) -> None:
    """Route structlog and stdlib logging through a single root handler.

    Replaces any handlers on the root logger. Unknown level names fall back
    to INFO.

    Args:
        level: Logging level name, e.g. "DEBUG" or "WARNING".
        json_output: Emit one JSON object per line; otherwise human-readable
            console output.
        stream: Where to write. Defaults to ``sys.stderr`` at call time.
    """
    stream = stream if stream is not None else sys.stderr

    structlog.configure(
        processors=[
            *_PRE_CHAIN,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=list(_PRE_CHAIN),
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(json_output, stream),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.getLevelNamesMapping().get(level.upper(), logging.INFO))


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger backed by the stdlib logger of the same name.

    Events pass through whatever processors structlog is configured with,
    then reach stdlib logging, so they are only emitted where the
    application lets them through.
    """
    return structlog.wrap_logger(logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger)
