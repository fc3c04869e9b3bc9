"""structlog output for the ``zoneresolve`` logger.

Library modules log through ``logging.getLogger(__name__)``. Calling
:func:`configure_logging` gives those records a structured rendering
(console or JSON lines on stderr) by installing one handler on the
``zoneresolve`` logger only; the root logger and any handlers the host
application configured are left alone.
"""

from __future__ import annotations

import logging
import sys

import structlog

PACKAGE_LOGGER = "zoneresolve"

# Processors applied to every record before rendering.
SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


class _PackageHandler(logging.StreamHandler):  # type: ignore[type-arg]
    """Marker type so repeated configuration replaces, not stacks, handlers."""


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> logging.Logger:
    """Route ``zoneresolve`` records through a structlog formatter on stderr.

    Args:
        verbose: Emit DEBUG records (one per resolver decision).
            When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.

    Returns:
        The configured ``zoneresolve`` logger.
    """
    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = _PackageHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=SHARED_PROCESSORS,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in [h for h in logger.handlers if isinstance(h, _PackageHandler)]:
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    # Our handler renders these records; don't print them twice via root.
    logger.propagate = False
    return logger
