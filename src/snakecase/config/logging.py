"""structlog configuration for snakecase.

The library itself only logs through stdlib ``logging`` and never
configures handlers on import. Applications that want its records call
:func:`configure_logging` (or :func:`configure_from_settings`), which
attaches one handler to the ``snakecase`` logger and leaves the root
logger alone.

Two output modes:
- Human (default): colored console output to stderr
- JSON: Structured JSON lines to stderr
"""

from __future__ import annotations

import logging
import sys

import structlog

from snakecase.config.settings import SnakeCaseSettings

_HANDLER_MARK = "_snakecase_handler"


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Configure structlog processors and output routing.

    Args:
        verbose: Enable DEBUG-level output. When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    setattr(handler, _HANDLER_MARK, True)

    # Only the package logger is touched; the root logger belongs to the host.
    pkg_logger = logging.getLogger("snakecase")
    for stale in [h for h in pkg_logger.handlers if getattr(h, _HANDLER_MARK, False)]:
        pkg_logger.removeHandler(stale)
        stale.close()
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(level)
    pkg_logger.propagate = False


def configure_from_settings(settings: SnakeCaseSettings | None = None) -> SnakeCaseSettings:
    """Apply *settings* (loaded from the environment when omitted)."""
    if settings is None:
        settings = SnakeCaseSettings()
    configure_logging(verbose=settings.verbose, log_json=settings.log_json)
    return settings
