"""structlog setup for the synthesis pass and the CLI.

Every module logs through stdlib ``logging.getLogger(__name__)``; the
formatter installed here renders those records with the structlog context
of the current synthesis pass attached.
"""

import logging
import sys
from contextlib import AbstractContextManager

import structlog

from repoproxy.config import get_settings


def _renderer(json_output: bool) -> structlog.types.Processor:
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(level: str | None = None, json_output: bool | None = None) -> None:
    """Route stdlib logging through structlog on stderr.

    Args:
        level: Log level name. Defaults to ``LOG_LEVEL`` from settings.
        json_output: Force JSON output. If None, JSON when ``APP_ENV`` is prod.
    """
    settings = get_settings()
    log_level = getattr(logging, (level or settings.log_level).upper(), logging.INFO)
    if json_output is None:
        json_output = settings.app_env == "prod"

    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(json_output),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(log_level)


def log_context(**kwargs: object) -> AbstractContextManager[None]:
    """Bind key-value pairs to every log record emitted inside the `with` block.

    Previously bound values are restored on exit.
    """
    return structlog.contextvars.bound_contextvars(**kwargs)
