# apiguard/logging_config.py
import logging
import sys
from typing import Any, Dict, Union

import structlog


def _as_level(log_level: Union[int, str]) -> int:
    if isinstance(log_level, str):
        return getattr(logging, log_level.upper())
    return log_level


def setup_logging(log_level: Union[int, str] = logging.INFO, trace_rejections: bool = False):
    """Set up structured logging for the validation service.

    Configures structlog and routes the standard library root logger through
    the same renderer, so Litestar, uvicorn and apiguard logs share one format.
    With ``trace_rejections`` the request validation logger is forced to DEBUG
    so every rejected payload is logged with its diagnostic count.
    """
    log_level = _as_level(log_level)

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.format_exc_info,
        structlog.processors.TimeStamper("iso"),
    ]

    # Per-logger stdlib levels do the fine-grained filtering when tracing
    structlog_level = logging.DEBUG if trace_rejections else log_level

    structlog.configure(
        processors=shared_processors + [structlog.dev.ConsoleRenderer(colors=True)],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(structlog_level),
        cache_logger_on_first_use=True,
    )

    # Non-structlog loggers get the same processors via the formatter
    formatter = structlog.stdlib.ProcessorFormatter(
        processor=structlog.dev.ConsoleRenderer(colors=True),
        foreign_pre_chain=shared_processors,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    handler.setLevel(log_level)

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(log_level)

    for name in logging.root.manager.loggerDict:
        if name != "root":
            logging.getLogger(name).handlers = []
            logging.getLogger(name).propagate = True
            logging.getLogger(name).setLevel(log_level)

    if trace_rejections and log_level > logging.DEBUG:
        logging.getLogger("apiguard.utils.validate_request").setLevel(logging.DEBUG)
        handler.setLevel(logging.DEBUG)


def get_uvicorn_log_config(log_level: Union[int, str] = logging.INFO) -> Dict[str, Any]:
    """Logging config for Uvicorn that silences its own handlers and
    propagates everything to the root logger configured above.
    """
    log_level_name = logging.getLevelName(_as_level(log_level))

    loggers = {
        name: {
            "handlers": ["null"],
            "level": log_level_name,
            "propagate": True,
        }
        for name in ("uvicorn", "uvicorn.error", "uvicorn.access")
    }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {},
        "handlers": {
            "null": {
                "class": "logging.NullHandler",
            },
        },
        "loggers": loggers,
    }
