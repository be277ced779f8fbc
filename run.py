#!/usr/bin/env python3
"""Wrapper script for running the Litestar app with Rich and Structlog."""
import uvicorn
from rich.traceback import install

# Show detailed tracebacks
install(show_locals=True, width=120, suppress=[uvicorn])

# Import config and logging AFTER setting up Rich
from apiguard.config import settings
from apiguard.logging_config import setup_logging, get_uvicorn_log_config

setup_logging(log_level=settings.LOG_LEVEL, trace_rejections=settings.DEBUG)

if __name__ == "__main__":
    log_config = get_uvicorn_log_config(log_level=settings.LOG_LEVEL)

    # Run the server using import string so reload works
    uvicorn.run(
        "apiguard.main:app",
        host="0.0.0.0",
        port=8080,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
        log_config=log_config,
    )
