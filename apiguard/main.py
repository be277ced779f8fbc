import os

import uvicorn
from litestar import Litestar
from litestar.config.cors import CORSConfig
from litestar.handlers import get
from litestar.logging import LoggingConfig
from litestar.openapi import OpenAPIConfig

from apiguard.config import settings
from apiguard.routes.validation import validation_router


@get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint for the server."""
    return {"status": "ok"}


def create_app() -> Litestar:
    """
    Create and configure the Litestar application.
    """

    cors_config = CORSConfig(
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    openapi_config = OpenAPIConfig(
        title="apiguard",
        version=settings.VERSION,
        summary="Request validation in front of a generative AI API",
        description=(
            "apiguard checks file upload, response and image variation payloads "
            "and explains what is wrong with them before they reach the upstream API."
        ),
    )

    logging_config = LoggingConfig(
        root={
            "level": settings.LOG_LEVEL.upper() or "INFO",
            "handlers": ["shared_console"],
        },
        formatters={"standard": {"format": "%(levelname)s:\t  %(message)s"}},
        handlers={
            "shared_console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
            }
        },
    )

    return Litestar(
        route_handlers=[health_check, validation_router],
        cors_config=cors_config,
        openapi_config=openapi_config,
        debug=settings.DEBUG,
        logging_config=logging_config,
    )


app = create_app()

if __name__ == "__main__":
    port = int(os.environ.get("PORT", 8080))

    uvicorn.run(
        "apiguard.main:app",
        host="0.0.0.0",
        port=port,
        reload=settings.DEBUG,
    )
