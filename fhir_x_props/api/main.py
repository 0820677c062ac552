"""FastAPI application factory for the FHIR x Props API."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI

from .. import __version__
from .config import APIConfig, get_config
from .routers import fhir_router, health_router

logger = logging.getLogger(__name__)

load_dotenv()


def create_app(config: APIConfig | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        config: Optional configuration. If None, loads from environment.

    Returns:
        Configured FastAPI application
    """
    if config is None:
        config = get_config()

    app = FastAPI(
        title="FHIR x Props API",
        description="Builds FHIR Patient resources from flat property maps",
        version=__version__,
    )
    app.state.config = config

    # Register routers
    app.include_router(health_router)
    app.include_router(fhir_router)

    return app


# Default app instance for uvicorn
app = create_app()


def main():
    """Entry point for the fhir-x-props-serve command."""
    import uvicorn

    config = get_config()

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info("Serving on %s:%d", config.host, config.port)

    uvicorn.run(
        "fhir_x_props.api.main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    main()
