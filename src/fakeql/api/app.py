"""
Main FastAPI application for FakeQL
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..data import DataSource, EntityKind, get_data_source, init_data_source
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware

# Configure logging before creating logger
configure_logging(debug=settings.debug, level=settings.log_level)
logger = get_logger(__name__)


def create_app(data_source: DataSource | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        data_source: Dataset to serve; generated from settings at startup if None
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup: generate (or install) the dataset once for the process
        logger.info("Starting FakeQL API...")
        source = init_data_source(data_source)
        logger.info(
            "Dataset ready",
            users=source.count(EntityKind.USER),
            albums=source.count(EntityKind.ALBUM),
            photos=source.count(EntityKind.PHOTO),
        )

        yield

        # Shutdown
        logger.info("Shutting down FakeQL API...")

    app = FastAPI(
        title="FakeQL API",
        description="GraphQL API over a generated Users, Albums and Photos dataset",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    # Request id and GraphQL operation name on every log line
    app.add_middleware(LoggingContextMiddleware)

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Health check endpoint, with entity counts of the served dataset
    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        source = data_source or get_data_source()
        return {
            "status": "healthy",
            "version": __version__,
            "entities": {kind.value: source.count(kind) for kind in EntityKind},
        }

    try:
        from ..graphql.schema import create_graphql_router, validate_schema

        # Fail at startup rather than on the first request
        logger.info("Validating GraphQL schema...")
        validate_schema()

        app.include_router(create_graphql_router(data_source), prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint=settings.graphql_path)
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        raise

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "fakeql.api.app:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
