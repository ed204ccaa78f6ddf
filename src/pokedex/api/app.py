"""
Main FastAPI application for the Pokedex API
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..store import PokemonStore, create_store

# Configure logging before creating logger
configure_logging(
    debug=settings.debug, json_output=settings.json_logs, level=settings.log_level
)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    store: PokemonStore = app.state.store
    logger.info(
        "Pokemon store ready",
        pokemon=len(store.list_pokemon()),
        types=len(store.list_types()),
        next_id=store.next_id,
    )
    logger.info(f"Running a GraphQL API server at localhost:{settings.api_port}/graphql")

    yield

    logger.info("Shutting down Pokedex API...")


def create_app(store: PokemonStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Store to serve. A fresh store is built from the configured seed
            when omitted.
    """

    app = FastAPI(
        title="Pokedex API",
        description="GraphQL API over an in-memory Pokemon catalog",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    # The store lives as long as the app; resolvers reach it through the GraphQL context
    app.state.store = store if store is not None else create_store()

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    try:
        from ..graphql.schema import create_graphql_router, validate_schema

        logger.info("Validating GraphQL schema...")
        validate_schema()

        app.include_router(create_graphql_router(), prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        # Re-raise to fail fast - server should not start with broken GraphQL
        raise

    return app


# Create the main application instance
app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "pokedex.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
