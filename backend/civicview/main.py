"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from civicview.api.errors import register_exception_handlers
from civicview.api.router import api_router
from civicview.config import Settings, get_settings
from civicview.seed import ensure_admin_user, seed_sample_data
from civicview.storage import StorageProvider, build_storage_provider

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app(
    settings: Settings | None = None,
    storage_provider: StorageProvider | None = None,
) -> FastAPI:
    """
    Build the application.

    The storage provider is created in the lifespan from settings unless one
    is passed in, so importing this module never opens a database connection.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler for startup/shutdown events."""
        # Startup
        logger.info("Starting %s in %s mode", settings.app_name, settings.environment)
        provider = storage_provider or build_storage_provider(settings)
        app.state.storage_provider = provider

        with provider.session() as storage:
            ensure_admin_user(storage, settings.admin_username, settings.admin_password)
            if settings.seed_sample_data:
                seed_sample_data(storage)

        yield

        # Shutdown
        logger.info("Shutting down %s", settings.app_name)
        provider.close()

    app = FastAPI(
        title=settings.app_name,
        description="Civic accountability platform: politician profiles, promises, votes and ratings",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/api/docs" if not settings.is_production else None,
        redoc_url="/api/redoc" if not settings.is_production else None,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include API router
    app.include_router(api_router, prefix="/api")

    @app.get("/health")
    async def health_check():
        """Health check endpoint for load balancers."""
        return {"status": "healthy", "environment": settings.environment}

    return app


app = create_app()
