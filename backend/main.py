"""
Main FastAPI application entry point
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.api.routes import codec, root
from app.core.config import Settings, get_settings
from app.core.errors import register_exception_handlers
from app.core.logging_config import LoggingConfig
from app.core.middleware import LoggingContextMiddleware

# Configure logging first
LoggingConfig.configure()

logger = LoggingConfig.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan events for FastAPI app"""
    settings = app.state.settings
    logger.info(f"Starting {settings.app_name} in {settings.app_env} mode...")
    logger.info(f"Server is running on port {settings.port}")
    if not settings.api_key_configured:
        logger.warning("x_api_key is not set; all authenticated endpoints will reject requests")

    yield

    logger.info(f"Shutting down {settings.app_name}...")


def create_app(settings: Settings) -> FastAPI:
    """Build the application: docs metadata, middleware, error handlers, routers"""
    application = FastAPI(
        title=settings.app_name,
        description=settings.app_description,
        version=settings.app_version,
        servers=[{"url": settings.server_url}],
        lifespan=lifespan,
    )
    application.state.settings = settings

    application.add_middleware(LoggingContextMiddleware)
    register_exception_handlers(application)

    application.include_router(root.router)
    application.include_router(codec.router)

    return application


app = create_app(get_settings())


def run() -> None:
    """Launch the Uvicorn server"""
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_config=None,  # keep LoggingConfig handlers
    )


if __name__ == "__main__":
    run()
