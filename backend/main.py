from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging

from api import users, reports
from config.settings import Settings, settings as default_settings
from init_db import init_database
from utils.error_handlers import register_exception_handlers
from utils.logging_utils import configure_logging
from utils.request_context import trace_requests

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan - startup and shutdown"""
    logger.info("Starting Users API...")
    init_database()
    yield
    logger.info("Application shutdown complete")


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        app_settings: Settings to use (defaults to the environment-derived settings)

    Returns:
        Configured FastAPI instance
    """
    app_settings = app_settings or default_settings
    configure_logging(app_settings.log_level, app_settings.log_dir)

    app = FastAPI(
        title="Users API",
        description="User management and report review API",
        version=API_VERSION,
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(app_settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(trace_requests)
    register_exception_handlers(app)

    # Include API routers
    app.include_router(users.router, prefix="/api")
    app.include_router(reports.router, prefix="/api")

    @app.get("/api/health", tags=["system"])
    def health_check():
        """Health check endpoint"""
        return {
            "status": "ok",
            "service": "Users API",
            "version": API_VERSION
        }

    return app


if __name__ == "__main__":
    import socket
    import sys
    import uvicorn

    def is_port_in_use(host: str, port: int) -> bool:
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            try:
                s.bind((host, port))
                return False
            except OSError:
                return True

    if is_port_in_use(default_settings.host, default_settings.port):
        logger.error(f"Port {default_settings.port} is already in use - is another instance running?")
        sys.exit(1)

    logger.info(f"Starting Users API on http://{default_settings.host}:{default_settings.port}...")
    uvicorn.run(create_app(), host=default_settings.host, port=default_settings.port)
