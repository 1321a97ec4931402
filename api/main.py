
"""
FastAPI application initialization
"""

from pathlib import Path
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError
from api.routes import health, stored_data, fetch, items, entities
from api.middleware import RequestContextMiddleware
from core.config import settings
from core.database import Database
from core.exceptions import ServiceError
from core.logging import setup_logging
from ingestion.extractors.api_extractor import RemoteFetcher
import logging

logger = logging.getLogger(__name__)


def create_app(
    database: Optional[Database] = None,
    fetcher: Optional[RemoteFetcher] = None,
    public_dir: Optional[str] = None
) -> FastAPI:
    """
    Build the application around one Database and one RemoteFetcher.

    Both are constructed here unless passed in, and handed to request
    handlers through ``app.state`` dependencies.
    """
    app = FastAPI(
        title="JSONPlaceholder Mirror API",
        description="Fetches JSONPlaceholder collections, normalizes them and serves the stored data",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc"
    )

    app.state.database = database or Database(
        settings.database_url,
        echo=settings.ENVIRONMENT == "debug"
    )
    app.state.fetcher = fetcher or RemoteFetcher()

    app.add_middleware(RequestContextMiddleware)

    # Include routers
    app.include_router(health.router)
    app.include_router(stored_data.router)
    app.include_router(fetch.router)
    app.include_router(items.router)
    app.include_router(entities.router)

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError):
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(SQLAlchemyError)
    async def storage_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error(f"{request.method} {request.url.path} storage failure: {str(exc)}")
        return JSONResponse(status_code=500, content={"error": str(exc)})

    static_dir = Path(public_dir or settings.PUBLIC_DIR)
    index_file = static_dir / "index.html"

    @app.get("/", include_in_schema=False)
    async def root():
        """Static entry page"""
        if index_file.is_file():
            return FileResponse(index_file)
        return {
            "message": "JSONPlaceholder Mirror API",
            "version": "1.0.0",
            "docs": "/docs",
            "health": "/health"
        }

    if static_dir.is_dir():
        app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")

    @app.on_event("startup")
    async def startup_event():
        """Application startup event"""
        logger.info("Starting JSONPlaceholder Mirror API")
        logger.info(f"Environment: {settings.ENVIRONMENT}")
        logger.info(f"Using database at: {app.state.database.url}")
        await app.state.database.create_all()

    @app.on_event("shutdown")
    async def shutdown_event():
        """Application shutdown event"""
        logger.info("Shutting down JSONPlaceholder Mirror API")
        await app.state.database.dispose()

    return app


setup_logging()
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("api.main:app", host=settings.API_HOST, port=settings.PORT)
