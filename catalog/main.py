"""Entry point for the catalog service."""

import time
import uuid
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from catalog.config import CATALOG_HOST, CATALOG_PORT, CATALOG_RELOAD
from catalog.database import get_db_connection, init_database
from catalog.exceptions import (
    CatalogException,
    NotFoundError,
    TagMismatchError,
    ValidationError
)
from catalog.logging_config import setup_logging
from catalog.routes.file_routes import router as file_router
from catalog.service_locator import set_file_service
from catalog.services.file_service import FileService

logger = setup_logging('catalog')


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Initialize the database and register the file service for the process lifetime.
    """
    logger.info("Catalog service starting up...")

    init_database()
    logger.info("Database initialized")

    set_file_service(FileService())
    logger.info("File service registered")

    yield

    logger.info("Catalog service shutting down...")
    set_file_service(None)


app = FastAPI(
    title="File Metadata Catalog",
    description="Tag and name searchable catalog of uploaded file metadata",
    version="1.0.0",
    lifespan=lifespan
)


def _error_response(status_code: int, exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": str(exc)}
    )


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """
    Middleware to log all HTTP requests and responses.
    """
    request_id = str(uuid.uuid4())
    request.state.request_id = request_id

    start_time = time.time()

    logger.info(
        f"Request started: {request.method} {request.url.path} [request_id={request_id}]"
    )

    response = await call_next(request)

    duration = time.time() - start_time

    logger.info(
        f"Request completed: {request.method} {request.url.path} "
        f"status={response.status_code} duration={duration:.3f}s [request_id={request_id}]"
    )

    response.headers["X-Request-ID"] = request_id

    return response


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    request_id = getattr(request.state, 'request_id', 'unknown')
    logger.warning(
        f"Validation error: {exc} [request_id={request_id}] path={request.url.path}"
    )
    return _error_response(status.HTTP_400_BAD_REQUEST, exc)


@app.exception_handler(TagMismatchError)
async def tag_mismatch_handler(request: Request, exc: TagMismatchError):
    request_id = getattr(request.state, 'request_id', 'unknown')
    logger.warning(
        f"Tag mismatch error: {exc} [request_id={request_id}] path={request.url.path}"
    )
    return _error_response(status.HTTP_400_BAD_REQUEST, exc)


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    request_id = getattr(request.state, 'request_id', 'unknown')
    logger.warning(
        f"Not found error: {exc} [request_id={request_id}] path={request.url.path}"
    )
    return _error_response(status.HTTP_404_NOT_FOUND, exc)


@app.exception_handler(CatalogException)
async def catalog_exception_handler(request: Request, exc: CatalogException):
    request_id = getattr(request.state, 'request_id', 'unknown')
    logger.error(
        f"Catalog exception: {exc} [request_id={request_id}] path={request.url.path}",
        exc_info=True
    )
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, exc)


app.include_router(file_router)


@app.get("/")
async def root():
    """
    Root endpoint for health check.
    """
    return {"message": "File Metadata Catalog API", "status": "running"}


@app.get("/health")
async def health_check():
    """
    Health check endpoint for container healthchecks.
    Returns 200 if service is alive.
    """
    return {"status": "healthy", "service": "catalog"}


@app.get("/ready")
async def ready_check():
    """
    Readiness check endpoint.
    Verifies the database can be queried.
    """
    try:
        with get_db_connection() as conn:
            conn.execute("SELECT 1 FROM files LIMIT 1")
        db_status = "ok"
    except Exception as e:
        db_status = f"error: {str(e)}"

    ready = db_status == "ok"
    status_code = status.HTTP_200_OK if ready else status.HTTP_503_SERVICE_UNAVAILABLE

    return JSONResponse(
        status_code=status_code,
        content={"ready": ready, "database": db_status}
    )


def main() -> None:
    """
    Start the FastAPI server with uvicorn.
    """
    uvicorn.run(
        "catalog.main:app",
        host=CATALOG_HOST,
        port=CATALOG_PORT,
        reload=CATALOG_RELOAD
    )


if __name__ == "__main__":
    main()
