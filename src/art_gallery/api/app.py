"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from art_gallery.api.auth import router as auth_router
from art_gallery.api.gallery import router as gallery_router
from art_gallery.api.messages import router as messages_router
from art_gallery.api.orders import router as orders_router
from art_gallery.app_logging import configure_logging
from art_gallery.containers import AppContainer
from art_gallery.domain.errors import (
    AuthError,
    ConflictError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    app.include_router(orders_router)
    app.include_router(gallery_router)
    app.include_router(messages_router)
    app.include_router(auth_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.exception_handler(ValidationError)
    async def validation_error(_: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"success": False, "message": exc.message, "field": exc.field},
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_error(
        _: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = exc.errors()
        field = _error_field(errors[0]) if errors else "body"
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "success": False,
                "message": f"Invalid value for field: {field}",
                "field": field,
            },
        )

    @app.exception_handler(ConflictError)
    async def conflict_error(_: Request, exc: ConflictError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={"success": False, "message": exc.message},
        )

    @app.exception_handler(NotFoundError)
    async def not_found_error(_: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"success": False, "message": exc.message},
        )

    @app.exception_handler(AuthError)
    async def auth_error(_: Request, exc: AuthError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"loggedIn": False, "message": exc.message},
        )

    @app.exception_handler(PersistenceError)
    async def persistence_error(request: Request, exc: PersistenceError) -> JSONResponse:
        logger.error(
            "Storage failure: %s %s: %s", request.method, request.url.path, exc.message
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "message": "Internal server error"},
        )

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "Unhandled error: %s %s", request.method, request.url.path, exc_info=exc
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "message": "Internal server error"},
        )

    return app


_REQUEST_SECTIONS = {"body", "query", "path", "header", "cookie"}


def _error_field(error: dict) -> str:
    """Return the request field name a pydantic error points at."""
    location = [
        str(part) for part in error.get("loc", ()) if part not in _REQUEST_SECTIONS
    ]
    return location[0] if location else "body"
