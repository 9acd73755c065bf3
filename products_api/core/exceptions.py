"""Application-level exceptions and FastAPI exception handlers."""


import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from products_api.core.config import settings

logger = logging.getLogger(__name__)

class AppException(Exception):
    """Base application exception."""

    def __init__(self, message: str, status_code: int = 500, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.status_code = status_code
        self.code = code
        super().__init__(message)

class NotFoundError(AppException):
    def __init__(self, entity: str):
        super().__init__(f"{entity} not found", status_code=404, code="NOT_FOUND")

class BadRequestError(AppException):
    def __init__(self, message: str):
        super().__init__(message, status_code=400, code="BAD_REQUEST")

class DataAccessError(AppException):
    """Raised when the record store fails. The cause is logged, never returned."""

    def __init__(self, message: str):
        super().__init__(message, status_code=500, code="DATA_ACCESS_ERROR")

# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------

def _error_body(error: str, **extra) -> dict:
    return {"success": False, "error": error, **extra}

def _validation_messages(exc: RequestValidationError) -> list[str]:
    """Flatten pydantic errors into plain messages.

    Field validators raise ``ValueError`` with a ready-made sentence; those are
    passed through as-is. Anything else (malformed JSON, wrong container type)
    is reported as ``"<location>: <pydantic message>"``.
    """
    messages: list[str] = []
    for err in exc.errors():
        cause = (err.get("ctx") or {}).get("error")
        if err.get("type") == "value_error" and cause is not None:
            messages.append(str(cause))
            continue
        loc = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        messages.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return messages

def register_exception_handlers(app: FastAPI) -> None:
    """Attach all custom exception handlers to the FastAPI app."""

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.message),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_error_body("Validation failed", details=_validation_messages(exc)),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            return JSONResponse(
                status_code=404,
                content=_error_body("Route not found", path=request.url.path),
            )
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content=_error_body(
                "Internal server error",
                message=str(exc) if settings.is_development else None,
            ),
        )
