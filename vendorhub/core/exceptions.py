"""Application-level exceptions and FastAPI exception handlers.

Every handled error is reported through the response envelope
``{"code": -1, "message": ...}`` with HTTP 200; only unexpected failures
surface as a 500.
"""


import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from vendorhub.core import messages

logger = logging.getLogger(__name__)

class AppException(Exception):
    """Base application exception."""

    def __init__(self, message: str, status_code: int = status.HTTP_200_OK, code: int = -1):
        self.message = message
        self.status_code = status_code
        self.code = code
        super().__init__(message)

class InvalidTokenError(AppException):
    """Token header missing, or rejected / errored in the validator."""

    def __init__(self, message: str = messages.INVALID_TOKEN):
        super().__init__(message)

class VendorValidationError(AppException):
    def __init__(self, message: str):
        super().__init__(message)

class DuplicateEmailError(AppException):
    def __init__(self, message: str = messages.EMAIL_ALREADY_REGISTERED):
        super().__init__(message)

class StoreError(AppException):
    """Raised when the document store rejects a read or write."""

    def __init__(self, message: str = messages.UNABLE_TO_PROCESS):
        super().__init__(message)

# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------

def _error_body(code: int, message: str) -> dict:
    return {"code": code, "message": message}

def _first_error_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return messages.UNABLE_TO_PROCESS
    first = errors[0]
    loc = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    return f"{loc}: {first.get('msg')}" if loc else str(first.get("msg"))

def register_exception_handlers(app: FastAPI) -> None:
    """Attach all custom exception handlers to the FastAPI app."""

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.code, exc.message),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.info("Rejected malformed request to %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content=_error_body(-1, _first_error_message(exc)),
        )

    @app.exception_handler(404)
    async def not_found_handler(request: Request, exc: Exception) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content=_error_body(-1, "Resource not found"),
        )

    @app.exception_handler(500)
    async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content=_error_body(-1, messages.UNABLE_TO_PROCESS),
        )
