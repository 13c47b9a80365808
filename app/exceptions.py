"""
Custom exception classes and FastAPI exception handlers.

Why custom exceptions?
  The service and storage layers raise domain-specific errors (like
  DeveloperNotFoundError) without importing HTTP concepts. The handlers
  registered here translate them into HTTP responses with one consistent
  body shape: {"message": "...", "error_type": "..."}.

  The React client surfaces `message` as a toast, so every error response
  carries one.

Exception hierarchy:
    DirectoryAPIError (base)
    ├── DeveloperNotFoundError   — unknown developer id (404)
    ├── DuplicateEmailError      — signup with a registered email (400)
    ├── InvalidCredentialsError  — wrong email or password at login (401)
    ├── MissingTokenError        — no bearer credential presented (401)
    ├── InvalidTokenError        — bearer credential failed verification (403)
    └── StorageError             — a collection could not be read or written (500)

Request validation errors raised by FastAPI/Pydantic are reported as 400
with every field error listed, not just the first one.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Base exception
# ---------------------------------------------------------------------------

class DirectoryAPIError(Exception):
    """Base exception for all Developer Directory API domain errors."""

    def __init__(self, detail: str = "An error occurred"):
        self.detail = detail
        super().__init__(self.detail)


# ---------------------------------------------------------------------------
# Domain exceptions
# ---------------------------------------------------------------------------

class DeveloperNotFoundError(DirectoryAPIError):
    """Raised when a requested developer does not exist."""

    def __init__(self, developer_id: str):
        self.developer_id = developer_id
        super().__init__("Developer not found")


class DuplicateEmailError(DirectoryAPIError):
    """Raised when attempting to register with an email that's already in use."""

    def __init__(self, email: str):
        self.email = email
        super().__init__("User with this email already exists")


class InvalidCredentialsError(DirectoryAPIError):
    """Raised when login credentials are incorrect."""

    def __init__(self):
        super().__init__("Invalid email or password")


class MissingTokenError(DirectoryAPIError):
    """Raised when a protected endpoint is called without a bearer token."""

    def __init__(self):
        super().__init__("Access token required")


class InvalidTokenError(DirectoryAPIError):
    """Raised when a bearer token is expired, tampered with, or malformed."""

    def __init__(self):
        super().__init__("Invalid or expired token")


class StorageError(DirectoryAPIError):
    """
    Raised when a collection cannot be loaded from or saved to its store.

    Attributes:
        collection: Name of the collection that failed (e.g. "developers").
    """

    def __init__(self, detail: str, collection: str):
        self.collection = collection
        super().__init__(detail)


# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------

def _format_validation_error(error: dict) -> str:
    """Render one pydantic error as "field: message" (drops the body/query prefix)."""
    location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
    if location:
        return f"{'.'.join(location)}: {error['msg']}"
    return error["msg"]


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register custom exception handlers with the FastAPI application.

    Each handler maps a domain exception to an HTTP status code and
    consistent JSON response format: {"message": "...", "error_type": "..."}

    This is called once during app startup in main.py.
    """

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={
                "message": "Validation error",
                "error_type": "validation_error",
                "errors": [_format_validation_error(err) for err in exc.errors()],
            },
        )

    @app.exception_handler(DeveloperNotFoundError)
    async def developer_not_found_handler(
        request: Request, exc: DeveloperNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={"message": exc.detail, "error_type": "developer_not_found"},
        )

    @app.exception_handler(DuplicateEmailError)
    async def duplicate_email_handler(
        request: Request, exc: DuplicateEmailError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={"message": exc.detail, "error_type": "duplicate_email"},
        )

    @app.exception_handler(InvalidCredentialsError)
    async def invalid_credentials_handler(
        request: Request, exc: InvalidCredentialsError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=401,
            content={"message": exc.detail, "error_type": "invalid_credentials"},
        )

    @app.exception_handler(MissingTokenError)
    async def missing_token_handler(
        request: Request, exc: MissingTokenError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=401,
            content={"message": exc.detail, "error_type": "missing_token"},
            headers={"WWW-Authenticate": "Bearer"},
        )

    @app.exception_handler(InvalidTokenError)
    async def invalid_token_handler(
        request: Request, exc: InvalidTokenError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=403,
            content={"message": exc.detail, "error_type": "invalid_token"},
        )

    @app.exception_handler(StorageError)
    async def storage_error_handler(
        request: Request, exc: StorageError
    ) -> JSONResponse:
        logger.error(
            "Storage failure on %s %s (collection=%s): %s",
            request.method, request.url.path, exc.collection, exc.detail,
        )
        return JSONResponse(
            status_code=500,
            content={"message": exc.detail, "error_type": "storage_error"},
        )
