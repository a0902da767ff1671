"""Error Handlers — global exception handlers for the Cadastro API.

Invariants:
    - CadastroError → its http_status with {"message": ...}
    - RequestValidationError → 400 with the FIRST error only, as a RegistrationValidationError
    - Exception (catch-all) → 500 generic message, never leaks internal details
    - Every failure body is a JSON object with a "message" field and nothing else

Design Decisions:
    - Three-layer handler: domain (CadastroError), validation (Pydantic), catch-all (Exception)
    - Codes and categories are logged, not returned
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from cadastro.core.errors import (
    CadastroError, ErrorSeverity, GENERIC_SERVER_ERROR_MESSAGE,
    RegistrationValidationError, StorageError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_cadastro_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_cadastro_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(CadastroError)
    async def cadastro_error_handler(request: Request, exc: CadastroError):
        """Handle all Cadastro domain/infrastructure errors."""
        extra = {"error_code": exc.code, "path": request.url.path}
        if isinstance(exc, StorageError):
            extra["operation"] = exc.operation
            logger.error(f"StorageError: {exc.detail}", extra=extra)
        elif exc.severity in (ErrorSeverity.ERROR, ErrorSeverity.CRITICAL):
            logger.error(f"CadastroError: {exc.message}", extra=extra)
        else:
            logger.info(f"CadastroError: {exc.message}", extra=extra)
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Report the first validation failure as a single message."""
        error = to_registration_validation_error(exc)
        logger.warning(
            f"Validation error on {request.url.path}: {error.message}",
            extra={"error_code": error.code, "field": error.field},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": GENERIC_SERVER_ERROR_MESSAGE},
        )


def to_registration_validation_error(
    exc: RequestValidationError,
) -> RegistrationValidationError:
    """Collapse pydantic's error list to its first entry.

    Rule failures raised as ValueError keep their original message (ctx.error)
    and, for RuleViolation, the field that broke the rule; framework errors
    (bad path params, malformed JSON) are prefixed with the field.
    """
    errors = exc.errors()
    if not errors:
        return RegistrationValidationError("Invalid request data", None)
    first = errors[0]
    loc = [str(part) for part in first.get("loc", ())]
    field = loc[-1] if loc else None
    cause = (first.get("ctx") or {}).get("error")
    if cause is not None:
        return RegistrationValidationError(
            str(cause), getattr(cause, "field", field),
        )
    if field is None or field == "body":
        return RegistrationValidationError(
            f"Request body: {first['msg']}", field,
        )
    return RegistrationValidationError(f"{field}: {first['msg']}", field)
