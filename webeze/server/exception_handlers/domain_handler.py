"""
Handlers for expected errors: domain exceptions and request validation.

Domain exceptions (``WebezeError``) carry their own HTTP status. Validation
errors are flattened into a ``{field: message}`` map keyed by the names the
client sent, so a form can show each message under its input.
"""

from typing import Any, Dict, Sequence

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from webeze.core.errors import AuthenticationError, WebezeError
from webeze.core.logging_config import get_logger

logger = get_logger(__name__)

VALUE_ERROR_PREFIX = "Value error, "


async def webeze_error_handler(request: Request, exc: WebezeError) -> JSONResponse:
    """Map a domain exception to its HTTP status with a ``detail`` message."""
    logger.debug(f"{type(exc).__name__} in {request.method} {request.url.path}: {exc.message}")
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthenticationError) else None
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message}, headers=headers)


def _message(error: Dict[str, Any]) -> str:
    ctx_error = (error.get("ctx") or {}).get("error")
    if isinstance(ctx_error, ValueError):
        return str(ctx_error)
    message = str(error.get("msg", "Invalid value"))
    return message[len(VALUE_ERROR_PREFIX):] if message.startswith(VALUE_ERROR_PREFIX) else message


def flatten_validation_errors(errors: Sequence[Dict[str, Any]]) -> Dict[str, str]:
    """
    Collapse pydantic errors into one message per field.

    The field key is the last location element (``body.confirmPassword`` becomes
    ``confirmPassword``). The first error reported for a field wins.
    """
    flattened: Dict[str, str] = {}
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if not isinstance(part, int)]
        field = loc[-1] if loc else "__root__"
        flattened.setdefault(field, _message(error))
    return flattened


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Return 422 with ``{"detail": "Validation failed", "errors": {...}}``."""
    errors = flatten_validation_errors(exc.errors())
    logger.debug(f"Validation failed for {request.method} {request.url.path}: {sorted(errors)}")
    return JSONResponse(
        status_code=422,
        content={"detail": "Validation failed", "errors": errors},
    )
