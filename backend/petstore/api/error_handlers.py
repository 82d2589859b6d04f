"""Error Handlers — global exception handlers feeding the Error Translator.

Invariants:
    - RequestValidationError (decode-time) -> MalformedInput; never reaches a handler
    - Malformed JSON body -> "Invalid JSON"; any other decode failure -> "Bad Request"
    - Exception (catch-all) -> Unhandled; detail redacted outside development
    - Starlette HTTPException (unknown route, wrong method) -> bare 404 or a ProblemDocument
      carrying the original status and headers (Allow on 405)
    - Every response body produced here comes from core/error_translator.py

Design Decisions:
    - Two-layer handler: decode (RequestValidationError) and catch-all (Exception)
    - Handler faults normally arrive as values from the Dispatcher; the catch-all only
      covers failures outside dispatch (route bugs, middleware)
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from petstore.api.responses import document_response, fault_response
from petstore.core.error_translator import INVALID_JSON_DETAIL, http_status_document
from petstore.core.faults import MalformedCategory, MalformedInput, Unhandled

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register decode-failure handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        fault = malformed_input_from(exc)
        logger.warning(
            f"Malformed input on {request.url.path}: {fault.reason}",
            extra={"path": request.url.path, "fault": "MalformedInput"},
        )
        return fault_response(fault)


def _register_http_error_handler(app: FastAPI) -> None:
    """Register routing/protocol failure handler (404 unknown route, 405, ...)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        logger.info(
            f"HTTP {exc.status_code} on {request.method} {request.url.path}",
            extra={"path": request.url.path},
        )
        document = http_status_document(exc.status_code, str(exc.detail))
        return document_response(exc.status_code, document, exc.headers)


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            extra={"path": request.url.path, "fault": "Unhandled"},
            exc_info=True,
        )
        return fault_response(Unhandled(exc))


def malformed_input_from(exc: RequestValidationError) -> MalformedInput:
    """Classify pydantic/FastAPI decode errors."""
    errors = exc.errors()
    if any(e.get("type") == "json_invalid" for e in errors):
        return MalformedInput(INVALID_JSON_DETAIL, MalformedCategory.INVALID_JSON)
    reason = "; ".join(
        f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}"
        for e in errors
    )
    return MalformedInput(reason or "The request could not be decoded")
