"""Error Translator — maps every Fault variant to an HTTP status and ProblemDocument.

Invariants:
    - Total over Fault: ValidationFailed/MalformedInput -> 400, NotFound -> 404, Unhandled -> 500
    - NotFound carries NO document (bare status, empty body)
    - Unhandled detail is the cause message only when expose_details is True (development)
    - Every document's `type` is an RFC 7231 section URI
    - Protocol-level failures outside dispatch (unknown route, wrong method) use the same
      document through http_status_document; 404 stays bare there too

Design Decisions:
    - Pure function + frozen dataclass: the HTTP layer serializes, this module only decides
      (ADR: functional core, imperative shell)
    - Two body shapes from one document: RFC 7807 problem+json (default) and the plain
      {error, message, errors} envelope for simpler clients
"""

from dataclasses import dataclass
from http import HTTPStatus
from typing import Mapping, assert_never

from petstore.core.faults import (
    Fault, MalformedCategory, MalformedInput, NotFound, Unhandled, ValidationFailed,
)

PROBLEM_CONTENT_TYPE = "application/problem+json"

RFC_BAD_REQUEST = "https://tools.ietf.org/html/rfc7231#section-6.5.1"
RFC_NOT_FOUND = "https://tools.ietf.org/html/rfc7231#section-6.5.4"
RFC_INTERNAL_ERROR = "https://tools.ietf.org/html/rfc7231#section-6.6.1"

_RFC_SECTIONS = {
    400: "6.5.1", 404: "6.5.4", 405: "6.5.5", 406: "6.5.6", 413: "6.5.11",
    415: "6.5.13", 500: "6.6.1", 501: "6.6.2", 503: "6.6.4",
}

VALIDATION_TITLE = "Validation failed"
VALIDATION_DETAIL = "One or more validation errors occurred."
BAD_REQUEST_TITLE = "Bad Request"
INVALID_JSON_TITLE = "Invalid JSON"
INVALID_JSON_DETAIL = "The request body contains invalid JSON"
UNHANDLED_TITLE = "An error occurred"
UNHANDLED_DETAIL = "An unexpected error occurred"


@dataclass(frozen=True)
class ProblemDocument:
    """Canonical error body."""
    status: int
    title: str
    detail: str
    type: str
    errors: Mapping[str, tuple[str, ...]] | None = None

    def to_problem(self) -> dict:
        body = {
            "type": self.type,
            "title": self.title,
            "status": self.status,
            "detail": self.detail,
        }
        if self.errors is not None:
            body["errors"] = {k: list(v) for k, v in self.errors.items()}
        return body

    def to_envelope(self) -> dict:
        body = {"error": self.title, "message": self.detail}
        if self.errors is not None:
            body["errors"] = {k: list(v) for k, v in self.errors.items()}
        return body


def translate(
    fault: Fault, *, expose_details: bool = False,
) -> tuple[int, ProblemDocument | None]:
    """Fault -> (status, document). Document is None only for NotFound."""
    if isinstance(fault, ValidationFailed):
        return 400, ProblemDocument(
            status=400, title=VALIDATION_TITLE, detail=VALIDATION_DETAIL,
            type=RFC_BAD_REQUEST, errors=fault.outcome,
        )
    if isinstance(fault, MalformedInput):
        return 400, _malformed_document(fault)
    if isinstance(fault, NotFound):
        return 404, None
    if isinstance(fault, Unhandled):
        return 500, ProblemDocument(
            status=500, title=UNHANDLED_TITLE,
            detail=fault.message if expose_details else UNHANDLED_DETAIL,
            type=RFC_INTERNAL_ERROR,
        )
    assert_never(fault)


def _malformed_document(fault: MalformedInput) -> ProblemDocument:
    match fault.category:
        case MalformedCategory.INVALID_JSON:
            return ProblemDocument(
                status=400, title=INVALID_JSON_TITLE,
                detail=fault.reason or INVALID_JSON_DETAIL, type=RFC_BAD_REQUEST,
            )
        case _:
            return ProblemDocument(
                status=400, title=BAD_REQUEST_TITLE,
                detail=fault.reason, type=RFC_BAD_REQUEST,
            )


def http_status_document(status: int, detail: str) -> ProblemDocument | None:
    """Routing/protocol failure -> document. None for 404 (same as NotFound)."""
    if status == 404:
        return None
    section = _RFC_SECTIONS.get(status, "6.5.1" if status < 500 else "6.6.1")
    try:
        title = HTTPStatus(status).phrase
    except ValueError:
        title = "Error"
    return ProblemDocument(
        status=status, title=title, detail=detail,
        type=f"https://tools.ietf.org/html/rfc7231#section-{section}",
    )
