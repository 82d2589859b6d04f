"""Response Rendering — turns a dispatch outcome into an HTTP response.

Invariants:
    - Fault -> Error Translator -> problem+json (or envelope) body; NotFound -> bare 404
    - None result -> empty body with the route's success status (204 / 200)
    - Any other result -> JSON with aliases and wire enum tokens, None fields dropped
    - Route decoding failures (enum tokens in query strings) become MalformedInput here,
      before a request value exists
    - JSON-in-query parameters: missing -> Bad Request, unparseable -> Invalid JSON,
      parseable but wrong shape -> Bad Request

Design Decisions:
    - Routes return Response objects directly: status codes are a per-route mapping and
      never leak into handlers (ADR: handlers stay HTTP-agnostic)
"""

from enum import Enum
from typing import Any, Iterable, Mapping, TypeVar

from fastapi import Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from petstore.config import get_settings
from petstore.core.domain_types import ENUM_CODEC
from petstore.core.enum_codec import DecodeFault
from petstore.core.error_translator import (
    PROBLEM_CONTENT_TYPE, ProblemDocument, translate,
)
from petstore.core.faults import Fault, MalformedCategory, MalformedInput, is_fault

ModelT = TypeVar("ModelT", bound=BaseModel)


def fault_response(fault: Fault) -> Response:
    status_code, document = translate(
        fault, expose_details=get_settings().is_development,
    )
    return document_response(status_code, document)


def document_response(
    status_code: int, document: ProblemDocument | None,
    headers: Mapping[str, str] | None = None,
) -> Response:
    """Serialize a document in the configured error format; None -> bare status."""
    if document is None:
        return Response(status_code=status_code, headers=headers)
    if get_settings().error_format == "envelope":
        return JSONResponse(
            status_code=status_code, content=document.to_envelope(), headers=headers,
        )
    return JSONResponse(
        status_code=status_code, content=document.to_problem(),
        media_type=PROBLEM_CONTENT_TYPE, headers=headers,
    )


def render(outcome: Any, success_status: int = status.HTTP_200_OK) -> Response:
    """Dispatch outcome -> Response."""
    if is_fault(outcome):
        return fault_response(outcome)
    if outcome is None:
        return Response(status_code=success_status)
    return JSONResponse(
        status_code=success_status,
        content=jsonable_encoder(outcome, by_alias=True, exclude_none=True),
    )


def decode_tokens(
    enum_type: type[Enum], raw: Iterable[str], parameter: str,
) -> tuple[Enum, ...] | MalformedInput:
    """Decode query-string tokens; accepts repeated and comma-separated values."""
    variants = []
    for chunk in raw:
        for token in filter(None, (t.strip() for t in chunk.split(","))):
            result = ENUM_CODEC.decode(enum_type, token)
            if isinstance(result, DecodeFault):
                return MalformedInput(f"{parameter}: {result.message}")
            variants.append(result)
    return tuple(variants)


def decode_json_param(
    model: type[ModelT], raw: str | None, parameter: str,
) -> ModelT | MalformedInput:
    """Decode a JSON-encoded query parameter into `model`."""
    if not raw:
        return MalformedInput(f"Missing required query parameter: {parameter}")
    try:
        return model.model_validate_json(raw)
    except ValidationError as e:
        if any(err.get("type") == "json_invalid" for err in e.errors()):
            return MalformedInput(
                f"Invalid JSON in query parameter: {parameter}",
                MalformedCategory.INVALID_JSON,
            )
        return MalformedInput(f"Failed to deserialize query parameter: {parameter}")
