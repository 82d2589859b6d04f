"""Error Translator — tests for the total Fault -> (status, ProblemDocument) mapping.

Tests cover:
    - Every Fault variant maps to exactly one (status, title) pair
    - NotFound has no document
    - Unhandled detail redacted unless expose_details
    - type URIs are RFC 7231 sections
    - problem+json vs envelope body shapes
"""

import pytest

from petstore.core.error_translator import (
    RFC_BAD_REQUEST, RFC_INTERNAL_ERROR, ProblemDocument, http_status_document,
    translate,
)
from petstore.core.faults import (
    FAULT_TYPES, MalformedCategory, MalformedInput, NotFound, Unhandled,
    ValidationFailed, is_fault,
)

_SAMPLES = {
    ValidationFailed: ValidationFailed({"name": ("'Name' must not be empty.",)}),
    MalformedInput: MalformedInput("body.id: Input should be a valid integer"),
    NotFound: NotFound("Pet", "9"),
    Unhandled: Unhandled(RuntimeError("db exploded")),
}

_EXPECTED = {
    ValidationFailed: (400, "Validation failed"),
    MalformedInput: (400, "Bad Request"),
    NotFound: (404, None),
    Unhandled: (500, "An error occurred"),
}


def test_every_fault_variant_is_mapped():
    assert set(_SAMPLES) == set(FAULT_TYPES)
    for fault_type in FAULT_TYPES:
        status, document = translate(_SAMPLES[fault_type])
        title = document.title if document else None
        assert (status, title) == _EXPECTED[fault_type]


def test_validation_failed_carries_field_errors():
    status, document = translate(_SAMPLES[ValidationFailed])
    assert document.type == RFC_BAD_REQUEST
    assert document.to_problem()["errors"] == {"name": ["'Name' must not be empty."]}


def test_malformed_input_has_no_field_errors():
    _, document = translate(_SAMPLES[MalformedInput])
    assert "errors" not in document.to_problem()
    assert document.detail == "body.id: Input should be a valid integer"


def test_invalid_json_title():
    _, document = translate(
        MalformedInput("The request body contains invalid JSON", MalformedCategory.INVALID_JSON),
    )
    assert document.title == "Invalid JSON"
    assert document.status == 400


def test_not_found_has_no_document():
    assert translate(NotFound()) == (404, None)


def test_unhandled_detail_redacted_by_default():
    _, document = translate(_SAMPLES[Unhandled])
    assert document.detail == "An unexpected error occurred"
    assert "db exploded" not in str(document.to_problem())
    assert document.type == RFC_INTERNAL_ERROR


def test_unhandled_detail_exposed_in_development():
    _, document = translate(_SAMPLES[Unhandled], expose_details=True)
    assert document.detail == "db exploded"


def test_unknown_value_is_not_silently_mapped():
    with pytest.raises(AssertionError):
        translate("not a fault")


def test_envelope_shape():
    doc = ProblemDocument(400, "Validation failed", "x", RFC_BAD_REQUEST, {"a": ("m",)})
    assert doc.to_envelope() == {
        "error": "Validation failed", "message": "x", "errors": {"a": ["m"]},
    }


def test_is_fault():
    assert all(is_fault(f) for f in _SAMPLES.values())
    assert not is_fault(None)
    assert not is_fault({"status": "ok"})


def test_http_status_document_for_routing_failures():
    assert http_status_document(404, "Not Found") is None
    document = http_status_document(405, "Method Not Allowed")
    assert document.title == "Method Not Allowed"
    assert document.type.endswith("section-6.5.5")
    assert http_status_document(418, "teapot").type == RFC_BAD_REQUEST
