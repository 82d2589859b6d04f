"""Behavior Chain — tests for ordering, short-circuit and validation gating.

Tests cover:
    - Behaviors run in registration order, handler last
    - A short-circuiting behavior prevents the handler call
    - ValidationBehavior returns every violation and skips the handler
    - ValidationBehavior validates the request payload, not the wrapper
"""

from dataclasses import dataclass

from petstore.core.faults import NotFound, ValidationFailed
from petstore.schemas.pet import PetDto
from petstore.schemas.requests import AddPetCommand, GetPetByIdQuery
from petstore.schemas.validators import build_validator_registry
from petstore.services.behaviors import LoggingBehavior, ValidationBehavior, run_chain


@dataclass(frozen=True)
class Echo:
    text: str


def _recording(trace: list, name: str):
    async def behavior(request, call_next):
        trace.append(f"{name}:before")
        result = await call_next()
        trace.append(f"{name}:after")
        return result
    return behavior


async def test_behaviors_wrap_handler_in_order():
    trace = []

    def handler(request):
        trace.append("handler")
        return request.text

    result = await run_chain(
        Echo("hi"), handler, [_recording(trace, "outer"), _recording(trace, "inner")],
    )
    assert result == "hi"
    assert trace == [
        "outer:before", "inner:before", "handler", "inner:after", "outer:after",
    ]


async def test_short_circuit_skips_handler():
    called = []

    async def deny(request, call_next):
        return NotFound("Echo")

    result = await run_chain(Echo("x"), lambda r: called.append(r), [deny])
    assert result == NotFound("Echo")
    assert called == []


async def test_validation_failure_skips_handler():
    called = []
    behavior = ValidationBehavior(build_validator_registry())

    result = await run_chain(
        AddPetCommand(pet=PetDto(name="")), lambda r: called.append(r), [behavior],
    )
    assert isinstance(result, ValidationFailed)
    assert set(result.outcome) == {"name", "photoUrls"}
    assert called == []


async def test_valid_payload_reaches_handler():
    behavior = ValidationBehavior(build_validator_registry())
    request = AddPetCommand(pet=PetDto(name="Rex", photo_urls=[]))

    result = await run_chain(request, lambda r: r.pet.name, [behavior])
    assert result == "Rex"


async def test_requests_without_rules_pass_validation():
    behavior = ValidationBehavior(build_validator_registry())
    result = await run_chain(GetPetByIdQuery(pet_id=1), lambda r: "ok", [behavior])
    assert result == "ok"


async def test_logging_behavior_returns_result_unchanged(caplog):
    caplog.set_level("DEBUG", logger="petstore.services.behaviors")
    result = await run_chain(
        Echo("x"), lambda r: NotFound("Echo"), [LoggingBehavior()],
    )
    assert result == NotFound("Echo")
    record = next(r for r in caplog.records if r.name == "petstore.services.behaviors")
    assert record.request_type == "Echo"
    assert record.fault == "NotFound"
