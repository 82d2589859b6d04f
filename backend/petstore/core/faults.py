"""Faults — tagged failure values returned (not raised) through the dispatch pipeline.

Invariants:
    - Fault is a closed union: ValidationFailed | MalformedInput | NotFound | Unhandled
    - Faults are immutable and created per call
    - A handler or behavior signals failure by RETURNING a Fault, never by raising one

Design Decisions:
    - Return values over exceptions: the error path has the same shape as the success
      path (ADR: uniform handler response, same reasoning as enforce_gates error dicts)
    - NotFound is the single absence signal for every operation kind (GET, PUT, DELETE)
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Union


class MalformedCategory(str, Enum):
    """Why a request could not be decoded."""
    INVALID_JSON = "invalid_json"
    BAD_REQUEST = "bad_request"


@dataclass(frozen=True)
class ValidationFailed:
    """One or more validation rules rejected the payload."""
    outcome: Mapping[str, tuple[str, ...]]

    def __post_init__(self):
        object.__setattr__(self, "outcome", MappingProxyType(dict(self.outcome)))


@dataclass(frozen=True)
class MalformedInput:
    """Raw input could not be turned into a request value."""
    reason: str
    category: MalformedCategory = MalformedCategory.BAD_REQUEST


@dataclass(frozen=True)
class NotFound:
    """The addressed resource does not exist."""
    resource: str = ""
    identifier: str = ""


@dataclass(frozen=True)
class Unhandled:
    """Any failure the core cannot recover from (handler crash, missing handler)."""
    cause: BaseException = field(compare=False)

    @property
    def message(self) -> str:
        return str(self.cause) or type(self.cause).__name__


Fault = Union[ValidationFailed, MalformedInput, NotFound, Unhandled]

FAULT_TYPES: tuple[type, ...] = (ValidationFailed, MalformedInput, NotFound, Unhandled)


def is_fault(value: object) -> bool:
    """True when a dispatch outcome is a Fault rather than a Result."""
    return isinstance(value, FAULT_TYPES)
