"""Fake Handlers — example endpoints exercising nullable output and JSON query input.

Invariants:
    - No example configured -> NotFound (bare 404), same as any absent resource
    - The parameter example only proves that `data` decoded; it stores nothing
"""

from petstore.core.faults import NotFound
from petstore.schemas.fake import TestNullableDto
from petstore.schemas.requests import (
    FakeNullableExampleTestQuery, FakeParameterExampleTestQuery,
)


class FakeHandlers:
    """Example operations; `example` is the object the nullable endpoint serves."""

    def __init__(self, example: TestNullableDto | None = None):
        self.example = example

    def nullable_example_test(
        self, request: FakeNullableExampleTestQuery,
    ) -> TestNullableDto | NotFound:
        if self.example is None:
            return NotFound("TestNullable")
        return self.example

    def parameter_example_test(self, request: FakeParameterExampleTestQuery) -> None:
        return None
