"""Fake Schemas — payloads of the /fake example endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class TestNullableDto(BaseModel):
    """Example object whose nullableName may be explicitly null."""
    __test__ = False  # not a pytest class
    model_config = ConfigDict(populate_by_name=True)

    name: str | None = None
    nullable_name: str | None = Field(None, alias="nullableName")
