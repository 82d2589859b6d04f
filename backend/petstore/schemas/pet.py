"""Pet Schemas — Pet, Category, Tag as exchanged on the wire.

Invariants:
    - All fields optional at decode time; `name` and `photoUrls` are enforced by
      the validator registry (schemas/validators.py), not by pydantic
    - status serializes as available|pending|sold
"""

from pydantic import BaseModel, ConfigDict, Field

from petstore.schemas.wire import Int64, PetStatusWire


class Category(BaseModel):
    """A category for a pet."""
    model_config = ConfigDict(populate_by_name=True)

    id: Int64 | None = None
    name: str | None = None


class Tag(BaseModel):
    """A tag for a pet."""
    model_config = ConfigDict(populate_by_name=True)

    id: Int64 | None = None
    name: str | None = None


class PetDto(BaseModel):
    """A pet for sale in the pet store."""
    model_config = ConfigDict(populate_by_name=True)

    id: Int64 | None = None
    category: Category | None = None
    name: str | None = None
    photo_urls: list[str] | None = Field(None, alias="photoUrls")
    tags: list[Tag] | None = None
    status: PetStatusWire | None = None
