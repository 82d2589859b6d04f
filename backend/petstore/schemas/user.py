"""User Schemas — user accounts as exchanged on the wire.

Invariants:
    - password is accepted on input but never emitted by handlers (UserDto built
      from the ORM row leaves it None, and None fields are excluded on output)
"""

from pydantic import BaseModel, ConfigDict, Field

from petstore.schemas.wire import Int32, Int64


class UserDto(BaseModel):
    """A user of the pet store."""
    model_config = ConfigDict(populate_by_name=True)

    id: Int64 | None = None
    username: str | None = None
    first_name: str | None = Field(None, alias="firstName")
    last_name: str | None = Field(None, alias="lastName")
    email: str | None = None
    password: str | None = None
    phone: str | None = None
    user_status: Int32 | None = Field(None, alias="userStatus")
