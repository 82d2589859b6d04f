"""API Dependencies — FastAPI providers for process-wide services and bounded path params.

Invariants:
    - Path ids are int64: anything outside the range fails decoding (400 Bad Request)
      before a request value exists, never as a storage overflow inside a handler
"""

from typing import Annotated

from fastapi import Path, Request

from petstore.schemas.wire import INT64_MAX, INT64_MIN
from petstore.services.request_dispatch import Dispatcher

PathId = Annotated[int, Path(ge=INT64_MIN, le=INT64_MAX)]


def get_dispatcher(request: Request) -> Dispatcher:
    """The dispatcher built in lifespan. Overridden in tests."""
    dispatcher = getattr(request.app.state, "dispatcher", None)
    if dispatcher is None:
        raise RuntimeError("Dispatcher not initialized")
    return dispatcher
