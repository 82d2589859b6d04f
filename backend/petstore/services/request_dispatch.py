"""Request Dispatch — routes a request by its exact runtime type to one handler.

Invariants:
    - Exactly one handler per request type; duplicates rejected at registration
    - verify() at startup rejects any declared request type without a handler
    - dispatch() invokes the handler at most once, through the behavior chain, no retries
    - Missing handler -> Unhandled fault (never a silent success, never NotFound)
    - Any Exception escaping a handler -> Unhandled fault; the process never crashes
    - Registry is frozen after startup; dispatch only reads

Design Decisions:
    - Explicit dict over scanning: every mapping visible in one place
      (ADR: no convention-over-config)
    - Exact type lookup (not isinstance walk): a subclass is a different operation
"""

import logging
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Sequence

from petstore.core.errors import (
    DuplicateRegistrationError, HandlerNotRegisteredError,
    MissingRegistrationError, RegistryFrozenError,
)
from petstore.core.faults import Unhandled
from petstore.services.behaviors import Behavior, Handler, run_chain

logger = logging.getLogger(__name__)


class HandlerRegistry:
    """request type -> handler. Populate at startup, then freeze()."""

    def __init__(self):
        self._handlers: dict[type, Handler] = {}
        self._frozen = False

    def register(self, request_type: type, handler: Handler) -> None:
        if self._frozen:
            raise RegistryFrozenError("HandlerRegistry")
        if request_type in self._handlers:
            raise DuplicateRegistrationError(request_type)
        self._handlers[request_type] = handler

    def register_all(self, mapping: Mapping[type, Handler]) -> None:
        for request_type, handler in mapping.items():
            self.register(request_type, handler)

    def verify(self, request_types: Iterable[type]) -> None:
        """Startup self-check: every declared request type has a handler."""
        missing = [t for t in request_types if t not in self._handlers]
        if missing:
            raise MissingRegistrationError(missing)

    def freeze(self) -> Mapping[type, Handler]:
        self._frozen = True
        return MappingProxyType(dict(self._handlers))


class Dispatcher:
    """dispatch(request) -> Result | Fault."""

    def __init__(
        self, handlers: Mapping[type, Handler], behaviors: Sequence[Behavior] = (),
    ):
        self._handlers = handlers
        self._behaviors = tuple(behaviors)

    @property
    def request_types(self) -> list[type]:
        return list(self._handlers)

    async def dispatch(self, request: Any) -> Any:
        request_type = type(request)
        handler = self._handlers.get(request_type)
        if handler is None:
            error = HandlerNotRegisteredError(request_type)
            logger.error(error.message, extra=error.to_log_extra())
            return Unhandled(error)
        try:
            return await run_chain(request, handler, self._behaviors)
        except Exception as e:
            logger.error(
                f"Handler for {request_type.__name__} failed: {e}",
                extra={"request_type": request_type.__name__, "fault": "Unhandled"},
                exc_info=True,
            )
            return Unhandled(e)
