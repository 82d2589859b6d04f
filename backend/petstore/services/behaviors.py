"""Behavior Chain — ordered interceptors wrapped around handler execution.

Invariants:
    - A behavior receives (request, call_next) and returns Result | Fault
    - A behavior may short-circuit by returning a Fault without calling call_next
    - ValidationBehavior evaluates EVERY rule for the payload type before deciding;
      a non-empty outcome returns ValidationFailed and the handler never runs
    - Handlers may be sync or async; run_chain awaits only what is awaitable
    - asyncio.CancelledError is never caught here (BaseException, propagates as-is)

Design Decisions:
    - Callables over a Behavior base class: any async (request, call_next) fits
      (ADR: Protocol over ABC)
    - Chain built per call from an immutable tuple: no shared mutable state between
      concurrent requests
"""

import inspect
import logging
import time
from typing import Any, Awaitable, Callable, Protocol, Sequence

from petstore.core.faults import ValidationFailed, is_fault
from petstore.core.validation import ValidatorRegistry

logger = logging.getLogger(__name__)

Handler = Callable[[Any], Any]
CallNext = Callable[[], Awaitable[Any]]


class Behavior(Protocol):
    """Cross-cutting interceptor around one dispatch."""
    async def __call__(self, request: Any, call_next: CallNext) -> Any: ...


class ValidationBehavior:
    """Runs the validator registry against the request payload before the handler."""

    def __init__(self, validators: ValidatorRegistry):
        self._validators = validators

    async def __call__(self, request: Any, call_next: CallNext) -> Any:
        payload = getattr(request, "payload", request)
        outcome = self._validators.validate(payload)
        if outcome:
            logger.info(
                f"Validation failed for {type(request).__name__}: "
                f"{sorted(outcome)}",
                extra={"request_type": type(request).__name__,
                       "fault": "ValidationFailed"},
            )
            return ValidationFailed(outcome)
        return await call_next()


class LoggingBehavior:
    """Logs request type, outcome kind and elapsed time for every dispatch."""

    async def __call__(self, request: Any, call_next: CallNext) -> Any:
        started = time.perf_counter()
        result = await call_next()
        elapsed_ms = round((time.perf_counter() - started) * 1000, 2)
        fault = type(result).__name__ if is_fault(result) else None
        logger.debug(
            f"Dispatched {type(request).__name__} "
            f"({fault or 'ok'}, {elapsed_ms}ms)",
            extra={"request_type": type(request).__name__,
                   "fault": fault, "elapsed_ms": elapsed_ms},
        )
        return result


async def _invoke(handler: Handler, request: Any) -> Any:
    result = handler(request)
    if inspect.isawaitable(result):
        result = await result
    return result


async def run_chain(
    request: Any, handler: Handler, behaviors: Sequence[Behavior],
) -> Any:
    """Run behaviors[0] -> behaviors[1] -> ... -> handler. Returns Result | Fault."""

    async def step(index: int) -> Any:
        if index == len(behaviors):
            return await _invoke(handler, request)
        return await behaviors[index](request, lambda: step(index + 1))

    return await step(0)
