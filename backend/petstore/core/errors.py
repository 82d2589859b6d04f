"""Error Hierarchy — typed exceptions for configuration defects and infrastructure failures.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Request-level failures are NOT exceptions — they travel as Fault values (core/faults.py)
    - Exceptions here are reserved for startup defects and storage failures

Design Decisions:
    - Single hierarchy with PetstoreError base: startup self-checks raise, lifespan aborts
      (ADR: configuration errors surface at boot, never on first request)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    CONFIGURATION = "configuration"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    request_type: str | None = None
    debug_info: dict[str, Any] | None = None


class PetstoreError(Exception):
    """Base exception for all Petstore errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_log_extra(self) -> dict:
        """Fields surfaced by the JSON log formatter."""
        return {
            "error_code": self.code,
            "request_type": self.context.request_type,
        }


# ─── Configuration Errors (startup) ─────────────────────────────

class ConfigurationError(PetstoreError):
    """Startup wiring is inconsistent. The process must not serve traffic."""
    def __init__(self, message: str, code: str = "CONFIGURATION_ERROR",
                 context: ErrorContext | None = None):
        super().__init__(
            message, code, ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, context,
        )


class DuplicateRegistrationError(ConfigurationError):
    """A second handler was registered for the same request type."""
    def __init__(self, request_type: type):
        super().__init__(
            f"Handler already registered for {request_type.__name__}",
            "DUPLICATE_HANDLER",
            ErrorContext(request_type=request_type.__name__),
        )
        self.request_type = request_type


class MissingRegistrationError(ConfigurationError):
    """One or more declared request types have no handler."""
    def __init__(self, missing: list[type]):
        names = sorted(t.__name__ for t in missing)
        super().__init__(
            f"No handler registered for: {', '.join(names)}",
            "MISSING_HANDLER",
        )
        self.missing = missing


class EnumMappingError(ConfigurationError):
    """An enum wire table is not a bijection over the enum's variants."""
    def __init__(self, enum_type: type, reason: str):
        super().__init__(
            f"Invalid wire mapping for {enum_type.__name__}: {reason}",
            "ENUM_MAPPING_INVALID",
        )
        self.enum_type = enum_type


class RegistryFrozenError(ConfigurationError):
    """Registration attempted after startup finished."""
    def __init__(self, registry: str):
        super().__init__(
            f"{registry} is frozen; registrations are only allowed at startup",
            "REGISTRY_FROZEN",
        )


# ─── Infrastructure Errors ──────────────────────────────────────

class DatabaseError(PetstoreError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context,
        )
        self.operation = operation


class HandlerNotRegisteredError(PetstoreError):
    """Dispatch reached a request type with no handler (startup check bypassed)."""
    def __init__(self, request_type: type):
        super().__init__(
            f"No handler registered for {request_type.__name__}",
            "HANDLER_NOT_REGISTERED", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, ErrorContext(request_type=request_type.__name__),
        )
        self.request_type = request_type
