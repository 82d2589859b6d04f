"""Validator Registry — ordered field rules per payload type, evaluated without fail-fast.

Invariants:
    - All functions are PURE: no IO, no async, no side effects
    - Every rule registered for a type runs; violations are collected, never short-circuited
    - A rule yields zero or one message; messages for one field keep registration order
    - Outcome keys are the wire field name (pydantic alias when present)
    - Registry is read-only after freeze()

Design Decisions:
    - Rules as small frozen dataclasses over validator classes: a payload's rule list is
      visible in one place (see schemas/validators.py) (ADR: no auto-discovery)
    - Collection rules (each) reuse the element type's rules with indexed keys
      (users[0].username) instead of a second rule language
"""

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Mapping, Sequence

from petstore.core.errors import ConfigurationError, RegistryFrozenError

ValidationOutcome = Mapping[str, tuple[str, ...]]

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


@dataclass(frozen=True)
class ValidationRule:
    """Named predicate over one field. `check` returns True when the value is valid."""
    field: str
    name: str
    check: Callable[[Any], bool]
    message: str

    def evaluate(self, payload: object) -> str | None:
        value = getattr(payload, self.field, None)
        return None if self.check(value) else self.message


@dataclass(frozen=True)
class EachRule:
    """Validate every element of a sequence field with the element type's rules."""
    field: str
    item_type: type


def wire_name(payload_type: type, field: str) -> str:
    """Alias of a pydantic field, or the attribute name itself."""
    model_fields = getattr(payload_type, "model_fields", None)
    if model_fields and field in model_fields:
        return model_fields[field].alias or field
    return field


def _label(field: str) -> str:
    # photo_urls -> 'Photo Urls'
    return " ".join(part.capitalize() for part in field.split("_"))


# ─── Rule Factories ──────────────────────────────────────────────

def not_empty(field: str) -> ValidationRule:
    """None, empty string/whitespace, and empty collections are rejected."""
    def check(v):
        if v is None:
            return False
        if isinstance(v, str):
            return bool(v.strip())
        if isinstance(v, (list, tuple, dict, set)):
            return len(v) > 0
        return True
    return ValidationRule(field, "not_empty", check, f"'{_label(field)}' must not be empty.")


def not_null(field: str) -> ValidationRule:
    return ValidationRule(
        field, "not_null", lambda v: v is not None, f"'{_label(field)}' must not be empty.",
    )


def greater_than(field: str, bound: int | float) -> ValidationRule:
    """Skipped when the value is absent; pair with not_null for required fields."""
    return ValidationRule(
        field, "greater_than", lambda v: v is None or v > bound,
        f"'{_label(field)}' must be greater than '{bound}'.",
    )


def min_length(field: str, length: int) -> ValidationRule:
    return ValidationRule(
        field, "min_length", lambda v: v is None or len(v) >= length,
        f"The length of '{_label(field)}' must be at least {length} characters.",
    )


def max_length(field: str, length: int) -> ValidationRule:
    return ValidationRule(
        field, "max_length", lambda v: v is None or len(v) <= length,
        f"The length of '{_label(field)}' must be {length} characters or fewer.",
    )


def email_address(field: str) -> ValidationRule:
    return ValidationRule(
        field, "email_address",
        lambda v: v is None or bool(_EMAIL_RE.match(v)),
        f"'{_label(field)}' is not a valid email address.",
    )


def each(field: str, item_type: type) -> EachRule:
    return EachRule(field, item_type)


# ─── Registry ────────────────────────────────────────────────────

class ValidatorRegistry:
    """payload type -> ordered rules. Populate at startup, then freeze()."""

    def __init__(self):
        self._rules: dict[type, list[ValidationRule | EachRule]] = {}
        self._frozen = False

    def register(
        self, payload_type: type, rules: Sequence[ValidationRule | EachRule],
    ) -> None:
        if self._frozen:
            raise RegistryFrozenError("ValidatorRegistry")
        if payload_type in self._rules:
            raise ConfigurationError(
                f"Rules already registered for {payload_type.__name__}",
                "DUPLICATE_VALIDATOR",
            )
        self._rules[payload_type] = list(rules)

    def freeze(self) -> "ValidatorRegistry":
        self._rules = MappingProxyType(
            {t: tuple(r) for t, r in self._rules.items()},
        )
        self._frozen = True
        return self

    def has_rules(self, payload_type: type) -> bool:
        return bool(self._rules.get(payload_type))

    def rules_for(self, payload_type: type) -> tuple:
        return tuple(self._rules.get(payload_type, ()))

    def validate(self, payload: object) -> ValidationOutcome:
        """Run every rule for type(payload). Empty mapping means valid."""
        errors: dict[str, list[str]] = {}
        self._collect(payload, "", errors)
        return MappingProxyType({k: tuple(v) for k, v in errors.items()})

    def _collect(self, payload: object, prefix: str, errors: dict[str, list[str]]) -> None:
        payload_type = type(payload)
        for rule in self._rules.get(payload_type, ()):
            key = prefix + wire_name(payload_type, rule.field)
            if isinstance(rule, EachRule):
                items = getattr(payload, rule.field, None) or ()
                for i, item in enumerate(items):
                    if isinstance(item, rule.item_type):
                        self._collect(item, f"{key}[{i}].", errors)
                continue
            message = rule.evaluate(payload)
            if message is not None:
                errors.setdefault(key, []).append(message)
