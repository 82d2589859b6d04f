"""Enum Codec — bidirectional mapping between enum variants and their wire tokens.

Invariants:
    - Every registered enum has a total, injective variant -> token table (checked at register)
    - decode order: exact wire token, then case-insensitive variant name, then declared default
    - Unknown token without a declared default -> DecodeFault (never a zero/first variant)
    - encode is total over registered enums; an unregistered enum is a configuration defect
    - Tables are read-only after freeze(); safe for concurrent reads without locks

Design Decisions:
    - Explicit static tables over per-member attributes: wire tokens are public contract,
      variant names are internal spelling (ADR: in-memory and wire representations diverge freely)
    - decode returns DecodeFault instead of raising: callers at the transport edge decide
      how to surface it (pydantic adapter in schemas/wire.py raises ValueError)
    - Name fallback kept for clients that send the symbolic name ("AVAILABLE")
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, TypeVar

from petstore.core.errors import EnumMappingError, RegistryFrozenError

E = TypeVar("E", bound=Enum)


@dataclass(frozen=True)
class DecodeFault:
    """A wire token that names no variant of the target enum."""
    token: str | None
    enum_type: type

    @property
    def message(self) -> str:
        return (
            f"Unable to convert \"{self.token}\" to enum "
            f"\"{self.enum_type.__name__}\"."
        )


@dataclass(frozen=True)
class EnumMapping:
    """Wire table for one enum type."""
    enum_type: type
    to_wire: Mapping[Enum, str]
    from_wire: Mapping[str, Enum]
    by_name: Mapping[str, Enum]
    default: Enum | None = None

    @property
    def tokens(self) -> list[str]:
        return [self.to_wire[v] for v in self.enum_type]


def build_mapping(
    enum_type: type[E], table: Mapping[E, str], default: E | None = None,
) -> EnumMapping:
    """Validate a wire table and freeze it. Raises EnumMappingError on any gap or clash."""
    variants = list(enum_type)
    unknown = [k for k in table if not isinstance(k, enum_type)]
    if unknown:
        raise EnumMappingError(enum_type, f"keys are not variants: {unknown!r}")
    missing = [v.name for v in variants if v not in table]
    if missing:
        raise EnumMappingError(enum_type, f"no wire token for {', '.join(missing)}")

    from_wire: dict[str, Enum] = {}
    for variant, token in table.items():
        if not isinstance(token, str) or not token:
            raise EnumMappingError(enum_type, f"{variant.name} has an empty token")
        if token in from_wire:
            raise EnumMappingError(
                enum_type,
                f"token '{token}' used by {from_wire[token].name} and {variant.name}",
            )
        from_wire[token] = variant

    if default is not None and not isinstance(default, enum_type):
        raise EnumMappingError(enum_type, f"default {default!r} is not a variant")

    return EnumMapping(
        enum_type=enum_type,
        to_wire=MappingProxyType(dict(table)),
        from_wire=MappingProxyType(from_wire),
        by_name=MappingProxyType({v.name.lower(): v for v in variants}),
        default=default,
    )


class EnumCodec:
    """Registry of wire tables. Populate at import/startup, then freeze()."""

    def __init__(self):
        self._mappings: dict[type, EnumMapping] = {}
        self._frozen = False

    def register(
        self, enum_type: type[E], table: Mapping[E, str], default: E | None = None,
    ) -> None:
        if self._frozen:
            raise RegistryFrozenError("EnumCodec")
        if enum_type in self._mappings:
            raise EnumMappingError(enum_type, "registered twice")
        self._mappings[enum_type] = build_mapping(enum_type, table, default)

    def freeze(self) -> "EnumCodec":
        self._mappings = MappingProxyType(dict(self._mappings))
        self._frozen = True
        return self

    @property
    def enum_types(self) -> list[type]:
        return list(self._mappings)

    def mapping(self, enum_type: type) -> EnumMapping:
        try:
            return self._mappings[enum_type]
        except KeyError:
            raise EnumMappingError(enum_type, "not registered with the codec") from None

    def decode(self, enum_type: type[E], token: str | None) -> E | DecodeFault:
        """Wire token -> variant, or DecodeFault."""
        mapping = self.mapping(enum_type)
        if token:
            variant = mapping.from_wire.get(token)
            if variant is not None:
                return variant
            variant = mapping.by_name.get(token.lower())
            if variant is not None:
                return variant
        if mapping.default is not None:
            return mapping.default
        return DecodeFault(token=token, enum_type=enum_type)

    def encode(self, variant: Enum) -> str:
        """Variant -> wire token. Total for every registered enum."""
        return self.mapping(type(variant)).to_wire[variant]

    def tokens(self, enum_type: type) -> list[str]:
        return self.mapping(enum_type).tokens
