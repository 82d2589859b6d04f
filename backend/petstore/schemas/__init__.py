"""Pydantic Schemas — structural decoding and JSON encoding at the API boundary.

Invariants:
    - Schemas check SHAPE only (types, JSON structure); business rules live in the
      validator registry so every violation is reported in one round trip
    - Enum fields decode/encode through ENUM_CODEC (schemas/wire.py)
    - Wire names are camelCase aliases; Python attributes are snake_case

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence (ADR: DDD boundary)
"""
