"""Core Layer — pure dispatch contracts: faults, enum codec, validation, error translation.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, schemas/ or db/
    - All functions are pure and deterministic; registries are frozen after startup

Design Decisions:
    - Functional core separated from imperative shell
"""
