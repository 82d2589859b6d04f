"""Route Modules — one file per OpenAPI tag.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes never contain business logic: decode, dispatch, render

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""
