"""Services Layer — handlers, behavior chain, and request dispatch.

Invariants:
    - Handlers split by OpenAPI tag (pet, store, user, default)
    - Dispatch uses an explicit type -> handler dict (no auto-discovery)

Design Decisions:
    - One handler file per tag for locality
"""
