"""API Layer — FastAPI routes, error handlers and response rendering.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every error body is produced by the Error Translator

Design Decisions:
    - Thin routes delegate to the dispatcher (functional core, imperative shell)
"""
