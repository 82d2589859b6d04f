"""Infrastructure Layer — database sessions, SQL repositories, logging setup.

Invariants:
    - Only this layer imports SQLAlchemy engine/session machinery
"""
