"""Infrastructure Layer — store access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from api/
    - All SQLAlchemy failures mapped to the core error hierarchy

Design Decisions:
    - Thin wrappers over SQLAlchemy: the store is the only shared resource
"""
