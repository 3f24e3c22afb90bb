"""Core Layer — pure domain types and contracts, no IO, no DB.

Invariants:
    - No module in core/ imports from api/, infrastructure/, or db/

Design Decisions:
    - Functional core separated from imperative shell
"""
