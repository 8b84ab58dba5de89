"""Core Layer — pure domain logic, no IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, models/ or db/
    - Entity rules are pure and deterministic (timestamps aside)

Design Decisions:
    - Functional core separated from imperative shell
"""
