"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - Business rules (name length, duplicates) stay in core/ and services/

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
