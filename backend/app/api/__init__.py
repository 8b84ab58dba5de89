"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses (DELETE: empty 204)

Design Decisions:
    - Thin routes delegate to use cases in services/
"""
