"""Benefits API Package — employee benefit catalogue service.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
