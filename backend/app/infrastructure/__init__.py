"""Infrastructure Layer — storage adapters and cross-cutting concerns.

Invariants:
    - Infrastructure implements core/ protocols; core never imports from here
    - All SQLAlchemy failures surface as StorageError

Design Decisions:
    - One adapter per repository protocol
"""
