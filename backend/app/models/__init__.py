"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)

Design Decisions:
    - One file per entity
    - All models imported here so Base.metadata is complete before
      create_all() or Alembic autogenerate runs
"""

from app.models.benefit import BenefitModel  # noqa: F401
