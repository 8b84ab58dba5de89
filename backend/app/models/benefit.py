"""Benefit ORM — persists benefit offerings in the `benefits` table.

Invariants:
    - id is an autoincrement integer primary key
    - name (<= 100) and description (<= 255) are trimmed before they are stored
    - is_active defaults to True
    - created_at / updated_at are timezone-aware; updated_at bumps on every UPDATE

Design Decisions:
    - Indexed on name (duplicate checks, search) and is_active (status filters)
"""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, validates

from app.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BenefitModel(Base):
    """Benefit row."""
    __tablename__ = "benefits"
    __table_args__ = (
        Index("idx_benefits_name", "name"),
        Index("idx_benefits_is_active", "is_active"),
    )

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(
        String(255), nullable=True,
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
        default=_utcnow, onupdate=_utcnow,
    )

    @validates("name", "description")
    def _strip_text(self, key: str, value: str | None) -> str | None:
        if isinstance(value, str):
            return value.strip()
        return value
