"""Benefit Entity — the employee benefit record and its business rules.

Invariants:
    - name is a string whose trimmed length is within [3, 100]
    - description is None or a string whose trimmed length is <= 255
    - is_active is a bool (defaults to True)
    - created_at / updated_at are datetimes, filled with "now" when absent
    - activate() / deactivate() are the only mutators and always bump updated_at

Design Decisions:
    - Validation is separate from construction: a Benefit can hold invalid data
      (e.g. raw user input) and report every problem at once via is_valid()
    - Pure dataclass, no IO: repositories convert to and from ORM rows
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from app.core.domain_types import MAX_BENEFIT_ID, BenefitId
from app.core.errors import BenefitValidationError, InvalidIdError

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 255


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class ValidationResult:
    """Outcome of Benefit.is_valid()."""
    is_valid: bool
    errors: list[str]


@dataclass
class Benefit:
    """Benefit offered to employees — pure domain object."""

    name: Any
    id: int | None = None
    description: Any = None
    is_active: Any = True
    created_at: Any = None
    updated_at: Any = None

    def __post_init__(self) -> None:
        if self.created_at is None:
            self.created_at = _utcnow()
        if self.updated_at is None:
            self.updated_at = _utcnow()

    @classmethod
    def from_data(cls, data: dict) -> "Benefit":
        """Rebuild a Benefit from a plain mapping (e.g. a storage row)."""
        return cls(
            id=data.get("id"),
            name=data.get("name"),
            description=data.get("description"),
            is_active=data.get("is_active", True),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )

    # ─── State transitions ───────────────────────────────────────

    def activate(self) -> None:
        self.is_active = True
        self.updated_at = _utcnow()

    def deactivate(self) -> None:
        self.is_active = False
        self.updated_at = _utcnow()

    @property
    def is_inactive(self) -> bool:
        return self.is_active is not True

    # ─── Validation ──────────────────────────────────────────────

    def is_valid(self) -> ValidationResult:
        """Run every check and collect the messages. Never raises."""
        errors = [
            *self._validate_name(),
            *self._validate_description(),
            *self._validate_status(),
            *self._validate_dates(),
        ]
        return ValidationResult(is_valid=not errors, errors=errors)

    def validate(self) -> None:
        """Raise BenefitValidationError carrying all messages if invalid."""
        result = self.is_valid()
        if not result.is_valid:
            raise BenefitValidationError(result.errors)

    def _validate_name(self) -> list[str]:
        if not isinstance(self.name, str):
            return ["Name is required and must be a string"]
        length = len(self.name.strip())
        if length == 0:
            return ["Name cannot be empty"]
        if length < NAME_MIN_LENGTH:
            return [f"Name must have at least {NAME_MIN_LENGTH} characters"]
        if length > NAME_MAX_LENGTH:
            return [f"Name must have at most {NAME_MAX_LENGTH} characters"]
        return []

    def _validate_description(self) -> list[str]:
        if self.description is None:
            return []
        if not isinstance(self.description, str):
            return ["Description must be a string"]
        if len(self.description.strip()) > DESCRIPTION_MAX_LENGTH:
            return [
                f"Description must have at most {DESCRIPTION_MAX_LENGTH} characters",
            ]
        return []

    def _validate_status(self) -> list[str]:
        if not isinstance(self.is_active, bool):
            return ["Active status must be a boolean"]
        return []

    def _validate_dates(self) -> list[str]:
        errors = []
        if self.created_at is not None and not isinstance(self.created_at, datetime):
            errors.append("Creation date must be a datetime")
        if self.updated_at is not None and not isinstance(self.updated_at, datetime):
            errors.append("Update date must be a datetime")
        return errors

    # ─── Projections ─────────────────────────────────────────────

    def to_dict(self) -> dict:
        """Plain snake_case projection, no behavior."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "is_active": self.is_active,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    def to_json(self) -> dict:
        """JSON-ready projection with camelCase keys and ISO-8601 dates."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "isActive": self.is_active,
            "createdAt": _isoformat(self.created_at),
            "updatedAt": _isoformat(self.updated_at),
        }


def _isoformat(value: Any) -> Any:
    return value.isoformat() if isinstance(value, datetime) else value


def require_benefit_id(value: object) -> BenefitId:
    """Return value as a BenefitId, or raise InvalidIdError.

    bool is rejected even though it subclasses int. Ids above MAX_BENEFIT_ID
    cannot exist in storage.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidIdError(value)
    if not 0 < value <= MAX_BENEFIT_ID:
        raise InvalidIdError(value)
    return BenefitId(value)
