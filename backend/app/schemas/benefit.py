"""Benefit Schemas — Pydantic models for the benefits API boundary.

Invariants:
    - Public JSON uses camelCase (isActive, createdAt, updatedAt)
    - BenefitCreate only checks shapes; length and duplicate rules are enforced
      by the entity and CreateBenefit, so every rule reports the same way
    - Response envelopes always carry success=True

Design Decisions:
    - alias_generator=to_camel with populate_by_name: Python code keeps
      snake_case, clients see camelCase
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.core.benefit import Benefit


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BenefitCreate(_CamelModel):
    """POST /benefits body — every field optional at the schema level."""
    name: str | None = None
    description: str | None = None
    is_active: bool | None = None

    def to_input(self) -> dict:
        """Plain dict for CreateBenefit, without fields the client omitted."""
        return self.model_dump(exclude_none=True)


class BenefitOut(_CamelModel):
    id: int
    name: str
    description: str | None = None
    is_active: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, benefit: Benefit) -> "BenefitOut":
        return cls(
            id=benefit.id,
            name=benefit.name,
            description=benefit.description,
            is_active=benefit.is_active,
            created_at=benefit.created_at,
            updated_at=benefit.updated_at,
        )


class BenefitListResponse(_CamelModel):
    success: bool = True
    data: list[BenefitOut] = Field(default_factory=list)


class BenefitResponse(_CamelModel):
    success: bool = True
    data: BenefitOut
    message: str
