"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - BenefitId wraps int — storage assigns it, it is in [1, MAX_BENEFIT_ID]
    - OrderField values are the public (camelCase) names accepted by the API
    - ListOptions defaults to name ascending with no pagination

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

BenefitId = NewType("BenefitId", int)

# Upper bound of the INTEGER primary key column
MAX_BENEFIT_ID = 2**31 - 1


# ─── Enums ───────────────────────────────────────────────────────

class OrderField(str, Enum):
    """Sortable benefit fields, keyed by their API names."""
    ID = "id"
    NAME = "name"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"


class OrderDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


# ─── Query Options ───────────────────────────────────────────────

@dataclass(frozen=True)
class ListOptions:
    """Pagination, ordering and status filters for benefit listings.

    active_only / inactive_only are read by the list use case to pick a
    repository query; repositories only look at the paging and order fields.
    """
    limit: int | None = None
    offset: int | None = None
    order_by: OrderField = OrderField.NAME
    order_direction: OrderDirection = OrderDirection.ASC
    active_only: bool = False
    inactive_only: bool = False
