"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection
    - Every method raises StorageError when the store fails; absence is
      reported with None / False, never with an exception

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no base class
    - Async in Protocol: implementations do IO
"""

from typing import Awaitable, Callable, Protocol, TypeVar

from app.core.benefit import Benefit
from app.core.domain_types import BenefitId, ListOptions

T = TypeVar("T")


class BenefitRepository(Protocol):
    """Contract for benefit persistence — implemented by shell."""
    async def create(self, benefit: Benefit) -> Benefit: ...
    async def find_by_id(self, benefit_id: BenefitId) -> Benefit | None: ...
    async def find_all(self, options: ListOptions | None = None) -> list[Benefit]: ...
    async def find_active(self, options: ListOptions | None = None) -> list[Benefit]: ...
    async def find_inactive(
        self, options: ListOptions | None = None,
    ) -> list[Benefit]: ...
    async def find_by_name(
        self, name: str, options: ListOptions | None = None,
    ) -> list[Benefit]: ...
    async def update(
        self, benefit_id: BenefitId, benefit: Benefit,
    ) -> Benefit | None: ...
    async def delete(self, benefit_id: BenefitId) -> bool: ...
    async def count(self, is_active: bool | None = None) -> int: ...
    async def exists_by_name(
        self, name: str, exclude_id: BenefitId | None = None,
    ) -> bool: ...
    async def transaction(self, fn: Callable[[], Awaitable[T]]) -> T: ...
