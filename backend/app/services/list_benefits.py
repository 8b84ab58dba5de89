"""List Benefits — status-filtered, paginated listings and counts."""

from app.core.benefit import Benefit
from app.core.domain_types import ListOptions
from app.core.errors import StorageError
from app.core.repository_protocols import BenefitRepository


class ListBenefits:
    """Read-only benefit queries."""

    def __init__(self, repository: BenefitRepository):
        self.repository = repository

    async def execute(self, options: ListOptions | None = None) -> list[Benefit]:
        """active_only wins over inactive_only; neither lists everything."""
        options = options or ListOptions()
        try:
            if options.active_only:
                return await self.repository.find_active(options)
            if options.inactive_only:
                return await self.repository.find_inactive(options)
            return await self.repository.find_all(options)
        except StorageError as e:
            raise StorageError(e.message, "list_benefits") from e

    async def search(
        self, name: str, options: ListOptions | None = None,
    ) -> list[Benefit]:
        try:
            return await self.repository.find_by_name(name, options or ListOptions())
        except StorageError as e:
            raise StorageError(e.message, "search_benefits") from e

    async def count(self, is_active: bool | None = None) -> int:
        try:
            return await self.repository.count(is_active)
        except StorageError as e:
            raise StorageError(e.message, "count_benefits") from e
