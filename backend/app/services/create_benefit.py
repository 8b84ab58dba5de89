"""Create Benefit — validates input, rejects duplicate names, persists.

Invariants:
    - Non-mapping input rejected before any entity is built
    - Entity validated before the repository is touched
    - Duplicate check and insert run in one repository transaction
    - is_active defaults to True when the input omits it (or sends None)
"""

import logging
from collections.abc import Mapping

from app.core.benefit import Benefit
from app.core.errors import (
    BenefitValidationError, DuplicateNameError, StorageError,
)
from app.core.repository_protocols import BenefitRepository

logger = logging.getLogger(__name__)


class CreateBenefit:
    """Create a new benefit."""

    def __init__(self, repository: BenefitRepository):
        self.repository = repository

    async def execute(self, data: Mapping) -> Benefit:
        if not isinstance(data, Mapping):
            raise BenefitValidationError(["Invalid input data"])

        is_active = data.get("is_active")
        benefit = Benefit(
            id=None,
            name=data.get("name"),
            description=data.get("description"),
            is_active=True if is_active is None else is_active,
        )
        benefit.validate()

        async def _insert() -> Benefit:
            if await self.repository.exists_by_name(benefit.name):
                raise DuplicateNameError(benefit.name.strip())
            return await self.repository.create(benefit)

        try:
            created = await self.repository.transaction(_insert)
        except StorageError as e:
            raise StorageError(e.message, "create_benefit") from e

        logger.info(
            f"Benefit created: {created.name}",
            extra={"benefit_id": created.id, "operation": "create_benefit"},
        )
        return created
