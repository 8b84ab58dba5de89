"""Delete Benefit — hard delete after an existence check.

Invariants:
    - Invalid id rejected before the repository is touched
    - Missing benefit raises ResourceNotFoundError and delete is never called
    - delete() reporting False raises DeleteFailedError
"""

import logging

from app.core.benefit import require_benefit_id
from app.core.errors import (
    DeleteFailedError, ErrorContext, ResourceNotFoundError, StorageError,
)
from app.core.repository_protocols import BenefitRepository

logger = logging.getLogger(__name__)


class DeleteBenefit:
    """Remove a benefit permanently."""

    def __init__(self, repository: BenefitRepository):
        self.repository = repository

    async def execute(self, benefit_id: object) -> bool:
        valid_id = require_benefit_id(benefit_id)
        try:
            benefit = await self.repository.find_by_id(valid_id)
            if benefit is None:
                raise ResourceNotFoundError("Benefit", str(valid_id))
            if not await self.repository.delete(valid_id):
                raise DeleteFailedError(valid_id)
        except StorageError as e:
            raise StorageError(
                e.message, "delete_benefit", ErrorContext(benefit_id=valid_id),
            ) from e

        logger.info(
            "Benefit deleted",
            extra={"benefit_id": valid_id, "operation": "delete_benefit"},
        )
        return True
