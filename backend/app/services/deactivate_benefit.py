"""Deactivate Benefit — idempotent switch to inactive.

Invariants:
    - Mirror of ActivateBenefit: already inactive means no write
"""

import logging

from app.core.benefit import Benefit, require_benefit_id
from app.core.domain_types import BenefitId
from app.core.errors import ErrorContext, ResourceNotFoundError, StorageError
from app.core.repository_protocols import BenefitRepository

logger = logging.getLogger(__name__)


class DeactivateBenefit:
    """Mark a benefit as inactive."""

    def __init__(self, repository: BenefitRepository):
        self.repository = repository

    async def execute(self, benefit_id: object) -> Benefit:
        valid_id = require_benefit_id(benefit_id)
        try:
            return await self.repository.transaction(
                lambda: self._deactivate(valid_id),
            )
        except StorageError as e:
            raise StorageError(
                e.message, "deactivate_benefit",
                ErrorContext(benefit_id=valid_id),
            ) from e

    async def _deactivate(self, benefit_id: BenefitId) -> Benefit:
        benefit = await self.repository.find_by_id(benefit_id)
        if benefit is None:
            raise ResourceNotFoundError("Benefit", str(benefit_id))
        if benefit.is_inactive:
            return benefit

        benefit.deactivate()
        updated = await self.repository.update(benefit_id, benefit)
        if updated is None:
            raise ResourceNotFoundError("Benefit", str(benefit_id))
        logger.info(
            "Benefit deactivated",
            extra={"benefit_id": benefit_id, "operation": "deactivate_benefit"},
        )
        return updated
