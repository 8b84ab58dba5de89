"""Activate Benefit — idempotent switch to active.

Invariants:
    - Invalid id rejected before the repository is touched
    - Missing benefit raises ResourceNotFoundError
    - Already active: returned as-is, update is never called
    - Lookup and update share one repository transaction; concurrent
      requests on the same row are last-write-wins
"""

import logging

from app.core.benefit import Benefit, require_benefit_id
from app.core.domain_types import BenefitId
from app.core.errors import ErrorContext, ResourceNotFoundError, StorageError
from app.core.repository_protocols import BenefitRepository

logger = logging.getLogger(__name__)


class ActivateBenefit:
    """Mark a benefit as active."""

    def __init__(self, repository: BenefitRepository):
        self.repository = repository

    async def execute(self, benefit_id: object) -> Benefit:
        valid_id = require_benefit_id(benefit_id)
        try:
            return await self.repository.transaction(
                lambda: self._activate(valid_id),
            )
        except StorageError as e:
            raise StorageError(
                e.message, "activate_benefit",
                ErrorContext(benefit_id=valid_id),
            ) from e

    async def _activate(self, benefit_id: BenefitId) -> Benefit:
        benefit = await self.repository.find_by_id(benefit_id)
        if benefit is None:
            raise ResourceNotFoundError("Benefit", str(benefit_id))
        if benefit.is_active is True:
            return benefit

        benefit.activate()
        updated = await self.repository.update(benefit_id, benefit)
        if updated is None:
            raise ResourceNotFoundError("Benefit", str(benefit_id))
        logger.info(
            "Benefit activated",
            extra={"benefit_id": benefit_id, "operation": "activate_benefit"},
        )
        return updated
