"""Seed Benefits — example catalogue for fresh development databases.

Invariants:
    - Inserts only into an empty table; returns the number of rows created
    - Rows go through the repository, so they are validated like user input
"""

import logging

from app.core.benefit import Benefit
from app.core.repository_protocols import BenefitRepository

logger = logging.getLogger(__name__)

EXAMPLE_BENEFITS = (
    {
        "name": "Plano de Saúde",
        "description": "Cobertura médica completa para funcionários",
        "is_active": True,
    },
    {
        "name": "Vale Refeição",
        "description": "Auxílio alimentação mensal",
        "is_active": True,
    },
    {
        "name": "Vale Transporte",
        "description": "Auxílio para transporte público",
        "is_active": True,
    },
    {
        "name": "Seguro de Vida",
        "description": "Proteção para a família do funcionário",
        "is_active": False,
    },
)


async def seed_benefits(repository: BenefitRepository) -> int:
    if await repository.count() > 0:
        logger.info("Benefits table not empty, skipping seed")
        return 0

    async def _insert_all() -> int:
        for data in EXAMPLE_BENEFITS:
            await repository.create(Benefit(**data))
        return len(EXAMPLE_BENEFITS)

    inserted = await repository.transaction(_insert_all)
    logger.info(f"Seeded {inserted} example benefits")
    return inserted
