"""Use case fixtures — AsyncMock repository double.

Invariants:
    - transaction() really awaits the unit of work it is given, so use cases
      behave as they do against the SQLAlchemy repository
    - Every other repository method is an AsyncMock the test configures
"""

import pytest
from unittest.mock import AsyncMock


@pytest.fixture
def repository():
    repo = AsyncMock()

    async def _run(fn):
        return await fn()

    repo.transaction.side_effect = _run
    return repo
