"""Deactivate Benefit — mirror of the activate tests."""

import pytest

from app.core.benefit import Benefit
from app.core.errors import InvalidIdError, ResourceNotFoundError, StorageError
from app.services.deactivate_benefit import DeactivateBenefit


async def test_deactivates_active_benefit(repository):
    repository.find_by_id.return_value = Benefit(id=1, name="Vale Refeição")
    repository.update.side_effect = lambda benefit_id, b: b

    result = await DeactivateBenefit(repository).execute(1)

    assert result.is_active is False
    repository.update.assert_awaited_once()


async def test_already_inactive_is_a_no_op(repository):
    benefit = Benefit(id=1, name="Vale Refeição", is_active=False)
    repository.find_by_id.return_value = benefit

    result = await DeactivateBenefit(repository).execute(1)

    assert result.is_active is False
    repository.update.assert_not_awaited()


async def test_missing_benefit_raises_not_found(repository):
    repository.find_by_id.return_value = None

    with pytest.raises(ResourceNotFoundError) as exc:
        await DeactivateBenefit(repository).execute(5)
    assert exc.value.resource_id == "5"


async def test_invalid_id_rejected(repository):
    with pytest.raises(InvalidIdError):
        await DeactivateBenefit(repository).execute(-1)
    repository.find_by_id.assert_not_awaited()


async def test_storage_error_is_rewrapped(repository):
    repository.find_by_id.return_value = Benefit(id=1, name="Vale Refeição")
    repository.update.side_effect = StorageError("OperationalError", "update")

    with pytest.raises(StorageError) as exc:
        await DeactivateBenefit(repository).execute(1)
    assert exc.value.operation == "deactivate_benefit"
