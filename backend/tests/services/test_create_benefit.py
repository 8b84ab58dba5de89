"""Create Benefit — tests for input checks, duplicate detection and persistence.

Tests cover:
    - Non-mapping input and invalid names never reach the repository
    - Duplicate names raise DuplicateNameError without calling create
    - is_active defaults to True
    - Duplicate check and create run inside transaction()
    - StorageError re-raised with the use case operation
"""

import pytest

from app.core.benefit import Benefit
from app.core.errors import (
    BenefitValidationError, DuplicateNameError, StorageError,
)
from app.services.create_benefit import CreateBenefit


def _persisted(benefit: Benefit) -> Benefit:
    return Benefit(
        id=1, name=benefit.name, description=benefit.description,
        is_active=benefit.is_active,
    )


async def test_creates_benefit_with_default_active_status(repository):
    repository.exists_by_name.return_value = False
    repository.create.side_effect = _persisted

    created = await CreateBenefit(repository).execute({"name": "Vale Refeição"})

    assert created.id == 1
    assert created.is_active is True
    sent = repository.create.await_args.args[0]
    assert sent.id is None
    assert sent.name == "Vale Refeição"


async def test_explicit_inactive_status_is_kept(repository):
    repository.exists_by_name.return_value = False
    repository.create.side_effect = _persisted

    created = await CreateBenefit(repository).execute(
        {"name": "Seguro de Vida", "is_active": False},
    )
    assert created.is_active is False


async def test_short_name_rejected_before_repository(repository):
    with pytest.raises(BenefitValidationError) as exc:
        await CreateBenefit(repository).execute({"name": "AB"})
    assert "Name must have at least 3 characters" in exc.value.errors
    repository.exists_by_name.assert_not_awaited()
    repository.create.assert_not_awaited()


async def test_missing_name_rejected(repository):
    with pytest.raises(BenefitValidationError):
        await CreateBenefit(repository).execute({"description": "Teste"})
    repository.create.assert_not_awaited()


@pytest.mark.parametrize("data", [None, "Vale Refeição", ["Vale"], 42])
async def test_non_mapping_input_rejected(repository, data):
    with pytest.raises(BenefitValidationError) as exc:
        await CreateBenefit(repository).execute(data)
    assert exc.value.errors == ["Invalid input data"]


async def test_duplicate_name_rejected_without_create(repository):
    repository.exists_by_name.return_value = True

    with pytest.raises(DuplicateNameError):
        await CreateBenefit(repository).execute({"name": "Valid Name"})
    repository.exists_by_name.assert_awaited_once_with("Valid Name")
    repository.create.assert_not_awaited()


async def test_check_and_insert_run_in_one_transaction(repository):
    repository.exists_by_name.return_value = False
    repository.create.side_effect = _persisted

    await CreateBenefit(repository).execute({"name": "Vale Transporte"})
    repository.transaction.assert_awaited_once()


async def test_storage_error_is_rewrapped(repository):
    repository.exists_by_name.return_value = False
    repository.create.side_effect = StorageError("OperationalError", "create")

    with pytest.raises(StorageError) as exc:
        await CreateBenefit(repository).execute({"name": "Vale Refeição"})
    assert exc.value.operation == "create_benefit"
    assert isinstance(exc.value.__cause__, StorageError)
