"""SQLAlchemy Benefit Repository — tests against in-memory SQLite.

Tests cover:
    - create assigns ids, trims text, validates first
    - find_* ordering, paging and status filters
    - find_by_name is case-insensitive and treats % literally
    - update / delete report absence with None / False
    - count and exists_by_name (with exclude_id)
    - transaction() commits once, rolls back everything on error
    - SQLAlchemy failures surface as StorageError
"""

import pytest
from sqlalchemy.exc import OperationalError

from app.core.benefit import Benefit
from app.core.domain_types import ListOptions, OrderDirection, OrderField
from app.core.errors import BenefitValidationError, StorageError
from app.infrastructure.benefit_repository import SqlAlchemyBenefitRepository


@pytest.fixture
def repo(test_db):
    return SqlAlchemyBenefitRepository(test_db)


async def _seed(repo, *specs):
    created = []
    for name, is_active in specs:
        created.append(await repo.create(Benefit(name=name, is_active=is_active)))
    return created


# ─── create ──────────────────────────────────────────────────────

async def test_create_assigns_id_and_trims(repo):
    created = await repo.create(
        Benefit(name="  Vale Refeição  ", description="  mensal "),
    )
    assert created.id is not None
    assert created.name == "Vale Refeição"
    assert created.description == "mensal"
    assert created.is_active is True
    assert created.created_at is not None


async def test_create_validates_before_insert(repo):
    with pytest.raises(BenefitValidationError):
        await repo.create(Benefit(name="AB"))
    assert await repo.count() == 0


# ─── find ────────────────────────────────────────────────────────

async def test_find_by_id_returns_none_when_absent(repo):
    assert await repo.find_by_id(404) is None


async def test_find_by_id_round_trips(repo):
    [created] = await _seed(repo, ("Vale Transporte", True))
    found = await repo.find_by_id(created.id)
    assert found.name == "Vale Transporte"
    assert found.id == created.id


async def test_find_all_defaults_to_name_ascending(repo):
    await _seed(repo, ("Vale Transporte", True), ("Plano de Saúde", True), ("Seguro de Vida", False))
    names = [b.name for b in await repo.find_all()]
    assert names == ["Plano de Saúde", "Seguro de Vida", "Vale Transporte"]


async def test_find_all_orders_and_pages(repo):
    await _seed(repo, ("Alpha", True), ("Bravo", True), ("Charlie", True), ("Delta", True))
    options = ListOptions(
        order_by=OrderField.NAME, order_direction=OrderDirection.DESC,
        limit=2, offset=1,
    )
    names = [b.name for b in await repo.find_all(options)]
    assert names == ["Charlie", "Bravo"]


async def test_find_all_orders_by_id(repo):
    created = await _seed(repo, ("Bravo", True), ("Alpha", True))
    ids = [b.id for b in await repo.find_all(ListOptions(order_by=OrderField.ID))]
    assert ids == [created[0].id, created[1].id]


async def test_offset_without_limit(repo):
    await _seed(repo, ("Alpha", True), ("Bravo", True), ("Charlie", True))
    names = [b.name for b in await repo.find_all(ListOptions(offset=2))]
    assert names == ["Charlie"]


async def test_status_filters(repo):
    await _seed(repo, ("Vale Refeição", False), ("Vale Transporte", True))
    assert [b.name for b in await repo.find_active()] == ["Vale Transporte"]
    assert [b.name for b in await repo.find_inactive()] == ["Vale Refeição"]


async def test_find_by_name_is_case_insensitive_substring(repo):
    await _seed(repo, ("Vale Refeição", True), ("Vale Transporte", True), ("Plano de Saúde", True))
    names = [b.name for b in await repo.find_by_name("VALE")]
    assert names == ["Vale Refeição", "Vale Transporte"]


async def test_find_by_name_treats_wildcards_literally(repo):
    await _seed(repo, ("Bonus 100%", True), ("Bonus anual", True))
    names = [b.name for b in await repo.find_by_name("%")]
    assert names == ["Bonus 100%"]


# ─── update / delete ─────────────────────────────────────────────

async def test_update_persists_status(repo):
    [created] = await _seed(repo, ("Vale Refeição", True))
    created.deactivate()
    updated = await repo.update(created.id, created)
    assert updated.is_active is False
    assert (await repo.find_by_id(created.id)).is_active is False


async def test_update_returns_none_for_missing_id(repo):
    assert await repo.update(77, Benefit(name="Vale Refeição")) is None


async def test_update_validates(repo):
    [created] = await _seed(repo, ("Vale Refeição", True))
    with pytest.raises(BenefitValidationError):
        await repo.update(created.id, Benefit(name="AB"))


async def test_delete_reports_whether_a_row_was_removed(repo):
    [created] = await _seed(repo, ("Vale Refeição", True))
    assert await repo.delete(created.id) is True
    assert await repo.delete(created.id) is False
    assert await repo.find_by_id(created.id) is None


# ─── count / exists ──────────────────────────────────────────────

async def test_count_with_and_without_filter(repo):
    await _seed(repo, ("Alpha", True), ("Bravo", True), ("Charlie", False))
    assert await repo.count() == 3
    assert await repo.count(is_active=True) == 2
    assert await repo.count(is_active=False) == 1


async def test_exists_by_name_with_exclude_id(repo):
    [created] = await _seed(repo, ("Vale Refeição", True))
    assert await repo.exists_by_name("Vale Refeição") is True
    assert await repo.exists_by_name("  Vale Refeição ") is True
    assert await repo.exists_by_name("Vale Refeição", exclude_id=created.id) is False
    assert await repo.exists_by_name("Seguro de Vida") is False


# ─── transaction ─────────────────────────────────────────────────

async def test_transaction_commits_all_writes(repo):
    async def _work():
        await repo.create(Benefit(name="Alpha"))
        await repo.create(Benefit(name="Bravo"))
        return "done"

    assert await repo.transaction(_work) == "done"
    assert await repo.count() == 2


async def test_transaction_rolls_back_and_reraises(repo):
    class Boom(Exception):
        pass

    async def _work():
        await repo.create(Benefit(name="Alpha"))
        raise Boom("stop")

    with pytest.raises(Boom):
        await repo.transaction(_work)
    assert await repo.count() == 0


async def test_nested_transaction_joins_outer(repo):
    async def _inner():
        return await repo.create(Benefit(name="Bravo"))

    async def _outer():
        await repo.create(Benefit(name="Alpha"))
        await repo.transaction(_inner)
        raise RuntimeError("abort")

    with pytest.raises(RuntimeError):
        await repo.transaction(_outer)
    assert await repo.count() == 0


# ─── storage failures ────────────────────────────────────────────

async def test_sqlalchemy_errors_become_storage_errors(repo, monkeypatch):
    async def _fail(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("database is locked"))

    monkeypatch.setattr(repo.db, "execute", _fail)

    with pytest.raises(StorageError) as exc:
        await repo.find_all()
    assert exc.value.operation == "find_all"
    assert exc.value.http_status == 500
