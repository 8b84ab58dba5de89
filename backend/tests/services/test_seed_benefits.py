"""Seed Benefits — inserts the example catalogue only into an empty table."""

from app.services.seed_benefits import EXAMPLE_BENEFITS, seed_benefits


async def test_seeds_empty_table(repository):
    repository.count.return_value = 0

    inserted = await seed_benefits(repository)

    assert inserted == len(EXAMPLE_BENEFITS) == 4
    assert repository.create.await_count == 4
    names = [c.args[0].name for c in repository.create.await_args_list]
    assert "Vale Refeição" in names


async def test_skips_non_empty_table(repository):
    repository.count.return_value = 2

    assert await seed_benefits(repository) == 0
    repository.create.assert_not_awaited()


def test_example_catalogue_is_valid():
    from app.core.benefit import Benefit

    for data in EXAMPLE_BENEFITS:
        assert Benefit(**data).is_valid().is_valid
