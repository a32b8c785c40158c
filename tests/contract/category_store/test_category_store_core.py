"""Contract tests for CategoryStore implementations."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from quitanda.domain.category import Category
from quitanda.interfaces.category_store import SortDirection
from quitanda.interfaces.errors import InvalidQueryError

if TYPE_CHECKING:
    from quitanda.interfaces.category_store import CategoryStore

# pylint: disable=magic-value-comparison


async def _add(store: CategoryStore, name: str, **fields) -> Category:
    return await store.persist(store.instantiate({"name": name, **fields}))


# --- persist -----------------------------------------------------------------


@pytest.mark.asyncio
async def test_persist_new_assigns_id(category_store: CategoryStore):
    """Persisting an unsaved record assigns a non-empty string id."""
    created = await _add(category_store, "Legumes", description="Frescos")
    assert isinstance(created.id, str)
    assert created.id
    assert created.name == "Legumes"
    assert created.description == "Frescos"
    assert created.active is True


@pytest.mark.asyncio
async def test_persist_does_not_mutate_argument(category_store: CategoryStore):
    """The record passed in keeps id None; the returned copy carries the id."""
    record = category_store.instantiate({"name": "Legumes"})
    created = await category_store.persist(record)
    assert record.id is None
    assert created is not record


@pytest.mark.asyncio
async def test_persist_assigns_distinct_ids(category_store: CategoryStore):
    """Each insert gets a fresh id."""
    ids = {(await _add(category_store, f"C{i}")).id for i in range(5)}
    assert len(ids) == 5


@pytest.mark.asyncio
async def test_persist_existing_updates_in_place(category_store: CategoryStore):
    """Persisting a record with a known id replaces the stored values."""
    created = await _add(category_store, "Legumes", description="Frescos")
    created.name = "Legumes Orgânicos"
    created.description = None
    created.active = False
    await category_store.persist(created)

    stored = await category_store.find_one({"id": created.id})
    assert stored == Category(
        id=created.id, name="Legumes Orgânicos", description=None, active=False
    )
    assert len(await category_store.find_many()) == 1


@pytest.mark.asyncio
async def test_persist_unknown_id_inserts(category_store: CategoryStore):
    """A record carrying an id the store has never seen is inserted as is."""
    await category_store.persist(Category(id="external-1", name="Importada"))
    stored = await category_store.find_one({"id": "external-1"})
    assert stored is not None
    assert stored.name == "Importada"


@pytest.mark.asyncio
async def test_insert_keeps_existing_records(category_store: CategoryStore):
    """Inserting next to a record stored under id "1" leaves that record intact."""
    existing = await category_store.persist(Category(id="1", name="Frutas"))
    created = await _add(category_store, "Legumes")

    assert created.id != existing.id
    assert await category_store.find_one({"id": "1"}) == existing
    assert await category_store.find_one({"id": created.id}) == created
    assert len(await category_store.find_many()) == 2


# --- find_one ----------------------------------------------------------------


@pytest.mark.asyncio
async def test_find_one_missing_returns_none(category_store: CategoryStore):
    """No match yields None rather than an error."""
    assert await category_store.find_one({"id": "999"}) is None


@pytest.mark.asyncio
async def test_find_one_ignores_active(category_store: CategoryStore):
    """Inactive records are found by id."""
    created = await _add(category_store, "Antiga", active=False)
    stored = await category_store.find_one({"id": created.id})
    assert stored is not None
    assert stored.active is False


@pytest.mark.asyncio
async def test_find_one_returns_detached_copy(category_store: CategoryStore):
    """Mutating a found record does not change the store."""
    created = await _add(category_store, "Legumes")
    found = await category_store.find_one({"id": created.id})
    found.name = "Mutated"
    again = await category_store.find_one({"id": created.id})
    assert again.name == "Legumes"


@pytest.mark.asyncio
async def test_find_one_with_several_matches_returns_lowest_id(
    category_store: CategoryStore,
):
    """With several matches, the one with the lowest id is returned."""
    ids = sorted([(await _add(category_store, "Dup")).id for _ in range(3)])
    found = await category_store.find_one({"name": "Dup"})
    assert found.id == ids[0]


# --- find_many ---------------------------------------------------------------


@pytest.mark.asyncio
async def test_find_many_empty_store(category_store: CategoryStore):
    """An empty store yields an empty list."""
    assert await category_store.find_many() == []


@pytest.mark.asyncio
async def test_find_many_filters_by_equality(category_store: CategoryStore):
    """Only records equal on every filter field are returned."""
    await _add(category_store, "Frutas")
    await _add(category_store, "Verduras", active=False)
    await _add(category_store, "Bebidas", description="Geladas")

    active = await category_store.find_many({"active": True})
    assert {c.name for c in active} == {"Frutas", "Bebidas"}

    both = await category_store.find_many({"active": True, "description": "Geladas"})
    assert [c.name for c in both] == ["Bebidas"]


@pytest.mark.asyncio
async def test_find_many_orders_by_name_code_point(category_store: CategoryStore):
    """String ordering is case-sensitive, by code point, on every backend."""
    for name in ["banana", "Óleos", "Abacate", "Zimbro", "açaí", "abacaxi"]:
        await _add(category_store, name)

    result = await category_store.find_many(order_by={"name": SortDirection.ASC})
    assert [c.name for c in result] == [
        "Abacate",
        "Zimbro",
        "abacaxi",
        "açaí",
        "banana",
        "Óleos",
    ]


@pytest.mark.asyncio
async def test_find_many_descending(category_store: CategoryStore):
    """DESC reverses the name order."""
    for name in ["B", "A", "C"]:
        await _add(category_store, name)
    result = await category_store.find_many(order_by={"name": SortDirection.DESC})
    assert [c.name for c in result] == ["C", "B", "A"]


@pytest.mark.asyncio
async def test_find_many_ties_break_by_id(category_store: CategoryStore):
    """Records sharing the sort key come back in id order."""
    created = [await _add(category_store, "Same") for _ in range(3)]
    await _add(category_store, "Before")

    result = await category_store.find_many(order_by={"name": SortDirection.ASC})
    assert [c.name for c in result][0] == "Before"
    assert [c.id for c in result[1:]] == sorted(c.id for c in created)


@pytest.mark.asyncio
async def test_find_many_multiple_keys_in_priority_order(
    category_store: CategoryStore,
):
    """The first ordering key dominates; later keys break its ties."""
    await _add(category_store, "B", active=True)
    await _add(category_store, "A", active=True)
    await _add(category_store, "C", active=False)

    result = await category_store.find_many(
        order_by={"active": SortDirection.ASC, "name": SortDirection.DESC}
    )
    assert [c.name for c in result] == ["C", "B", "A"]


@pytest.mark.asyncio
async def test_find_many_none_sorts_last_ascending(category_store: CategoryStore):
    """Missing descriptions sort after present ones in ascending order."""
    await _add(category_store, "Sem descrição")
    await _add(category_store, "Com descrição", description="x")

    result = await category_store.find_many(order_by={"description": SortDirection.ASC})
    assert [c.description for c in result] == ["x", None]


@pytest.mark.asyncio
async def test_find_many_returns_detached_copies(category_store: CategoryStore):
    """Mutating listed records does not change the store."""
    await _add(category_store, "Legumes")
    (listed,) = await category_store.find_many()
    listed.active = False
    (again,) = await category_store.find_many()
    assert again.active is True


# --- query validation --------------------------------------------------------


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "where, order_by",
    [({"price": 1}, None), (None, {"price": SortDirection.ASC})],
    ids=["filter", "order"],
)
async def test_find_many_rejects_unknown_fields(
    category_store: CategoryStore, where, order_by
):
    """Unknown filter or ordering fields raise InvalidQueryError."""
    with pytest.raises(InvalidQueryError):
        await category_store.find_many(where=where, order_by=order_by)


@pytest.mark.asyncio
async def test_find_one_rejects_unknown_fields(category_store: CategoryStore):
    """Unknown filter fields raise InvalidQueryError."""
    with pytest.raises(InvalidQueryError):
        await category_store.find_one({"slug": "frutas"})
