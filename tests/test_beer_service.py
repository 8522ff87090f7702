# tests/test_beer_service.py
import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.beer import Beer
from app.schemas.beer import BeerCreate
from app.services.beer_service import BeerService
from app.services.exceptions import (
    BeerAlreadyRegisteredError,
    BeerNotFoundError,
    BeerStockExceededError,
    BeerStockUnderflowError,
    CapacityExceededError,
    DomainValidationError,
    DuplicateNameError,
    InvalidQuantityError,
    NotFoundError,
)

INVALID_BEER_ID = 999_999


async def _count_beers(db: AsyncSession) -> int:
    return (await db.execute(select(func.count(Beer.id)))).scalar_one()


# ---------- create ----------

@pytest.mark.asyncio
async def test_create_returns_persisted_beer_with_id(beer_service: BeerService, beer_payload):
    candidate = beer_payload(quantity=10, max=50)

    created = await beer_service.create(candidate)

    assert created.id is not None
    assert created.name == candidate.name
    assert created.quantity == candidate.quantity
    assert created.max == candidate.max

    found = await beer_service.find_by_name(candidate.name)
    assert found == created


@pytest.mark.asyncio
async def test_create_with_registered_name_raises_and_writes_nothing(
    beer_service: BeerService, async_db_session: AsyncSession, beer_payload
):
    existing = await beer_service.create(beer_payload(name="Brahma", quantity=5, max=20))
    before = await _count_beers(async_db_session)

    with pytest.raises(BeerAlreadyRegisteredError) as exc:
        await beer_service.create(BeerCreate(name="Brahma", quantity=1, max=99))
    assert "Brahma" in exc.value.detail

    assert await _count_beers(async_db_session) == before
    assert await beer_service.find_by_name("Brahma") == existing


@pytest.mark.asyncio
async def test_create_rejects_quantity_above_max_built_without_validation(beer_service: BeerService):
    candidate = BeerCreate.model_construct(name="Overflow", quantity=60, max=50)

    with pytest.raises(DomainValidationError):
        await beer_service.create(candidate)


@pytest.mark.asyncio
async def test_generic_aliases_match_beer_errors(beer_service: BeerService, skol):
    with pytest.raises(DuplicateNameError):
        await beer_service.create(BeerCreate(name="Skol", quantity=1, max=2))
    with pytest.raises(NotFoundError):
        await beer_service.find_by_name("Colorado")
    with pytest.raises(CapacityExceededError):
        await beer_service.increment(skol.id, 41)


# ---------- find_by_name / list_all ----------

@pytest.mark.asyncio
async def test_find_by_name_returns_beer(beer_service: BeerService, skol):
    found = await beer_service.find_by_name("Skol")
    assert found == skol


@pytest.mark.asyncio
async def test_find_by_unknown_name_raises_not_found(beer_service: BeerService):
    with pytest.raises(BeerNotFoundError) as exc:
        await beer_service.find_by_name("Unknown Lager")
    assert exc.value.name == "Unknown Lager"


@pytest.mark.asyncio
async def test_list_all_on_empty_catalog_returns_empty_list(beer_service: BeerService):
    assert await beer_service.list_all() == []


@pytest.mark.asyncio
async def test_list_all_returns_every_beer_once(beer_service: BeerService, beer_payload):
    created = [await beer_service.create(beer_payload()) for _ in range(3)]

    listed = await beer_service.list_all()

    assert len(listed) == 3
    assert {b.id for b in listed} == {b.id for b in created}


# ---------- delete_by_id ----------

@pytest.mark.asyncio
async def test_delete_by_id_removes_beer(beer_service: BeerService, skol):
    await beer_service.delete_by_id(skol.id)

    with pytest.raises(BeerNotFoundError):
        await beer_service.find_by_name("Skol")
    with pytest.raises(BeerNotFoundError):
        await beer_service.delete_by_id(skol.id)


@pytest.mark.asyncio
async def test_delete_unknown_id_raises_and_keeps_catalog(
    beer_service: BeerService, async_db_session: AsyncSession, skol
):
    with pytest.raises(BeerNotFoundError) as exc:
        await beer_service.delete_by_id(INVALID_BEER_ID)
    assert exc.value.beer_id == INVALID_BEER_ID
    assert await _count_beers(async_db_session) == 1


# ---------- increment ----------

@pytest.mark.asyncio
async def test_increment_adds_to_stock(beer_service: BeerService, skol):
    incremented = await beer_service.increment(skol.id, 10)

    assert incremented.quantity == 20
    assert incremented.quantity < incremented.max


@pytest.mark.asyncio
async def test_increment_up_to_max_is_allowed(beer_service: BeerService, skol):
    incremented = await beer_service.increment(skol.id, 40)
    assert incremented.quantity == incremented.max == 50


@pytest.mark.asyncio
async def test_increment_greater_than_max_raises(beer_service: BeerService, skol):
    with pytest.raises(BeerStockExceededError):
        await beer_service.increment(skol.id, 80)
    assert (await beer_service.find_by_name("Skol")).quantity == 10


@pytest.mark.asyncio
async def test_increment_whose_sum_exceeds_max_raises(beer_service: BeerService, skol):
    with pytest.raises(BeerStockExceededError):
        await beer_service.increment(skol.id, 45)
    assert (await beer_service.find_by_name("Skol")).quantity == 10


@pytest.mark.asyncio
async def test_increment_unknown_id_raises_not_found(beer_service: BeerService):
    with pytest.raises(BeerNotFoundError):
        await beer_service.increment(INVALID_BEER_ID, 10)


@pytest.mark.asyncio
@pytest.mark.parametrize("amount", [0, -5])
async def test_increment_requires_positive_amount(beer_service: BeerService, skol, amount):
    with pytest.raises(InvalidQuantityError):
        await beer_service.increment(skol.id, amount)


@pytest.mark.asyncio
async def test_increment_sequence_stops_at_capacity(beer_service: BeerService, skol):
    first = await beer_service.increment(skol.id, 10)
    assert first.quantity == 20

    second = await beer_service.increment(skol.id, 25)
    assert second.quantity == 45

    with pytest.raises(BeerStockExceededError):
        await beer_service.increment(skol.id, 10)
    assert (await beer_service.find_by_name("Skol")).quantity == 45


# ---------- decrement ----------

@pytest.mark.asyncio
async def test_decrement_subtracts_from_stock(beer_service: BeerService, skol):
    decremented = await beer_service.decrement(skol.id, 5)

    assert decremented.quantity == 5
    assert decremented.quantity > 0


@pytest.mark.asyncio
async def test_decrement_to_empty_stock(beer_service: BeerService, skol):
    decremented = await beer_service.decrement(skol.id, 10)
    assert decremented.quantity == 0


@pytest.mark.asyncio
async def test_decrement_below_zero_raises_without_clamping(beer_service: BeerService, skol):
    with pytest.raises(BeerStockUnderflowError):
        await beer_service.decrement(skol.id, 80)
    assert (await beer_service.find_by_name("Skol")).quantity == 10


@pytest.mark.asyncio
async def test_decrement_unknown_id_raises_not_found(beer_service: BeerService):
    with pytest.raises(BeerNotFoundError):
        await beer_service.decrement(INVALID_BEER_ID, 10)
