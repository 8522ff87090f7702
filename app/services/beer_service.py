from __future__ import annotations

from app.core.logging import BEER_LOGGER, get_logger
from app.core.metrics import record_stock_movement
from app.mappers import beer_mapper
from app.models.beer import Beer
from app.repositories.beer_repository import BeerRepository
from app.schemas.beer import BeerCreate, BeerRead
from app.services.exceptions import (
    BeerAlreadyRegisteredError,
    BeerNotFoundError,
    BeerStockExceededError,
    BeerStockUnderflowError,
    DomainValidationError,
    InvalidQuantityError,
)

logger = get_logger(BEER_LOGGER)


class BeerService:
    """Reglas de negocio del stock de cervezas.

    Holds nothing but its repository, so it can be built per request. Every
    precondition is checked before the single repository write of the
    operation; a failed check leaves the stored data untouched.
    """

    def __init__(self, repository: BeerRepository):
        self.repository = repository

    async def create(self, candidate: BeerCreate) -> BeerRead:
        if candidate.quantity < 0 or candidate.max <= 0 or candidate.quantity > candidate.max:
            raise DomainValidationError("Beer quantity must be between 0 and max.")

        if await self.repository.find_by_name(candidate.name) is not None:
            logger.warning("Duplicate beer rejected", extra={"beer_name": candidate.name})
            raise BeerAlreadyRegisteredError(candidate.name)

        saved = await self.repository.save(beer_mapper.to_model(candidate))
        logger.info(
            "Beer created",
            extra={"beer_id": saved.id, "beer_name": saved.name, "quantity": saved.quantity},
        )
        return beer_mapper.to_schema(saved)

    async def find_by_name(self, name: str) -> BeerRead:
        beer = await self.repository.find_by_name(name)
        if beer is None:
            raise BeerNotFoundError(name=name)
        return beer_mapper.to_schema(beer)

    async def list_all(self) -> list[BeerRead]:
        return [beer_mapper.to_schema(beer) for beer in await self.repository.find_all()]

    async def delete_by_id(self, beer_id: int) -> None:
        await self._get_or_raise(beer_id)
        await self.repository.delete_by_id(beer_id)
        logger.info("Beer deleted", extra={"beer_id": beer_id})

    async def increment(self, beer_id: int, quantity: int) -> BeerRead:
        _check_positive(quantity)
        beer = await self._get_or_raise(beer_id, for_update=True)

        new_quantity = beer.quantity + quantity
        if new_quantity > beer.max:
            logger.warning(
                "Stock increment rejected",
                extra={"beer_id": beer_id, "quantity": beer.quantity, "requested": quantity, "max": beer.max},
            )
            raise BeerStockExceededError(beer_id, quantity)

        return await self._store_quantity(beer, new_quantity, "increment")

    async def decrement(self, beer_id: int, quantity: int) -> BeerRead:
        _check_positive(quantity)
        beer = await self._get_or_raise(beer_id, for_update=True)

        new_quantity = beer.quantity - quantity
        if new_quantity < 0:
            logger.warning(
                "Stock decrement rejected",
                extra={"beer_id": beer_id, "quantity": beer.quantity, "requested": quantity},
            )
            raise BeerStockUnderflowError(beer_id, quantity)

        return await self._store_quantity(beer, new_quantity, "decrement")

    async def _get_or_raise(self, beer_id: int, *, for_update: bool = False) -> Beer:
        beer = await self.repository.find_by_id(beer_id, for_update=for_update)
        if beer is None:
            raise BeerNotFoundError(beer_id=beer_id)
        return beer

    async def _store_quantity(self, beer: Beer, new_quantity: int, operation: str) -> BeerRead:
        beer.quantity = new_quantity
        saved = await self.repository.save(beer)
        record_stock_movement(operation)
        logger.info(
            "Beer stock updated",
            extra={"beer_id": saved.id, "operation": operation, "quantity": saved.quantity},
        )
        return beer_mapper.to_schema(saved)


def _check_positive(quantity: int) -> None:
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
        raise InvalidQuantityError("La cantidad debe ser mayor que 0.")
