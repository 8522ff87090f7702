from __future__ import annotations

from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_beer_service
from app.db.session_async import commit, get_async_db
from app.schemas.beer import MAX_DB_INT, BeerCreate, BeerRead, QuantityRequest
from app.services.beer_service import BeerService

router = APIRouter(prefix="/beers", tags=["beers"])

# Los errores del servicio se traducen en app.api.error_handlers; una sesión
# sin commit se descarta al cerrarse, así que solo hace falta confirmar el éxito.


@router.post("", response_model=BeerRead, status_code=status.HTTP_201_CREATED)
async def create_beer(
    payload: BeerCreate,
    service: BeerService = Depends(get_beer_service),
    db: AsyncSession = Depends(get_async_db),
):
    beer = await service.create(payload)
    await commit(db)
    return beer


@router.get("", response_model=list[BeerRead])
async def list_beers(service: BeerService = Depends(get_beer_service)):
    return await service.list_all()


@router.get("/{name}", response_model=BeerRead)
async def get_beer_by_name(
    name: str = Path(..., min_length=1),
    service: BeerService = Depends(get_beer_service),
):
    return await service.find_by_name(name)


@router.delete("/{beer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_beer(
    beer_id: int = Path(..., ge=1, le=MAX_DB_INT),
    service: BeerService = Depends(get_beer_service),
    db: AsyncSession = Depends(get_async_db),
):
    await service.delete_by_id(beer_id)
    await commit(db)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{beer_id}/increment", response_model=BeerRead)
async def increment_stock(
    payload: QuantityRequest,
    beer_id: int = Path(..., ge=1, le=MAX_DB_INT),
    service: BeerService = Depends(get_beer_service),
    db: AsyncSession = Depends(get_async_db),
):
    beer = await service.increment(beer_id, payload.quantity)
    await commit(db)
    return beer


@router.patch("/{beer_id}/decrement", response_model=BeerRead)
async def decrement_stock(
    payload: QuantityRequest,
    beer_id: int = Path(..., ge=1, le=MAX_DB_INT),
    service: BeerService = Depends(get_beer_service),
    db: AsyncSession = Depends(get_async_db),
):
    beer = await service.decrement(beer_id, payload.quantity)
    await commit(db)
    return beer
