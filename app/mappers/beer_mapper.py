"""Conversión campo a campo entre el esquema de la API y el modelo ORM."""

from __future__ import annotations

from app.models.beer import Beer
from app.schemas.beer import BeerCreate, BeerRead


def to_model(payload: BeerCreate | BeerRead) -> Beer:
    beer = Beer(
        name=payload.name,
        quantity=payload.quantity,
        max=payload.max,
    )
    beer_id = getattr(payload, "id", None)
    if beer_id is not None:
        beer.id = beer_id
    return beer


def to_schema(beer: Beer) -> BeerRead:
    return BeerRead(
        id=beer.id,
        name=beer.name,
        quantity=beer.quantity,
        max=beer.max,
    )
