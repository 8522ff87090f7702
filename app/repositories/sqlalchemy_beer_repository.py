from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.operations import flush_async, refresh_async, rollback_async
from app.models.beer import Beer
from app.repositories.beer_repository import BeerRepository
from app.services.exceptions import BeerAlreadyRegisteredError, DomainValidationError

UNIQUE_VIOLATION_SQLSTATE = "23505"
_NAME_INDEX = "ix_beers_name"
_NAME_COLUMN = "beers.name"


def _is_duplicate_name(exc: IntegrityError) -> bool:
    """True when the violation is the unique index on beers.name."""
    orig = exc.orig
    # asyncpg expone sqlstate; psycopg, pgcode
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate:
        return sqlstate == UNIQUE_VIOLATION_SQLSTATE
    errorname = getattr(orig, "sqlite_errorname", None)
    if errorname and errorname != "SQLITE_CONSTRAINT_UNIQUE":
        return False
    # SQLite informa la columna ("beers.name"), PostgreSQL el índice
    message = str(orig)
    return _NAME_INDEX in message or _NAME_COLUMN in message


class SqlAlchemyBeerRepository(BeerRepository):
    """BeerRepository backed by an AsyncSession. Flushes but never commits."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_by_name(self, name: str) -> Beer | None:
        result = await self.session.execute(select(Beer).where(Beer.name == name))
        return result.scalar_one_or_none()

    async def find_by_id(self, beer_id: int, *, for_update: bool = False) -> Beer | None:
        stmt = select(Beer).where(Beer.id == beer_id)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def find_all(self) -> list[Beer]:
        result = await self.session.execute(select(Beer).order_by(Beer.id.asc()))
        return list(result.scalars().all())

    async def save(self, beer: Beer) -> Beer:
        name = beer.name
        if beer.id is not None:
            # merge devuelve la instancia persistente si ya estaba en la sesión
            beer = await self.session.merge(beer)
        else:
            self.session.add(beer)
        try:
            await flush_async(self.session, beer)
        except IntegrityError as exc:
            await rollback_async(self.session)
            if _is_duplicate_name(exc):
                raise BeerAlreadyRegisteredError(name) from exc
            raise DomainValidationError("Beer violates stock constraints.") from exc
        await refresh_async(self.session, beer)
        return beer

    async def delete_by_id(self, beer_id: int) -> None:
        beer = await self.session.get(Beer, beer_id)
        if beer is None:
            return
        await self.session.delete(beer)
        await flush_async(self.session)
