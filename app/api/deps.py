# app/api/deps.py
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session_async import get_async_db
from app.repositories.sqlalchemy_beer_repository import SqlAlchemyBeerRepository
from app.services.beer_service import BeerService


def build_beer_service(db: AsyncSession) -> BeerService:
    """Wire the SQLAlchemy repository into a fresh BeerService."""
    return BeerService(SqlAlchemyBeerRepository(db))


def get_beer_service(db: AsyncSession = Depends(get_async_db)) -> BeerService:
    return build_beer_service(db)
