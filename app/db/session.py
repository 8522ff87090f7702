# app/db/session.py
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base

from app.core.config import settings

# SQLite requires special connect args for multi-thread access.
connect_args = {}
if settings.DATABASE_URL.startswith("sqlite"):
    connect_args = {"check_same_thread": False}

# Engine sync: creación de tablas fuera de Alembic (tests, scripts).
engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
    connect_args=connect_args,
    echo=settings.DB_ECHO,
)

Base = declarative_base()


def create_tables() -> None:
    import app.models.beer  # noqa: F401

    Base.metadata.create_all(bind=engine)


def drop_tables() -> None:
    Base.metadata.drop_all(bind=engine)
