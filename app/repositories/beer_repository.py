from abc import ABC, abstractmethod

from app.models.beer import Beer


class BeerRepository(ABC):
    """Persistence port used by the beer stock service."""

    @abstractmethod
    async def find_by_name(self, name: str) -> Beer | None:
        """Return the beer with the given name, or None."""

    @abstractmethod
    async def find_by_id(self, beer_id: int, *, for_update: bool = False) -> Beer | None:
        """Return the beer with the given id, or None.

        ``for_update`` asks the backend to lock the row until the end of the
        current transaction.
        """

    @abstractmethod
    async def find_all(self) -> list[Beer]:
        """Return every stored beer."""

    @abstractmethod
    async def save(self, beer: Beer) -> Beer:
        """Insert the beer (assigning an id) or overwrite the stored one."""

    @abstractmethod
    async def delete_by_id(self, beer_id: int) -> None:
        """Remove the beer with the given id."""
