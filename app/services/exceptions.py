# app/services/exceptions.py

class ServiceError(Exception):
    """Clase base para errores de la capa de servicio."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(detail)


class InvalidQuantityError(ServiceError):
    """Lanzada cuando una cantidad es inválida (e.g., <= 0)."""
    pass


class DomainValidationError(ServiceError):
    """Entrada de dominio inválida."""
    pass


class ResourceNotFoundError(ServiceError):
    """Recurso no encontrado."""
    pass


class ConflictError(ServiceError):
    """Conflicto de estado en la operación."""
    pass


class StockLimitError(ServiceError):
    """El movimiento dejaría el stock fuera de [0, max]."""
    pass


class BeerNotFoundError(ResourceNotFoundError):
    def __init__(self, *, beer_id: int | None = None, name: str | None = None):
        self.beer_id = beer_id
        self.name = name
        if name is not None:
            detail = f"Beer with name {name} not found in the system."
        else:
            detail = f"Beer with id {beer_id} not found in the system."
        super().__init__(detail)


class BeerAlreadyRegisteredError(ConflictError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Beer with name {name} already registered in the system.")


class BeerStockExceededError(StockLimitError):
    def __init__(self, beer_id: int, quantity: int):
        self.beer_id = beer_id
        self.quantity = quantity
        super().__init__(
            f"Beer with id {beer_id} cannot be incremented by {quantity}: stock capacity exceeded."
        )


class BeerStockUnderflowError(StockLimitError):
    def __init__(self, beer_id: int, quantity: int):
        self.beer_id = beer_id
        self.quantity = quantity
        super().__init__(
            f"Beer with id {beer_id} cannot be decremented by {quantity}: not enough stock."
        )


# Nombres genéricos usados por los llamadores que no conocen el dominio "beer".
NotFoundError = BeerNotFoundError
DuplicateNameError = BeerAlreadyRegisteredError
CapacityExceededError = BeerStockExceededError
