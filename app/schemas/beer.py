from pydantic import BaseModel, ConfigDict, Field, model_validator

# Límite de la columna Integer (32 bits con signo).
MAX_DB_INT = 2_147_483_647


# ---------- Beer ----------
class BeerBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    quantity: int = Field(..., ge=0, le=MAX_DB_INT)
    max: int = Field(..., gt=0, le=MAX_DB_INT)

    @model_validator(mode="after")
    def check_quantity_within_max(self) -> "BeerBase":
        if self.quantity > self.max:
            raise ValueError("quantity cannot be greater than max")
        return self


class BeerCreate(BeerBase):
    pass


class BeerRead(BeerBase):
    id: int
    model_config = ConfigDict(from_attributes=True)


class QuantityRequest(BaseModel):
    """Cuerpo de los endpoints de incremento/decremento de stock."""

    quantity: int = Field(..., gt=0, le=MAX_DB_INT)
