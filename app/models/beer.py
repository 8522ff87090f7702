from sqlalchemy import CheckConstraint, DateTime, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from app.db.session import Base


class Beer(Base):
    __tablename__ = "beers"
    __table_args__ = (
        CheckConstraint("quantity >= 0", name="ck_beers_quantity_non_negative"),
        CheckConstraint('"max" > 0', name="ck_beers_max_positive"),
        CheckConstraint('quantity <= "max"', name="ck_beers_quantity_within_max"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), unique=True, nullable=False, index=True)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    max: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = mapped_column(DateTime(timezone=True), onupdate=func.now())

    def __repr__(self) -> str:
        return f"<Beer id={self.id} name={self.name!r} quantity={self.quantity}/{self.max}>"
