from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from webapi.database.base import Base


class Car(Base):
    """
    SQLAlchemy model for the `car` table.
    """
    __tablename__ = "car"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    car_name: Mapped[str] = mapped_column(String(100), nullable=False)

    def __repr__(self) -> str:
        return f"<Car(id={self.id!r}, car_name={self.car_name!r})>"
