from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from webapi.database.base import Base


class Subscription(Base):
    """
    SQLAlchemy model for the `subscription` table.

    A subscription registers a callback URL for an (object, event) pair, e.g.
    ("car", "ondelete"). Only the registration is stored here; delivering the
    callbacks is not part of this service.
    """
    __tablename__ = "subscription"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    object_name: Mapped[str | None] = mapped_column(String(100), nullable=True)

    event_name: Mapped[str | None] = mapped_column(String(100), nullable=True)

    call_back: Mapped[str] = mapped_column(String(2048), nullable=False)

    def __repr__(self) -> str:
        return (
            f"<Subscription(id={self.id!r}, object_name={self.object_name!r}, "
            f"event_name={self.event_name!r})>"
        )
