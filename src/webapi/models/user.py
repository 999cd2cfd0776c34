from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from webapi.database.base import Base


class Usr(Base):
    """
    SQLAlchemy model for the `usr` table.

    `usr` rather than `user`, which is a reserved word in Postgres.
    """
    __tablename__ = "usr"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Login name (must be unique and non-null)
    usr_name: Mapped[str] = mapped_column(
        String(50),
        unique=True,
        nullable=False
    )

    usr_password: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        # Never include the password here; reprs end up in logs
        return f"<Usr(id={self.id!r}, usr_name={self.usr_name!r})>"
