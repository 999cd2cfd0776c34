from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from webapi.database.base import Base


class Error(Base):
    """
    SQLAlchemy model for the `error` table: display names for numeric error codes.

    Ids are the ErrorCode values themselves, so they are inserted explicitly
    when the table is seeded.
    """
    __tablename__ = "error"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)

    error_name: Mapped[str] = mapped_column(String(100), nullable=False)

    def __repr__(self) -> str:
        return f"<Error(id={self.id!r}, error_name={self.error_name!r})>"
