from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from app.types.sqlalchemy import Base


class Filme(Base):
    __tablename__ = "filme"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(primary_key=True, init=False)
    title: Mapped[str] = mapped_column(String(50))
    genre: Mapped[str] = mapped_column(String(50))
    # Duration in minutes
    duration: Mapped[int]
    cinema_id: Mapped[int | None] = mapped_column(
        ForeignKey("cinema.id", ondelete="SET NULL"),
        default=None,
    )
