from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.types.sqlalchemy import Base


class Cinema(Base):
    __tablename__ = "cinema"
    # Without AUTOINCREMENT, SQLite may give the id of a deleted row to a new one
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(primary_key=True, init=False)
    name: Mapped[str] = mapped_column(String(100))
