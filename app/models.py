"""SQLAlchemy ORM models.

This module defines the "movies" table which stores the favorite movie
records. Ids come from SQLite's AUTOINCREMENT so a deleted id is never
handed out again.
"""

from __future__ import annotations

from sqlalchemy import Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class Movie(Base):
    """A favorite movie entry shown in the list."""

    __tablename__ = "movies"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255))
    director: Mapped[str] = mapped_column(String(255))

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"Movie(id={self.id}, title={self.title}, director={self.director})"
