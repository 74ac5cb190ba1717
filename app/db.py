"""Database session management and repositories."""

from __future__ import annotations

import logging
from typing import Iterator

from sqlalchemy import create_engine, delete, select
from sqlalchemy.orm import Session, sessionmaker

from app.core.config import get_settings
from app.models import Base, Movie

logger = logging.getLogger(__name__)

# SQLite INTEGER primary keys are signed 64-bit.
MAX_MOVIE_ID = 2**63 - 1


def _database_url() -> str:
    """Return the SQLAlchemy URL from settings (defaults to local SQLite)."""
    return get_settings().database_url


def _connect_args(url: str) -> dict:
    # Sync endpoints and their dependencies may run on different threadpool workers.
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


_url = _database_url()
engine = create_engine(_url, connect_args=_connect_args(_url), future=True)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


def init_models() -> None:
    """Create tables if they do not exist."""
    Base.metadata.create_all(bind=engine)


def get_session() -> Iterator[Session]:
    """FastAPI-friendly dependency that manages commits/rollbacks."""

    session = SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


class MovieRepository:
    """Data access helpers for favorite movie records."""

    def add(self, session: Session, *, title: str, director: str) -> Movie:
        movie = Movie(title=title, director=director)
        session.add(movie)
        session.flush()  # assign the id before leaving scope
        session.refresh(movie)
        logger.info("Added movie id=%s title=%r", movie.id, movie.title)
        return movie

    def list_all(self, session: Session) -> list[Movie]:
        query = select(Movie).order_by(Movie.id)
        movies = list(session.execute(query).scalars())
        logger.debug("Listed %d movies", len(movies))
        return movies

    def delete(self, session: Session, movie_id: int) -> bool:
        """Remove a movie by id; a missing id is not an error."""

        if not -MAX_MOVIE_ID - 1 <= movie_id <= MAX_MOVIE_ID:
            logger.debug("Delete requested for out-of-range movie id=%s", movie_id)
            return False
        result = session.execute(delete(Movie).where(Movie.id == movie_id))
        removed = bool(result.rowcount)
        if removed:
            logger.info("Deleted movie id=%s", movie_id)
        else:
            logger.debug("Delete requested for unknown movie id=%s", movie_id)
        return removed
