"""FastAPI entrypoint wiring the movie repository to the htmx fragments."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Form, HTTPException, Response, status
from fastapi.responses import FileResponse, HTMLResponse
from sqlalchemy.orm import Session

from app.core.config import get_settings
from app.db import MovieRepository, get_session, init_models
from app.services.rendering import render_index_page, render_movie_item, render_movie_list


@asynccontextmanager
async def lifespan(_: FastAPI):
    """Ensure database tables before serving."""

    init_models()
    yield


app = FastAPI(title="Favorite Movies", lifespan=lifespan)
repo = MovieRepository()


@app.get("/", response_class=HTMLResponse)
def index() -> HTMLResponse:
    return HTMLResponse(render_index_page())


@app.get("/movies", response_class=HTMLResponse)
def list_movies(session: Session = Depends(get_session)) -> HTMLResponse:
    return HTMLResponse(render_movie_list(repo.list_all(session)))


@app.post("/movies", response_class=HTMLResponse)
def create_movie(
    title: str = Form(...),
    director: str = Form(...),
    session: Session = Depends(get_session),
) -> HTMLResponse:
    """Store a new movie and return its list item for htmx to append."""

    title = title.strip()
    director = director.strip()
    if not title or not director:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="title and director must not be empty",
        )

    movie = repo.add(session, title=title, director=director)
    return HTMLResponse(render_movie_item(movie))


@app.delete("/movies/{movie_id}")
def delete_movie(movie_id: int, session: Session = Depends(get_session)) -> Response:
    # htmx skips the swap on 204, so the removed <li> needs an empty 200.
    repo.delete(session, movie_id)
    return Response(status_code=status.HTTP_200_OK)


@app.get("/styles.css")
def stylesheet() -> FileResponse:
    path = get_settings().stylesheet_path
    if not path.is_file():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="stylesheet not found")
    return FileResponse(path, media_type="text/css")
