"""HTML rendering for the page shell and the htmx fragments."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from app.models import Movie

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

_env = Environment(
    loader=FileSystemLoader(TEMPLATES_DIR),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


def _render(template_name: str, **context) -> str:
    return _env.get_template(template_name).render(**context)


def render_base_page(children: str) -> str:
    """Wrap already-rendered markup in the full HTML document."""

    return _render("base.html", children=Markup(children))


def render_index_page() -> str:
    """Page shell whose main element loads the movie list as soon as it appears."""

    return render_base_page(_render("index.html"))


def render_movie_list(movies: Iterable[Movie]) -> str:
    movies = list(movies)
    logger.debug("Rendering list fragment with %d movies", len(movies))
    return _render("movie_list.html", movies=movies)


def render_movie_item(movie: Movie) -> str:
    return _render("movie_item.html", movie=movie)


def render_movie_form() -> str:
    """Same partial the list template includes below the grid."""
    return _render("movie_form.html")


def render_trash_icon() -> str:
    """Same partial every item template includes in its delete button."""
    return _render("trash_icon.html")
