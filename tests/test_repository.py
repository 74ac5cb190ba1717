from app.db import MovieRepository
from app.models import Movie


def test_add_assigns_increasing_ids(session):
    repo = MovieRepository()
    first = repo.add(session, title="Inception", director="Nolan")
    second = repo.add(session, title="Heat", director="Mann")
    session.commit()

    assert first.id == 1
    assert second.id == 2
    assert isinstance(first, Movie)


def test_list_all_returns_insertion_order(session):
    repo = MovieRepository()
    for title in ("Alien", "Heat", "Ran"):
        repo.add(session, title=title, director="Someone")
    session.commit()

    assert [movie.title for movie in repo.list_all(session)] == ["Alien", "Heat", "Ran"]


def test_delete_existing_and_missing(session):
    repo = MovieRepository()
    movie = repo.add(session, title="Inception", director="Nolan")
    session.commit()

    assert repo.delete(session, movie.id) is True
    assert repo.delete(session, movie.id) is False
    assert repo.delete(session, 12345) is False
    session.commit()

    assert repo.list_all(session) == []


def test_deleted_id_is_not_reused(session):
    repo = MovieRepository()
    repo.add(session, title="Alien", director="Scott")
    last = repo.add(session, title="Heat", director="Mann")
    session.commit()
    repo.delete(session, last.id)
    session.commit()

    fresh = repo.add(session, title="Ran", director="Kurosawa")
    session.commit()
    assert fresh.id == last.id + 1


def test_delete_out_of_range_id_returns_false(session):
    repo = MovieRepository()
    repo.add(session, title="Inception", director="Nolan")
    session.commit()

    assert repo.delete(session, 2**63) is False
    assert repo.delete(session, -(2**63) - 1) is False
    assert len(repo.list_all(session)) == 1
