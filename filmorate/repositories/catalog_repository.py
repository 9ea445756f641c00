# filmorate/repositories/catalog_repository.py
import logging
from typing import List

from sqlalchemy import text
from sqlalchemy.exc import NoResultFound
from sqlalchemy.orm import Session

from pydantic_models import Genre, Mpa
from ..exceptions import NotFoundError

logger = logging.getLogger(__name__)

ALL_MPA_SQL = text("select mpa_id, name from mpa order by mpa_id")
MPA_BY_ID_SQL = text("select mpa_id, name from mpa where mpa_id = :mpa_id")

ALL_GENRES_SQL = text("select genre_id, name from genres order by genre_id")
GENRE_BY_ID_SQL = text("select genre_id, name from genres where genre_id = :genre_id")
GENRES_BY_FILM_SQL = text(
    "select g.genre_id, g.name from film_genre as fg "
    "join genres as g on fg.genre_id = g.genre_id "
    "where fg.film_id = :film_id "
    "order by g.genre_id"
)


def get_all_mpa(db: Session) -> List[Mpa]:
    return [Mpa(id=row.mpa_id, name=row.name) for row in db.execute(ALL_MPA_SQL)]


def find_mpa_by_id(db: Session, mpa_id: int) -> Mpa:
    try:
        row = db.execute(MPA_BY_ID_SQL, {"mpa_id": mpa_id}).one()
    except NoResultFound:
        logger.warning(f"Rating with id {mpa_id} not found")
        raise NotFoundError("Rating", mpa_id)
    return Mpa(id=row.mpa_id, name=row.name)


def get_all_genres(db: Session) -> List[Genre]:
    return [Genre(id=row.genre_id, name=row.name) for row in db.execute(ALL_GENRES_SQL)]


def find_genre_by_id(db: Session, genre_id: int) -> Genre:
    try:
        row = db.execute(GENRE_BY_ID_SQL, {"genre_id": genre_id}).one()
    except NoResultFound:
        logger.warning(f"Genre with id {genre_id} not found")
        raise NotFoundError("Genre", genre_id)
    return Genre(id=row.genre_id, name=row.name)


def get_genres_by_film(db: Session, film_id: int) -> List[Genre]:
    return [
        Genre(id=row.genre_id, name=row.name)
        for row in db.execute(GENRES_BY_FILM_SQL, {"film_id": film_id})
    ]
