# filmorate/repositories/film_repository.py
import logging
from typing import List

from sqlalchemy import Date, bindparam, insert, text
from sqlalchemy.exc import NoResultFound, SQLAlchemyError
from sqlalchemy.orm import Session

from pydantic_models import Film, Genre, Mpa
from ..exceptions import NotFoundError
from .models import FilmTable

logger = logging.getLogger(__name__)

FILM_COLUMNS = (
    "select f.film_id, f.name, f.description, f.release_date, f.duration, f.mpa_id, "
    "m.name as mpa_name from films as f "
    "join mpa as m on f.mpa_id = m.mpa_id"
)

ALL_FILMS_SQL = text(FILM_COLUMNS + " order by f.film_id")

FILM_BY_ID_SQL = text(FILM_COLUMNS + " where f.film_id = :film_id")

UPDATE_FILM_SQL = text(
    "update films set "
    "name = :name, description = :description, release_date = :release_date, "
    "duration = :duration, mpa_id = :mpa_id "
    "where film_id = :film_id"
).bindparams(bindparam("release_date", type_=Date))

POPULAR_FILMS_SQL = text(
    FILM_COLUMNS + " "
    "left join "
    "(select film_id, count(user_id) as likes_qty from likes "
    "group by film_id order by likes_qty desc, film_id limit :count) "
    "as top on f.film_id = top.film_id "
    "order by coalesce(top.likes_qty, 0) desc, f.film_id "
    "limit :count"
)

ADD_GENRE_SQL = text("insert into film_genre(film_id, genre_id) values (:film_id, :genre_id)")
DELETE_GENRE_SQL = text("delete from film_genre where (film_id = :film_id and genre_id = :genre_id)")
CLEAR_GENRES_SQL = text("delete from film_genre where film_id = :film_id")

LIKES_BY_FILM_SQL = text("select user_id from likes where film_id = :film_id")
ADD_LIKE_SQL = text("insert into likes(film_id, user_id) values (:film_id, :user_id)")
DELETE_LIKE_SQL = text("delete from likes where (film_id = :film_id and user_id = :user_id)")


def get_all_films(db: Session) -> List[Film]:
    return [map_row_to_film(row) for row in db.execute(ALL_FILMS_SQL)]


def find_film_by_id(db: Session, film_id: int) -> Film:
    try:
        row = db.execute(FILM_BY_ID_SQL, {"film_id": film_id}).one()
    except NoResultFound:
        logger.warning(f"Movie with id {film_id} not found")
        raise NotFoundError("Movie", film_id)
    return map_row_to_film(row)


def add_film(db: Session, film: Film) -> Film:
    if not film.name:
        raise ValueError("Title missing")

    try:
        result = db.execute(
            insert(FilmTable.__table__).values(
                name=film.name,
                description=film.description,
                release_date=film.release_date,
                duration=film.duration,
                mpa_id=film.mpa.id if film.mpa else None,
            )
        )
        film_id = result.inserted_primary_key[0]
        for genre_id in _distinct_genre_ids(film.genres):
            db.execute(ADD_GENRE_SQL, {"film_id": film_id, "genre_id": genre_id})
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Ошибка при сохранении фильма '{film.name}': {e}")
        raise

    film.id = film_id
    logger.debug(f"Movie {film.model_dump_json(by_alias=True)} saved")
    return film


def update_film(db: Session, film: Film) -> Film:
    try:
        result = db.execute(
            UPDATE_FILM_SQL,
            {
                "name": film.name,
                "description": film.description,
                "release_date": film.release_date,
                "duration": film.duration,
                "mpa_id": film.mpa.id if film.mpa else None,
                "film_id": film.id,
            },
        )
        if result.rowcount == 0:
            db.rollback()
            logger.warning(f"Movie with id {film.id} not found")
            raise NotFoundError("Movie", film.id)

        # жанры заменяются целиком в той же транзакции
        db.execute(CLEAR_GENRES_SQL, {"film_id": film.id})
        for genre_id in _distinct_genre_ids(film.genres):
            db.execute(ADD_GENRE_SQL, {"film_id": film.id, "genre_id": genre_id})
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Ошибка при обновлении фильма {film.id}: {e}")
        raise

    logger.info(f"Movie {film.id} updated")
    return film


def get_popular_films(db: Session, count: int) -> List[Film]:
    if count <= 0:
        return []
    return [map_row_to_film(row) for row in db.execute(POPULAR_FILMS_SQL, {"count": count})]


def add_genre_to_film(db: Session, film_id: int, genre_id: int):
    _execute_and_commit(db, ADD_GENRE_SQL, {"film_id": film_id, "genre_id": genre_id})


def delete_genre_from_film(db: Session, film_id: int, genre_id: int):
    _execute_and_commit(db, DELETE_GENRE_SQL, {"film_id": film_id, "genre_id": genre_id})


def clear_genres_from_film(db: Session, film_id: int):
    _execute_and_commit(db, CLEAR_GENRES_SQL, {"film_id": film_id})


def get_likes_by_film(db: Session, film_id: int) -> List[int]:
    return [row.user_id for row in db.execute(LIKES_BY_FILM_SQL, {"film_id": film_id})]


def add_like(db: Session, film_id: int, user_id: int):
    _execute_and_commit(db, ADD_LIKE_SQL, {"film_id": film_id, "user_id": user_id})
    logger.info(f"User {user_id} liked movie {film_id}")


def delete_like(db: Session, film_id: int, user_id: int):
    _execute_and_commit(db, DELETE_LIKE_SQL, {"film_id": film_id, "user_id": user_id})


def map_row_to_film(row) -> Film:
    rs = row._mapping
    mpa = Mpa(id=rs["mpa_id"], name=rs["mpa_name"])
    return Film(
        id=rs["film_id"],
        name=rs["name"],
        description=rs["description"],
        release_date=rs["release_date"],
        duration=rs["duration"],
        mpa=mpa,
    )


def _distinct_genre_ids(genres: List[Genre]) -> List[int]:
    return list(dict.fromkeys(genre.id for genre in genres))


def _execute_and_commit(db: Session, statement, params: dict):
    try:
        result = db.execute(statement, params)
        db.commit()
        return result
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Ошибка при выполнении запроса: {e}")
        raise
