import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from filmorate.db import get_db
from filmorate.exceptions import NotFoundError
from filmorate.repositories.catalog_repository import (
    get_genres_by_film,
    find_mpa_by_id,
    find_genre_by_id,
)
from filmorate.repositories.film_repository import (
    get_all_films,
    find_film_by_id,
    add_film,
    update_film,
    get_popular_films,
    add_like,
    delete_like,
)
from filmorate.repositories.user_repository import find_user_by_id
from filmorate.validation import validate_film
from pydantic_models import Film, ViolationsResponse

logger = logging.getLogger(__name__)

film_router = APIRouter(
    prefix="/films",
    tags=["Films"],
    responses={
        400: {"model": ViolationsResponse},
        404: {"description": "Not found"},
    },
)


def with_genres(db: Session, film: Film) -> Film:
    # жанры не подтягиваются запросами фильмов, догружаем отдельно
    film.genres = get_genres_by_film(db, film.id)
    return film


def check_film(db: Session, film: Film):
    violations = validate_film(film)
    if violations:
        logger.warning(f"Film validation failed: {violations}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=violations)
    try:
        find_mpa_by_id(db, film.mpa.id)
        for genre in film.genres:
            find_genre_by_id(db, genre.id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@film_router.get("", response_model=List[Film])
async def get_films(db: Session = Depends(get_db)):
    return [with_genres(db, film) for film in get_all_films(db)]


@film_router.get("/popular", response_model=List[Film])
async def get_popular(
        count: int = Query(10, ge=1, description="Сколько фильмов вернуть"),
        db: Session = Depends(get_db),
):
    return [with_genres(db, film) for film in get_popular_films(db, count)]


@film_router.get("/{film_id}", response_model=Film)
async def get_film(film_id: int, db: Session = Depends(get_db)):
    try:
        return with_genres(db, find_film_by_id(db, film_id))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@film_router.post("", response_model=Film, status_code=status.HTTP_201_CREATED)
async def create_film(film: Film, db: Session = Depends(get_db)):
    check_film(db, film)
    try:
        saved = add_film(db, film)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=[str(e)])
    except IntegrityError as e:
        logger.error(f"Integrity error occurred: {e}")
        raise HTTPException(status_code=409, detail="Database integrity error")
    return with_genres(db, saved)


@film_router.put("", response_model=Film)
async def change_film(film: Film, db: Session = Depends(get_db)):
    if film.id is None:
        raise HTTPException(status_code=400, detail=["id must not be empty"])
    check_film(db, film)
    try:
        updated = update_film(db, film)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except IntegrityError as e:
        logger.error(f"Integrity error occurred: {e}")
        raise HTTPException(status_code=409, detail="Database integrity error")
    return with_genres(db, updated)


@film_router.put("/{film_id}/like/{user_id}")
async def like_film(film_id: int, user_id: int, db: Session = Depends(get_db)):
    try:
        find_film_by_id(db, film_id)
        find_user_by_id(db, user_id)
        add_like(db, film_id, user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except IntegrityError:
        raise HTTPException(status_code=409, detail="Like already exists")
    return {"status": "success"}


@film_router.delete("/{film_id}/like/{user_id}")
async def unlike_film(film_id: int, user_id: int, db: Session = Depends(get_db)):
    try:
        find_film_by_id(db, film_id)
        find_user_by_id(db, user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    delete_like(db, film_id, user_id)
    return {"status": "success"}
