from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from filmorate.db import get_db
from filmorate.exceptions import NotFoundError
from filmorate.repositories.catalog_repository import (
    get_all_mpa,
    find_mpa_by_id,
    get_all_genres,
    find_genre_by_id,
)
from pydantic_models import Genre, Mpa

# Справочники только на чтение
catalog_router = APIRouter(
    tags=["Catalog"],
    responses={404: {"description": "Not found"}},
)


@catalog_router.get("/mpa", response_model=List[Mpa])
async def get_ratings(db: Session = Depends(get_db)):
    return get_all_mpa(db)


@catalog_router.get("/mpa/{mpa_id}", response_model=Mpa)
async def get_rating(mpa_id: int, db: Session = Depends(get_db)):
    try:
        return find_mpa_by_id(db, mpa_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@catalog_router.get("/genres", response_model=List[Genre])
async def get_genres(db: Session = Depends(get_db)):
    return get_all_genres(db)


@catalog_router.get("/genres/{genre_id}", response_model=Genre)
async def get_genre(genre_id: int, db: Session = Depends(get_db)):
    try:
        return find_genre_by_id(db, genre_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
