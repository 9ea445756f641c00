import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from filmorate.db import get_db
from filmorate.exceptions import NotFoundError
from filmorate.repositories.user_repository import (
    get_all_users,
    find_user_by_id,
    add_user,
    update_user,
    add_friend,
    delete_friend,
    get_friends,
    get_common_friends,
)
from filmorate.validation import validate_user
from pydantic_models import User, ViolationsResponse

logger = logging.getLogger(__name__)

user_router = APIRouter(
    prefix="/users",
    tags=["Users"],
    responses={
        400: {"model": ViolationsResponse},
        404: {"description": "Not found"},
    },
)


def check_user(user: User):
    violations = validate_user(user)
    if violations:
        logger.warning(f"User validation failed: {violations}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=violations)
    # пустое имя заменяется логином
    if not user.name or not user.name.strip():
        user.name = user.login


@user_router.get("", response_model=List[User])
async def get_users(db: Session = Depends(get_db)):
    return get_all_users(db)


@user_router.get("/{user_id}", response_model=User)
async def get_user(user_id: int, db: Session = Depends(get_db)):
    try:
        return find_user_by_id(db, user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@user_router.post("", response_model=User, status_code=status.HTTP_201_CREATED)
async def create_user(user: User, db: Session = Depends(get_db)):
    check_user(user)
    logger.info(f"Registering new user: '{user.login}'")
    try:
        return add_user(db, user)
    except IntegrityError as e:
        logger.error(f"Integrity error occurred: {e}")
        raise HTTPException(status_code=409, detail="Database integrity error")


@user_router.put("", response_model=User)
async def change_user(user: User, db: Session = Depends(get_db)):
    if user.id is None:
        raise HTTPException(status_code=400, detail=["id must not be empty"])
    check_user(user)
    try:
        update_user(db, user)
        return find_user_by_id(db, user.id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@user_router.put("/{user_id}/friends/{friend_id}")
async def befriend(user_id: int, friend_id: int, db: Session = Depends(get_db)):
    if user_id == friend_id:
        raise HTTPException(status_code=400, detail=["user cannot befriend themselves"])
    try:
        find_user_by_id(db, user_id)
        find_user_by_id(db, friend_id)
        add_friend(db, user_id, friend_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except IntegrityError:
        raise HTTPException(status_code=409, detail="Friendship already exists")
    return {"status": "success"}


@user_router.delete("/{user_id}/friends/{friend_id}")
async def unfriend(user_id: int, friend_id: int, db: Session = Depends(get_db)):
    try:
        find_user_by_id(db, user_id)
        find_user_by_id(db, friend_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    delete_friend(db, user_id, friend_id)
    return {"status": "success"}


@user_router.get("/{user_id}/friends", response_model=List[User])
async def list_friends(user_id: int, db: Session = Depends(get_db)):
    try:
        find_user_by_id(db, user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return get_friends(db, user_id)


@user_router.get("/{user_id}/friends/common/{other_id}", response_model=List[User])
async def list_common_friends(user_id: int, other_id: int, db: Session = Depends(get_db)):
    try:
        find_user_by_id(db, user_id)
        find_user_by_id(db, other_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return get_common_friends(db, user_id, other_id)
