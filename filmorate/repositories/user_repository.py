# filmorate/repositories/user_repository.py
import logging
from typing import List

from sqlalchemy import Date, bindparam, insert, text
from sqlalchemy.exc import NoResultFound, SQLAlchemyError
from sqlalchemy.orm import Session

from pydantic_models import User
from ..exceptions import NotFoundError
from .models import UserTable

logger = logging.getLogger(__name__)

USER_COLUMNS = "select u.user_id, u.email, u.login, u.name, u.birthday from users as u"

ALL_USERS_SQL = text(USER_COLUMNS + " order by u.user_id")
USER_BY_ID_SQL = text(USER_COLUMNS + " where u.user_id = :user_id")

UPDATE_USER_SQL = text(
    "update users set email = :email, login = :login, name = :name, birthday = :birthday "
    "where user_id = :user_id"
).bindparams(bindparam("birthday", type_=Date))

FRIEND_IDS_SQL = text("select friend_id from friendships where user_id = :user_id")
FRIENDS_SQL = text(
    USER_COLUMNS + " join friendships as fr on fr.friend_id = u.user_id "
    "where fr.user_id = :user_id order by u.user_id"
)
COMMON_FRIENDS_SQL = text(
    USER_COLUMNS + " "
    "join friendships as a on a.friend_id = u.user_id and a.user_id = :user_id "
    "join friendships as b on b.friend_id = u.user_id and b.user_id = :other_id "
    "order by u.user_id"
)
ADD_FRIEND_SQL = text("insert into friendships(user_id, friend_id) values (:user_id, :friend_id)")
DELETE_FRIEND_SQL = text("delete from friendships where (user_id = :user_id and friend_id = :friend_id)")


def get_all_users(db: Session) -> List[User]:
    return [map_row_to_user(row) for row in db.execute(ALL_USERS_SQL)]


def find_user_by_id(db: Session, user_id: int) -> User:
    try:
        row = db.execute(USER_BY_ID_SQL, {"user_id": user_id}).one()
    except NoResultFound:
        logger.warning(f"User with id {user_id} not found")
        raise NotFoundError("User", user_id)
    user = map_row_to_user(row)
    user.friends = {r.friend_id for r in db.execute(FRIEND_IDS_SQL, {"user_id": user_id})}
    return user


def add_user(db: Session, user: User) -> User:
    try:
        result = db.execute(
            insert(UserTable.__table__).values(
                email=user.email,
                login=user.login,
                name=user.name,
                birthday=user.birthday,
            )
        )
        user.id = result.inserted_primary_key[0]
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Ошибка при сохранении пользователя '{user.login}': {e}")
        raise
    logger.info(f"User '{user.login}' saved with id {user.id}")
    return user


def update_user(db: Session, user: User) -> User:
    try:
        result = db.execute(
            UPDATE_USER_SQL,
            {
                "email": user.email,
                "login": user.login,
                "name": user.name,
                "birthday": user.birthday,
                "user_id": user.id,
            },
        )
        if result.rowcount == 0:
            db.rollback()
            logger.warning(f"User with id {user.id} not found")
            raise NotFoundError("User", user.id)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Ошибка при обновлении пользователя {user.id}: {e}")
        raise
    return user


def add_friend(db: Session, user_id: int, friend_id: int):
    try:
        db.execute(ADD_FRIEND_SQL, {"user_id": user_id, "friend_id": friend_id})
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Не удалось добавить друга {friend_id} пользователю {user_id}: {e}")
        raise
    logger.info(f"User {user_id} added friend {friend_id}")


def delete_friend(db: Session, user_id: int, friend_id: int):
    try:
        db.execute(DELETE_FRIEND_SQL, {"user_id": user_id, "friend_id": friend_id})
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Не удалось удалить друга {friend_id} у пользователя {user_id}: {e}")
        raise


def get_friends(db: Session, user_id: int) -> List[User]:
    return [map_row_to_user(row) for row in db.execute(FRIENDS_SQL, {"user_id": user_id})]


def get_common_friends(db: Session, user_id: int, other_id: int) -> List[User]:
    rows = db.execute(COMMON_FRIENDS_SQL, {"user_id": user_id, "other_id": other_id})
    return [map_row_to_user(row) for row in rows]


def map_row_to_user(row) -> User:
    rs = row._mapping
    return User(
        id=rs["user_id"],
        email=rs["email"],
        login=rs["login"],
        name=rs["name"],
        birthday=rs["birthday"],
    )
