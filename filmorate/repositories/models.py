# filmorate/repositories/models.py
from sqlalchemy import Column, Integer, String, Date, ForeignKey
from sqlalchemy.orm import declarative_base

BaseDeclaration = declarative_base()


class MpaTable(BaseDeclaration):
    __tablename__ = "mpa"

    mpa_id = Column(Integer, primary_key=True)
    name = Column(String(16), unique=True, nullable=False)


class GenreTable(BaseDeclaration):
    __tablename__ = "genres"

    genre_id = Column(Integer, primary_key=True)
    name = Column(String(64), unique=True, nullable=False)


class FilmTable(BaseDeclaration):
    __tablename__ = "films"

    film_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(String(200), nullable=True)
    release_date = Column(Date, nullable=True)
    duration = Column(Integer, nullable=True)
    mpa_id = Column(Integer, ForeignKey("mpa.mpa_id"), nullable=False)


class FilmGenreTable(BaseDeclaration):
    __tablename__ = "film_genre"

    # составной ключ не даёт привязать жанр к фильму дважды
    film_id = Column(Integer, ForeignKey("films.film_id", ondelete="CASCADE"), primary_key=True)
    genre_id = Column(Integer, ForeignKey("genres.genre_id"), primary_key=True)


class UserTable(BaseDeclaration):
    __tablename__ = "users"

    user_id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), nullable=True)
    login = Column(String(64), nullable=False)
    name = Column(String(255), nullable=True)
    birthday = Column(Date, nullable=False)


class LikeTable(BaseDeclaration):
    __tablename__ = "likes"

    film_id = Column(Integer, ForeignKey("films.film_id", ondelete="CASCADE"), primary_key=True)
    user_id = Column(Integer, ForeignKey("users.user_id", ondelete="CASCADE"), primary_key=True)


class FriendshipTable(BaseDeclaration):
    __tablename__ = "friendships"

    # user_id добавил friend_id в друзья, обратная запись не подразумевается
    user_id = Column(Integer, ForeignKey("users.user_id", ondelete="CASCADE"), primary_key=True)
    friend_id = Column(Integer, ForeignKey("users.user_id", ondelete="CASCADE"), primary_key=True)
