from datetime import date

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List, Set


class Mpa(BaseModel):
    id: int
    name: Optional[str] = None


class Genre(BaseModel):
    id: int
    name: Optional[str] = None


class Film(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    release_date: Optional[date] = Field(None, alias="releaseDate")
    duration: Optional[int] = None
    mpa: Optional[Mpa] = None
    genres: List[Genre] = Field(default_factory=list)


class User(BaseModel):
    # ограничения полей проверяет filmorate.validation.validate_user
    id: Optional[int] = None
    email: Optional[str] = None
    login: Optional[str] = None
    name: Optional[str] = None
    birthday: Optional[date] = None
    friends: Set[int] = Field(default_factory=set)


class ViolationsResponse(BaseModel):
    detail: List[str]
