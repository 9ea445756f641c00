# tests/test_validation.py
from datetime import date

from filmorate.validation import validate_film, validate_user
from pydantic_models import Film, Mpa, User

TODAY = date(2024, 5, 1)


def test_valid_user_has_no_violations():
    user = User(id=0, email="neo@mail.ru", login="neo", birthday=date(1990, 1, 1))
    assert validate_user(user, today=TODAY) == []


def test_user_violations():
    user = User(id=-1, email="not-an-email", login=None, birthday=None)
    violations = validate_user(user, today=TODAY)
    assert "id must not be negative" in violations
    assert "login must not be empty" in violations
    assert "email is not a valid address" in violations
    assert "birthday must not be empty" in violations


def test_user_login_with_spaces():
    user = User(login="neo anderson", birthday=date(1990, 1, 1))
    assert validate_user(user, today=TODAY) == ["login must not be blank or contain spaces"]


def test_user_birthday_must_be_in_past():
    assert validate_user(User(login="neo", birthday=TODAY), today=TODAY) == [
        "birthday must be in the past"
    ]


def test_user_without_email_is_valid():
    assert validate_user(User(login="neo", birthday=date(1990, 1, 1)), today=TODAY) == []


def test_valid_film():
    film = Film(name="Inception", description="x" * 200, release_date=date(2010, 7, 16),
                duration=148, mpa=Mpa(id=3))
    assert validate_film(film) == []


def test_film_violations():
    film = Film(name=" ", description="x" * 201, release_date=date(1895, 12, 27), duration=0)
    assert validate_film(film) == [
        "name must not be empty",
        "description must be at most 200 characters",
        "release date must not be before 1895-12-28",
        "duration must be positive",
        "mpa must not be empty",
    ]
