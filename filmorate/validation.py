# filmorate/validation.py
"""
Проверки входных данных на границе системы.

Каждая функция возвращает список нарушений; пустой список означает,
что значение можно передавать в репозиторий.
"""
from datetime import date
from typing import List, Optional

from email_validator import EmailNotValidError, validate_email

from pydantic_models import Film, User

MAX_DESCRIPTION_LENGTH = 200
CINEMA_BIRTHDAY = date(1895, 12, 28)


def validate_user(user: User, today: Optional[date] = None) -> List[str]:
    today = today or date.today()
    violations = []

    if user.id is not None and user.id < 0:
        violations.append("id must not be negative")

    if user.login is None:
        violations.append("login must not be empty")
    elif not user.login.strip() or any(ch.isspace() for ch in user.login):
        violations.append("login must not be blank or contain spaces")

    if user.email is not None:
        try:
            validate_email(user.email, check_deliverability=False)
        except EmailNotValidError:
            violations.append("email is not a valid address")

    if user.birthday is None:
        violations.append("birthday must not be empty")
    elif user.birthday >= today:
        violations.append("birthday must be in the past")

    return violations


def validate_film(film: Film) -> List[str]:
    violations = []

    if film.id is not None and film.id < 0:
        violations.append("id must not be negative")
    if not film.name or not film.name.strip():
        violations.append("name must not be empty")
    if film.description is not None and len(film.description) > MAX_DESCRIPTION_LENGTH:
        violations.append(f"description must be at most {MAX_DESCRIPTION_LENGTH} characters")
    if film.release_date is not None and film.release_date < CINEMA_BIRTHDAY:
        violations.append(f"release date must not be before {CINEMA_BIRTHDAY.isoformat()}")
    if film.duration is not None and film.duration <= 0:
        violations.append("duration must be positive")
    if film.mpa is None:
        violations.append("mpa must not be empty")

    return violations
