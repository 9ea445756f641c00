# filmorate/db.py
import logging
import os

from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker, Session

from .repositories.models import BaseDeclaration

logger = logging.getLogger(__name__)

# Database configuration
DB_USER = os.getenv("DB_USER", "postgres")
DB_PASSWORD = os.getenv("DB_PASSWORD", "postgres")
DB_HOST = os.getenv("DB_HOST", "localhost")
DB_PORT = os.getenv("DB_PORT", "5432")
DB_NAME = os.getenv("DB_NAME", "filmorate")

DATABASE_URL = os.getenv(
    "DATABASE_URL",
    f"postgresql://{DB_USER}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{DB_NAME}",
)
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"

if DATABASE_URL.startswith("postgres://"):
    DATABASE_URL = DATABASE_URL.replace("postgres://", "postgresql://", 1)

engine = create_engine(DATABASE_URL, echo=SQL_ECHO)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

MPA_RATINGS = {
    1: "G",
    2: "PG",
    3: "PG-13",
    4: "R",
    5: "NC-17",
}

GENRES = {
    1: "Comedy",
    2: "Drama",
    3: "Cartoon",
    4: "Thriller",
    5: "Documentary",
    6: "Action",
}


def seed_reference_data(db: Session):
    """
    Заполняет справочники mpa и genres, если записей ещё нет.
    """
    existing_mpa = {row.mpa_id for row in db.execute(text("select mpa_id from mpa"))}
    for mpa_id, name in MPA_RATINGS.items():
        if mpa_id not in existing_mpa:
            db.execute(
                text("insert into mpa(mpa_id, name) values (:mpa_id, :name)"),
                {"mpa_id": mpa_id, "name": name},
            )

    existing_genres = {row.genre_id for row in db.execute(text("select genre_id from genres"))}
    for genre_id, name in GENRES.items():
        if genre_id not in existing_genres:
            db.execute(
                text("insert into genres(genre_id, name) values (:genre_id, :name)"),
                {"genre_id": genre_id, "name": name},
            )
    db.commit()


def init_db(bind=engine):
    logger.info("Initializing database...")
    BaseDeclaration.metadata.create_all(bind=bind)
    db = Session(bind=bind)
    try:
        seed_reference_data(db)
    finally:
        db.close()
    logger.info("Database tables created successfully.")


# Dependency for FastAPI routes
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
