# main.py

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import OperationalError

from catalog_router import catalog_router
from film_router import film_router
from filmorate.db import init_db
from user_router import user_router

logger = logging.getLogger("filmorate.main")
logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    handlers=[logging.StreamHandler()],
)

app = FastAPI(
    title="Filmorate Api",
    description="Фильмы, пользователи, лайки и друзья",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)

# Подключение роутеров
app.include_router(film_router)
app.include_router(user_router)
app.include_router(catalog_router)

# Инициализация базы данных
try:
    init_db()
except OperationalError as e:
    logger.error(f"Failed to initialize database: {e}")


@app.get("/liveness")
async def health():
    return {"status": "ok", "problems": []}
