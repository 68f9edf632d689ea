from contextlib import asynccontextmanager
from fastapi import FastAPI

from app.db.base import Base
from app.db.session import engine, SessionLocal
from app.db.init_db import create_default_admin
from app.utils.logger import logger
from app.core.config import settings


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Maneja startup/shutdown de la app.
    """
    # --- Startup ---
    logger.info("Iniciando aplicación Maquinaria Backend (entorno=%s)", settings.environment)

    if settings.environment == "development":
        Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        create_default_admin(db)
    finally:
        db.close()

    logger.info("Startup completado correctamente")

    yield

    # --- Shutdown ---
    engine.dispose()
    logger.info("Aplicación cerrada correctamente")
