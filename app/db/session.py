# app/db/session.py
from typing import Generator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from app.core.config import settings


@event.listens_for(Engine, "connect")
def _activar_foreign_keys_sqlite(dbapi_connection, connection_record):
    # SQLite ignora las FK (y sus ON DELETE) si no se activan por conexión
    if dbapi_connection.__class__.__module__.startswith("sqlite3"):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# Engine de conexión
engine = create_engine(
    settings.database_url,
    pool_pre_ping=True,
    future=True,
)

# Sesión de base de datos
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """
    Dependency de FastAPI para obtener una sesión de base de datos.
    Garantiza que la sesión se cierre al finalizar.
    """
    db: Session = SessionLocal()
    try:
        yield db
    finally:
        db.close()
