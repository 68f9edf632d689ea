import logging
from typing import Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.exceptions import AppException

logger = logging.getLogger("maquinaria_backend")


def _campo_desde_loc(loc) -> str:
    partes = [str(p) for p in loc]
    if partes and partes[0] in ("body", "query", "path"):
        partes = partes[1:]
    return ".".join(partes) or "body"


def errores_por_campo(errors) -> Dict[str, List[str]]:
    """Agrupa los errores de Pydantic en un mapa campo -> mensajes."""
    agrupados: Dict[str, List[str]] = {}
    for err in errors:
        mensaje = err.get("msg", "Valor inválido")
        # Los ValueError de los validadores llegan como "Value error, <mensaje>"
        if mensaje.startswith("Value error, "):
            mensaje = mensaje[len("Value error, "):]
        agrupados.setdefault(_campo_desde_loc(err.get("loc", ())), []).append(mensaje)
    return agrupados


def register_error_handlers(app: FastAPI):
    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException):
        logger.warning("Error %s en %s - %s", exc.status_code, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        logger.error("Error HTTP %s en %s - %s", exc.status_code, request.url.path, exc.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errores = errores_por_campo(exc.errors())
        logger.info("Error de validación en %s - %s", request.url.path, errores)
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"message": "Error de validación", "errors": errores},
        )

    @app.exception_handler(SQLAlchemyError)
    async def database_exception_handler(request: Request, exc: SQLAlchemyError):
        logger.exception("Error de base de datos en %s", request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": f"Error inesperado en la base de datos: {exc}"},
        )
