# app/api/v1/routers/mantenimientos.py
"""
Router de mantenimientos: CRUD y consultas de costo, fechas y estadísticas.

Las rutas fijas se declaran antes de `/{mantenimiento_id}`.
"""
from datetime import date
from decimal import Decimal
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.exceptions import NotFoundException
from app.core.security import get_current_usuario
from app.crud import mantenimiento as crud_mantenimiento
from app.db.session import get_db
from app.schemas.common import ErrorResponse, MessageResponse
from app.schemas.mantenimiento import (
    ConteoResponse,
    EstadisticasMantenimientosResponse,
    MantenimientoCreate,
    MantenimientoRead,
    MantenimientosCostososResponse,
    MantenimientoUpdate,
)
from app.utils.logger import logger

router = APIRouter(tags=["Mantenimientos"])


@router.get("/", response_model=List[MantenimientoRead], summary="Listar mantenimientos")
def list_all(db: Session = Depends(get_db), current_user=Depends(get_current_usuario)):
    return crud_mantenimiento.list_mantenimientos(db)


@router.get(
    "/estadisticas",
    response_model=EstadisticasMantenimientosResponse,
    summary="Estadísticas de mantenimientos",
    description="Un mantenimiento se considera completado cuando su fecha de entrega ya llegó.",
)
def estadisticas(db: Session = Depends(get_db), current_user=Depends(get_current_usuario)):
    return {
        "message": "Estadísticas obtenidas exitosamente",
        "data": crud_mantenimiento.estadisticas_mantenimientos(db),
    }


@router.get("/buscar", response_model=List[MantenimientoRead], summary="Buscar mantenimientos")
def buscar(
    termino: str = Query(..., min_length=2, description="Texto en código, nombre o descripción"),
    db: Session = Depends(get_db),
    current_user=Depends(get_current_usuario),
):
    return crud_mantenimiento.buscar_mantenimientos(db, termino)


@router.get(
    "/rango-fechas",
    response_model=List[MantenimientoRead],
    responses={422: {"model": ErrorResponse}},
    summary="Mantenimientos por rango de fecha de entrega",
)
def rango_fechas(
    fecha_inicio: date = Query(..., alias="fechaInicio"),
    fecha_fin: date = Query(..., alias="fechaFin"),
    db: Session = Depends(get_db),
    current_user=Depends(get_current_usuario),
):
    return crud_mantenimiento.mantenimientos_por_rango(db, fecha_inicio, fecha_fin)


@router.get(
    "/costosos",
    response_model=MantenimientosCostososResponse,
    summary="Mantenimientos con costo mayor al umbral",
)
def costosos(
    umbral: Optional[Decimal] = Query(None, ge=0),
    db: Session = Depends(get_db),
    current_user=Depends(get_current_usuario),
):
    if umbral is None:
        umbral = settings.costo_mantenimiento_alto
    mantenimientos = crud_mantenimiento.mantenimientos_costosos(db, umbral)
    return {
        "data": mantenimientos,
        "count": len(mantenimientos),
        "costo_total": sum((m.costo for m in mantenimientos), Decimal("0")),
    }


@router.get(
    "/retroexcavadoras",
    response_model=ConteoResponse,
    summary="Cantidad de mantenimientos de retroexcavadoras",
)
def retroexcavadoras(db: Session = Depends(get_db), current_user=Depends(get_current_usuario)):
    return {"count": crud_mantenimiento.contar_retroexcavadoras(db)}


@router.post(
    "/",
    response_model=MantenimientoRead,
    status_code=status.HTTP_201_CREATED,
    responses={422: {"model": ErrorResponse}},
    summary="Crear mantenimiento",
)
def create(
    payload: MantenimientoCreate,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_usuario),
):
    mantenimiento = crud_mantenimiento.create_mantenimiento(db, payload)
    logger.info(
        "Mantenimiento creado",
        extra={"id": mantenimiento.id, "codigo": mantenimiento.codigo, "usuario_id": current_user.id},
    )
    return mantenimiento


@router.get(
    "/{mantenimiento_id}",
    response_model=MantenimientoRead,
    responses={404: {"model": ErrorResponse}},
    summary="Obtener mantenimiento",
)
def get_one(mantenimiento_id: int, db: Session = Depends(get_db), current_user=Depends(get_current_usuario)):
    mantenimiento = crud_mantenimiento.get_mantenimiento(db, mantenimiento_id)
    if not mantenimiento:
        raise NotFoundException("Mantenimiento no encontrado")
    return mantenimiento


@router.put(
    "/{mantenimiento_id}",
    response_model=MantenimientoRead,
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
    summary="Actualizar mantenimiento",
)
def update(
    mantenimiento_id: int,
    payload: MantenimientoUpdate,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_usuario),
):
    mantenimiento = crud_mantenimiento.update_mantenimiento(db, mantenimiento_id, payload)
    if not mantenimiento:
        raise NotFoundException("Mantenimiento no encontrado")
    logger.info("Mantenimiento actualizado", extra={"id": mantenimiento.id, "usuario_id": current_user.id})
    return mantenimiento


@router.delete(
    "/{mantenimiento_id}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
    summary="Eliminar mantenimiento",
    description="No se permite eliminar un mantenimiento que tenga pagos registrados.",
)
def delete(mantenimiento_id: int, db: Session = Depends(get_db), current_user=Depends(get_current_usuario)):
    if not crud_mantenimiento.delete_mantenimiento(db, mantenimiento_id):
        raise NotFoundException("Mantenimiento no encontrado")
    logger.info("Mantenimiento eliminado", extra={"id": mantenimiento_id, "usuario_id": current_user.id})
    return {"message": "Mantenimiento eliminado exitosamente"}
