# app/api/v1/routers/maquinas.py
from decimal import Decimal
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.exceptions import NotFoundException
from app.core.security import get_current_usuario
from app.crud import maquina as crud_maquina
from app.db.session import get_db
from app.schemas.common import ErrorResponse, MessageResponse
from app.schemas.maquina import MaquinaCreate, MaquinaRead, MaquinaUpdate
from app.schemas.resumen import MantenimientoResumen
from app.utils.logger import logger

router = APIRouter(tags=["Máquinas"])


@router.get("/", response_model=List[MaquinaRead], summary="Listar máquinas")
def list_all(db: Session = Depends(get_db), current_user=Depends(get_current_usuario)):
    return crud_maquina.list_maquinas(db)


@router.get(
    "/pesadas-costosas",
    response_model=List[MaquinaRead],
    summary="Máquinas pesadas con mantenimientos costosos",
    description=(
        "Máquinas de categoría pesada con al menos un mantenimiento cuyo costo supera el umbral. "
        "Cada máquina incluye solo los mantenimientos que lo superan."
    ),
)
def pesadas_costosas(
    umbral: Optional[Decimal] = Query(None, ge=0),
    db: Session = Depends(get_db),
    current_user=Depends(get_current_usuario),
):
    if umbral is None:
        umbral = settings.costo_mantenimiento_alto
    return [
        MaquinaRead.model_validate(maquina).model_copy(
            update={"mantenimientos": [MantenimientoResumen.model_validate(m) for m in costosos]}
        )
        for maquina, costosos in crud_maquina.maquinas_pesadas_costosas(db, umbral)
    ]


@router.post(
    "/",
    response_model=MaquinaRead,
    status_code=status.HTTP_201_CREATED,
    responses={422: {"model": ErrorResponse}},
    summary="Crear máquina",
)
def create(payload: MaquinaCreate, db: Session = Depends(get_db), current_user=Depends(get_current_usuario)):
    maquina = crud_maquina.create_maquina(db, payload)
    logger.info("Máquina creada", extra={"id": maquina.id, "usuario_id": current_user.id})
    return maquina


@router.get(
    "/{maquina_id}",
    response_model=MaquinaRead,
    responses={404: {"model": ErrorResponse}},
    summary="Obtener máquina",
)
def get_one(maquina_id: int, db: Session = Depends(get_db), current_user=Depends(get_current_usuario)):
    maquina = crud_maquina.get_maquina(db, maquina_id)
    if not maquina:
        raise NotFoundException("Máquina no encontrada")
    return maquina


@router.put(
    "/{maquina_id}",
    response_model=MaquinaRead,
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
    summary="Actualizar máquina",
)
def update(
    maquina_id: int,
    payload: MaquinaUpdate,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_usuario),
):
    maquina = crud_maquina.update_maquina(db, maquina_id, payload)
    if not maquina:
        raise NotFoundException("Máquina no encontrada")
    logger.info("Máquina actualizada", extra={"id": maquina.id, "usuario_id": current_user.id})
    return maquina


@router.delete(
    "/{maquina_id}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
    summary="Eliminar máquina",
    description="No se permite eliminar una máquina cuyos mantenimientos tengan pagos registrados.",
)
def delete(maquina_id: int, db: Session = Depends(get_db), current_user=Depends(get_current_usuario)):
    if not crud_maquina.delete_maquina(db, maquina_id):
        raise NotFoundException("Máquina no encontrada")
    logger.info("Máquina eliminada", extra={"id": maquina_id, "usuario_id": current_user.id})
    return {"message": "Máquina eliminada exitosamente"}
