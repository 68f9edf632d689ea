# app/api/v1/routers/empleados.py
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundException
from app.core.security import get_current_usuario
from app.crud import empleado as crud_empleado
from app.db.session import get_db
from app.schemas.common import ErrorResponse, MessageResponse
from app.schemas.empleado import EmpleadoCreate, EmpleadoRead, EmpleadoUpdate
from app.utils.logger import logger

router = APIRouter(tags=["Empleados"])


@router.get("/", response_model=List[EmpleadoRead], summary="Listar empleados")
def list_all(db: Session = Depends(get_db), current_user=Depends(get_current_usuario)):
    return crud_empleado.list_empleados(db)


@router.get(
    "/ordenados",
    response_model=List[EmpleadoRead],
    summary="Empleados con cargo 'empleado'",
    description="Empleados cuyo cargo contiene la palabra 'empleado', ordenados por apellido y nombre.",
)
def ordenados(db: Session = Depends(get_db), current_user=Depends(get_current_usuario)):
    return crud_empleado.list_empleados_ordenados(db)


@router.post(
    "/",
    response_model=EmpleadoRead,
    status_code=status.HTTP_201_CREATED,
    responses={422: {"model": ErrorResponse}},
    summary="Crear empleado",
)
def create(payload: EmpleadoCreate, db: Session = Depends(get_db), current_user=Depends(get_current_usuario)):
    empleado = crud_empleado.create_empleado(db, payload)
    logger.info("Empleado creado", extra={"id": empleado.id, "usuario_id": current_user.id})
    return empleado


@router.get(
    "/{empleado_id}",
    response_model=EmpleadoRead,
    responses={404: {"model": ErrorResponse}},
    summary="Obtener empleado",
)
def get_one(empleado_id: int, db: Session = Depends(get_db), current_user=Depends(get_current_usuario)):
    empleado = crud_empleado.get_empleado(db, empleado_id)
    if not empleado:
        raise NotFoundException("Empleado no encontrado")
    return empleado


@router.put(
    "/{empleado_id}",
    response_model=EmpleadoRead,
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
    summary="Actualizar empleado",
)
def update(
    empleado_id: int,
    payload: EmpleadoUpdate,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_usuario),
):
    empleado = crud_empleado.update_empleado(db, empleado_id, payload)
    if not empleado:
        raise NotFoundException("Empleado no encontrado")
    logger.info("Empleado actualizado", extra={"id": empleado.id, "usuario_id": current_user.id})
    return empleado


@router.delete(
    "/{empleado_id}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Eliminar empleado",
)
def delete(empleado_id: int, db: Session = Depends(get_db), current_user=Depends(get_current_usuario)):
    if not crud_empleado.delete_empleado(db, empleado_id):
        raise NotFoundException("Empleado no encontrado")
    logger.info("Empleado eliminado", extra={"id": empleado_id, "usuario_id": current_user.id})
    return {"message": "Empleado eliminado exitosamente"}
