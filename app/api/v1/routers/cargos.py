# app/api/v1/routers/cargos.py
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundException
from app.core.security import get_current_usuario
from app.crud import cargo as crud_cargo
from app.db.session import get_db
from app.schemas.cargo import CargoCreate, CargoRead, CargoUpdate
from app.schemas.common import ErrorResponse, MessageResponse
from app.utils.logger import logger

router = APIRouter(tags=["Cargos"])


@router.get("/", response_model=List[CargoRead], summary="Listar cargos")
def list_all(db: Session = Depends(get_db), current_user=Depends(get_current_usuario)):
    return crud_cargo.list_cargos(db)


@router.post(
    "/",
    response_model=CargoRead,
    status_code=status.HTTP_201_CREATED,
    responses={422: {"model": ErrorResponse}},
    summary="Crear cargo",
)
def create(payload: CargoCreate, db: Session = Depends(get_db), current_user=Depends(get_current_usuario)):
    cargo = crud_cargo.create_cargo(db, payload)
    logger.info("Cargo creado", extra={"id": cargo.id, "usuario_id": current_user.id})
    return cargo


@router.get(
    "/{cargo_id}",
    response_model=CargoRead,
    responses={404: {"model": ErrorResponse}},
    summary="Obtener cargo",
)
def get_one(cargo_id: int, db: Session = Depends(get_db), current_user=Depends(get_current_usuario)):
    cargo = crud_cargo.get_cargo(db, cargo_id)
    if not cargo:
        raise NotFoundException("Cargo no encontrado")
    return cargo


@router.put(
    "/{cargo_id}",
    response_model=CargoRead,
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
    summary="Actualizar cargo",
)
def update(
    cargo_id: int,
    payload: CargoUpdate,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_usuario),
):
    cargo = crud_cargo.update_cargo(db, cargo_id, payload)
    if not cargo:
        raise NotFoundException("Cargo no encontrado")
    logger.info("Cargo actualizado", extra={"id": cargo.id, "usuario_id": current_user.id})
    return cargo


@router.delete(
    "/{cargo_id}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Eliminar cargo",
)
def delete(cargo_id: int, db: Session = Depends(get_db), current_user=Depends(get_current_usuario)):
    if not crud_cargo.delete_cargo(db, cargo_id):
        raise NotFoundException("Cargo no encontrado")
    logger.info("Cargo eliminado", extra={"id": cargo_id, "usuario_id": current_user.id})
    return {"message": "Cargo eliminado exitosamente"}
