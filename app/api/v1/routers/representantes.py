# app/api/v1/routers/representantes.py
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundException
from app.core.security import get_current_usuario
from app.crud import representante as crud_representante
from app.db.session import get_db
from app.schemas.common import ErrorResponse, MessageResponse
from app.schemas.representante import RepresentanteCreate, RepresentanteRead, RepresentanteUpdate
from app.utils.logger import logger

router = APIRouter(tags=["Representantes"])


@router.get("/", response_model=List[RepresentanteRead], summary="Listar representantes")
def list_all(db: Session = Depends(get_db), current_user=Depends(get_current_usuario)):
    return crud_representante.list_representantes(db)


@router.get(
    "/sin-solicitudes",
    response_model=List[RepresentanteRead],
    summary="Representantes de empresas sin solicitudes",
)
def sin_solicitudes(db: Session = Depends(get_db), current_user=Depends(get_current_usuario)):
    return crud_representante.representantes_sin_solicitudes(db)


@router.post(
    "/",
    response_model=RepresentanteRead,
    status_code=status.HTTP_201_CREATED,
    responses={422: {"model": ErrorResponse}},
    summary="Crear representante",
)
def create(
    payload: RepresentanteCreate,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_usuario),
):
    representante = crud_representante.create_representante(db, payload)
    logger.info("Representante creado", extra={"id": representante.id, "usuario_id": current_user.id})
    return representante


@router.get(
    "/{representante_id}",
    response_model=RepresentanteRead,
    responses={404: {"model": ErrorResponse}},
    summary="Obtener representante",
)
def get_one(representante_id: int, db: Session = Depends(get_db), current_user=Depends(get_current_usuario)):
    representante = crud_representante.get_representante(db, representante_id)
    if not representante:
        raise NotFoundException("Representante no encontrado")
    return representante


@router.put(
    "/{representante_id}",
    response_model=RepresentanteRead,
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
    summary="Actualizar representante",
)
def update(
    representante_id: int,
    payload: RepresentanteUpdate,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_usuario),
):
    representante = crud_representante.update_representante(db, representante_id, payload)
    if not representante:
        raise NotFoundException("Representante no encontrado")
    return representante


@router.delete(
    "/{representante_id}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Eliminar representante",
)
def delete(representante_id: int, db: Session = Depends(get_db), current_user=Depends(get_current_usuario)):
    if not crud_representante.delete_representante(db, representante_id):
        raise NotFoundException("Representante no encontrado")
    logger.info("Representante eliminado", extra={"id": representante_id, "usuario_id": current_user.id})
    return {"message": "Representante eliminado exitosamente"}
