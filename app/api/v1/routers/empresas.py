# app/api/v1/routers/empresas.py
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundException
from app.core.security import get_current_usuario
from app.crud import empresa as crud_empresa
from app.db.session import get_db
from app.schemas.common import ErrorResponse, MessageResponse
from app.schemas.empresa import EmpresaConConteo, EmpresaCreate, EmpresaRead, EmpresaUpdate
from app.utils.logger import logger

router = APIRouter(tags=["Empresas"])


@router.get("/", response_model=List[EmpresaRead], summary="Listar empresas")
def list_all(db: Session = Depends(get_db), current_user=Depends(get_current_usuario)):
    return crud_empresa.list_empresas(db)


@router.get(
    "/mas-solicitudes",
    response_model=EmpresaConConteo,
    responses={404: {"model": ErrorResponse}},
    summary="Empresa con más solicitudes",
    description="En caso de empate se devuelve la empresa registrada primero.",
)
def mas_solicitudes(db: Session = Depends(get_db), current_user=Depends(get_current_usuario)):
    resultado = crud_empresa.empresa_mas_solicitudes(db)
    if resultado is None:
        raise NotFoundException("No hay empresas registradas")
    empresa, conteo = resultado
    return EmpresaConConteo(
        **EmpresaRead.model_validate(empresa).model_dump(), solicitudes_count=conteo
    )


@router.get("/sin-solicitudes", response_model=List[EmpresaRead], summary="Empresas sin solicitudes")
def sin_solicitudes(db: Session = Depends(get_db), current_user=Depends(get_current_usuario)):
    return crud_empresa.empresas_sin_solicitudes(db)


@router.post(
    "/",
    response_model=EmpresaRead,
    status_code=status.HTTP_201_CREATED,
    responses={422: {"model": ErrorResponse}},
    summary="Crear empresa",
)
def create(payload: EmpresaCreate, db: Session = Depends(get_db), current_user=Depends(get_current_usuario)):
    empresa = crud_empresa.create_empresa(db, payload)
    logger.info("Empresa creada", extra={"id": empresa.id, "nit": empresa.nit, "usuario_id": current_user.id})
    return empresa


@router.get(
    "/{empresa_id}",
    response_model=EmpresaRead,
    responses={404: {"model": ErrorResponse}},
    summary="Obtener empresa",
)
def get_one(empresa_id: int, db: Session = Depends(get_db), current_user=Depends(get_current_usuario)):
    empresa = crud_empresa.get_empresa(db, empresa_id)
    if not empresa:
        raise NotFoundException("Empresa no encontrada")
    return empresa


@router.put(
    "/{empresa_id}",
    response_model=EmpresaRead,
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
    summary="Actualizar empresa",
)
def update(
    empresa_id: int,
    payload: EmpresaUpdate,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_usuario),
):
    empresa = crud_empresa.update_empresa(db, empresa_id, payload)
    if not empresa:
        raise NotFoundException("Empresa no encontrada")
    logger.info("Empresa actualizada", extra={"id": empresa.id, "usuario_id": current_user.id})
    return empresa


@router.delete(
    "/{empresa_id}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Eliminar empresa",
)
def delete(empresa_id: int, db: Session = Depends(get_db), current_user=Depends(get_current_usuario)):
    if not crud_empresa.delete_empresa(db, empresa_id):
        raise NotFoundException("Empresa no encontrada")
    logger.info("Empresa eliminada", extra={"id": empresa_id, "usuario_id": current_user.id})
    return {"message": "Empresa eliminada exitosamente"}
