# app/api/v1/routers/categorias_maquinarias.py
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundException
from app.core.security import get_current_usuario
from app.crud import categoria_maquinaria as crud_categoria
from app.db.session import get_db
from app.schemas.categoria_maquinaria import (
    CategoriaMaquinariaCreate,
    CategoriaMaquinariaRead,
    CategoriaMaquinariaUpdate,
)
from app.schemas.common import ErrorResponse, MessageResponse
from app.utils.logger import logger

router = APIRouter(tags=["Categorías de maquinaria"])


@router.get("/", response_model=List[CategoriaMaquinariaRead], summary="Listar categorías")
def list_all(db: Session = Depends(get_db), current_user=Depends(get_current_usuario)):
    return crud_categoria.list_categorias(db)


@router.post(
    "/",
    response_model=CategoriaMaquinariaRead,
    status_code=status.HTTP_201_CREATED,
    responses={422: {"model": ErrorResponse}},
    summary="Crear categoría",
)
def create(
    payload: CategoriaMaquinariaCreate,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_usuario),
):
    categoria = crud_categoria.create_categoria(db, payload)
    logger.info("Categoría creada", extra={"id": categoria.id, "usuario_id": current_user.id})
    return categoria


@router.get(
    "/{categoria_id}",
    response_model=CategoriaMaquinariaRead,
    responses={404: {"model": ErrorResponse}},
    summary="Obtener categoría",
)
def get_one(categoria_id: int, db: Session = Depends(get_db), current_user=Depends(get_current_usuario)):
    categoria = crud_categoria.get_categoria(db, categoria_id)
    if not categoria:
        raise NotFoundException("Categoría no encontrada")
    return categoria


@router.put(
    "/{categoria_id}",
    response_model=CategoriaMaquinariaRead,
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
    summary="Actualizar categoría",
)
def update(
    categoria_id: int,
    payload: CategoriaMaquinariaUpdate,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_usuario),
):
    categoria = crud_categoria.update_categoria(db, categoria_id, payload)
    if not categoria:
        raise NotFoundException("Categoría no encontrada")
    return categoria


@router.delete(
    "/{categoria_id}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Eliminar categoría",
)
def delete(categoria_id: int, db: Session = Depends(get_db), current_user=Depends(get_current_usuario)):
    if not crud_categoria.delete_categoria(db, categoria_id):
        raise NotFoundException("Categoría no encontrada")
    logger.info("Categoría eliminada", extra={"id": categoria_id, "usuario_id": current_user.id})
    return {"message": "Categoría eliminada exitosamente"}
