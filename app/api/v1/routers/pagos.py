# app/api/v1/routers/pagos.py
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundException
from app.core.security import get_current_usuario
from app.crud import pago as crud_pago
from app.db.session import get_db
from app.schemas.common import ErrorResponse, MessageResponse
from app.schemas.pago import PagoCreate, PagoRead, PagoUpdate
from app.utils.logger import logger

router = APIRouter(tags=["Pagos"])


@router.get("/", response_model=List[PagoRead], summary="Listar pagos")
def list_all(db: Session = Depends(get_db), current_user=Depends(get_current_usuario)):
    return crud_pago.list_pagos(db)


@router.post(
    "/",
    response_model=PagoRead,
    status_code=status.HTTP_201_CREATED,
    responses={422: {"model": ErrorResponse}},
    summary="Registrar pago",
)
def create(payload: PagoCreate, db: Session = Depends(get_db), current_user=Depends(get_current_usuario)):
    pago = crud_pago.create_pago(db, payload)
    logger.info(
        "Pago registrado",
        extra={"id": pago.id, "codigo_pago": pago.codigo_pago, "monto": str(pago.monto)},
    )
    return pago


@router.get(
    "/{pago_id}",
    response_model=PagoRead,
    responses={404: {"model": ErrorResponse}},
    summary="Obtener pago",
)
def get_one(pago_id: int, db: Session = Depends(get_db), current_user=Depends(get_current_usuario)):
    pago = crud_pago.get_pago(db, pago_id)
    if not pago:
        raise NotFoundException("Pago no encontrado")
    return pago


@router.put(
    "/{pago_id}",
    response_model=PagoRead,
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
    summary="Actualizar pago",
)
def update(
    pago_id: int,
    payload: PagoUpdate,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_usuario),
):
    pago = crud_pago.update_pago(db, pago_id, payload)
    if not pago:
        raise NotFoundException("Pago no encontrado")
    logger.info("Pago actualizado", extra={"id": pago.id, "usuario_id": current_user.id})
    return pago


@router.delete(
    "/{pago_id}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Eliminar pago",
)
def delete(pago_id: int, db: Session = Depends(get_db), current_user=Depends(get_current_usuario)):
    if not crud_pago.delete_pago(db, pago_id):
        raise NotFoundException("Pago no encontrado")
    logger.info("Pago eliminado", extra={"id": pago_id, "usuario_id": current_user.id})
    return {"message": "Pago eliminado exitosamente"}
