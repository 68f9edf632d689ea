# app/api/v1/routers/solicitudes.py
"""
Router de solicitudes de maquinaria.

Las máquinas de una solicitud viajan como lista de pares
`{"maquinaId", "cantidad"}`; crear o actualizar reemplaza el conjunto completo.
"""
from typing import List

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundException
from app.core.security import get_current_usuario
from app.db.session import get_db
from app.models.usuario import Usuario
from app.schemas.common import ErrorResponse, MessageResponse
from app.schemas.solicitud import (
    CambioEstadoRequest,
    ReporteMensualResponse,
    ReporteSolicitudesResponse,
    SolicitudCreate,
    SolicitudDetalle,
    SolicitudesEmpleadoResponse,
    SolicitudRead,
    SolicitudUpdate,
    TotalMaquinasEmpresa,
)
from app.services import solicitud_service

router = APIRouter(tags=["Solicitudes"])


@router.get("/", response_model=List[SolicitudDetalle], summary="Listar solicitudes")
def list_all(db: Session = Depends(get_db), current_user=Depends(get_current_usuario)):
    return solicitud_service.list_solicitudes(db)


# -----------------------------------------------------
# Reportes
# -----------------------------------------------------
@router.get(
    "/total-maquinas-empresa/{nombre_empresa}",
    response_model=TotalMaquinasEmpresa,
    responses={404: {"model": ErrorResponse}},
    summary="Total de máquinas solicitadas por una empresa",
)
def total_maquinas_empresa(
    nombre_empresa: str,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_usuario),
):
    return solicitud_service.total_maquinas_empresa(db, nombre_empresa)


@router.get(
    "/empleado/{documento}",
    response_model=SolicitudesEmpleadoResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Solicitudes de un empleado por documento",
)
def solicitudes_empleado(
    documento: str,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_usuario),
):
    return solicitud_service.solicitudes_por_empleado(db, documento)


@router.get(
    "/reporte-mensual",
    response_model=ReporteMensualResponse,
    summary="Solicitudes de un mes",
    description="Filtra por año y mes de la fecha en que se registró la solicitud.",
)
def reporte_mensual(
    anio: int = Query(..., ge=1900, le=9999),
    mes: int = Query(..., ge=1, le=12),
    db: Session = Depends(get_db),
    current_user=Depends(get_current_usuario),
):
    solicitudes = solicitud_service.reporte_mensual(db, anio, mes)
    return {"anio": anio, "mes": mes, "count": len(solicitudes), "data": solicitudes}


@router.get(
    "/reporte-octubre-2023",
    response_model=ReporteMensualResponse,
    summary="Solicitudes de octubre de 2023",
)
def reporte_octubre_2023(db: Session = Depends(get_db), current_user=Depends(get_current_usuario)):
    solicitudes = solicitud_service.reporte_mensual(db, 2023, 10)
    return {"anio": 2023, "mes": 10, "count": len(solicitudes), "data": solicitudes}


@router.get(
    "/reporte",
    response_model=ReporteSolicitudesResponse,
    summary="Reporte detallado de solicitudes",
)
def reporte(db: Session = Depends(get_db), current_user=Depends(get_current_usuario)):
    solicitudes = solicitud_service.reporte_detallado(db)
    return {"count": len(solicitudes), "data": solicitudes}


# -----------------------------------------------------
# CRUD
# -----------------------------------------------------
@router.post(
    "/",
    response_model=SolicitudRead,
    status_code=status.HTTP_201_CREATED,
    responses={422: {"model": ErrorResponse}},
    summary="Crear solicitud",
)
def create(
    payload: SolicitudCreate,
    db: Session = Depends(get_db),
    current_user: Usuario = Depends(get_current_usuario),
):
    return solicitud_service.crear_solicitud(db, current_user, payload)


@router.get(
    "/{solicitud_id}",
    response_model=SolicitudDetalle,
    responses={404: {"model": ErrorResponse}},
    summary="Obtener solicitud",
)
def get_one(solicitud_id: int, db: Session = Depends(get_db), current_user=Depends(get_current_usuario)):
    solicitud = solicitud_service.get_solicitud(db, solicitud_id)
    if not solicitud:
        raise NotFoundException("Solicitud no encontrada")
    return solicitud


@router.put(
    "/{solicitud_id}",
    response_model=SolicitudRead,
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
    summary="Actualizar solicitud",
    description="Reemplaza los datos de la solicitud y su conjunto completo de máquinas.",
)
def update(
    solicitud_id: int,
    payload: SolicitudUpdate,
    db: Session = Depends(get_db),
    current_user: Usuario = Depends(get_current_usuario),
):
    solicitud = solicitud_service.actualizar_solicitud(db, current_user, solicitud_id, payload)
    if not solicitud:
        raise NotFoundException("Solicitud no encontrada")
    return solicitud


@router.patch(
    "/{solicitud_id}/estado",
    response_model=SolicitudRead,
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
    summary="Cambiar estado de la solicitud",
)
def cambiar_estado(
    solicitud_id: int,
    payload: CambioEstadoRequest,
    db: Session = Depends(get_db),
    current_user: Usuario = Depends(get_current_usuario),
):
    solicitud = solicitud_service.cambiar_estado(db, current_user, solicitud_id, payload.estado)
    if not solicitud:
        raise NotFoundException("Solicitud no encontrada")
    return solicitud


@router.delete(
    "/{solicitud_id}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
    summary="Eliminar solicitud",
    description="No se permite eliminar una solicitud cuyos mantenimientos tengan pagos registrados.",
)
def delete(
    solicitud_id: int,
    db: Session = Depends(get_db),
    current_user: Usuario = Depends(get_current_usuario),
):
    if not solicitud_service.eliminar_solicitud(db, current_user, solicitud_id):
        raise NotFoundException("Solicitud no encontrada")
    return {"message": "Solicitud eliminada exitosamente"}
