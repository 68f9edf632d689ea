# app/services/solicitud_service.py
"""
Servicio de solicitudes de maquinaria.

Maneja el ciclo de vida de una solicitud:
- Creación con estado `pendiente` y fecha de solicitud = ahora
- Reemplazo completo del conjunto de máquinas asignadas (máquina -> cantidad)
- Cambio de estado (cualquier estado puede pasar a cualquier otro)
- Eliminación (primero asignaciones y empleados, luego la cabecera)
- Reportes derivados por empresa, empleado y mes

La cabecera y sus asignaciones se confirman en un único commit.
"""
from datetime import datetime, timezone
from typing import Dict, List, Optional

from sqlalchemy import extract, func
from sqlalchemy.orm import Session

from app.core.exceptions import DependencyConflictException, NotFoundException
from app.crud.common import confirmar, lanzar_si_hay_errores, validar_existentes
from app.crud.empleado import get_empleado_by_documento
from app.crud.empresa import get_empresa_by_nombre
from app.crud.mantenimiento import contar_pagos
from app.models.empleado import Empleado
from app.models.empresa import Empresa
from app.models.mantenimiento import Mantenimiento
from app.models.maquina import Maquina
from app.models.solicitud import EstadoSolicitud, Solicitud, SolicitudMaquina
from app.models.usuario import Usuario
from app.schemas.solicitud import AsignacionMaquina, SolicitudBase, SolicitudCreate, SolicitudUpdate
from app.utils.logger import logger

REFERENCIAS = {"empresa_id": (Empresa, "La empresa seleccionada no existe")}
CAMPOS_NO_CABECERA = {"maquinas", "empleado_ids", "estado"}


# -----------------------------------------------------
# Validación de referencias
# -----------------------------------------------------
def _validar_referencias(db: Session, data: SolicitudBase) -> None:
    errores: Dict[str, List[str]] = {}
    validar_existentes(db, data.model_dump(include={"empresa_id"}), REFERENCIAS, errores)

    ids_maquinas = [a.maquina_id for a in data.maquinas]
    existentes = {
        fila[0] for fila in db.query(Maquina.id).filter(Maquina.id.in_(ids_maquinas)).all()
    }
    for i, asignacion in enumerate(data.maquinas):
        if asignacion.maquina_id not in existentes:
            errores.setdefault(f"maquinas.{i}.maquinaId", []).append(
                "La máquina seleccionada no existe"
            )

    if data.empleado_ids:
        existentes = {
            fila[0]
            for fila in db.query(Empleado.id).filter(Empleado.id.in_(data.empleado_ids)).all()
        }
        for i, empleado_id in enumerate(data.empleado_ids):
            if empleado_id not in existentes:
                errores.setdefault(f"empleadoIds.{i}", []).append(
                    "El empleado seleccionado no existe"
                )

    lanzar_si_hay_errores(errores)


# -----------------------------------------------------
# Asignaciones
# -----------------------------------------------------
def reemplazar_asignaciones(solicitud: Solicitud, maquinas: List[AsignacionMaquina]) -> None:
    """
    Deja en la solicitud exactamente el conjunto (máquina, cantidad) recibido.

    Las asignaciones existentes se actualizan en sitio, las ausentes se
    eliminan y las nuevas se agregan. No hace commit.
    """
    deseadas = {a.maquina_id: a.cantidad for a in maquinas}
    actuales = {a.maquina_id: a for a in solicitud.asignaciones}

    for maquina_id, asignacion in actuales.items():
        if maquina_id not in deseadas:
            solicitud.asignaciones.remove(asignacion)

    for maquina_id, cantidad in deseadas.items():
        if maquina_id in actuales:
            actuales[maquina_id].cantidad = cantidad
        else:
            solicitud.asignaciones.append(SolicitudMaquina(maquina_id=maquina_id, cantidad=cantidad))


def _reemplazar_empleados(db: Session, solicitud: Solicitud, empleado_ids: Optional[List[int]]) -> None:
    if empleado_ids is None:
        return
    solicitud.empleados = (
        db.query(Empleado).filter(Empleado.id.in_(empleado_ids)).all() if empleado_ids else []
    )


# -----------------------------------------------------
# CRUD
# -----------------------------------------------------
def get_solicitud(db: Session, solicitud_id: int) -> Optional[Solicitud]:
    return db.query(Solicitud).filter(Solicitud.id == solicitud_id).first()


def list_solicitudes(db: Session) -> List[Solicitud]:
    return db.query(Solicitud).order_by(Solicitud.id).all()


def crear_solicitud(db: Session, usuario: Usuario, data: SolicitudCreate) -> Solicitud:
    _validar_referencias(db, data)

    solicitud = Solicitud(
        **data.model_dump(exclude=CAMPOS_NO_CABECERA),
        usuario_id=usuario.id,
        fecha_solicitud=datetime.now(timezone.utc),
        estado=EstadoSolicitud.pendiente,
    )
    db.add(solicitud)
    reemplazar_asignaciones(solicitud, data.maquinas)
    _reemplazar_empleados(db, solicitud, data.empleado_ids)
    confirmar(db)
    db.refresh(solicitud)

    logger.info(
        "Solicitud creada",
        extra={
            "solicitud_id": solicitud.id,
            "usuario_id": usuario.id,
            "maquinas": len(data.maquinas),
        },
    )
    return solicitud


def actualizar_solicitud(
    db: Session, usuario: Usuario, solicitud_id: int, data: SolicitudUpdate
) -> Optional[Solicitud]:
    solicitud = get_solicitud(db, solicitud_id)
    if not solicitud:
        return None

    _validar_referencias(db, data)

    for campo, valor in data.model_dump(exclude_unset=True, exclude=CAMPOS_NO_CABECERA).items():
        setattr(solicitud, campo, valor)
    if data.estado is not None:
        solicitud.estado = data.estado

    reemplazar_asignaciones(solicitud, data.maquinas)
    _reemplazar_empleados(db, solicitud, data.empleado_ids)
    confirmar(db)
    db.refresh(solicitud)

    logger.info(
        "Solicitud actualizada",
        extra={"solicitud_id": solicitud.id, "usuario_id": usuario.id},
    )
    return solicitud


def cambiar_estado(
    db: Session, usuario: Usuario, solicitud_id: int, estado: EstadoSolicitud
) -> Optional[Solicitud]:
    solicitud = get_solicitud(db, solicitud_id)
    if not solicitud:
        return None

    anterior = solicitud.estado
    solicitud.estado = estado
    db.commit()
    db.refresh(solicitud)

    logger.info(
        "Estado de solicitud cambiado",
        extra={
            "solicitud_id": solicitud.id,
            "usuario_id": usuario.id,
            "estado_anterior": anterior.value,
            "estado_nuevo": estado.value,
        },
    )
    return solicitud


def eliminar_solicitud(db: Session, usuario: Usuario, solicitud_id: int) -> bool:
    solicitud = get_solicitud(db, solicitud_id)
    if not solicitud:
        return False

    pagos = contar_pagos(db, Mantenimiento.solicitud_id == solicitud_id)
    if pagos:
        logger.warning(
            "Eliminación de solicitud bloqueada por pagos asociados",
            extra={"solicitud_id": solicitud_id, "pagos": pagos},
        )
        raise DependencyConflictException(
            "No se puede eliminar la solicitud porque tiene mantenimientos con pagos asociados"
        )

    solicitud.asignaciones.clear()
    solicitud.empleados = []
    db.flush()
    db.delete(solicitud)
    db.commit()

    logger.info("Solicitud eliminada", extra={"solicitud_id": solicitud_id, "usuario_id": usuario.id})
    return True


# -----------------------------------------------------
# Reportes
# -----------------------------------------------------
def total_maquinas_empresa(db: Session, nombre_empresa: str) -> dict:
    empresa = get_empresa_by_nombre(db, nombre_empresa)
    if not empresa:
        raise NotFoundException("Empresa no encontrada")

    total = (
        db.query(func.coalesce(func.sum(SolicitudMaquina.cantidad), 0))
        .join(Solicitud, SolicitudMaquina.solicitud_id == Solicitud.id)
        .filter(Solicitud.empresa_id == empresa.id)
        .scalar()
    )
    return {"empresa": empresa.nombre_empresa, "total_maquinas": int(total or 0)}


def solicitudes_por_empleado(db: Session, documento: str) -> dict:
    empleado = get_empleado_by_documento(db, documento)
    if not empleado:
        raise NotFoundException("Empleado no encontrado")

    solicitudes = (
        db.query(Solicitud)
        .join(Solicitud.empleados)
        .filter(Empleado.id == empleado.id)
        .order_by(Solicitud.fecha_solicitud, Solicitud.id)
        .all()
    )
    return {"empleado": empleado, "solicitudes": solicitudes}


def reporte_mensual(db: Session, anio: int, mes: int) -> List[Solicitud]:
    return (
        db.query(Solicitud)
        .filter(
            extract("year", Solicitud.fecha_solicitud) == anio,
            extract("month", Solicitud.fecha_solicitud) == mes,
        )
        .order_by(Solicitud.fecha_solicitud, Solicitud.id)
        .all()
    )


def reporte_detallado(db: Session) -> List[Solicitud]:
    return db.query(Solicitud).order_by(Solicitud.fecha_solicitud.desc(), Solicitud.id.desc()).all()
