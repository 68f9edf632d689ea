# app/crud/mantenimiento.py
"""
CRUD y consultas de mantenimientos.

Un mantenimiento con pagos registrados no se puede eliminar.
"""
from datetime import date
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from app.core.exceptions import DependencyConflictException
from app.crud.common import (
    agregar_error,
    aplicar_cambios,
    confirmar,
    lanzar_si_hay_errores,
    validar_existentes,
    validar_unicos,
)
from app.models.mantenimiento import Mantenimiento
from app.models.maquina import Maquina
from app.models.pago import Pago
from app.models.solicitud import Solicitud
from app.schemas.mantenimiento import MantenimientoCreate, MantenimientoUpdate
from app.utils.logger import logger

CAMPOS_UNICOS = {"codigo": "El código ya está registrado"}
REFERENCIAS = {
    "maquina_id": (Maquina, "La máquina seleccionada no existe"),
    "solicitud_id": (Solicitud, "La solicitud seleccionada no existe"),
}


def get_mantenimiento(db: Session, mantenimiento_id: int) -> Optional[Mantenimiento]:
    return db.query(Mantenimiento).filter(Mantenimiento.id == mantenimiento_id).first()


def list_mantenimientos(db: Session) -> List[Mantenimiento]:
    return db.query(Mantenimiento).order_by(Mantenimiento.fecha_entrega.desc(), Mantenimiento.id).all()


def create_mantenimiento(db: Session, data: MantenimientoCreate) -> Mantenimiento:
    valores = data.model_dump()
    errores = {}
    validar_unicos(db, Mantenimiento, valores, CAMPOS_UNICOS, errores)
    validar_existentes(db, valores, REFERENCIAS, errores)
    lanzar_si_hay_errores(errores)

    obj = Mantenimiento(**valores)
    db.add(obj)
    confirmar(db, CAMPOS_UNICOS)
    db.refresh(obj)
    return obj


def update_mantenimiento(
    db: Session, mantenimiento_id: int, data: MantenimientoUpdate
) -> Optional[Mantenimiento]:
    mantenimiento = get_mantenimiento(db, mantenimiento_id)
    if not mantenimiento:
        return None

    cambios = data.model_dump(exclude_unset=True)
    errores = {}
    validar_unicos(db, Mantenimiento, cambios, CAMPOS_UNICOS, errores, excluir_id=mantenimiento_id)
    validar_existentes(db, cambios, REFERENCIAS, errores)
    lanzar_si_hay_errores(errores)

    aplicar_cambios(mantenimiento, cambios)
    confirmar(db, CAMPOS_UNICOS)
    db.refresh(mantenimiento)
    return mantenimiento


def contar_pagos(db: Session, *criterios) -> int:
    """Pagos de los mantenimientos que cumplen `criterios`."""
    return (
        db.query(func.count(Pago.id))
        .join(Mantenimiento, Pago.mantenimiento_id == Mantenimiento.id)
        .filter(*criterios)
        .scalar()
    )


def delete_mantenimiento(db: Session, mantenimiento_id: int) -> bool:
    mantenimiento = get_mantenimiento(db, mantenimiento_id)
    if not mantenimiento:
        return False

    pagos = contar_pagos(db, Mantenimiento.id == mantenimiento_id)
    if pagos:
        logger.warning(
            "Eliminación bloqueada por pagos asociados",
            extra={"mantenimiento_id": mantenimiento_id, "pagos": pagos},
        )
        raise DependencyConflictException(
            "No se puede eliminar el mantenimiento porque tiene pagos asociados"
        )

    db.delete(mantenimiento)
    db.commit()
    return True


# -----------------------------------------------------
# Consultas
# -----------------------------------------------------
def estadisticas_mantenimientos(db: Session) -> dict:
    hoy = date.today()
    total = db.query(func.count(Mantenimiento.id)).scalar() or 0
    completados = (
        db.query(func.count(Mantenimiento.id)).filter(Mantenimiento.fecha_entrega <= hoy).scalar() or 0
    )
    costo_total = Decimal(str(db.query(func.coalesce(func.sum(Mantenimiento.costo), 0)).scalar() or 0))
    costo_promedio = (costo_total / total) if total else Decimal("0")

    return {
        "total_mantenimientos": total,
        "mantenimientos_completados": completados,
        "mantenimientos_pendientes": total - completados,
        "costo_total": costo_total.quantize(Decimal("0.01")),
        "costo_promedio": costo_promedio.quantize(Decimal("0.01")),
        "porcentaje_completados": round(completados / total * 100, 2) if total else 0.0,
    }


def buscar_mantenimientos(db: Session, termino: str) -> List[Mantenimiento]:
    patron = f"%{termino}%"
    return (
        db.query(Mantenimiento)
        .filter(
            or_(
                Mantenimiento.codigo.ilike(patron),
                Mantenimiento.nombre.ilike(patron),
                Mantenimiento.descripcion.ilike(patron),
            )
        )
        .order_by(Mantenimiento.fecha_entrega.desc(), Mantenimiento.id)
        .all()
    )


def mantenimientos_por_rango(db: Session, fecha_inicio: date, fecha_fin: date) -> List[Mantenimiento]:
    if fecha_fin < fecha_inicio:
        errores = {}
        agregar_error(errores, "fecha_fin", "La fecha fin debe ser igual o posterior a la fecha inicio")
        lanzar_si_hay_errores(errores)

    return (
        db.query(Mantenimiento)
        .filter(Mantenimiento.fecha_entrega.between(fecha_inicio, fecha_fin))
        .order_by(Mantenimiento.fecha_entrega, Mantenimiento.id)
        .all()
    )


def mantenimientos_costosos(db: Session, umbral: Decimal) -> List[Mantenimiento]:
    return (
        db.query(Mantenimiento)
        .filter(Mantenimiento.costo > umbral)
        .order_by(Mantenimiento.costo.desc(), Mantenimiento.id)
        .all()
    )


def contar_retroexcavadoras(db: Session) -> int:
    return (
        db.query(func.count(Mantenimiento.id))
        .join(Mantenimiento.maquina)
        .filter(Maquina.tipo_maquina.ilike("%retroexcavadora%"))
        .scalar()
        or 0
    )
