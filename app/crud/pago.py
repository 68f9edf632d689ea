# app/crud/pago.py
from typing import List, Optional

from sqlalchemy.orm import Session

from app.crud.common import (
    aplicar_cambios,
    confirmar,
    lanzar_si_hay_errores,
    validar_existentes,
    validar_unicos,
)
from app.models.empresa import Empresa
from app.models.mantenimiento import Mantenimiento
from app.models.pago import Pago
from app.schemas.pago import PagoCreate, PagoUpdate

CAMPOS_UNICOS = {"codigo_pago": "El código de pago ya está registrado"}
REFERENCIAS = {
    "mantenimiento_id": (Mantenimiento, "El mantenimiento seleccionado no existe"),
    "empresa_id": (Empresa, "La empresa seleccionada no existe"),
}


def get_pago(db: Session, pago_id: int) -> Optional[Pago]:
    return db.query(Pago).filter(Pago.id == pago_id).first()


def list_pagos(db: Session) -> List[Pago]:
    return db.query(Pago).order_by(Pago.id).all()


def create_pago(db: Session, data: PagoCreate) -> Pago:
    valores = data.model_dump()
    errores = {}
    validar_unicos(db, Pago, valores, CAMPOS_UNICOS, errores)
    validar_existentes(db, valores, REFERENCIAS, errores)
    lanzar_si_hay_errores(errores)

    obj = Pago(**valores)
    db.add(obj)
    confirmar(db, CAMPOS_UNICOS)
    db.refresh(obj)
    return obj


def update_pago(db: Session, pago_id: int, data: PagoUpdate) -> Optional[Pago]:
    pago = get_pago(db, pago_id)
    if not pago:
        return None

    cambios = data.model_dump(exclude_unset=True)
    errores = {}
    validar_unicos(db, Pago, cambios, CAMPOS_UNICOS, errores, excluir_id=pago_id)
    validar_existentes(db, cambios, REFERENCIAS, errores)
    lanzar_si_hay_errores(errores)

    aplicar_cambios(pago, cambios)
    confirmar(db, CAMPOS_UNICOS)
    db.refresh(pago)
    return pago


def delete_pago(db: Session, pago_id: int) -> bool:
    pago = get_pago(db, pago_id)
    if not pago:
        return False
    db.delete(pago)
    db.commit()
    return True
