# app/crud/cargo.py
from typing import List, Optional

from sqlalchemy.orm import Session

from app.crud.common import aplicar_cambios, confirmar, lanzar_si_hay_errores, validar_unicos
from app.models.cargo import Cargo
from app.schemas.cargo import CargoCreate, CargoUpdate

CAMPOS_UNICOS = {"nombre": "El cargo ya existe"}


def get_cargo(db: Session, cargo_id: int) -> Optional[Cargo]:
    return db.query(Cargo).filter(Cargo.id == cargo_id).first()


def list_cargos(db: Session) -> List[Cargo]:
    return db.query(Cargo).order_by(Cargo.nombre).all()


def create_cargo(db: Session, data: CargoCreate) -> Cargo:
    valores = data.model_dump()
    errores = {}
    validar_unicos(db, Cargo, valores, CAMPOS_UNICOS, errores)
    lanzar_si_hay_errores(errores)

    obj = Cargo(**valores)
    db.add(obj)
    confirmar(db, CAMPOS_UNICOS)
    db.refresh(obj)
    return obj


def update_cargo(db: Session, cargo_id: int, data: CargoUpdate) -> Optional[Cargo]:
    cargo = get_cargo(db, cargo_id)
    if not cargo:
        return None

    cambios = data.model_dump(exclude_unset=True)
    errores = {}
    validar_unicos(db, Cargo, cambios, CAMPOS_UNICOS, errores, excluir_id=cargo_id)
    lanzar_si_hay_errores(errores)

    aplicar_cambios(cargo, cambios)
    confirmar(db, CAMPOS_UNICOS)
    db.refresh(cargo)
    return cargo


def delete_cargo(db: Session, cargo_id: int) -> bool:
    cargo = get_cargo(db, cargo_id)
    if not cargo:
        return False
    db.delete(cargo)
    db.commit()
    return True
