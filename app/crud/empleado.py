# app/crud/empleado.py
from typing import List, Optional

from sqlalchemy.orm import Session

from app.crud.common import (
    aplicar_cambios,
    confirmar,
    lanzar_si_hay_errores,
    validar_existentes,
    validar_unicos,
)
from app.models.cargo import Cargo
from app.models.empleado import Empleado
from app.schemas.empleado import EmpleadoCreate, EmpleadoUpdate

CAMPOS_UNICOS = {"documento": "El documento ya está registrado"}
REFERENCIAS = {"cargo_id": (Cargo, "El cargo seleccionado no existe")}


def get_empleado(db: Session, empleado_id: int) -> Optional[Empleado]:
    return db.query(Empleado).filter(Empleado.id == empleado_id).first()


def get_empleado_by_documento(db: Session, documento: str) -> Optional[Empleado]:
    return db.query(Empleado).filter(Empleado.documento == documento).first()


def list_empleados(db: Session) -> List[Empleado]:
    return db.query(Empleado).order_by(Empleado.apellido, Empleado.nombre).all()


def list_empleados_ordenados(db: Session) -> List[Empleado]:
    """Empleados cuyo cargo contiene 'empleado', por apellido y nombre."""
    return (
        db.query(Empleado)
        .join(Empleado.cargo)
        .filter(Cargo.nombre.ilike("%empleado%"))
        .order_by(Empleado.apellido, Empleado.nombre)
        .all()
    )


def create_empleado(db: Session, data: EmpleadoCreate) -> Empleado:
    valores = data.model_dump()
    errores = {}
    validar_unicos(db, Empleado, valores, CAMPOS_UNICOS, errores)
    validar_existentes(db, valores, REFERENCIAS, errores)
    lanzar_si_hay_errores(errores)

    obj = Empleado(**valores)
    db.add(obj)
    confirmar(db, CAMPOS_UNICOS)
    db.refresh(obj)
    return obj


def update_empleado(db: Session, empleado_id: int, data: EmpleadoUpdate) -> Optional[Empleado]:
    empleado = get_empleado(db, empleado_id)
    if not empleado:
        return None

    cambios = data.model_dump(exclude_unset=True)
    errores = {}
    validar_unicos(db, Empleado, cambios, CAMPOS_UNICOS, errores, excluir_id=empleado_id)
    validar_existentes(db, cambios, REFERENCIAS, errores)
    lanzar_si_hay_errores(errores)

    aplicar_cambios(empleado, cambios)
    confirmar(db, CAMPOS_UNICOS)
    db.refresh(empleado)
    return empleado


def delete_empleado(db: Session, empleado_id: int) -> bool:
    empleado = get_empleado(db, empleado_id)
    if not empleado:
        return False
    db.delete(empleado)
    db.commit()
    return True
