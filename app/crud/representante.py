# app/crud/representante.py
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
from app.models.representante import Representante
from app.schemas.representante import RepresentanteCreate, RepresentanteUpdate

CAMPOS_UNICOS = {
    "cedula": "La cédula ya está registrada",
    "email": "El email ya está registrado",
    "empresa_id": "La empresa ya tiene un representante",
}
REFERENCIAS = {"empresa_id": (Empresa, "La empresa seleccionada no existe")}


def get_representante(db: Session, representante_id: int) -> Optional[Representante]:
    return db.query(Representante).filter(Representante.id == representante_id).first()


def list_representantes(db: Session) -> List[Representante]:
    return db.query(Representante).order_by(Representante.nombre).all()


def create_representante(db: Session, data: RepresentanteCreate) -> Representante:
    valores = data.model_dump()
    errores = {}
    validar_unicos(db, Representante, valores, CAMPOS_UNICOS, errores)
    validar_existentes(db, valores, REFERENCIAS, errores)
    lanzar_si_hay_errores(errores)

    obj = Representante(**valores)
    db.add(obj)
    confirmar(db, CAMPOS_UNICOS)
    db.refresh(obj)
    return obj


def update_representante(
    db: Session, representante_id: int, data: RepresentanteUpdate
) -> Optional[Representante]:
    representante = get_representante(db, representante_id)
    if not representante:
        return None

    cambios = data.model_dump(exclude_unset=True)
    errores = {}
    validar_unicos(db, Representante, cambios, CAMPOS_UNICOS, errores, excluir_id=representante_id)
    validar_existentes(db, cambios, REFERENCIAS, errores)
    lanzar_si_hay_errores(errores)

    aplicar_cambios(representante, cambios)
    confirmar(db, CAMPOS_UNICOS)
    db.refresh(representante)
    return representante


def delete_representante(db: Session, representante_id: int) -> bool:
    representante = get_representante(db, representante_id)
    if not representante:
        return False
    db.delete(representante)
    db.commit()
    return True


def representantes_sin_solicitudes(db: Session) -> List[Representante]:
    """Representantes de empresas que no tienen solicitudes."""
    return (
        db.query(Representante)
        .join(Representante.empresa)
        .filter(~Empresa.solicitudes.any())
        .order_by(Representante.nombre)
        .all()
    )
