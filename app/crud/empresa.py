# app/crud/empresa.py
from typing import List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.crud.common import aplicar_cambios, confirmar, lanzar_si_hay_errores, validar_unicos
from app.models.empresa import Empresa
from app.models.solicitud import Solicitud
from app.schemas.empresa import EmpresaCreate, EmpresaUpdate

CAMPOS_UNICOS = {"nit": "El NIT ya está registrado"}


def get_empresa(db: Session, empresa_id: int) -> Optional[Empresa]:
    return db.query(Empresa).filter(Empresa.id == empresa_id).first()


def get_empresa_by_nombre(db: Session, nombre: str) -> Optional[Empresa]:
    return db.query(Empresa).filter(Empresa.nombre_empresa == nombre).first()


def list_empresas(db: Session) -> List[Empresa]:
    return db.query(Empresa).order_by(Empresa.nombre_empresa).all()


def create_empresa(db: Session, data: EmpresaCreate) -> Empresa:
    valores = data.model_dump()
    errores = {}
    validar_unicos(db, Empresa, valores, CAMPOS_UNICOS, errores)
    lanzar_si_hay_errores(errores)

    obj = Empresa(**valores)
    db.add(obj)
    confirmar(db, CAMPOS_UNICOS)
    db.refresh(obj)
    return obj


def update_empresa(db: Session, empresa_id: int, data: EmpresaUpdate) -> Optional[Empresa]:
    empresa = get_empresa(db, empresa_id)
    if not empresa:
        return None

    cambios = data.model_dump(exclude_unset=True)
    errores = {}
    validar_unicos(db, Empresa, cambios, CAMPOS_UNICOS, errores, excluir_id=empresa_id)
    lanzar_si_hay_errores(errores)

    aplicar_cambios(empresa, cambios)
    confirmar(db, CAMPOS_UNICOS)
    db.refresh(empresa)
    return empresa


def delete_empresa(db: Session, empresa_id: int) -> bool:
    empresa = get_empresa(db, empresa_id)
    if not empresa:
        return False
    db.delete(empresa)
    db.commit()
    return True


# -----------------------------------------------------
# Consultas de reporte
# -----------------------------------------------------
def empresa_mas_solicitudes(db: Session) -> Optional[Tuple[Empresa, int]]:
    """
    Empresa con más solicitudes. En empate gana la de menor id
    (la primera registrada).
    """
    conteo = func.count(Solicitud.id).label("solicitudes_count")
    fila = (
        db.query(Empresa, conteo)
        .outerjoin(Solicitud, Solicitud.empresa_id == Empresa.id)
        .group_by(Empresa.id)
        .order_by(conteo.desc(), Empresa.id)
        .first()
    )
    if fila is None:
        return None
    return fila[0], fila[1]


def empresas_sin_solicitudes(db: Session) -> List[Empresa]:
    return (
        db.query(Empresa)
        .filter(~Empresa.solicitudes.any())
        .order_by(Empresa.id)
        .all()
    )
