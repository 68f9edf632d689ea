# app/crud/maquina.py
from decimal import Decimal
from itertools import groupby
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from app.core.exceptions import DependencyConflictException
from app.crud.common import aplicar_cambios, confirmar, lanzar_si_hay_errores, validar_existentes
from app.crud.mantenimiento import contar_pagos
from app.models.categoria_maquinaria import CategoriaMaquinaria, TipoMaquinaria
from app.models.empresa import Empresa
from app.models.mantenimiento import Mantenimiento
from app.models.maquina import Maquina
from app.schemas.maquina import MaquinaCreate, MaquinaUpdate
from app.utils.logger import logger

REFERENCIAS = {
    "categoria_id": (CategoriaMaquinaria, "La categoría seleccionada no existe"),
    "empresa_id": (Empresa, "La empresa seleccionada no existe"),
}


def get_maquina(db: Session, maquina_id: int) -> Optional[Maquina]:
    return db.query(Maquina).filter(Maquina.id == maquina_id).first()


def list_maquinas(db: Session) -> List[Maquina]:
    return db.query(Maquina).order_by(Maquina.id).all()


def create_maquina(db: Session, data: MaquinaCreate) -> Maquina:
    valores = data.model_dump()
    errores = {}
    validar_existentes(db, valores, REFERENCIAS, errores)
    lanzar_si_hay_errores(errores)

    obj = Maquina(**valores)
    db.add(obj)
    confirmar(db)
    db.refresh(obj)
    return obj


def update_maquina(db: Session, maquina_id: int, data: MaquinaUpdate) -> Optional[Maquina]:
    maquina = get_maquina(db, maquina_id)
    if not maquina:
        return None

    cambios = data.model_dump(exclude_unset=True)
    errores = {}
    validar_existentes(db, cambios, REFERENCIAS, errores)
    lanzar_si_hay_errores(errores)

    aplicar_cambios(maquina, cambios)
    confirmar(db)
    db.refresh(maquina)
    return maquina


def delete_maquina(db: Session, maquina_id: int) -> bool:
    maquina = get_maquina(db, maquina_id)
    if not maquina:
        return False

    # Los mantenimientos se borran en cascada; los que tienen pagos no
    pagos = contar_pagos(db, Mantenimiento.maquina_id == maquina_id)
    if pagos:
        logger.warning(
            "Eliminación de máquina bloqueada por pagos asociados",
            extra={"maquina_id": maquina_id, "pagos": pagos},
        )
        raise DependencyConflictException(
            "No se puede eliminar la máquina porque tiene mantenimientos con pagos asociados"
        )

    db.delete(maquina)
    db.commit()
    return True


def maquinas_pesadas_costosas(db: Session, umbral: Decimal) -> List[Tuple[Maquina, List[Mantenimiento]]]:
    """
    Máquinas de categoría pesada con al menos un mantenimiento de costo
    mayor a `umbral`.

    Returns:
        pares (máquina, mantenimientos que superan el umbral), por id de máquina.
        `Maquina.mantenimientos` queda intacto en la sesión.
    """
    costosos = (
        db.query(Mantenimiento)
        .join(Mantenimiento.maquina)
        .join(Maquina.categoria)
        .filter(
            CategoriaMaquinaria.tipo_maquinaria == TipoMaquinaria.pesada,
            Mantenimiento.costo > umbral,
        )
        .order_by(Mantenimiento.maquina_id, Mantenimiento.id)
        .all()
    )
    return [
        (grupo[0].maquina, grupo)
        for grupo in (list(g) for _, g in groupby(costosos, key=lambda m: m.maquina_id))
    ]
