# app/crud/common.py
"""
Utilidades compartidas por los módulos CRUD.

- Validación de unicidad (ignorando el propio registro en updates)
- Validación de existencia de llaves foráneas
- Commit que traduce violaciones de unicidad concurrentes a 422
"""
import logging
from typing import Dict, List, Optional, Type

from pydantic.alias_generators import to_camel
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundException, ValidationException

logger = logging.getLogger("maquinaria_backend")

Errores = Dict[str, List[str]]


def agregar_error(errores: Errores, campo: str, mensaje: str) -> None:
    errores.setdefault(to_camel(campo), []).append(mensaje)


def obtener_o_404(db: Session, model: Type, obj_id: int, mensaje: str):
    obj = db.query(model).filter(model.id == obj_id).first()
    if not obj:
        raise NotFoundException(mensaje)
    return obj


def validar_unicos(
    db: Session,
    model: Type,
    valores: Dict[str, object],
    campos: Dict[str, str],
    errores: Errores,
    excluir_id: Optional[int] = None,
) -> None:
    """
    Verifica que cada campo de `campos` presente en `valores` no exista ya.

    Args:
        valores: datos validados (solo las llaves enviadas)
        campos: campo -> mensaje de error
        excluir_id: id del registro en edición
    """
    for campo, mensaje in campos.items():
        if campo not in valores or valores[campo] is None:
            continue
        query = db.query(model.id).filter(getattr(model, campo) == valores[campo])
        if excluir_id is not None:
            query = query.filter(model.id != excluir_id)
        if query.first() is not None:
            agregar_error(errores, campo, mensaje)


def validar_existentes(
    db: Session,
    valores: Dict[str, object],
    referencias: Dict[str, tuple],
    errores: Errores,
) -> None:
    """
    Verifica llaves foráneas: campo -> (Modelo, mensaje).
    """
    for campo, (model, mensaje) in referencias.items():
        valor = valores.get(campo)
        if valor is None:
            continue
        if db.query(model.id).filter(model.id == valor).first() is None:
            agregar_error(errores, campo, mensaje)


def lanzar_si_hay_errores(errores: Errores) -> None:
    if errores:
        raise ValidationException(errores)


def aplicar_cambios(obj, cambios: Dict[str, object]) -> None:
    # Solo las llaves presentes en la petición
    for campo, valor in cambios.items():
        setattr(obj, campo, valor)


def confirmar(db: Session, campos_unicos: Optional[Dict[str, str]] = None) -> None:
    """
    Hace commit; si la BD rechaza por unicidad (carrera entre dos peticiones),
    revierte y responde como error de validación del campo afectado.
    """
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        detalle = str(exc.orig).lower()
        errores: Errores = {}
        for campo, mensaje in (campos_unicos or {}).items():
            if campo.lower() in detalle:
                agregar_error(errores, campo, mensaje)
        if not errores:
            errores = {"registro": ["El registro viola una restricción de integridad"]}
        logger.warning("Conflicto de integridad al guardar", extra={"detalle": detalle})
        raise ValidationException(errores) from exc
