# app/crud/categoria_maquinaria.py
from typing import List, Optional

from sqlalchemy.orm import Session

from app.crud.common import aplicar_cambios, confirmar
from app.models.categoria_maquinaria import CategoriaMaquinaria
from app.schemas.categoria_maquinaria import CategoriaMaquinariaCreate, CategoriaMaquinariaUpdate


def get_categoria(db: Session, categoria_id: int) -> Optional[CategoriaMaquinaria]:
    return db.query(CategoriaMaquinaria).filter(CategoriaMaquinaria.id == categoria_id).first()


def list_categorias(db: Session) -> List[CategoriaMaquinaria]:
    return db.query(CategoriaMaquinaria).order_by(CategoriaMaquinaria.id).all()


def create_categoria(db: Session, data: CategoriaMaquinariaCreate) -> CategoriaMaquinaria:
    obj = CategoriaMaquinaria(**data.model_dump())
    db.add(obj)
    confirmar(db)
    db.refresh(obj)
    return obj


def update_categoria(
    db: Session, categoria_id: int, data: CategoriaMaquinariaUpdate
) -> Optional[CategoriaMaquinaria]:
    categoria = get_categoria(db, categoria_id)
    if not categoria:
        return None
    aplicar_cambios(categoria, data.model_dump(exclude_unset=True))
    confirmar(db)
    db.refresh(categoria)
    return categoria


def delete_categoria(db: Session, categoria_id: int) -> bool:
    categoria = get_categoria(db, categoria_id)
    if not categoria:
        return False
    db.delete(categoria)
    db.commit()
    return True
