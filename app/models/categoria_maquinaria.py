# app/models/categoria_maquinaria.py
import enum

from sqlalchemy import Column, String, DateTime, Enum
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.db.base import Base, BigIntPK


class TipoMaquinaria(enum.Enum):
    lijera = "lijera"
    pesada = "pesada"


class CategoriaMaquinaria(Base):
    __tablename__ = "categorias_maquinarias"

    id = Column(BigIntPK, primary_key=True, autoincrement=True)
    tipo_maquinaria = Column(Enum(TipoMaquinaria), nullable=False, index=True)
    descripcion = Column(String(500), nullable=False)
    creado_en = Column(DateTime(timezone=True), server_default=func.now())
    actualizado_en = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    maquinas = relationship(
        "Maquina",
        back_populates="categoria",
        lazy="selectin",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
