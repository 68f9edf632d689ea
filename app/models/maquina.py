# app/models/maquina.py
import enum

from sqlalchemy import Column, BigInteger, String, DateTime, Enum, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.db.base import Base, BigIntPK


class EstadoMaquina(enum.Enum):
    disponible = "disponible"
    mantenimiento = "mantenimiento"
    reparacion = "reparacion"


class Maquina(Base):
    __tablename__ = "maquinas"

    id = Column(BigIntPK, primary_key=True, autoincrement=True)
    tipo_maquina = Column(String(255), nullable=False, index=True)
    nombre = Column(String(255), nullable=True)
    categoria_id = Column(
        BigInteger,
        ForeignKey("categorias_maquinarias.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    empresa_id = Column(BigInteger, ForeignKey("empresas.id", ondelete="SET NULL"), nullable=True)
    estado = Column(Enum(EstadoMaquina), default=EstadoMaquina.disponible, nullable=False)
    creado_en = Column(DateTime(timezone=True), server_default=func.now())
    actualizado_en = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    categoria = relationship("CategoriaMaquinaria", back_populates="maquinas", lazy="selectin")
    mantenimientos = relationship(
        "Mantenimiento",
        back_populates="maquina",
        lazy="selectin",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    asignaciones = relationship(
        "SolicitudMaquina", back_populates="maquina", cascade="all, delete-orphan", passive_deletes=True
    )
