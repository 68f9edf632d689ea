# app/models/pago.py
"""
Modelo para registro de pagos de mantenimientos.

Un mantenimiento puede tener múltiples pagos; mientras tenga alguno
no puede eliminarse.
"""
import enum

from sqlalchemy import Column, BigInteger, Numeric, String, Text, Enum, Date, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.db.base import Base, BigIntPK


class MetodoPago(enum.Enum):
    efectivo = "efectivo"
    tarjeta = "tarjeta"
    transferencia = "transferencia"


class EstadoPago(enum.Enum):
    """Estados posibles de un pago"""
    pendiente = "pendiente"
    completado = "completado"
    rechazado = "rechazado"


class Pago(Base):
    __tablename__ = "pagos"

    id = Column(BigIntPK, primary_key=True, autoincrement=True)
    codigo_pago = Column(String(100), nullable=False, unique=True, index=True)
    fecha_pago = Column(Date, nullable=False)
    monto = Column(Numeric(12, 2, asdecimal=True), nullable=False)
    metodo_pago = Column(Enum(MetodoPago), nullable=False)
    referencia = Column(String(255), nullable=True)
    estado = Column(Enum(EstadoPago), default=EstadoPago.pendiente, nullable=False, index=True)
    observaciones = Column(Text, nullable=True)
    mantenimiento_id = Column(
        BigInteger, ForeignKey("mantenimientos.id", ondelete="CASCADE"), nullable=False, index=True
    )
    empresa_id = Column(BigInteger, ForeignKey("empresas.id", ondelete="CASCADE"), nullable=False, index=True)
    creado_en = Column(DateTime(timezone=True), server_default=func.now())
    actualizado_en = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    mantenimiento = relationship("Mantenimiento", back_populates="pagos", lazy="selectin")
    empresa = relationship("Empresa", back_populates="pagos", lazy="selectin")

    def __repr__(self) -> str:
        return f"<Pago(id={self.id}, codigo={self.codigo_pago}, monto={self.monto})>"
