# app/models/mantenimiento.py
"""
Orden de trabajo de mantenimiento sobre una máquina.

Relación: Maquina (1) → Mantenimiento (N) ← (1) Solicitud
          Mantenimiento (1) → Pago (N)
"""
from sqlalchemy import Column, BigInteger, Integer, String, Text, Numeric, Date, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.db.base import Base, BigIntPK


class Mantenimiento(Base):
    __tablename__ = "mantenimientos"

    id = Column(BigIntPK, primary_key=True, autoincrement=True)
    codigo = Column(String(100), nullable=False, unique=True, index=True)
    nombre = Column(String(255), nullable=False)
    descripcion = Column(String(1000), nullable=False)
    costo = Column(Numeric(12, 2, asdecimal=True), nullable=False)
    tiempo_estimado = Column(Integer, nullable=False, comment="Tiempo estimado en horas")
    manual_procedimiento = Column(Text, nullable=True)
    fecha_entrega = Column(Date, nullable=False, index=True)
    maquina_id = Column(BigInteger, ForeignKey("maquinas.id", ondelete="CASCADE"), nullable=False, index=True)
    solicitud_id = Column(
        BigInteger, ForeignKey("solicitudes.id", ondelete="CASCADE"), nullable=False, index=True
    )
    creado_en = Column(DateTime(timezone=True), server_default=func.now())
    actualizado_en = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    maquina = relationship("Maquina", back_populates="mantenimientos", lazy="selectin")
    solicitud = relationship("Solicitud", back_populates="mantenimientos", lazy="selectin")
    pagos = relationship(
        "Pago",
        back_populates="mantenimiento",
        lazy="selectin",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Mantenimiento(id={self.id}, codigo={self.codigo}, costo={self.costo})>"
