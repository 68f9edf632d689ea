# app/models/empleado.py
from sqlalchemy import Column, BigInteger, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.db.base import Base, BigIntPK


class Empleado(Base):
    __tablename__ = "empleados"

    id = Column(BigIntPK, primary_key=True, autoincrement=True)
    documento = Column(String(20), unique=True, nullable=False, index=True)
    nombre = Column(String(255), nullable=False)
    apellido = Column(String(255), nullable=False)
    telefono = Column(String(20), nullable=False)
    email = Column(String(255), nullable=True)
    cargo_id = Column(BigInteger, ForeignKey("cargos.id", ondelete="CASCADE"), nullable=False, index=True)
    creado_en = Column(DateTime(timezone=True), server_default=func.now())
    actualizado_en = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    cargo = relationship("Cargo", back_populates="empleados", lazy="selectin")
    solicitudes = relationship(
        "Solicitud", secondary="solicitud_empleado", back_populates="empleados", passive_deletes=True
    )
