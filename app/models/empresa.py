# app/models/empresa.py
from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.db.base import Base, BigIntPK


class Empresa(Base):
    __tablename__ = "empresas"

    id = Column(BigIntPK, primary_key=True, autoincrement=True)
    nit = Column(String(64), nullable=False, unique=True)
    nombre_empresa = Column(String(255), nullable=False, index=True)
    direccion = Column(String(255), nullable=False)
    ciudad = Column(String(100), nullable=False)
    telefono = Column(String(20), nullable=False)
    creado_en = Column(DateTime(timezone=True), server_default=func.now())
    actualizado_en = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    representante = relationship(
        "Representante",
        back_populates="empresa",
        uselist=False,
        lazy="selectin",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    solicitudes = relationship(
        "Solicitud", back_populates="empresa", cascade="all, delete-orphan", passive_deletes=True
    )
    pagos = relationship("Pago", back_populates="empresa", cascade="all, delete-orphan", passive_deletes=True)
