# app/models/representante.py
from sqlalchemy import Column, BigInteger, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.db.base import Base, BigIntPK


class Representante(Base):
    __tablename__ = "representantes"

    id = Column(BigIntPK, primary_key=True, autoincrement=True)
    nombre = Column(String(255), nullable=False)
    cedula = Column(String(20), nullable=False, unique=True)
    telefono = Column(String(20), nullable=False)
    email = Column(String(255), nullable=False, unique=True)
    empresa_id = Column(
        BigInteger, ForeignKey("empresas.id", ondelete="CASCADE"), nullable=False, unique=True, index=True
    )
    creado_en = Column(DateTime(timezone=True), server_default=func.now())
    actualizado_en = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    empresa = relationship("Empresa", back_populates="representante", lazy="selectin")
