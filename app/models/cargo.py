# app/models/cargo.py
from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.db.base import Base, BigIntPK


class Cargo(Base):
    __tablename__ = "cargos"

    id = Column(BigIntPK, primary_key=True, autoincrement=True)
    nombre = Column(String(255), unique=True, nullable=False)
    descripcion = Column(String(500), nullable=False)
    creado_en = Column(DateTime(timezone=True), server_default=func.now())
    actualizado_en = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relación inversa
    empleados = relationship(
        "Empleado",
        back_populates="cargo",
        lazy="selectin",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
