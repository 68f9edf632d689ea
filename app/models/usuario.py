"""
Modelo de Usuario para autenticación.
"""
import enum

from sqlalchemy import Column, String, DateTime, Enum
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.db.base import Base, BigIntPK


class RolUsuario(enum.Enum):
    admin = "admin"
    empleado = "empleado"


class Usuario(Base):
    __tablename__ = "usuarios"

    id = Column(BigIntPK, primary_key=True, autoincrement=True)
    nombre = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    rol = Column(Enum(RolUsuario), default=RolUsuario.empleado, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    tokens = relationship(
        "AuthToken", back_populates="usuario", cascade="all, delete-orphan", passive_deletes=True
    )
    solicitudes = relationship("Solicitud", back_populates="usuario", passive_deletes=True)

    @property
    def es_admin(self) -> bool:
        return self.rol == RolUsuario.admin

    def __repr__(self) -> str:
        return f"<Usuario(id={self.id}, email={self.email}, rol={self.rol})>"
