# app/models/solicitud.py
"""
Solicitudes de uso de maquinaria.

Una solicitud reserva una o varias máquinas (con cantidad) para un proyecto,
en una fecha y franja horaria. La asignación máquina/cantidad vive en
`solicitud_maquina`; el personal asignado en `solicitud_empleado`.
"""
import enum

from sqlalchemy import (
    Column, BigInteger, Integer, String, Date, Time, DateTime, Enum, ForeignKey,
    Table, UniqueConstraint, CheckConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.db.base import Base, BigIntPK


class EstadoSolicitud(enum.Enum):
    pendiente = "pendiente"
    aprobada = "aprobada"
    rechazada = "rechazada"
    completada = "completada"


solicitud_empleado = Table(
    "solicitud_empleado",
    Base.metadata,
    Column("solicitud_id", BigInteger, ForeignKey("solicitudes.id", ondelete="CASCADE"), primary_key=True),
    Column("empleado_id", BigInteger, ForeignKey("empleados.id", ondelete="CASCADE"), primary_key=True),
)


class Solicitud(Base):
    __tablename__ = "solicitudes"

    id = Column(BigIntPK, primary_key=True, autoincrement=True)
    usuario_id = Column(BigInteger, ForeignKey("usuarios.id", ondelete="SET NULL"), nullable=True, index=True)
    empresa_id = Column(BigInteger, ForeignKey("empresas.id", ondelete="CASCADE"), nullable=True, index=True)
    fecha_solicitud = Column(DateTime(timezone=True), nullable=False, index=True)
    fecha_uso = Column(Date, nullable=False)
    hora_inicio = Column(Time, nullable=False)
    hora_fin = Column(Time, nullable=False)
    proyecto = Column(String(255), nullable=False)
    lugar = Column(String(255), nullable=False)
    estado = Column(Enum(EstadoSolicitud), default=EstadoSolicitud.pendiente, nullable=False, index=True)
    creado_en = Column(DateTime(timezone=True), server_default=func.now())
    actualizado_en = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    usuario = relationship("Usuario", back_populates="solicitudes", lazy="selectin")
    empresa = relationship("Empresa", back_populates="solicitudes", lazy="selectin")
    asignaciones = relationship(
        "SolicitudMaquina",
        back_populates="solicitud",
        lazy="selectin",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="SolicitudMaquina.maquina_id",
    )
    empleados = relationship(
        "Empleado", secondary=solicitud_empleado, back_populates="solicitudes", lazy="selectin"
    )
    mantenimientos = relationship(
        "Mantenimiento", back_populates="solicitud", cascade="all, delete-orphan", passive_deletes=True
    )


class SolicitudMaquina(Base):
    """Asignación (solicitud, máquina, cantidad)."""
    __tablename__ = "solicitud_maquina"

    id = Column(BigIntPK, primary_key=True, autoincrement=True)
    solicitud_id = Column(
        BigInteger, ForeignKey("solicitudes.id", ondelete="CASCADE"), nullable=False, index=True
    )
    maquina_id = Column(BigInteger, ForeignKey("maquinas.id", ondelete="CASCADE"), nullable=False, index=True)
    cantidad = Column(Integer, nullable=False, default=1)
    creado_en = Column(DateTime(timezone=True), server_default=func.now())
    actualizado_en = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    solicitud = relationship("Solicitud", back_populates="asignaciones")
    maquina = relationship("Maquina", back_populates="asignaciones", lazy="selectin")

    __table_args__ = (
        UniqueConstraint("solicitud_id", "maquina_id", name="uq_solicitud_maquina"),
        CheckConstraint("cantidad >= 1", name="ck_solicitud_maquina_cantidad"),
    )
