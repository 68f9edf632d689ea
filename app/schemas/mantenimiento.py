# app/schemas/mantenimiento.py
"""
Schemas de mantenimientos.

Validaciones:
- costo >= 0
- tiempo_estimado entre 1 y 720 horas (30 días)
- fecha_entrega no anterior a hoy al crear
"""
from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from app.schemas.common import CamelModel
from app.schemas.resumen import (
    CategoriaResumen,
    EmpresaResumen,
    PagoResumen,
    SolicitudResumen,
)


class MantenimientoBase(CamelModel):
    codigo: str = Field(..., min_length=1, max_length=100)
    nombre: str = Field(..., min_length=1, max_length=255)
    descripcion: str = Field(..., min_length=1, max_length=1000)
    costo: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
    tiempo_estimado: int = Field(..., ge=1, le=720, description="Horas")
    manual_procedimiento: Optional[str] = None
    fecha_entrega: date
    maquina_id: int
    solicitud_id: int


class MantenimientoCreate(MantenimientoBase):

    @field_validator("fecha_entrega")
    @classmethod
    def fecha_no_pasada(cls, v: date) -> date:
        if v < date.today():
            raise ValueError("La fecha de entrega no puede ser anterior a hoy")
        return v


class MantenimientoUpdate(CamelModel):
    codigo: str = Field(None, min_length=1, max_length=100)
    nombre: str = Field(None, min_length=1, max_length=255)
    descripcion: str = Field(None, min_length=1, max_length=1000)
    costo: Decimal = Field(None, ge=0, max_digits=12, decimal_places=2)
    tiempo_estimado: int = Field(None, ge=1, le=720)
    manual_procedimiento: Optional[str] = None
    fecha_entrega: date = None
    maquina_id: int = None
    solicitud_id: int = None


class MaquinaConCategoria(CamelModel):
    id: int
    tipo_maquina: str
    nombre: Optional[str] = None
    categoria: Optional[CategoriaResumen] = None


class SolicitudConEmpresa(SolicitudResumen):
    empresa: Optional[EmpresaResumen] = None


class MantenimientoRead(MantenimientoBase):
    id: int
    creado_en: Optional[datetime] = None
    maquina: Optional[MaquinaConCategoria] = None
    solicitud: Optional[SolicitudConEmpresa] = None
    pagos: List[PagoResumen] = []


class MantenimientosCostososResponse(CamelModel):
    data: List[MantenimientoRead]
    count: int
    costo_total: Decimal


class EstadisticasMantenimientos(BaseModel):
    total_mantenimientos: int
    mantenimientos_completados: int
    mantenimientos_pendientes: int
    costo_total: Decimal
    costo_promedio: Decimal
    porcentaje_completados: float


class EstadisticasMantenimientosResponse(BaseModel):
    message: str
    data: EstadisticasMantenimientos


class ConteoResponse(BaseModel):
    count: int
