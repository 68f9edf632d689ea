# app/schemas/pago.py
"""
Schemas para manejo de pagos de mantenimientos.
"""
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from app.models.pago import EstadoPago, MetodoPago
from app.schemas.common import CamelModel
from app.schemas.resumen import EmpresaResumen, MaquinaResumen


class PagoBase(CamelModel):
    codigo_pago: str = Field(..., min_length=1, max_length=100)
    fecha_pago: date
    monto: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
    metodo_pago: MetodoPago
    referencia: Optional[str] = Field(None, max_length=255)
    estado: EstadoPago
    observaciones: Optional[str] = Field(None, max_length=1000)
    mantenimiento_id: int
    empresa_id: int


class PagoCreate(PagoBase):
    pass


class PagoUpdate(CamelModel):
    codigo_pago: str = Field(None, min_length=1, max_length=100)
    fecha_pago: date = None
    monto: Decimal = Field(None, ge=0, max_digits=12, decimal_places=2)
    metodo_pago: MetodoPago = None
    referencia: Optional[str] = Field(None, max_length=255)
    estado: EstadoPago = None
    observaciones: Optional[str] = Field(None, max_length=1000)
    mantenimiento_id: int = None
    empresa_id: int = None


class MantenimientoConMaquina(CamelModel):
    id: int
    codigo: str
    nombre: str
    costo: Decimal
    maquina: Optional[MaquinaResumen] = None


class PagoRead(PagoBase):
    id: int
    creado_en: Optional[datetime] = None
    mantenimiento: Optional[MantenimientoConMaquina] = None
    empresa: Optional[EmpresaResumen] = None
