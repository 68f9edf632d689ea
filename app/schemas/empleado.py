# app/schemas/empleado.py
from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field

from app.schemas.common import CamelModel
from app.schemas.resumen import CargoResumen


class EmpleadoBase(CamelModel):
    documento: str = Field(..., min_length=1, max_length=20)
    nombre: str = Field(..., min_length=1, max_length=255)
    apellido: str = Field(..., min_length=1, max_length=255)
    telefono: str = Field(..., min_length=1, max_length=20)
    email: Optional[EmailStr] = None
    cargo_id: int


class EmpleadoCreate(EmpleadoBase):
    pass


class EmpleadoUpdate(CamelModel):
    documento: str = Field(None, min_length=1, max_length=20)
    nombre: str = Field(None, min_length=1, max_length=255)
    apellido: str = Field(None, min_length=1, max_length=255)
    telefono: str = Field(None, min_length=1, max_length=20)
    email: Optional[EmailStr] = None
    cargo_id: int = None


class EmpleadoRead(EmpleadoBase):
    id: int
    email: Optional[str] = None
    creado_en: Optional[datetime] = None
    cargo: Optional[CargoResumen] = None
