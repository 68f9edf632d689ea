# app/schemas/cargo.py
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from app.schemas.common import CamelModel
from app.schemas.resumen import EmpleadoResumen


class CargoBase(CamelModel):
    nombre: str = Field(..., min_length=1, max_length=255)
    descripcion: str = Field(..., min_length=1, max_length=500)


class CargoCreate(CargoBase):
    pass


class CargoUpdate(CamelModel):
    nombre: str = Field(None, min_length=1, max_length=255)
    descripcion: str = Field(None, min_length=1, max_length=500)


class CargoRead(CargoBase):
    id: int
    creado_en: Optional[datetime] = None
    empleados: List[EmpleadoResumen] = []
