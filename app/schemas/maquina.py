# app/schemas/maquina.py
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from app.models.maquina import EstadoMaquina
from app.schemas.common import CamelModel
from app.schemas.resumen import CategoriaResumen, MantenimientoResumen


class MaquinaBase(CamelModel):
    tipo_maquina: str = Field(..., min_length=1, max_length=255)
    nombre: Optional[str] = Field(None, max_length=255)
    categoria_id: int
    empresa_id: Optional[int] = None
    estado: EstadoMaquina = EstadoMaquina.disponible


class MaquinaCreate(MaquinaBase):
    pass


class MaquinaUpdate(CamelModel):
    tipo_maquina: str = Field(None, min_length=1, max_length=255)
    nombre: Optional[str] = Field(None, max_length=255)
    categoria_id: int = None
    empresa_id: Optional[int] = None
    estado: EstadoMaquina = None


class MaquinaRead(MaquinaBase):
    id: int
    creado_en: Optional[datetime] = None
    categoria: Optional[CategoriaResumen] = None
    mantenimientos: List[MantenimientoResumen] = []
