# app/schemas/categoria_maquinaria.py
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from app.models.categoria_maquinaria import TipoMaquinaria
from app.schemas.common import CamelModel
from app.schemas.resumen import MaquinaResumen


class CategoriaMaquinariaBase(CamelModel):
    tipo_maquinaria: TipoMaquinaria
    descripcion: str = Field(..., min_length=1, max_length=500)


class CategoriaMaquinariaCreate(CategoriaMaquinariaBase):
    pass


class CategoriaMaquinariaUpdate(CamelModel):
    tipo_maquinaria: TipoMaquinaria = None
    descripcion: str = Field(None, min_length=1, max_length=500)


class CategoriaMaquinariaRead(CategoriaMaquinariaBase):
    id: int
    creado_en: Optional[datetime] = None
    maquinas: List[MaquinaResumen] = []
