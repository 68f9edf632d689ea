# app/schemas/empresa.py
from datetime import datetime
from typing import Optional

from pydantic import Field

from app.schemas.common import CamelModel
from app.schemas.resumen import RepresentanteResumen


class EmpresaBase(CamelModel):
    nit: str = Field(..., min_length=1, max_length=64)
    nombre_empresa: str = Field(..., min_length=1, max_length=255)
    direccion: str = Field(..., min_length=1, max_length=255)
    ciudad: str = Field(..., min_length=1, max_length=100)
    telefono: str = Field(..., min_length=1, max_length=20)


class EmpresaCreate(EmpresaBase):
    pass


class EmpresaUpdate(CamelModel):
    nit: str = Field(None, min_length=1, max_length=64)
    nombre_empresa: str = Field(None, min_length=1, max_length=255)
    direccion: str = Field(None, min_length=1, max_length=255)
    ciudad: str = Field(None, min_length=1, max_length=100)
    telefono: str = Field(None, min_length=1, max_length=20)


class EmpresaRead(EmpresaBase):
    id: int
    creado_en: Optional[datetime] = None
    representante: Optional[RepresentanteResumen] = None


class EmpresaConConteo(EmpresaRead):
    """Empresa con el número de solicitudes asociadas."""
    solicitudes_count: int
