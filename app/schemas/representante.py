# app/schemas/representante.py
from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field

from app.schemas.common import CamelModel
from app.schemas.resumen import EmpresaResumen


class RepresentanteBase(CamelModel):
    nombre: str = Field(..., min_length=1, max_length=255)
    cedula: str = Field(..., min_length=1, max_length=20)
    telefono: str = Field(..., min_length=1, max_length=20)
    email: EmailStr
    empresa_id: int


class RepresentanteCreate(RepresentanteBase):
    pass


class RepresentanteUpdate(CamelModel):
    nombre: str = Field(None, min_length=1, max_length=255)
    cedula: str = Field(None, min_length=1, max_length=20)
    telefono: str = Field(None, min_length=1, max_length=20)
    email: EmailStr = None
    empresa_id: int = None


class RepresentanteRead(RepresentanteBase):
    id: int
    email: str
    creado_en: Optional[datetime] = None
    empresa: Optional[EmpresaResumen] = None
