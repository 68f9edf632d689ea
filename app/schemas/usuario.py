# app/schemas/usuario.py
from typing import List

from pydantic import BaseModel, EmailStr, Field, field_validator

from app.models.usuario import RolUsuario
from app.schemas.auth import UsuarioRead, _confirmacion
from app.schemas.common import CamelModel


class UsuarioCreate(CamelModel):
    nombre: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=6)
    password_confirmation: str = Field(..., min_length=6)
    rol: RolUsuario

    @field_validator("password_confirmation")
    @classmethod
    def confirmacion_coincide(cls, v: str, info) -> str:
        return _confirmacion(v, info, "password")


class UsuarioUpdate(CamelModel):
    nombre: str = Field(None, min_length=1, max_length=255)
    email: EmailStr = None
    rol: RolUsuario = None


class UsuarioListResponse(BaseModel):
    message: str
    data: List[UsuarioRead]
    count: int


class EstadisticasUsuarios(BaseModel):
    total_usuarios: int
    total_administradores: int
    total_empleados: int
    porcentaje_administradores: float
    porcentaje_empleados: float


class EstadisticasUsuariosResponse(BaseModel):
    message: str
    data: EstadisticasUsuarios
