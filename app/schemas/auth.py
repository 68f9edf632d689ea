# app/schemas/auth.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from app.models.usuario import RolUsuario
from app.schemas.common import CamelModel


def _confirmacion(v: str, info, campo: str) -> str:
    if info.data.get(campo) is not None and v != info.data.get(campo):
        raise ValueError("La confirmación de contraseña no coincide")
    return v


class RegistroRequest(CamelModel):
    nombre: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=6)
    password_confirmation: str = Field(..., min_length=6)
    rol: Optional[RolUsuario] = None

    @field_validator("password_confirmation")
    @classmethod
    def confirmacion_coincide(cls, v: str, info) -> str:
        return _confirmacion(v, info, "password")


class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class PerfilUpdate(CamelModel):
    nombre: str = Field(None, min_length=1, max_length=255)
    email: EmailStr = None


class CambioPasswordRequest(CamelModel):
    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=6)
    new_password_confirmation: str = Field(..., min_length=6)

    @field_validator("new_password_confirmation")
    @classmethod
    def confirmacion_coincide(cls, v: str, info) -> str:
        return _confirmacion(v, info, "new_password")


class UsuarioRead(CamelModel):
    id: int
    nombre: str
    email: str
    rol: RolUsuario
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class TokenResponse(CamelModel):
    message: str
    access_token: str
    token_type: str = "Bearer"
    user: UsuarioRead


class UsuarioResponse(BaseModel):
    message: str
    data: UsuarioRead
