# app/api/v1/routers/auth.py
"""
Router de autenticación: registro, login, logout y perfil propio.

Login y registro son públicos; el resto exige token Bearer vigente.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.security import get_current_token, get_current_usuario
from app.db.session import get_db
from app.models.auth_token import AuthToken
from app.models.usuario import Usuario
from app.schemas.auth import (
    CambioPasswordRequest,
    LoginRequest,
    PerfilUpdate,
    RegistroRequest,
    TokenResponse,
    UsuarioRead,
    UsuarioResponse,
)
from app.schemas.common import ErrorResponse, MessageResponse
from app.services import auth_service

router = APIRouter(tags=["Auth"])


@router.post(
    "/registrar",
    response_model=TokenResponse,
    status_code=status.HTTP_201_CREATED,
    responses={422: {"model": ErrorResponse}},
    summary="Registrar usuario",
)
def registrar(payload: RegistroRequest, db: Session = Depends(get_db)):
    usuario, token = auth_service.registrar(db, payload)
    return TokenResponse(
        message="Usuario registrado exitosamente",
        access_token=token,
        user=UsuarioRead.model_validate(usuario),
    )


@router.post(
    "/login",
    response_model=TokenResponse,
    responses={401: {"model": ErrorResponse}},
    summary="Login con email y contraseña",
)
def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    """
    Retorna un JWT y los datos del usuario.
    """
    usuario, token = auth_service.login(db, credentials.email, credentials.password)
    return TokenResponse(
        message="Login exitoso",
        access_token=token,
        user=UsuarioRead.model_validate(usuario),
    )


@router.post("/logout", response_model=MessageResponse, summary="Cerrar sesión")
def logout(registro: AuthToken = Depends(get_current_token), db: Session = Depends(get_db)):
    """Revoca el token con el que se hizo la petición."""
    auth_service.logout(db, registro)
    return {"message": "Sesión cerrada exitosamente"}


@router.get("/profile", response_model=UsuarioResponse, summary="Perfil del usuario autenticado")
def profile(usuario: Usuario = Depends(get_current_usuario)):
    return {"message": "Perfil obtenido exitosamente", "data": usuario}


@router.put("/profile", response_model=UsuarioResponse, summary="Actualizar perfil propio")
def update_profile(
    payload: PerfilUpdate,
    usuario: Usuario = Depends(get_current_usuario),
    db: Session = Depends(get_db),
):
    usuario = auth_service.actualizar_perfil(db, usuario, payload)
    return {"message": "Perfil actualizado exitosamente", "data": usuario}


@router.post(
    "/change-password",
    response_model=MessageResponse,
    responses={401: {"model": ErrorResponse}},
    summary="Cambiar contraseña",
)
def change_password(
    payload: CambioPasswordRequest,
    usuario: Usuario = Depends(get_current_usuario),
    db: Session = Depends(get_db),
):
    auth_service.cambiar_password(db, usuario, payload)
    return {"message": "Contraseña actualizada exitosamente"}
