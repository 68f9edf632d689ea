# app/services/auth_service.py
"""
Registro, login, logout y gestión del perfil propio.

Cada login emite un JWT respaldado por una fila en `auth_tokens`; borrar
la fila revoca el token.
"""
from typing import Tuple

from sqlalchemy.orm import Session

from app.core.exceptions import UnauthorizedException
from app.core.security import create_access_token, verify_password
from app.crud import usuario as crud_usuario
from app.models.auth_token import AuthToken
from app.models.usuario import RolUsuario, Usuario
from app.schemas.auth import CambioPasswordRequest, PerfilUpdate, RegistroRequest
from app.utils.logger import logger


def emitir_token(db: Session, usuario: Usuario, nombre: str = "auth_token") -> str:
    token, jti, expira = create_access_token(
        subject=str(usuario.id), extra_claims={"rol": usuario.rol.value}
    )
    db.add(AuthToken(usuario_id=usuario.id, jti=jti, nombre=nombre, expira_en=expira))
    db.commit()
    return token


def registrar(db: Session, data: RegistroRequest) -> Tuple[Usuario, str]:
    usuario = crud_usuario.create_usuario(
        db,
        nombre=data.nombre,
        email=data.email,
        password=data.password,
        rol=data.rol or RolUsuario.empleado,
    )
    token = emitir_token(db, usuario)
    logger.info("Usuario registrado", extra={"usuario_id": usuario.id, "rol": usuario.rol.value})
    return usuario, token


def login(db: Session, email: str, password: str) -> Tuple[Usuario, str]:
    usuario = crud_usuario.authenticate(db, email, password)
    if not usuario:
        logger.warning("Login fallido", extra={"email": email})
        raise UnauthorizedException("Credenciales incorrectas")
    token = emitir_token(db, usuario)
    logger.info("Login exitoso", extra={"usuario_id": usuario.id})
    return usuario, token


def logout(db: Session, registro: AuthToken) -> None:
    usuario_id = registro.usuario_id
    db.delete(registro)
    db.commit()
    logger.info("Sesión cerrada", extra={"usuario_id": usuario_id})


def actualizar_perfil(db: Session, usuario: Usuario, data: PerfilUpdate) -> Usuario:
    return crud_usuario.update_usuario(db, usuario, data.model_dump(exclude_unset=True))


def cambiar_password(db: Session, usuario: Usuario, data: CambioPasswordRequest) -> None:
    if not verify_password(data.current_password, usuario.password_hash):
        raise UnauthorizedException("La contraseña actual es incorrecta")
    crud_usuario.set_password(db, usuario, data.new_password)
    logger.info("Contraseña actualizada", extra={"usuario_id": usuario.id})
