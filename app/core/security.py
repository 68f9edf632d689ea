# app/core/security.py
"""
Funciones centralizadas de seguridad: hashing de contraseñas, emisión y
validación de JWT, y dependencias de FastAPI para autenticación por rol.
"""
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional, Tuple

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.exceptions import ForbiddenException, UnauthorizedException
from app.db.session import get_db
from app.models.auth_token import AuthToken
from app.models.usuario import Usuario

pwd_context = CryptContext(
    schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=settings.bcrypt_rounds
)

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/login", auto_error=False)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    if not hashed_password:
        return False
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(
    subject: str,
    expires_delta: Optional[timedelta] = None,
    extra_claims: Optional[Dict[str, Any]] = None,
) -> Tuple[str, str, datetime]:
    """
    Firma un JWT para `subject`.

    Returns:
        (token, jti, expiración)
    """
    expira = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    jti = uuid.uuid4().hex
    payload: Dict[str, Any] = {"sub": subject, "jti": jti, "exp": expira}
    if extra_claims:
        payload.update(extra_claims)
    token = jwt.encode(payload, settings.secret_key, algorithm=settings.algorithm)
    return token, jti, expira


def decode_access_token(token: str) -> Dict[str, Any]:
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError as exc:
        raise UnauthorizedException("Token inválido o expirado.") from exc


def get_current_token(
    token: Optional[str] = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> AuthToken:
    if not token:
        raise UnauthorizedException("No autenticado.")

    payload = decode_access_token(token)
    jti = payload.get("jti")
    sub = payload.get("sub")
    if not jti or not sub:
        raise UnauthorizedException("Token inválido o expirado.")

    registro = db.query(AuthToken).filter(AuthToken.jti == jti).first()
    if not registro or str(registro.usuario_id) != str(sub):
        raise UnauthorizedException("Token revocado.")
    return registro


def get_current_usuario(registro: AuthToken = Depends(get_current_token)) -> Usuario:
    return registro.usuario


def require_role(*roles: str):
    """Dependency factory: exige que el usuario autenticado tenga uno de `roles`."""

    def _checker(usuario: Usuario = Depends(get_current_usuario)) -> Usuario:
        if usuario.rol.value not in roles:
            raise ForbiddenException("No tienes permisos para realizar esta acción.")
        return usuario

    return _checker
