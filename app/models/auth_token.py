# app/models/auth_token.py
"""
Tokens de acceso emitidos a un usuario.

El JWT lleva el `jti` de su fila; un token deja de ser válido en cuanto
la fila se elimina (logout), aunque la firma y la expiración sigan vigentes.
"""
from sqlalchemy import Column, BigInteger, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.db.base import Base, BigIntPK


class AuthToken(Base):
    __tablename__ = "auth_tokens"

    id = Column(BigIntPK, primary_key=True, autoincrement=True)
    usuario_id = Column(
        BigInteger, ForeignKey("usuarios.id", ondelete="CASCADE"), nullable=False, index=True
    )
    jti = Column(String(64), unique=True, nullable=False, index=True)
    nombre = Column(String(100), nullable=False, default="auth_token")
    creado_en = Column(DateTime(timezone=True), server_default=func.now())
    expira_en = Column(DateTime(timezone=True), nullable=False)

    usuario = relationship("Usuario", back_populates="tokens")
