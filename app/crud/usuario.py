# app/crud/usuario.py
from typing import List, Optional

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from app.crud.common import aplicar_cambios, confirmar, lanzar_si_hay_errores, validar_unicos
from app.models.usuario import RolUsuario, Usuario

CAMPOS_UNICOS = {"email": "El email ya está registrado"}


# -----------------------------------------------------
# Obtener usuario
# -----------------------------------------------------
def get_usuario(db: Session, usuario_id: int) -> Optional[Usuario]:
    return db.query(Usuario).filter(Usuario.id == usuario_id).first()


def get_usuario_by_email(db: Session, email: str) -> Optional[Usuario]:
    return db.query(Usuario).filter(Usuario.email == email).first()


# -----------------------------------------------------
# Autenticar usuario
# -----------------------------------------------------
def authenticate(db: Session, email: str, password: str) -> Optional[Usuario]:
    from app.core.security import verify_password
    usuario = get_usuario_by_email(db, email)
    if not usuario or not verify_password(password, usuario.password_hash):
        return None
    return usuario


# -----------------------------------------------------
# Listados
# -----------------------------------------------------
def list_usuarios(db: Session) -> List[Usuario]:
    return db.query(Usuario).order_by(Usuario.nombre, Usuario.id).all()


def list_empleados(db: Session) -> List[Usuario]:
    return (
        db.query(Usuario)
        .filter(Usuario.rol == RolUsuario.empleado)
        .order_by(Usuario.nombre, Usuario.id)
        .all()
    )


def buscar_usuarios(db: Session, termino: str) -> List[Usuario]:
    patron = f"%{termino}%"
    return (
        db.query(Usuario)
        .filter(or_(Usuario.nombre.ilike(patron), Usuario.email.ilike(patron)))
        .order_by(Usuario.nombre, Usuario.id)
        .all()
    )


# -----------------------------------------------------
# Crear / actualizar / eliminar
# -----------------------------------------------------
def create_usuario(
    db: Session, nombre: str, email: str, password: str, rol: RolUsuario = RolUsuario.empleado
) -> Usuario:
    from app.core.security import hash_password
    errores = {}
    validar_unicos(db, Usuario, {"email": email}, CAMPOS_UNICOS, errores)
    lanzar_si_hay_errores(errores)

    obj = Usuario(nombre=nombre, email=email, password_hash=hash_password(password), rol=rol)
    db.add(obj)
    confirmar(db, CAMPOS_UNICOS)
    db.refresh(obj)
    return obj


def update_usuario(db: Session, usuario: Usuario, cambios: dict) -> Usuario:
    errores = {}
    validar_unicos(db, Usuario, cambios, CAMPOS_UNICOS, errores, excluir_id=usuario.id)
    lanzar_si_hay_errores(errores)

    aplicar_cambios(usuario, cambios)
    confirmar(db, CAMPOS_UNICOS)
    db.refresh(usuario)
    return usuario


def set_password(db: Session, usuario: Usuario, password: str) -> None:
    from app.core.security import hash_password
    usuario.password_hash = hash_password(password)
    db.commit()


def delete_usuario(db: Session, usuario: Usuario) -> None:
    db.delete(usuario)
    db.commit()


# -----------------------------------------------------
# Estadísticas
# -----------------------------------------------------
def estadisticas_usuarios(db: Session) -> dict:
    total = db.query(func.count(Usuario.id)).scalar() or 0
    admins = db.query(func.count(Usuario.id)).filter(Usuario.rol == RolUsuario.admin).scalar() or 0
    empleados = (
        db.query(func.count(Usuario.id)).filter(Usuario.rol == RolUsuario.empleado).scalar() or 0
    )

    def _porcentaje(parte: int) -> float:
        return round(parte / total * 100, 2) if total else 0.0

    return {
        "total_usuarios": total,
        "total_administradores": admins,
        "total_empleados": empleados,
        "porcentaje_administradores": _porcentaje(admins),
        "porcentaje_empleados": _porcentaje(empleados),
    }
