# app/api/v1/routers/usuarios.py
"""
Administración de usuarios.

- Listar, crear y eliminar: solo admin
- Ver y editar: el propio usuario o un admin; solo un admin cambia el rol
- Nadie puede eliminarse a sí mismo
"""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.core.config import Roles
from app.core.exceptions import ForbiddenException, NotFoundException
from app.core.security import get_current_usuario, require_role
from app.crud import usuario as crud_usuario
from app.db.session import get_db
from app.models.usuario import Usuario
from app.schemas.auth import UsuarioResponse
from app.schemas.common import ErrorResponse, MessageResponse
from app.schemas.usuario import (
    EstadisticasUsuariosResponse,
    UsuarioCreate,
    UsuarioListResponse,
    UsuarioUpdate,
)
from app.utils.logger import logger

router = APIRouter(tags=["Usuarios"])


def _obtener(db: Session, usuario_id: int) -> Usuario:
    usuario = crud_usuario.get_usuario(db, usuario_id)
    if not usuario:
        raise NotFoundException("Usuario no encontrado")
    return usuario


def _exigir_propio_o_admin(actual: Usuario, usuario_id: int) -> None:
    if not actual.es_admin and actual.id != usuario_id:
        raise ForbiddenException("No tienes permisos para realizar esta acción.")


@router.get("/", response_model=UsuarioListResponse, summary="Listar usuarios")
def list_all(
    db: Session = Depends(get_db),
    current_user=Depends(require_role(Roles.ADMIN)),
):
    usuarios = crud_usuario.list_usuarios(db)
    return {"message": "Usuarios obtenidos exitosamente", "data": usuarios, "count": len(usuarios)}


@router.get(
    "/estadisticas",
    response_model=EstadisticasUsuariosResponse,
    summary="Estadísticas de usuarios por rol",
)
def estadisticas(
    db: Session = Depends(get_db),
    current_user=Depends(require_role(Roles.ADMIN)),
):
    return {
        "message": "Estadísticas obtenidas exitosamente",
        "data": crud_usuario.estadisticas_usuarios(db),
    }


@router.get("/buscar", response_model=UsuarioListResponse, summary="Buscar usuarios por nombre o email")
def buscar(
    q: str = Query(..., min_length=2, description="Texto a buscar en nombre o email"),
    db: Session = Depends(get_db),
    current_user=Depends(get_current_usuario),
):
    usuarios = crud_usuario.buscar_usuarios(db, q)
    return {"message": "Búsqueda completada", "data": usuarios, "count": len(usuarios)}


@router.get("/empleados", response_model=UsuarioListResponse, summary="Usuarios con rol empleado")
def empleados(
    db: Session = Depends(get_db),
    current_user=Depends(get_current_usuario),
):
    usuarios = crud_usuario.list_empleados(db)
    return {"message": "Empleados obtenidos exitosamente", "data": usuarios, "count": len(usuarios)}


@router.post(
    "/",
    response_model=UsuarioResponse,
    status_code=status.HTTP_201_CREATED,
    responses={422: {"model": ErrorResponse}},
    summary="Crear usuario",
)
def create(
    payload: UsuarioCreate,
    db: Session = Depends(get_db),
    current_user=Depends(require_role(Roles.ADMIN)),
):
    usuario = crud_usuario.create_usuario(
        db, nombre=payload.nombre, email=payload.email, password=payload.password, rol=payload.rol
    )
    logger.info("Usuario creado", extra={"id": usuario.id, "admin": current_user.id})
    return {"message": "Usuario creado exitosamente", "data": usuario}


@router.get(
    "/{usuario_id}",
    response_model=UsuarioResponse,
    responses={403: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Obtener usuario",
)
def get_one(
    usuario_id: int,
    db: Session = Depends(get_db),
    current_user: Usuario = Depends(get_current_usuario),
):
    _exigir_propio_o_admin(current_user, usuario_id)
    return {"message": "Usuario obtenido exitosamente", "data": _obtener(db, usuario_id)}


@router.put(
    "/{usuario_id}",
    response_model=UsuarioResponse,
    responses={403: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Actualizar usuario",
)
def update(
    usuario_id: int,
    payload: UsuarioUpdate,
    db: Session = Depends(get_db),
    current_user: Usuario = Depends(get_current_usuario),
):
    _exigir_propio_o_admin(current_user, usuario_id)
    cambios = payload.model_dump(exclude_unset=True)
    if "rol" in cambios and not current_user.es_admin:
        raise ForbiddenException("Solo un administrador puede cambiar el rol.")

    usuario = crud_usuario.update_usuario(db, _obtener(db, usuario_id), cambios)
    logger.info("Usuario actualizado", extra={"id": usuario.id, "por": current_user.id})
    return {"message": "Usuario actualizado exitosamente", "data": usuario}


@router.delete(
    "/{usuario_id}",
    response_model=MessageResponse,
    responses={403: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Eliminar usuario",
)
def delete(
    usuario_id: int,
    db: Session = Depends(get_db),
    current_user: Usuario = Depends(require_role(Roles.ADMIN)),
):
    if current_user.id == usuario_id:
        raise ForbiddenException("No puedes eliminar tu propio usuario")
    crud_usuario.delete_usuario(db, _obtener(db, usuario_id))
    logger.info("Usuario eliminado", extra={"id": usuario_id, "admin": current_user.id})
    return {"message": "Usuario eliminado exitosamente"}
