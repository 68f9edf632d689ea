from app.db.base import Base

# Importa modelos para que se registren en Base.metadata
from .usuario import Usuario, RolUsuario
from .auth_token import AuthToken
from .empresa import Empresa
from .representante import Representante
from .cargo import Cargo
from .empleado import Empleado
from .categoria_maquinaria import CategoriaMaquinaria, TipoMaquinaria
from .maquina import Maquina, EstadoMaquina
from .mantenimiento import Mantenimiento
from .pago import Pago, MetodoPago, EstadoPago
from .solicitud import Solicitud, SolicitudMaquina, EstadoSolicitud, solicitud_empleado

__all__ = [
    "Usuario",
    "RolUsuario",
    "AuthToken",
    "Empresa",
    "Representante",
    "Cargo",
    "Empleado",
    "CategoriaMaquinaria",
    "TipoMaquinaria",
    "Maquina",
    "EstadoMaquina",
    "Mantenimiento",
    "Pago",
    "MetodoPago",
    "EstadoPago",
    "Solicitud",
    "SolicitudMaquina",
    "EstadoSolicitud",
    "solicitud_empleado",
    "Base",
]
