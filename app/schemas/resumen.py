# app/schemas/resumen.py
"""
Representaciones planas (sin relaciones) de cada entidad.

Los esquemas de lectura las usan para anidar relaciones sin ciclos.
"""
from datetime import date, datetime, time
from decimal import Decimal
from typing import Optional

from app.models.categoria_maquinaria import TipoMaquinaria
from app.models.maquina import EstadoMaquina
from app.models.pago import EstadoPago, MetodoPago
from app.models.solicitud import EstadoSolicitud
from app.models.usuario import RolUsuario
from app.schemas.common import CamelModel


class UsuarioResumen(CamelModel):
    id: int
    nombre: str
    email: str
    rol: RolUsuario


class CargoResumen(CamelModel):
    id: int
    nombre: str
    descripcion: str


class EmpleadoResumen(CamelModel):
    id: int
    documento: str
    nombre: str
    apellido: str
    telefono: str
    email: Optional[str] = None
    cargo_id: int


class EmpresaResumen(CamelModel):
    id: int
    nit: str
    nombre_empresa: str
    direccion: str
    ciudad: str
    telefono: str


class RepresentanteResumen(CamelModel):
    id: int
    nombre: str
    cedula: str
    telefono: str
    email: str
    empresa_id: int


class CategoriaResumen(CamelModel):
    id: int
    tipo_maquinaria: TipoMaquinaria
    descripcion: str


class MaquinaResumen(CamelModel):
    id: int
    tipo_maquina: str
    nombre: Optional[str] = None
    categoria_id: int
    empresa_id: Optional[int] = None
    estado: EstadoMaquina


class MantenimientoResumen(CamelModel):
    id: int
    codigo: str
    nombre: str
    descripcion: str
    costo: Decimal
    tiempo_estimado: int
    manual_procedimiento: Optional[str] = None
    fecha_entrega: date
    maquina_id: int
    solicitud_id: int


class PagoResumen(CamelModel):
    id: int
    codigo_pago: str
    fecha_pago: date
    monto: Decimal
    metodo_pago: MetodoPago
    referencia: Optional[str] = None
    estado: EstadoPago
    mantenimiento_id: int
    empresa_id: int


class SolicitudResumen(CamelModel):
    id: int
    usuario_id: Optional[int] = None
    empresa_id: Optional[int] = None
    fecha_solicitud: datetime
    fecha_uso: date
    hora_inicio: time
    hora_fin: time
    proyecto: str
    lugar: str
    estado: EstadoSolicitud
