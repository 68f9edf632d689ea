# app/schemas/solicitud.py
"""
Schemas de solicitudes de maquinaria.

Las máquinas se envían como una sola lista de pares
`{"maquinaId": 1, "cantidad": 3}`; la lista completa reemplaza la
asignación vigente de la solicitud.
"""
from datetime import date, datetime, time
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from app.models.solicitud import EstadoSolicitud
from app.schemas.common import CamelModel
from app.schemas.resumen import (
    EmpleadoResumen,
    EmpresaResumen,
    MaquinaResumen,
    SolicitudResumen,
    UsuarioResumen,
)


class AsignacionMaquina(CamelModel):
    maquina_id: int = Field(..., gt=0)
    cantidad: int = Field(..., ge=1)


class SolicitudBase(CamelModel):
    fecha_uso: date
    hora_inicio: time
    hora_fin: time
    proyecto: str = Field(..., min_length=1, max_length=255)
    lugar: str = Field(..., min_length=1, max_length=255)
    empresa_id: Optional[int] = None
    maquinas: List[AsignacionMaquina] = Field(..., min_length=1)
    empleado_ids: Optional[List[int]] = None

    @field_validator("hora_fin")
    @classmethod
    def fin_despues_de_inicio(cls, v: time, info) -> time:
        inicio = info.data.get("hora_inicio")
        if inicio is not None and v <= inicio:
            raise ValueError("La hora de fin debe ser posterior a la hora de inicio")
        return v

    @field_validator("maquinas")
    @classmethod
    def sin_maquinas_repetidas(cls, v: List[AsignacionMaquina]) -> List[AsignacionMaquina]:
        ids = [a.maquina_id for a in v]
        if len(ids) != len(set(ids)):
            raise ValueError("Cada máquina solo puede aparecer una vez en la solicitud")
        return v

    @field_validator("empleado_ids")
    @classmethod
    def sin_empleados_repetidos(cls, v: Optional[List[int]]) -> Optional[List[int]]:
        if v is not None and len(v) != len(set(v)):
            raise ValueError("Cada empleado solo puede aparecer una vez en la solicitud")
        return v


class SolicitudCreate(SolicitudBase):
    pass


class SolicitudUpdate(SolicitudBase):
    estado: Optional[EstadoSolicitud] = None


class CambioEstadoRequest(CamelModel):
    estado: EstadoSolicitud


class AsignacionRead(CamelModel):
    maquina_id: int
    cantidad: int
    maquina: Optional[MaquinaResumen] = None


class SolicitudRead(SolicitudResumen):
    asignaciones: List[AsignacionRead] = []


class SolicitudDetalle(SolicitudRead):
    usuario: Optional[UsuarioResumen] = None
    empresa: Optional[EmpresaResumen] = None
    empleados: List[EmpleadoResumen] = []


class TotalMaquinasEmpresa(CamelModel):
    empresa: str
    total_maquinas: int


class SolicitudesEmpleadoResponse(CamelModel):
    empleado: EmpleadoResumen
    solicitudes: List[SolicitudRead]


class ReporteMensualResponse(CamelModel):
    anio: int
    mes: int
    count: int
    data: List[SolicitudDetalle]


class ReporteSolicitudesResponse(BaseModel):
    count: int
    data: List[SolicitudDetalle]
