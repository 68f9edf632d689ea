from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base de los esquemas de la API.

    Los atributos se declaran en snake_case y viajan en camelCase
    (`nombre_empresa` <-> `nombreEmpresa`); la entrada acepta ambos.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ErrorResponse(BaseModel):
    message: str
    errors: Optional[Dict[str, List[str]]] = None


class MessageResponse(BaseModel):
    message: str


class ResponseBase(BaseModel):
    """Esquema base para respuestas con sobre message + data"""
    message: str
    data: Optional[Any] = None
