"""
Excepciones de dominio de la API.

Cada excepción sabe con qué código HTTP se responde; los handlers de
app.core.error_handlers las traducen al cuerpo `{message, errors?}`.
"""
from typing import Dict, List, Optional

from fastapi import status


class AppException(Exception):
    """Excepción base para errores controlados de la aplicación."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(
        self,
        message: str,
        errors: Optional[Dict[str, List[str]]] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.errors = errors
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> dict:
        body = {"message": self.message}
        if self.errors:
            body["errors"] = self.errors
        return body


class ValidationException(AppException):
    """Errores de validación por campo: campo -> [mensajes]."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY

    def __init__(self, errors: Dict[str, List[str]], message: str = "Error de validación"):
        super().__init__(message, errors=errors)


class NotFoundException(AppException):
    status_code = status.HTTP_404_NOT_FOUND


class UnauthorizedException(AppException):
    status_code = status.HTTP_401_UNAUTHORIZED


class ForbiddenException(AppException):
    status_code = status.HTTP_403_FORBIDDEN


class DependencyConflictException(AppException):
    """El registro no se puede eliminar porque otros dependen de él."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
