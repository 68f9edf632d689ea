# app/core/config.py
from decimal import Decimal
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings


# Roles del sistema
class Roles:
    """Constantes para roles de usuario."""
    ADMIN = "admin"
    EMPLEADO = "empleado"


class Settings(BaseSettings):
    """
    Configuración principal de la aplicación, cargada desde variables de entorno.
    """

    # --- Core ---
    environment: str = Field("development", alias="ENVIRONMENT")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    # --- Seguridad / JWT ---
    secret_key: str = Field(..., alias="SECRET_KEY", description="Clave secreta para firmar los JWT")
    algorithm: str = Field("HS256", alias="ALGORITHM")
    access_token_expire_minutes: int = Field(1440, alias="ACCESS_TOKEN_EXPIRE_MINUTES")
    bcrypt_rounds: int = Field(12, alias="BCRYPT_ROUNDS")

    # --- Base de datos ---
    database_url: str = Field(..., alias="DATABASE_URL", description="URL de conexión SQLAlchemy")

    # --- CORS ---
    backend_cors_origins: str = Field("", alias="BACKEND_CORS_ORIGINS")

    # --- Reglas de negocio ---
    costo_mantenimiento_alto: Decimal = Field(
        Decimal("1000000"),
        alias="COSTO_MANTENIMIENTO_ALTO",
        description="Umbral de costo para considerar un mantenimiento costoso",
    )

    # --- Administrador inicial ---
    admin_email: str = Field("admin@maquinaria.com", alias="ADMIN_EMAIL")
    admin_password: str = Field("Admin123!", alias="ADMIN_PASSWORD")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"

    @property
    def cors_origins(self) -> List[str]:
        if not self.backend_cors_origins.strip():
            return ["*"]
        return [o.strip() for o in self.backend_cors_origins.split(",") if o.strip()]


settings = Settings()
