from fastapi import FastAPI
from app.api.v1 import api_router
from app.core.error_handlers import register_error_handlers
from app.core.lifespan import lifespan
from app.core.logging_middleware import log_requests
from app.utils.cors import setup_cors


def create_app() -> FastAPI:
    app = FastAPI(
        title="Maquinaria Backend",
        version="1.0.0",
        description="API para gestión de maquinaria pesada: empresas, máquinas, solicitudes, mantenimientos y pagos",
        lifespan=lifespan,
        contact={
            "name": "Equipo Backend",
            "email": "soporte@maquinaria.com",
        },
    )

    # --- Configuración CORS ---
    setup_cors(app)

    # --- Manejo de errores y logging de peticiones ---
    register_error_handlers(app)
    app.middleware("http")(log_requests)

    # --- Rutas centralizadas ---
    app.include_router(api_router)

    return app


app = create_app()
