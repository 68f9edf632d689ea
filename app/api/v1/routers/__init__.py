from fastapi import APIRouter

# Importa cada módulo de rutas
from app.api.v1.routers import (
    auth,
    usuarios,
    cargos,
    categorias_maquinarias,
    empleados,
    empresas,
    representantes,
    maquinas,
    mantenimientos,
    pagos,
    solicitudes,
    health,
)

# Router principal con prefijo global
api_router = APIRouter(prefix="/api/v1")

# Endpoint raíz para verificar que la API funciona
@api_router.get("/", tags=["Root"])
def read_root():
    return {"message": "Bienvenido a la API v1 de Maquinaria Backend"}

# Registro de módulos de rutas
api_router.include_router(health.router)
api_router.include_router(auth.router)
api_router.include_router(usuarios.router, prefix="/usuarios")
api_router.include_router(cargos.router, prefix="/cargos")
api_router.include_router(categorias_maquinarias.router, prefix="/categorias-maquinarias")
api_router.include_router(empleados.router, prefix="/empleados")
api_router.include_router(empresas.router, prefix="/empresas")
api_router.include_router(representantes.router, prefix="/representantes")
api_router.include_router(maquinas.router, prefix="/maquinas")
api_router.include_router(mantenimientos.router, prefix="/mantenimientos")
api_router.include_router(pagos.router, prefix="/pagos")
api_router.include_router(solicitudes.router, prefix="/solicitudes")
