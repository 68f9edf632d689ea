from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings


def setup_cors(app: FastAPI) -> None:
    origins = settings.cors_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # El navegador rechaza credenciales con origen comodín
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
