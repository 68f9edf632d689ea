import time

from fastapi import Request

from app.utils.logger import logger


async def log_requests(request: Request, call_next):
    inicio = time.perf_counter()
    logger.info("Petición: %s %s", request.method, request.url.path)
    response = await call_next(request)
    duracion_ms = (time.perf_counter() - inicio) * 1000
    logger.info(
        "Respuesta: %s %s %s (%.1f ms)",
        response.status_code,
        request.method,
        request.url.path,
        duracion_ms,
    )
    return response
