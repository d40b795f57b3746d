import logging
from typing import Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from maquinaria_api.core.exceptions import ErrorValidacion

logger = logging.getLogger("maquinaria_api")

MENSAJE_VALIDACION = "Error de validación"
# Starlette responde "Not Found" cuando ninguna ruta coincide
DETALLE_RUTA_INEXISTENTE = "Not Found"


def _envelope(status_code: int, message: str, errors: Dict[str, List[str]] = None, headers=None) -> JSONResponse:
    content = {"status": False, "message": message}
    if errors is not None:
        content["errors"] = errors
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def _errores_por_campo(errors) -> Dict[str, List[str]]:
    """Agrupa los errores de pydantic por nombre de campo."""
    agrupados: Dict[str, List[str]] = {}
    for err in errors:
        loc = [str(p) for p in err.get("loc", ())]
        if len(loc) > 1 and loc[0] in ("body", "query", "path", "header"):
            loc = loc[1:]
        campo = ".".join(loc) or "body"
        if err.get("type") == "missing":
            mensaje = f"El campo {campo} es obligatorio."
        else:
            mensaje = err.get("msg", "Valor inválido")
        agrupados.setdefault(campo, []).append(mensaje)
    return agrupados


def register_error_handlers(app: FastAPI):
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == DETALLE_RUTA_INEXISTENTE:
            logger.warning("Ruta no encontrada: %s %s", request.method, request.url.path)
            return _envelope(exc.status_code, "Endpoint no encontrado")

        logger.error("Error HTTP %s en %s - %s", exc.status_code, request.url, exc.detail)
        return _envelope(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.error("Error de validación en %s - %s", request.url, exc.errors())
        return _envelope(
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            MENSAJE_VALIDACION,
            errors=_errores_por_campo(exc.errors()),
        )

    @app.exception_handler(ErrorValidacion)
    async def business_validation_handler(request: Request, exc: ErrorValidacion):
        logger.warning("Validación de negocio fallida en %s - %s", request.url, exc.errors)
        return _envelope(status.HTTP_422_UNPROCESSABLE_ENTITY, exc.message, errors=exc.errors)

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request: Request, exc: IntegrityError):
        logger.error("Violación de integridad en %s - %s", request.url, exc.orig)
        return _envelope(
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            MENSAJE_VALIDACION,
            errors={"general": ["El registro viola una restricción de integridad."]},
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Error no controlado en %s", request.url)
        return _envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, "Error interno del servidor")
