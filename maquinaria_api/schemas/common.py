from pydantic import BaseModel
from typing import Any, Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")

# Rango de BIGINT con signo: ids fuera de él no pueden existir
MAX_ID = 2**63 - 1


class RespuestaAPI(BaseModel, Generic[T]):
    """Sobre uniforme de todas las respuestas del API"""
    status: bool = True
    message: Optional[str] = None
    data: Optional[T] = None


class MensajeRespuesta(BaseModel):
    status: bool = True
    message: str


class ErrorResponse(BaseModel):
    status: bool = False
    message: str
    errors: Optional[Dict[str, List[str]]] = None


# Respuestas de error documentadas en OpenAPI para las rutas protegidas
RESPUESTAS_ERROR: Dict[int, Dict[str, Any]] = {
    401: {"model": ErrorResponse, "description": "Token ausente, inválido o revocado"},
    404: {"model": ErrorResponse, "description": "Recurso no encontrado"},
    422: {"model": ErrorResponse, "description": "Error de validación"},
}
