# maquinaria_api/core/exceptions.py
from typing import Dict, List


class ErrorValidacion(Exception):
    """
    Error de reglas de negocio (unicidad, llaves foráneas, campos obligatorios).
    Se responde como 422 con los mensajes agrupados por campo.
    """

    def __init__(self, errors: Dict[str, List[str]], message: str = "Error de validación"):
        super().__init__(message)
        self.errors = errors
        self.message = message

    @classmethod
    def campo(cls, field: str, mensaje: str, message: str = "Error de validación") -> "ErrorValidacion":
        return cls({field: [mensaje]}, message=message)
