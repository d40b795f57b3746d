from typing import Annotated

from fastapi import Path

from maquinaria_api.schemas.common import MAX_ID

# Identificador de registro en la ruta; fuera de rango responde 422
IdRegistro = Annotated[int, Path(ge=1, le=MAX_ID, description="Identificador del registro")]
