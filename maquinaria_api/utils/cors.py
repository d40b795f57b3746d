from typing import List

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from maquinaria_api.core.config import settings


def _parse_origins(value: str) -> List[str]:
    return [o.strip() for o in value.split(",") if o.strip()]


def setup_cors(app: FastAPI) -> None:
    origins = _parse_origins(settings.backend_cors_origins) or ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
