from fastapi import FastAPI

from maquinaria_api.api.v1.routers import API_VERSION, api_router
from maquinaria_api.core.error_handlers import register_error_handlers
from maquinaria_api.core.lifespan import lifespan
from maquinaria_api.core.logging_middleware import log_requests
from maquinaria_api.utils.cors import setup_cors


def create_app() -> FastAPI:
    app = FastAPI(
        title="API de Maquinaria",
        version=API_VERSION,
        description="Registro de solicitudes de mantenimiento de maquinaria de construcción",
        lifespan=lifespan,
        contact={
            "name": "Equipo Backend",
            "email": "soporte@example.com",
        },
    )

    # --- Configuración CORS ---
    setup_cors(app)

    # --- Log de peticiones ---
    app.middleware("http")(log_requests)

    # --- Respuestas de error uniformes ---
    register_error_handlers(app)

    # --- Rutas centralizadas ---
    app.include_router(api_router)

    return app


app = create_app()
