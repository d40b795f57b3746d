from contextlib import asynccontextmanager

from fastapi import FastAPI
from sqlalchemy.orm import Session

from maquinaria_api.core.config import settings
from maquinaria_api.db.base import Base
from maquinaria_api.db.init_db import create_default_admin
from maquinaria_api.db.session import engine
from maquinaria_api.utils.logger import logger
import maquinaria_api.models  # noqa: F401  registra las tablas en Base.metadata


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Maneja startup/shutdown de la app.
    En desarrollo crea las tablas y garantiza el usuario administrador.
    """
    try:
        # --- Startup ---
        logger.info("Iniciando API de Maquinaria (%s)...", settings.environment)

        if settings.environment == "development":
            Base.metadata.create_all(bind=engine)

        session = Session(bind=engine)
        try:
            create_default_admin(session)
        finally:
            session.close()

        logger.info("Startup completado correctamente")

    except Exception as e:
        logger.exception("Error en startup: %s", e)

    yield

    # --- Shutdown ---
    logger.info("Aplicación apagándose...")
    engine.dispose()
