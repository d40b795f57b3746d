# maquinaria_api/api/v1/routers/mantenimientos.py
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from maquinaria_api.api.dependencies import IdRegistro
from maquinaria_api.db.session import get_db
from maquinaria_api.schemas.common import MensajeRespuesta, RespuestaAPI
from maquinaria_api.schemas.mantenimiento import MantenimientoCreate, MantenimientoRead, MantenimientoUpdate
from maquinaria_api.crud.mantenimiento import (
    get_mantenimiento,
    list_mantenimientos,
    create_mantenimiento,
    update_mantenimiento,
    delete_mantenimiento,
)
from maquinaria_api.utils.logger import logger

router = APIRouter(tags=["Mantenimientos"])

NO_ENCONTRADO = "Mantenimiento no encontrado"


@router.get("", response_model=RespuestaAPI[List[MantenimientoRead]], summary="Listar mantenimientos")
def list_mantenimientos_endpoint(db: Session = Depends(get_db)):
    return {"status": True, "data": list_mantenimientos(db)}


@router.post(
    "",
    response_model=RespuestaAPI[MantenimientoRead],
    status_code=status.HTTP_201_CREATED,
    summary="Crear mantenimiento",
    description="`codigo` debe ser único y `tipo_maquinaria_id` debe existir."
)
def create_mantenimiento_endpoint(payload: MantenimientoCreate, db: Session = Depends(get_db)):
    mantenimiento = create_mantenimiento(db, payload)
    logger.info("Mantenimiento creado: id=%s codigo=%s", mantenimiento.id, mantenimiento.codigo)
    return {"status": True, "message": "Mantenimiento creado exitosamente", "data": mantenimiento}


@router.get("/{mantenimiento_id}", response_model=RespuestaAPI[MantenimientoRead], summary="Obtener mantenimiento")
def get_mantenimiento_endpoint(mantenimiento_id: IdRegistro, db: Session = Depends(get_db)):
    mantenimiento = get_mantenimiento(db, mantenimiento_id)
    if not mantenimiento:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NO_ENCONTRADO)
    return {"status": True, "data": mantenimiento}


@router.put(
    "/{mantenimiento_id}",
    response_model=RespuestaAPI[MantenimientoRead],
    summary="Actualizar mantenimiento",
    description="Cambiar el costo no recalcula los detalles de solicitud ya registrados."
)
def update_mantenimiento_endpoint(
    mantenimiento_id: IdRegistro,
    payload: MantenimientoUpdate,
    db: Session = Depends(get_db),
):
    mantenimiento = update_mantenimiento(db, mantenimiento_id, payload)
    if not mantenimiento:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NO_ENCONTRADO)

    logger.info("Mantenimiento actualizado: %s", mantenimiento_id)
    return {"status": True, "message": "Mantenimiento actualizado exitosamente", "data": mantenimiento}


@router.delete("/{mantenimiento_id}", response_model=MensajeRespuesta, summary="Eliminar mantenimiento")
def delete_mantenimiento_endpoint(mantenimiento_id: IdRegistro, db: Session = Depends(get_db)):
    if not delete_mantenimiento(db, mantenimiento_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NO_ENCONTRADO)

    logger.info("Mantenimiento eliminado: %s", mantenimiento_id)
    return {"status": True, "message": "Mantenimiento eliminado exitosamente"}
