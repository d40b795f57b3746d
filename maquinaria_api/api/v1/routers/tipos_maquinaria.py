# maquinaria_api/api/v1/routers/tipos_maquinaria.py
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from maquinaria_api.api.dependencies import IdRegistro
from maquinaria_api.db.session import get_db
from maquinaria_api.schemas.common import MensajeRespuesta, RespuestaAPI
from maquinaria_api.schemas.tipo_maquinaria import TipoMaquinariaCreate, TipoMaquinariaRead, TipoMaquinariaUpdate
from maquinaria_api.crud.tipo_maquinaria import (
    get_tipo_maquinaria,
    list_tipos_maquinaria,
    create_tipo_maquinaria,
    update_tipo_maquinaria,
    delete_tipo_maquinaria,
)
from maquinaria_api.utils.logger import logger

router = APIRouter(tags=["Tipos de maquinaria"])

NO_ENCONTRADO = "Tipo de maquinaria no encontrado"


@router.get(
    "",
    response_model=RespuestaAPI[List[TipoMaquinariaRead]],
    summary="Listar tipos de maquinaria",
    description="Incluye la categoría y los mantenimientos definidos para cada tipo."
)
def list_tipos_endpoint(db: Session = Depends(get_db)):
    return {"status": True, "data": list_tipos_maquinaria(db)}


@router.post(
    "",
    response_model=RespuestaAPI[TipoMaquinariaRead],
    status_code=status.HTTP_201_CREATED,
    summary="Crear tipo de maquinaria"
)
def create_tipo_endpoint(payload: TipoMaquinariaCreate, db: Session = Depends(get_db)):
    tipo = create_tipo_maquinaria(db, payload)
    logger.info("Tipo de maquinaria creado: id=%s nombre=%s", tipo.id, tipo.nombre)
    return {"status": True, "message": "Tipo de maquinaria creado exitosamente", "data": tipo}


@router.get("/{tipo_id}", response_model=RespuestaAPI[TipoMaquinariaRead], summary="Obtener tipo de maquinaria")
def get_tipo_endpoint(tipo_id: IdRegistro, db: Session = Depends(get_db)):
    tipo = get_tipo_maquinaria(db, tipo_id)
    if not tipo:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NO_ENCONTRADO)
    return {"status": True, "data": tipo}


@router.put("/{tipo_id}", response_model=RespuestaAPI[TipoMaquinariaRead], summary="Actualizar tipo de maquinaria")
def update_tipo_endpoint(tipo_id: IdRegistro, payload: TipoMaquinariaUpdate, db: Session = Depends(get_db)):
    tipo = update_tipo_maquinaria(db, tipo_id, payload)
    if not tipo:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NO_ENCONTRADO)

    logger.info("Tipo de maquinaria actualizado: %s", tipo_id)
    return {"status": True, "message": "Tipo de maquinaria actualizado exitosamente", "data": tipo}


@router.delete("/{tipo_id}", response_model=MensajeRespuesta, summary="Eliminar tipo de maquinaria")
def delete_tipo_endpoint(tipo_id: IdRegistro, db: Session = Depends(get_db)):
    if not delete_tipo_maquinaria(db, tipo_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NO_ENCONTRADO)

    logger.info("Tipo de maquinaria eliminado: %s", tipo_id)
    return {"status": True, "message": "Tipo de maquinaria eliminado exitosamente"}
