# maquinaria_api/api/v1/routers/representantes.py
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from maquinaria_api.api.dependencies import IdRegistro
from maquinaria_api.db.session import get_db
from maquinaria_api.schemas.common import MensajeRespuesta, RespuestaAPI
from maquinaria_api.schemas.representante import RepresentanteCreate, RepresentanteRead, RepresentanteUpdate
from maquinaria_api.crud.representante import (
    get_representante,
    list_representantes,
    create_representante,
    update_representante,
    delete_representante,
)
from maquinaria_api.utils.logger import logger

router = APIRouter(tags=["Representantes"])

NO_ENCONTRADO = "Representante no encontrado"


@router.get("", response_model=RespuestaAPI[List[RepresentanteRead]], summary="Listar representantes")
def list_representantes_endpoint(db: Session = Depends(get_db)):
    return {"status": True, "data": list_representantes(db)}


@router.post(
    "",
    response_model=RespuestaAPI[RepresentanteRead],
    status_code=status.HTTP_201_CREATED,
    summary="Crear representante",
    description="`documento` y `email` deben ser únicos; `empresa_id` debe existir."
)
def create_representante_endpoint(payload: RepresentanteCreate, db: Session = Depends(get_db)):
    representante = create_representante(db, payload)
    logger.info("Representante creado: id=%s empresa=%s", representante.id, representante.empresa_id)
    return {"status": True, "message": "Representante creado exitosamente", "data": representante}


@router.get("/{representante_id}", response_model=RespuestaAPI[RepresentanteRead], summary="Obtener representante")
def get_representante_endpoint(representante_id: IdRegistro, db: Session = Depends(get_db)):
    representante = get_representante(db, representante_id)
    if not representante:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NO_ENCONTRADO)
    return {"status": True, "data": representante}


@router.put("/{representante_id}", response_model=RespuestaAPI[RepresentanteRead], summary="Actualizar representante")
def update_representante_endpoint(
    representante_id: IdRegistro,
    payload: RepresentanteUpdate,
    db: Session = Depends(get_db),
):
    representante = update_representante(db, representante_id, payload)
    if not representante:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NO_ENCONTRADO)

    logger.info("Representante actualizado: %s", representante_id)
    return {"status": True, "message": "Representante actualizado exitosamente", "data": representante}


@router.delete("/{representante_id}", response_model=MensajeRespuesta, summary="Eliminar representante")
def delete_representante_endpoint(representante_id: IdRegistro, db: Session = Depends(get_db)):
    if not delete_representante(db, representante_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NO_ENCONTRADO)

    logger.info("Representante eliminado: %s", representante_id)
    return {"status": True, "message": "Representante eliminado exitosamente"}
