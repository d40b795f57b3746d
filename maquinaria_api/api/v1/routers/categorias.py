# maquinaria_api/api/v1/routers/categorias.py
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from maquinaria_api.api.dependencies import IdRegistro
from maquinaria_api.db.session import get_db
from maquinaria_api.schemas.common import MensajeRespuesta, RespuestaAPI
from maquinaria_api.schemas.categoria import CategoriaCreate, CategoriaRead, CategoriaUpdate
from maquinaria_api.crud.categoria import (
    get_categoria,
    list_categorias,
    create_categoria,
    update_categoria,
    delete_categoria,
)
from maquinaria_api.utils.logger import logger

router = APIRouter(tags=["Categorías de maquinaria"])

NO_ENCONTRADA = "Categoría no encontrada"


@router.get("", response_model=RespuestaAPI[List[CategoriaRead]], summary="Listar categorías")
def list_categorias_endpoint(db: Session = Depends(get_db)):
    return {"status": True, "data": list_categorias(db)}


@router.post(
    "",
    response_model=RespuestaAPI[CategoriaRead],
    status_code=status.HTTP_201_CREATED,
    summary="Crear categoría"
)
def create_categoria_endpoint(payload: CategoriaCreate, db: Session = Depends(get_db)):
    categoria = create_categoria(db, payload)
    logger.info("Categoría creada: id=%s nombre=%s", categoria.id, categoria.nombre)
    return {"status": True, "message": "Categoría creada exitosamente", "data": categoria}


@router.get("/{categoria_id}", response_model=RespuestaAPI[CategoriaRead], summary="Obtener categoría")
def get_categoria_endpoint(categoria_id: IdRegistro, db: Session = Depends(get_db)):
    categoria = get_categoria(db, categoria_id)
    if not categoria:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NO_ENCONTRADA)
    return {"status": True, "data": categoria}


@router.put("/{categoria_id}", response_model=RespuestaAPI[CategoriaRead], summary="Actualizar categoría")
def update_categoria_endpoint(categoria_id: IdRegistro, payload: CategoriaUpdate, db: Session = Depends(get_db)):
    categoria = update_categoria(db, categoria_id, payload)
    if not categoria:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NO_ENCONTRADA)

    logger.info("Categoría actualizada: %s", categoria_id)
    return {"status": True, "message": "Categoría actualizada exitosamente", "data": categoria}


@router.delete(
    "/{categoria_id}",
    response_model=MensajeRespuesta,
    summary="Eliminar categoría",
    description="Elimina la categoría y, en cascada, sus tipos de maquinaria."
)
def delete_categoria_endpoint(categoria_id: IdRegistro, db: Session = Depends(get_db)):
    if not delete_categoria(db, categoria_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NO_ENCONTRADA)

    logger.info("Categoría eliminada: %s", categoria_id)
    return {"status": True, "message": "Categoría eliminada exitosamente"}
