from sqlalchemy.orm import Session
from typing import List, Optional

from maquinaria_api.models.categoria import Categoria
from maquinaria_api.models.tipo_maquinaria import TipoMaquinaria
from maquinaria_api.schemas.tipo_maquinaria import TipoMaquinariaCreate, TipoMaquinariaUpdate
from maquinaria_api.crud.base import (
    aplicar_cambios,
    eliminar,
    errores_llaves_foraneas,
    errores_obligatorios,
    guardar,
    validar,
)

REFERENCIAS = {"categoria_id": Categoria}


def get_tipo_maquinaria(db: Session, tipo_id: int) -> Optional[TipoMaquinaria]:
    return db.query(TipoMaquinaria).filter(TipoMaquinaria.id == tipo_id).first()


def list_tipos_maquinaria(db: Session) -> List[TipoMaquinaria]:
    return db.query(TipoMaquinaria).order_by(TipoMaquinaria.id).all()


def create_tipo_maquinaria(db: Session, data: TipoMaquinariaCreate) -> TipoMaquinaria:
    create_data = data.model_dump()
    validar(errores_llaves_foraneas(db, create_data, REFERENCIAS))
    return guardar(db, TipoMaquinaria(**create_data))


def update_tipo_maquinaria(db: Session, tipo_id: int, data: TipoMaquinariaUpdate) -> Optional[TipoMaquinaria]:
    tipo = get_tipo_maquinaria(db, tipo_id)
    if not tipo:
        return None

    update_data = data.model_dump(exclude_unset=True)
    validar(
        errores_obligatorios(TipoMaquinaria, update_data),
        errores_llaves_foraneas(db, update_data, REFERENCIAS),
    )
    aplicar_cambios(tipo, update_data)
    return guardar(db, tipo)


def delete_tipo_maquinaria(db: Session, tipo_id: int) -> bool:
    return eliminar(db, get_tipo_maquinaria(db, tipo_id))
