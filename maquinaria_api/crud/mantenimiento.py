from sqlalchemy.orm import Session
from typing import List, Optional

from maquinaria_api.models.mantenimiento import Mantenimiento
from maquinaria_api.models.tipo_maquinaria import TipoMaquinaria
from maquinaria_api.schemas.mantenimiento import MantenimientoCreate, MantenimientoUpdate
from maquinaria_api.crud.base import (
    aplicar_cambios,
    eliminar,
    errores_llaves_foraneas,
    errores_obligatorios,
    errores_unicidad,
    guardar,
    validar,
)

CAMPOS_UNICOS = ("codigo",)
REFERENCIAS = {"tipo_maquinaria_id": TipoMaquinaria}


def get_mantenimiento(db: Session, mantenimiento_id: int) -> Optional[Mantenimiento]:
    return db.query(Mantenimiento).filter(Mantenimiento.id == mantenimiento_id).first()


def list_mantenimientos(db: Session) -> List[Mantenimiento]:
    return db.query(Mantenimiento).order_by(Mantenimiento.id).all()


def create_mantenimiento(db: Session, data: MantenimientoCreate) -> Mantenimiento:
    create_data = data.model_dump()
    validar(
        errores_unicidad(db, Mantenimiento, create_data, CAMPOS_UNICOS),
        errores_llaves_foraneas(db, create_data, REFERENCIAS),
    )
    return guardar(db, Mantenimiento(**create_data))


def update_mantenimiento(db: Session, mantenimiento_id: int, data: MantenimientoUpdate) -> Optional[Mantenimiento]:
    mantenimiento = get_mantenimiento(db, mantenimiento_id)
    if not mantenimiento:
        return None

    update_data = data.model_dump(exclude_unset=True)
    validar(
        errores_obligatorios(Mantenimiento, update_data),
        errores_unicidad(db, Mantenimiento, update_data, CAMPOS_UNICOS, excluir_id=mantenimiento_id),
        errores_llaves_foraneas(db, update_data, REFERENCIAS),
    )
    aplicar_cambios(mantenimiento, update_data)
    return guardar(db, mantenimiento)


def delete_mantenimiento(db: Session, mantenimiento_id: int) -> bool:
    return eliminar(db, get_mantenimiento(db, mantenimiento_id))
