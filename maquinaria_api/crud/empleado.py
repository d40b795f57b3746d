from sqlalchemy.orm import Session
from typing import List, Optional

from maquinaria_api.models.empleado import Empleado
from maquinaria_api.schemas.empleado import EmpleadoCreate, EmpleadoUpdate
from maquinaria_api.crud.base import (
    aplicar_cambios,
    eliminar,
    errores_obligatorios,
    errores_unicidad,
    guardar,
    validar,
)

CAMPOS_UNICOS = ("documento", "email")


def get_empleado(db: Session, empleado_id: int) -> Optional[Empleado]:
    return db.query(Empleado).filter(Empleado.id == empleado_id).first()


def list_empleados(db: Session) -> List[Empleado]:
    return db.query(Empleado).order_by(Empleado.id).all()


def create_empleado(db: Session, data: EmpleadoCreate) -> Empleado:
    create_data = data.model_dump()
    validar(errores_unicidad(db, Empleado, create_data, CAMPOS_UNICOS))
    return guardar(db, Empleado(**create_data))


def update_empleado(db: Session, empleado_id: int, data: EmpleadoUpdate) -> Optional[Empleado]:
    empleado = get_empleado(db, empleado_id)
    if not empleado:
        return None

    update_data = data.model_dump(exclude_unset=True)
    validar(
        errores_obligatorios(Empleado, update_data),
        errores_unicidad(db, Empleado, update_data, CAMPOS_UNICOS, excluir_id=empleado_id),
    )
    aplicar_cambios(empleado, update_data)
    return guardar(db, empleado)


def delete_empleado(db: Session, empleado_id: int) -> bool:
    return eliminar(db, get_empleado(db, empleado_id))
