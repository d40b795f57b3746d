from sqlalchemy.orm import Session
from typing import List, Optional

from maquinaria_api.core.exceptions import ErrorValidacion
from maquinaria_api.models.empleado import Empleado
from maquinaria_api.models.solicitud import Solicitud
from maquinaria_api.models.solicitud_empleado import SolicitudEmpleado
from maquinaria_api.schemas.solicitud_empleado import SolicitudEmpleadoCreate, SolicitudEmpleadoUpdate
from maquinaria_api.crud.base import (
    aplicar_cambios,
    eliminar,
    errores_llaves_foraneas,
    errores_obligatorios,
    guardar,
    validar,
)

REFERENCIAS = {"solicitud_id": Solicitud, "empleado_id": Empleado}
YA_ASIGNADO = "El empleado ya está asignado a esta solicitud"


def get_asignacion(db: Session, asignacion_id: int) -> Optional[SolicitudEmpleado]:
    return db.query(SolicitudEmpleado).filter(SolicitudEmpleado.id == asignacion_id).first()


def list_asignaciones(db: Session) -> List[SolicitudEmpleado]:
    return db.query(SolicitudEmpleado).order_by(SolicitudEmpleado.id).all()


def _verificar_no_duplicada(db: Session, solicitud_id: int, empleado_id: int, excluir_id: Optional[int] = None):
    query = db.query(SolicitudEmpleado.id).filter(
        SolicitudEmpleado.solicitud_id == solicitud_id,
        SolicitudEmpleado.empleado_id == empleado_id,
    )
    if excluir_id is not None:
        query = query.filter(SolicitudEmpleado.id != excluir_id)
    if query.first():
        raise ErrorValidacion.campo("empleado_id", YA_ASIGNADO, message=YA_ASIGNADO)


def create_asignacion(db: Session, data: SolicitudEmpleadoCreate) -> SolicitudEmpleado:
    create_data = data.model_dump()
    validar(errores_llaves_foraneas(db, create_data, REFERENCIAS))
    _verificar_no_duplicada(db, create_data["solicitud_id"], create_data["empleado_id"])
    return guardar(db, SolicitudEmpleado(**create_data))


def update_asignacion(db: Session, asignacion_id: int, data: SolicitudEmpleadoUpdate) -> Optional[SolicitudEmpleado]:
    asignacion = get_asignacion(db, asignacion_id)
    if not asignacion:
        return None

    update_data = data.model_dump(exclude_unset=True)
    validar(
        errores_obligatorios(SolicitudEmpleado, update_data),
        errores_llaves_foraneas(db, update_data, REFERENCIAS),
    )
    if "solicitud_id" in update_data or "empleado_id" in update_data:
        _verificar_no_duplicada(
            db,
            update_data.get("solicitud_id", asignacion.solicitud_id),
            update_data.get("empleado_id", asignacion.empleado_id),
            excluir_id=asignacion_id,
        )

    aplicar_cambios(asignacion, update_data)
    return guardar(db, asignacion)


def delete_asignacion(db: Session, asignacion_id: int) -> bool:
    return eliminar(db, get_asignacion(db, asignacion_id))
