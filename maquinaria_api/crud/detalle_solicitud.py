# maquinaria_api/crud/detalle_solicitud.py
"""
CRUD de detalles de solicitud.

costo_total nunca lo envía el cliente: siempre es el costo unitario del
mantenimiento multiplicado por cantidad_maquinas, y se recalcula cuando un
PUT cambia cualquiera de los dos.
"""
from decimal import Decimal
from sqlalchemy.orm import Session
from typing import List, Optional

from maquinaria_api.core.exceptions import ErrorValidacion
from maquinaria_api.models.detalle_solicitud import DetalleSolicitud
from maquinaria_api.models.mantenimiento import Mantenimiento
from maquinaria_api.models.solicitud import Solicitud
from maquinaria_api.schemas.detalle_solicitud import DetalleSolicitudCreate, DetalleSolicitudUpdate
from maquinaria_api.crud.base import (
    aplicar_cambios,
    eliminar,
    errores_llaves_foraneas,
    errores_obligatorios,
    guardar,
    validar,
)

REFERENCIAS = {"solicitud_id": Solicitud, "mantenimiento_id": Mantenimiento}
# Máximo representable en NUMERIC(15, 2)
MAX_COSTO_TOTAL = Decimal("9999999999999.99")


def calcular_costo_total(mantenimiento: Mantenimiento, cantidad_maquinas: int) -> Decimal:
    return (Decimal(mantenimiento.costo) * cantidad_maquinas).quantize(Decimal("0.01"))


def _costo_total_validado(mantenimiento: Mantenimiento, cantidad_maquinas: int) -> Decimal:
    costo_total = calcular_costo_total(mantenimiento, cantidad_maquinas)
    if costo_total > MAX_COSTO_TOTAL:
        raise ErrorValidacion.campo(
            "cantidad_maquinas",
            "El costo total excede el máximo permitido para un detalle de solicitud.",
        )
    return costo_total


def get_detalle(db: Session, detalle_id: int) -> Optional[DetalleSolicitud]:
    return db.query(DetalleSolicitud).filter(DetalleSolicitud.id == detalle_id).first()


def list_detalles(db: Session) -> List[DetalleSolicitud]:
    return db.query(DetalleSolicitud).order_by(DetalleSolicitud.id).all()


def create_detalle(db: Session, data: DetalleSolicitudCreate) -> DetalleSolicitud:
    create_data = data.model_dump()
    validar(errores_llaves_foraneas(db, create_data, REFERENCIAS))

    mantenimiento = db.get(Mantenimiento, create_data["mantenimiento_id"])
    create_data["costo_total"] = _costo_total_validado(mantenimiento, create_data["cantidad_maquinas"])
    return guardar(db, DetalleSolicitud(**create_data))


def update_detalle(db: Session, detalle_id: int, data: DetalleSolicitudUpdate) -> Optional[DetalleSolicitud]:
    detalle = get_detalle(db, detalle_id)
    if not detalle:
        return None

    update_data = data.model_dump(exclude_unset=True)
    validar(
        errores_obligatorios(DetalleSolicitud, update_data),
        errores_llaves_foraneas(db, update_data, REFERENCIAS),
    )

    if "cantidad_maquinas" in update_data or "mantenimiento_id" in update_data:
        mantenimiento_id = update_data.get("mantenimiento_id", detalle.mantenimiento_id)
        cantidad = update_data.get("cantidad_maquinas", detalle.cantidad_maquinas)
        mantenimiento = db.get(Mantenimiento, mantenimiento_id)
        update_data["costo_total"] = _costo_total_validado(mantenimiento, cantidad)

    aplicar_cambios(detalle, update_data)
    return guardar(db, detalle)


def delete_detalle(db: Session, detalle_id: int) -> bool:
    return eliminar(db, get_detalle(db, detalle_id))
