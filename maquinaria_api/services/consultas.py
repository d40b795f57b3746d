# maquinaria_api/services/consultas.py
"""
Consultas de reportes sobre solicitudes, empresas, empleados y maquinaria.

Cada función es una única consulta parametrizada; los filtros por nombre
son coincidencias parciales sin distinguir mayúsculas.
"""
from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from maquinaria_api.models.categoria import Categoria
from maquinaria_api.models.detalle_solicitud import DetalleSolicitud
from maquinaria_api.models.empleado import Empleado
from maquinaria_api.models.empresa import Empresa
from maquinaria_api.models.mantenimiento import Mantenimiento
from maquinaria_api.models.representante import Representante
from maquinaria_api.models.solicitud import Solicitud
from maquinaria_api.models.solicitud_empleado import SolicitudEmpleado
from maquinaria_api.models.tipo_maquinaria import TipoMaquinaria
from maquinaria_api.schemas.consulta import (
    CantidadMantenimientosTipo,
    EmpresaConTotal,
    RepresentanteSinSolicitudes,
    SolicitudDeEmpleado,
    TotalMaquinasEmpresa,
)
from maquinaria_api.schemas.resumen import EmpresaResumen, RepresentanteResumen, SolicitudResumen

UMBRAL_COSTO_DEFECTO = Decimal("1000000")


ESCAPE_LIKE = "\\"


def _contiene(texto: str) -> str:
    """Patrón LIKE de subcadena; los comodines del texto se toman literales."""
    texto = (
        texto.replace(ESCAPE_LIKE, ESCAPE_LIKE * 2)
        .replace("%", ESCAPE_LIKE + "%")
        .replace("_", ESCAPE_LIKE + "_")
    )
    return f"%{texto}%"


def empleados_ordenados(db: Session) -> List[Empleado]:
    return db.query(Empleado).order_by(Empleado.apellido.asc(), Empleado.nombre.asc()).all()


def maquinaria_costosa(
    db: Session,
    umbral: Decimal = UMBRAL_COSTO_DEFECTO,
    categoria: str = "Pesada",
) -> List[Dict]:
    rows = (
        db.query(
            TipoMaquinaria.nombre.label("tipo_maquinaria"),
            Categoria.nombre.label("categoria"),
            Mantenimiento.codigo.label("codigo"),
            Mantenimiento.nombre.label("mantenimiento"),
            Mantenimiento.costo.label("costo"),
        )
        .select_from(TipoMaquinaria)
        .join(Mantenimiento, Mantenimiento.tipo_maquinaria_id == TipoMaquinaria.id)
        .join(Categoria, TipoMaquinaria.categoria_id == Categoria.id)
        .filter(Categoria.nombre.ilike(_contiene(categoria), escape=ESCAPE_LIKE))
        .filter(Mantenimiento.costo > umbral)
        .order_by(Mantenimiento.costo.desc(), Mantenimiento.id.asc())
        .all()
    )
    return [row._asdict() for row in rows]


def empresa_con_mas_solicitudes(db: Session) -> Optional[EmpresaConTotal]:
    total = func.count(Solicitud.id).label("total_solicitudes")
    row = (
        db.query(Empresa, total)
        .join(Solicitud, Solicitud.empresa_id == Empresa.id)
        .group_by(Empresa.id)
        .order_by(total.desc(), Empresa.id.asc())
        .first()
    )
    if row is None:
        return None
    empresa, cantidad = row
    return EmpresaConTotal(
        **EmpresaResumen.model_validate(empresa).model_dump(),
        total_solicitudes=cantidad,
    )


def total_maquinas_empresa(db: Session, nombre: str) -> TotalMaquinasEmpresa:
    total = (
        db.query(func.coalesce(func.sum(DetalleSolicitud.cantidad_maquinas), 0))
        .select_from(DetalleSolicitud)
        .join(Solicitud, DetalleSolicitud.solicitud_id == Solicitud.id)
        .join(Empresa, Solicitud.empresa_id == Empresa.id)
        .filter(Empresa.nombre.ilike(_contiene(nombre), escape=ESCAPE_LIKE))
        .scalar()
    )
    return TotalMaquinasEmpresa(total_maquinas=int(total or 0), empresa=nombre)


def solicitudes_de_empleado(db: Session, documento: str) -> List[SolicitudDeEmpleado]:
    rows = (
        db.query(Solicitud, SolicitudEmpleado.estado)
        .join(SolicitudEmpleado, SolicitudEmpleado.solicitud_id == Solicitud.id)
        .join(Empleado, SolicitudEmpleado.empleado_id == Empleado.id)
        .filter(Empleado.documento == documento)
        .order_by(Solicitud.fecha_solicitud.asc(), Solicitud.id.asc())
        .all()
    )
    return [
        SolicitudDeEmpleado(
            **SolicitudResumen.model_validate(solicitud).model_dump(),
            empresa=EmpresaResumen.model_validate(solicitud.empresa),
            estado_asignacion=estado,
        )
        for solicitud, estado in rows
    ]


def representantes_sin_solicitudes(db: Session) -> List[RepresentanteSinSolicitudes]:
    rows = (
        db.query(Representante, Empresa.nombre)
        .join(Empresa, Representante.empresa_id == Empresa.id)
        .filter(~Empresa.solicitudes.any())
        .order_by(Representante.id.asc())
        .all()
    )
    return [
        RepresentanteSinSolicitudes(
            **RepresentanteResumen.model_validate(representante).model_dump(),
            empresa_nombre=empresa_nombre,
        )
        for representante, empresa_nombre in rows
    ]


def listado_solicitudes(db: Session) -> List[Dict]:
    rows = (
        db.query(
            Empresa.nombre.label("empresa"),
            Solicitud.codigo.label("codigo_solicitud"),
            Mantenimiento.nombre.label("mantenimiento"),
            DetalleSolicitud.cantidad_maquinas.label("cantidad_maquinas"),
            DetalleSolicitud.costo_total.label("costo_total"),
        )
        .select_from(Solicitud)
        .join(Empresa, Solicitud.empresa_id == Empresa.id)
        .join(DetalleSolicitud, DetalleSolicitud.solicitud_id == Solicitud.id)
        .join(Mantenimiento, DetalleSolicitud.mantenimiento_id == Mantenimiento.id)
        .order_by(Solicitud.id.asc(), DetalleSolicitud.id.asc())
        .all()
    )
    return [row._asdict() for row in rows]


def mantenimientos_por_tipo(db: Session, tipo: str) -> CantidadMantenimientosTipo:
    cantidad = (
        db.query(func.count(DetalleSolicitud.id))
        .select_from(DetalleSolicitud)
        .join(Mantenimiento, DetalleSolicitud.mantenimiento_id == Mantenimiento.id)
        .join(TipoMaquinaria, Mantenimiento.tipo_maquinaria_id == TipoMaquinaria.id)
        .filter(TipoMaquinaria.nombre.ilike(_contiene(tipo), escape=ESCAPE_LIKE))
        .scalar()
    )
    return CantidadMantenimientosTipo(cantidad_mantenimientos=cantidad or 0, tipo_maquinaria=tipo)


def rango_mes(anio: int, mes: int):
    """Devuelve [inicio, fin) del mes calendario."""
    inicio = date(anio, mes, 1)
    fin = date(anio + 1, 1, 1) if mes == 12 else date(anio, mes + 1, 1)
    return inicio, fin


def solicitudes_del_mes(db: Session, anio: int, mes: int) -> List[Dict]:
    inicio, fin = rango_mes(anio, mes)
    rows = (
        db.query(
            Empresa.nombre.label("empresa"),
            TipoMaquinaria.nombre.label("maquinaria"),
            Mantenimiento.codigo.label("codigo"),
            Mantenimiento.nombre.label("mantenimiento"),
            DetalleSolicitud.cantidad_maquinas.label("cantidad_maquinas"),
        )
        .select_from(Solicitud)
        .join(Empresa, Solicitud.empresa_id == Empresa.id)
        .join(DetalleSolicitud, DetalleSolicitud.solicitud_id == Solicitud.id)
        .join(Mantenimiento, DetalleSolicitud.mantenimiento_id == Mantenimiento.id)
        .join(TipoMaquinaria, Mantenimiento.tipo_maquinaria_id == TipoMaquinaria.id)
        .filter(Solicitud.fecha_solicitud >= inicio, Solicitud.fecha_solicitud < fin)
        .order_by(Solicitud.fecha_solicitud.asc(), DetalleSolicitud.id.asc())
        .all()
    )
    return [row._asdict() for row in rows]
