from maquinaria_api.db.base import Base

# Importa modelos para que se registren en Base.metadata
from .user import User, RolUsuario
from .token_revocado import TokenRevocado
from .empresa import Empresa
from .representante import Representante
from .empleado import Empleado, RolEmpleado
from .categoria import Categoria
from .tipo_maquinaria import TipoMaquinaria
from .mantenimiento import Mantenimiento
from .solicitud import Solicitud, EstadoSolicitud
from .detalle_solicitud import DetalleSolicitud
from .solicitud_empleado import SolicitudEmpleado, EstadoAsignacion

__all__ = [
    "User",
    "RolUsuario",
    "TokenRevocado",
    "Empresa",
    "Representante",
    "Empleado",
    "RolEmpleado",
    "Categoria",
    "TipoMaquinaria",
    "Mantenimiento",
    "Solicitud",
    "EstadoSolicitud",
    "DetalleSolicitud",
    "SolicitudEmpleado",
    "EstadoAsignacion",
    "Base",
]
