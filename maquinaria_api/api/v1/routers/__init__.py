from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from maquinaria_api.core.security import get_current_user
from maquinaria_api.schemas.common import RESPUESTAS_ERROR

# Importa cada módulo de rutas
from maquinaria_api.api.v1.routers import (
    auth,
    empresas,
    representantes,
    categorias,
    tipos_maquinaria,
    mantenimientos,
    solicitudes,
    detalle_solicitudes,
    empleados,
    solicitud_empleados,
    consultas,
    dashboard,
)

API_VERSION = "1.0.0"

# Router principal con prefijo global
api_router = APIRouter(prefix="/api")

# Todas las rutas salvo register/login exigen un token válido
protegido = {"dependencies": [Depends(get_current_user)], "responses": RESPUESTAS_ERROR}


# Endpoint raíz para verificar que la API funciona
@api_router.get("/", tags=["Root"])
def read_root():
    return {
        "status": True,
        "message": "API de Maquinaria funcionando correctamente",
        "version": API_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


# Registro de módulos de rutas
api_router.include_router(auth.router)
api_router.include_router(auth.protected_router)

api_router.include_router(empresas.router, prefix="/empresas", **protegido)
api_router.include_router(representantes.router, prefix="/representantes", **protegido)
api_router.include_router(categorias.router, prefix="/categorias", **protegido)
api_router.include_router(tipos_maquinaria.router, prefix="/tipos-maquinaria", **protegido)
api_router.include_router(mantenimientos.router, prefix="/mantenimientos", **protegido)
api_router.include_router(solicitudes.router, prefix="/solicitudes", **protegido)
api_router.include_router(detalle_solicitudes.router, prefix="/detalle-solicitudes", **protegido)
api_router.include_router(empleados.router, prefix="/empleados", **protegido)
api_router.include_router(solicitud_empleados.router, prefix="/solicitud-empleados", **protegido)
api_router.include_router(consultas.router, prefix="/consultas", **protegido)
api_router.include_router(dashboard.router, prefix="/dashboard", **protegido)

# Alias con guion bajo de las rutas históricas
api_router.include_router(tipos_maquinaria.router, prefix="/tipos_maquinaria", include_in_schema=False, **protegido)
api_router.include_router(detalle_solicitudes.router, prefix="/detalle_solicitudes", include_in_schema=False, **protegido)
api_router.include_router(solicitud_empleados.router, prefix="/solicitud_empleados", include_in_schema=False, **protegido)
