"""
Script para crear las tablas y poblar la base de datos con los datos de
demostración (usuarios, empresas, maquinaria, mantenimientos, empleados,
solicitudes de octubre de 2023 con sus detalles y asignaciones).

Uso:
    python -m maquinaria_api.scripts.poblar_datos [--reset]
"""
import argparse
from datetime import date
from decimal import Decimal

from sqlalchemy.orm import Session

from maquinaria_api.core.security import hash_password
from maquinaria_api.crud.detalle_solicitud import calcular_costo_total
from maquinaria_api.db.base import Base
from maquinaria_api.db.session import SessionLocal, engine
from maquinaria_api.models import (
    Categoria,
    DetalleSolicitud,
    Empleado,
    Empresa,
    Mantenimiento,
    Representante,
    Solicitud,
    SolicitudEmpleado,
    TipoMaquinaria,
    User,
)
from maquinaria_api.models.empleado import RolEmpleado
from maquinaria_api.models.solicitud import EstadoSolicitud
from maquinaria_api.models.solicitud_empleado import EstadoAsignacion
from maquinaria_api.models.user import RolUsuario

USUARIOS = [
    {"name": "Administrador", "email": "admin@maquinaria.com", "password": "admin123", "rol": RolUsuario.admin},
    {"name": "Juan Pérez", "email": "juan@maquinaria.com", "password": "empleado123", "rol": RolUsuario.empleado},
    {"name": "María García", "email": "maria@maquinaria.com", "password": "supervisor123", "rol": RolUsuario.supervisor},
]

EMPRESAS = [
    {"nombre": "Argos S.A.", "nit": "900123456-1", "direccion": "Carrera 43A #1-50, Medellín",
     "telefono": "6043198700", "email": "contacto@argos.com"},
    {"nombre": "Constructora ABC", "nit": "800987654-3", "direccion": "Calle 100 #15-20, Bogotá",
     "telefono": "6017654321", "email": "info@constructoraabc.com"},
    {"nombre": "Ingeniería XYZ", "nit": "901555666-7", "direccion": "Avenida 6N #28-10, Cali",
     "telefono": "6024445566", "email": "proyectos@ingenieriaxyz.com"},
]

# (nit de la empresa, datos del representante)
REPRESENTANTES = [
    ("900123456-1", {"nombre": "Carlos", "apellido": "Rodríguez", "documento": "1020304050",
                     "telefono": "3001112233", "email": "carlos.rodriguez@argos.com"}),
    ("800987654-3", {"nombre": "Ana", "apellido": "López", "documento": "5040302010",
                     "telefono": "3104445566", "email": "ana.lopez@constructoraabc.com"}),
]

CATEGORIAS = [
    {"nombre": "Maquinaria Pesada", "descripcion": "Equipos de gran tamaño para movimiento de tierra"},
    {"nombre": "Maquinaria Ligera", "descripcion": "Equipos portátiles y de menor tamaño"},
]

# (categoría, datos del tipo)
TIPOS = [
    ("Maquinaria Pesada", {"nombre": "Retroexcavadora", "descripcion": "Excavación y carga de material"}),
    ("Maquinaria Pesada", {"nombre": "Excavadora", "descripcion": "Excavación de gran volumen"}),
    ("Maquinaria Pesada", {"nombre": "Bulldozer", "descripcion": "Empuje y nivelación de terreno"}),
    ("Maquinaria Ligera", {"nombre": "Vibrador de Concreto", "descripcion": "Compactación de concreto fresco"}),
]

# (tipo, datos del mantenimiento)
MANTENIMIENTOS = [
    ("Retroexcavadora", {"codigo": "MANT-001", "nombre": "Mantenimiento preventivo retroexcavadora",
                         "descripcion": "Cambio de aceite, filtros y revisión hidráulica",
                         "costo": Decimal("1500000.00"), "tiempo_estimado": 8}),
    ("Excavadora", {"codigo": "MANT-002", "nombre": "Mantenimiento correctivo excavadora",
                    "descripcion": "Reparación del sistema de orugas",
                    "costo": Decimal("2500000.00"), "tiempo_estimado": 16}),
    ("Bulldozer", {"codigo": "MANT-003", "nombre": "Revisión general bulldozer",
                   "descripcion": "Inspección de motor, transmisión y cuchilla",
                   "costo": Decimal("800000.00"), "tiempo_estimado": 6}),
    ("Vibrador de Concreto", {"codigo": "MANT-004", "nombre": "Mantenimiento vibrador",
                              "descripcion": "Revisión de motor y cambio de aguja",
                              "costo": Decimal("300000.00"), "tiempo_estimado": 2}),
]

EMPLEADOS = [
    {"nombre": "Pedro", "apellido": "González", "documento": "1057896547", "email": "pedro.gonzalez@maquinaria.com",
     "direccion": "Calle 50 #30-20, Medellín", "telefono": "3157778899", "rol": RolEmpleado.empleado},
    {"nombre": "Laura", "apellido": "Martínez", "documento": "9876543210", "email": "laura.martinez@maquinaria.com",
     "direccion": "Carrera 70 #45-10, Medellín", "telefono": "3189990011", "rol": RolEmpleado.supervisor},
]

# (nit de la empresa, datos de la solicitud)
SOLICITUDES = [
    ("900123456-1", {"codigo": "SOL-001", "fecha_solicitud": date(2023, 10, 15), "fecha_deseada": date(2023, 10, 30),
                     "estado": EstadoSolicitud.pendiente,
                     "descripcion_solicitud": "Mantenimiento preventivo de retroexcavadoras"}),
    ("800987654-3", {"codigo": "SOL-002", "fecha_solicitud": date(2023, 10, 20), "fecha_deseada": date(2023, 11, 5),
                     "estado": EstadoSolicitud.en_proceso,
                     "descripcion_solicitud": "Reparación de excavadora"}),
    ("900123456-1", {"codigo": "SOL-003", "fecha_solicitud": date(2023, 10, 25), "fecha_deseada": date(2023, 11, 10),
                     "estado": EstadoSolicitud.completada,
                     "descripcion_solicitud": "Revisión general de bulldozers"}),
]

# (solicitud, mantenimiento, cantidad de máquinas)
DETALLES = [
    ("SOL-001", "MANT-001", 2),
    ("SOL-002", "MANT-002", 1),
    ("SOL-003", "MANT-003", 3),
]

# (solicitud, documento del empleado, estado)
ASIGNACIONES = [
    ("SOL-001", "1057896547", EstadoAsignacion.asignado),
    ("SOL-001", "9876543210", EstadoAsignacion.en_proceso),
    ("SOL-002", "1057896547", EstadoAsignacion.completado),
]


def poblar_datos(db: Session) -> None:
    """Inserta el conjunto de datos de demostración en una base vacía."""
    for data in USUARIOS:
        datos = dict(data)
        password = datos.pop("password")
        db.add(User(hashed_password=hash_password(password), **datos))

    empresas = {data["nit"]: Empresa(**data) for data in EMPRESAS}
    db.add_all(empresas.values())

    for nit, data in REPRESENTANTES:
        db.add(Representante(empresa=empresas[nit], **data))

    categorias = {data["nombre"]: Categoria(**data) for data in CATEGORIAS}
    db.add_all(categorias.values())

    tipos = {}
    for categoria, data in TIPOS:
        tipos[data["nombre"]] = TipoMaquinaria(categoria=categorias[categoria], **data)
    db.add_all(tipos.values())

    mantenimientos = {}
    for tipo, data in MANTENIMIENTOS:
        mantenimientos[data["codigo"]] = Mantenimiento(tipo_maquinaria=tipos[tipo], **data)
    db.add_all(mantenimientos.values())

    empleados = {data["documento"]: Empleado(**data) for data in EMPLEADOS}
    db.add_all(empleados.values())

    solicitudes = {}
    for nit, data in SOLICITUDES:
        solicitudes[data["codigo"]] = Solicitud(empresa=empresas[nit], **data)
    db.add_all(solicitudes.values())

    for codigo, codigo_mantenimiento, cantidad in DETALLES:
        mantenimiento = mantenimientos[codigo_mantenimiento]
        db.add(DetalleSolicitud(
            solicitud=solicitudes[codigo],
            mantenimiento=mantenimiento,
            cantidad_maquinas=cantidad,
            costo_total=calcular_costo_total(mantenimiento, cantidad),
        ))

    for codigo, documento, estado in ASIGNACIONES:
        db.add(SolicitudEmpleado(solicitud=solicitudes[codigo], empleado=empleados[documento], estado=estado))

    db.commit()


def main():
    parser = argparse.ArgumentParser(description="Pobla la base de datos con datos de demostración")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Elimina y vuelve a crear todas las tablas antes de poblar"
    )
    args = parser.parse_args()

    if args.reset:
        print(">> Eliminando tablas existentes...")
        Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        if db.query(Empresa).first() and not args.reset:
            print("[!] La base de datos ya tiene datos. Use --reset para recrearla.")
            return
        poblar_datos(db)
        print(f"[OK] Datos de demostración cargados: {len(EMPRESAS)} empresas, "
              f"{len(MANTENIMIENTOS)} mantenimientos, {len(SOLICITUDES)} solicitudes")
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
