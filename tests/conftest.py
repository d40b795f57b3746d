"""
Fixtures compartidas: base SQLite en memoria por prueba, cliente HTTP con
la sesión inyectada y cabeceras de autenticación de un usuario registrado.
"""
import os

os.environ.setdefault("SECRET_KEY", "clave-de-pruebas")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ENVIRONMENT", "test")

from decimal import Decimal
from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from maquinaria_api.db.base import Base
from maquinaria_api.db.session import get_db
from maquinaria_api.main import app
from maquinaria_api.models import (
    Categoria,
    Empleado,
    Empresa,
    Mantenimiento,
    Solicitud,
    TipoMaquinaria,
)
from maquinaria_api.scripts.poblar_datos import poblar_datos

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session):
    app.dependency_overrides[get_db] = lambda: db
    # Sin `with`: el lifespan no se ejecuta contra la base real
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(client: TestClient):
    """Registra un usuario y devuelve la cabecera Bearer de su token."""
    response = client.post(
        "/api/register",
        json={
            "name": "Usuario Pruebas",
            "email": "pruebas@maquinaria.com",
            "password": "secreto123",
            "rol": "admin",
        },
    )
    assert response.status_code == 201
    token = response.json()["data"]["token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def datos_demo(db: Session):
    poblar_datos(db)
    return db


@pytest.fixture
def empresa(db: Session):
    empresa = Empresa(
        nombre="Constructora Prueba",
        nit="900000001-1",
        direccion="Calle 1 #2-3",
        telefono="3000000000",
        email="contacto@constructoraprueba.com",
    )
    db.add(empresa)
    db.commit()
    db.refresh(empresa)
    return empresa


@pytest.fixture
def tipo_maquinaria(db: Session):
    categoria = Categoria(nombre="Maquinaria Pesada", descripcion="Equipos grandes")
    tipo = TipoMaquinaria(nombre="Retroexcavadora", descripcion="Excavación", categoria=categoria)
    db.add(tipo)
    db.commit()
    db.refresh(tipo)
    return tipo


@pytest.fixture
def mantenimiento(db: Session, tipo_maquinaria: TipoMaquinaria):
    mantenimiento = Mantenimiento(
        codigo="MANT-100",
        nombre="Preventivo",
        descripcion="Cambio de aceite y filtros",
        costo=Decimal("1500000.00"),
        tiempo_estimado=8,
        tipo_maquinaria=tipo_maquinaria,
    )
    db.add(mantenimiento)
    db.commit()
    db.refresh(mantenimiento)
    return mantenimiento


@pytest.fixture
def solicitud(db: Session, empresa: Empresa):
    solicitud = Solicitud(codigo="SOL-100", fecha_solicitud=date(2023, 10, 15), empresa=empresa)
    db.add(solicitud)
    db.commit()
    db.refresh(solicitud)
    return solicitud


@pytest.fixture
def empleado(db: Session):
    empleado = Empleado(
        nombre="Pedro",
        apellido="González",
        documento="1057896547",
        email="pedro@maquinaria.com",
        direccion="Calle 50 #30-20",
        telefono="3157778899",
    )
    db.add(empleado)
    db.commit()
    db.refresh(empleado)
    return empleado
