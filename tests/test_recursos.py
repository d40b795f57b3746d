"""
Pruebas CRUD de representantes, categorías, tipos de maquinaria,
mantenimientos, empleados y solicitudes.
"""
from fastapi.testclient import TestClient

from maquinaria_api.models.empresa import Empresa


class TestRepresentantes:

    def _payload(self, empresa_id, **extra):
        return {
            "nombre": "Carlos",
            "apellido": "Rodríguez",
            "documento": "1020304050",
            "telefono": "3001112233",
            "email": "carlos@constructoraprueba.com",
            "empresa_id": empresa_id,
            **extra,
        }

    def test_crear_con_empresa(self, client: TestClient, auth_headers, empresa: Empresa):
        response = client.post("/api/representantes", json=self._payload(empresa.id), headers=auth_headers)

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["empresa"]["id"] == empresa.id
        assert data["empresa"]["nombre"] == empresa.nombre

        empresa_data = client.get(f"/api/empresas/{empresa.id}", headers=auth_headers).json()["data"]
        assert [r["documento"] for r in empresa_data["representantes"]] == ["1020304050"]

    def test_empresa_inexistente(self, client: TestClient, auth_headers):
        response = client.post("/api/representantes", json=self._payload(9999), headers=auth_headers)

        assert response.status_code == 422
        assert response.json()["errors"]["empresa_id"] == ["El campo empresa_id seleccionado no existe."]

    def test_empresa_id_fuera_de_rango(self, client: TestClient, auth_headers):
        response = client.post("/api/representantes", json=self._payload(10**20), headers=auth_headers)

        assert response.status_code == 422
        assert "empresa_id" in response.json()["errors"]

    def test_documento_duplicado(self, client: TestClient, auth_headers, empresa: Empresa):
        client.post("/api/representantes", json=self._payload(empresa.id), headers=auth_headers)
        response = client.post(
            "/api/representantes",
            json=self._payload(empresa.id, email="otro@constructoraprueba.com"),
            headers=auth_headers,
        )

        assert response.status_code == 422
        assert list(response.json()["errors"]) == ["documento"]

    def test_no_encontrado(self, client: TestClient, auth_headers):
        response = client.get("/api/representantes/9999", headers=auth_headers)

        assert response.status_code == 404
        assert response.json()["message"] == "Representante no encontrado"


class TestCategoriasYTipos:

    def test_flujo_categoria_tipo_mantenimiento(self, client: TestClient, auth_headers):
        categoria = client.post(
            "/api/categorias",
            json={"nombre": "Maquinaria Pesada", "descripcion": "Equipos grandes"},
            headers=auth_headers,
        )
        assert categoria.status_code == 201
        categoria_id = categoria.json()["data"]["id"]

        tipo = client.post(
            "/api/tipos-maquinaria",
            json={"nombre": "Bulldozer", "categoria_id": categoria_id},
            headers=auth_headers,
        )
        assert tipo.status_code == 201
        tipo_data = tipo.json()["data"]
        assert tipo_data["categoria"]["nombre"] == "Maquinaria Pesada"

        mantenimiento = client.post(
            "/api/mantenimientos",
            json={
                "codigo": "MANT-900",
                "nombre": "Revisión general",
                "descripcion": "Motor y transmisión",
                "costo": 800000,
                "tipo_maquinaria_id": tipo_data["id"],
            },
            headers=auth_headers,
        )
        assert mantenimiento.status_code == 201
        assert mantenimiento.json()["data"]["tipo_maquinaria"]["nombre"] == "Bulldozer"

        categoria_data = client.get(f"/api/categorias/{categoria_id}", headers=auth_headers).json()["data"]
        assert [t["nombre"] for t in categoria_data["tipos_maquinaria"]] == ["Bulldozer"]

        tipo_data = client.get(f"/api/tipos-maquinaria/{tipo_data['id']}", headers=auth_headers).json()["data"]
        assert [m["codigo"] for m in tipo_data["mantenimientos"]] == ["MANT-900"]

    def test_alias_con_guion_bajo(self, client: TestClient, auth_headers, tipo_maquinaria):
        response = client.get(f"/api/tipos_maquinaria/{tipo_maquinaria.id}", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["data"]["nombre"] == "Retroexcavadora"

    def test_tipo_con_categoria_inexistente(self, client: TestClient, auth_headers):
        response = client.post(
            "/api/tipos-maquinaria",
            json={"nombre": "Grúa", "categoria_id": 9999},
            headers=auth_headers,
        )

        assert response.status_code == 422
        assert "categoria_id" in response.json()["errors"]

    def test_eliminar_categoria(self, client: TestClient, auth_headers, tipo_maquinaria):
        categoria_id = tipo_maquinaria.categoria_id
        response = client.delete(f"/api/categorias/{categoria_id}", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["message"] == "Categoría eliminada exitosamente"
        assert client.get(f"/api/categorias/{categoria_id}", headers=auth_headers).status_code == 404
        assert client.get("/api/tipos-maquinaria", headers=auth_headers).json()["data"] == []


class TestMantenimientos:

    def test_codigo_duplicado(self, client: TestClient, auth_headers, mantenimiento):
        response = client.post(
            "/api/mantenimientos",
            json={
                "codigo": mantenimiento.codigo,
                "nombre": "Otro",
                "descripcion": "Otro",
                "costo": 1000,
                "tipo_maquinaria_id": mantenimiento.tipo_maquinaria_id,
            },
            headers=auth_headers,
        )

        assert response.status_code == 422
        assert response.json()["errors"]["codigo"] == ["El campo codigo ya ha sido registrado."]

    def test_costo_negativo(self, client: TestClient, auth_headers, tipo_maquinaria):
        response = client.post(
            "/api/mantenimientos",
            json={
                "codigo": "MANT-901",
                "nombre": "Negativo",
                "descripcion": "Costo inválido",
                "costo": -5,
                "tipo_maquinaria_id": tipo_maquinaria.id,
            },
            headers=auth_headers,
        )

        assert response.status_code == 422
        assert "costo" in response.json()["errors"]

    def test_actualizar_costo(self, client: TestClient, auth_headers, mantenimiento):
        response = client.put(
            f"/api/mantenimientos/{mantenimiento.id}",
            json={"costo": 1750000.5},
            headers=auth_headers,
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert float(data["costo"]) == 1750000.5
        assert data["codigo"] == "MANT-100"


class TestEmpleados:

    EMPLEADO = {
        "nombre": "Laura",
        "apellido": "Martínez",
        "documento": "9876543210",
        "email": "laura@maquinaria.com",
        "direccion": "Carrera 70 #45-10",
        "telefono": "3189990011",
    }

    def test_crear_rol_por_defecto(self, client: TestClient, auth_headers):
        response = client.post("/api/empleados", json=self.EMPLEADO, headers=auth_headers)

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["rol"] == "empleado"
        assert data["asignaciones"] == []

    def test_documento_duplicado(self, client: TestClient, auth_headers, empleado):
        response = client.post(
            "/api/empleados",
            json={**self.EMPLEADO, "documento": empleado.documento},
            headers=auth_headers,
        )

        assert response.status_code == 422
        assert "documento" in response.json()["errors"]

    def test_actualizar_y_eliminar(self, client: TestClient, auth_headers, empleado):
        response = client.put(
            f"/api/empleados/{empleado.id}",
            json={"rol": "supervisor"},
            headers=auth_headers,
        )
        assert response.status_code == 200
        assert response.json()["data"]["rol"] == "supervisor"
        assert response.json()["data"]["documento"] == "1057896547"

        assert client.delete(f"/api/empleados/{empleado.id}", headers=auth_headers).status_code == 200
        response = client.get(f"/api/empleados/{empleado.id}", headers=auth_headers)
        assert response.status_code == 404
        assert response.json()["message"] == "Empleado no encontrado"


class TestSolicitudes:

    def test_crear_estado_por_defecto(self, client: TestClient, auth_headers, empresa: Empresa):
        response = client.post(
            "/api/solicitudes",
            json={"codigo": "SOL-200", "fecha_solicitud": "2023-10-15", "empresa_id": empresa.id},
            headers=auth_headers,
        )

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["estado"] == "pendiente"
        assert data["empresa"]["id"] == empresa.id
        assert data["detalles"] == []
        assert data["asignaciones"] == []

    def test_codigo_duplicado(self, client: TestClient, auth_headers, solicitud):
        response = client.post(
            "/api/solicitudes",
            json={"codigo": solicitud.codigo, "fecha_solicitud": "2023-10-16", "empresa_id": solicitud.empresa_id},
            headers=auth_headers,
        )

        assert response.status_code == 422
        assert "codigo" in response.json()["errors"]

    def test_estado_invalido(self, client: TestClient, auth_headers, solicitud):
        response = client.put(
            f"/api/solicitudes/{solicitud.id}",
            json={"estado": "archivada"},
            headers=auth_headers,
        )

        assert response.status_code == 422
        assert "estado" in response.json()["errors"]

    def test_cambiar_estado(self, client: TestClient, auth_headers, solicitud):
        response = client.put(
            f"/api/solicitudes/{solicitud.id}",
            json={"estado": "en_proceso"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["estado"] == "en_proceso"
        assert data["codigo"] == "SOL-100"
        assert data["fecha_solicitud"] == "2023-10-15"

    def test_no_encontrada(self, client: TestClient, auth_headers):
        response = client.delete("/api/solicitudes/9999", headers=auth_headers)

        assert response.status_code == 404
        assert response.json()["message"] == "Solicitud no encontrada"
