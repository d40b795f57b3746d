"""
Pruebas del CRUD de empresas: el recurso de referencia del API.
"""
from fastapi.testclient import TestClient

from maquinaria_api.models.empresa import Empresa


EMPRESA = {
    "nombre": "Constructora XYZ",
    "nit": "900123456-7",
    "direccion": "Calle 123 #45-67",
    "telefono": "3001234567",
    "email": "contacto@xyz.com",
}


class TestCrearEmpresa:

    def test_crear_empresa(self, client: TestClient, auth_headers):
        response = client.post("/api/empresas", json=EMPRESA, headers=auth_headers)

        assert response.status_code == 201
        body = response.json()
        assert body["status"] is True
        assert body["message"] == "Empresa creada exitosamente"
        for campo, valor in EMPRESA.items():
            assert body["data"][campo] == valor
        assert body["data"]["id"] > 0
        assert body["data"]["representantes"] == []

    def test_email_duplicado(self, client: TestClient, auth_headers):
        client.post("/api/empresas", json=EMPRESA, headers=auth_headers)
        response = client.post(
            "/api/empresas",
            json={**EMPRESA, "nit": "800000000-1"},
            headers=auth_headers,
        )

        assert response.status_code == 422
        body = response.json()
        assert body["status"] is False
        assert body["errors"] == {"email": ["El campo email ya ha sido registrado."]}

    def test_nit_y_email_duplicados(self, client: TestClient, auth_headers):
        client.post("/api/empresas", json=EMPRESA, headers=auth_headers)
        response = client.post("/api/empresas", json=EMPRESA, headers=auth_headers)

        assert response.status_code == 422
        assert set(response.json()["errors"]) == {"nit", "email"}

    def test_campos_obligatorios(self, client: TestClient, auth_headers):
        response = client.post("/api/empresas", json={"nombre": "Sin datos"}, headers=auth_headers)

        assert response.status_code == 422
        errors = response.json()["errors"]
        assert errors["nit"] == ["El campo nit es obligatorio."]
        assert "email" in errors
        assert "nombre" not in errors

    def test_email_invalido(self, client: TestClient, auth_headers):
        response = client.post(
            "/api/empresas",
            json={**EMPRESA, "email": "no-es-email"},
            headers=auth_headers,
        )

        assert response.status_code == 422
        assert "email" in response.json()["errors"]


class TestConsultarEmpresa:

    def test_listar(self, client: TestClient, auth_headers, empresa: Empresa):
        response = client.get("/api/empresas", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()["data"]
        assert len(data) == 1
        assert data[0]["nit"] == empresa.nit

    def test_obtener_incluye_solicitudes(self, client: TestClient, auth_headers, empresa: Empresa, solicitud):
        response = client.get(f"/api/empresas/{empresa.id}", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["nombre"] == empresa.nombre
        assert [s["codigo"] for s in data["solicitudes"]] == ["SOL-100"]

    def test_obtener_inexistente(self, client: TestClient, auth_headers):
        response = client.get("/api/empresas/9999", headers=auth_headers)

        assert response.status_code == 404
        assert response.json() == {"status": False, "message": "Empresa no encontrada"}

    def test_id_fuera_de_rango(self, client: TestClient, auth_headers):
        response = client.get("/api/empresas/99999999999999999999", headers=auth_headers)

        assert response.status_code == 422
        assert "empresa_id" in response.json()["errors"]


class TestActualizarEmpresa:

    def test_actualizacion_parcial(self, client: TestClient, auth_headers, empresa: Empresa):
        response = client.put(
            f"/api/empresas/{empresa.id}",
            json={"telefono": "3109998877"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["telefono"] == "3109998877"
        assert data["nombre"] == "Constructora Prueba"
        assert data["email"] == "contacto@constructoraprueba.com"

    def test_conservar_su_propio_email(self, client: TestClient, auth_headers, empresa: Empresa):
        response = client.put(
            f"/api/empresas/{empresa.id}",
            json={"email": empresa.email},
            headers=auth_headers,
        )

        assert response.status_code == 200

    def test_email_de_otra_empresa(self, client: TestClient, auth_headers, empresa: Empresa):
        otra = client.post("/api/empresas", json=EMPRESA, headers=auth_headers).json()["data"]
        response = client.put(
            f"/api/empresas/{otra['id']}",
            json={"email": empresa.email},
            headers=auth_headers,
        )

        assert response.status_code == 422
        assert "email" in response.json()["errors"]

    def test_null_en_campo_obligatorio(self, client: TestClient, auth_headers, empresa: Empresa):
        response = client.put(
            f"/api/empresas/{empresa.id}",
            json={"nombre": None},
            headers=auth_headers,
        )

        assert response.status_code == 422
        assert response.json()["errors"]["nombre"] == ["El campo nombre es obligatorio."]

    def test_actualizar_inexistente(self, client: TestClient, auth_headers):
        response = client.put("/api/empresas/9999", json={"nombre": "X"}, headers=auth_headers)

        assert response.status_code == 404


class TestEliminarEmpresa:

    def test_eliminar_y_consultar(self, client: TestClient, auth_headers, empresa: Empresa):
        response = client.delete(f"/api/empresas/{empresa.id}", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {"status": True, "message": "Empresa eliminada exitosamente"}
        assert client.get(f"/api/empresas/{empresa.id}", headers=auth_headers).status_code == 404

    def test_eliminar_en_cascada(self, client: TestClient, auth_headers, db, empresa: Empresa, solicitud):
        client.delete(f"/api/empresas/{empresa.id}", headers=auth_headers)

        response = client.get("/api/solicitudes", headers=auth_headers)
        assert response.json()["data"] == []

    def test_eliminar_inexistente(self, client: TestClient, auth_headers):
        response = client.delete("/api/empresas/9999", headers=auth_headers)

        assert response.status_code == 404
