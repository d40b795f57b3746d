"""
Pruebas de autenticación: registro, login, perfil y revocación de tokens.
"""
from fastapi.testclient import TestClient


REGISTRO = {
    "name": "Maryuri Zorro",
    "email": "maryuri@maquinaria.com",
    "password": "123456",
    "rol": "empleado",
}


class TestRegistro:
    """POST /api/register"""

    def test_registro_devuelve_usuario_y_token(self, client: TestClient):
        response = client.post("/api/register", json=REGISTRO)

        assert response.status_code == 201
        body = response.json()
        assert body["status"] is True
        assert body["message"] == "Usuario registrado exitosamente"
        assert body["data"]["user"]["email"] == REGISTRO["email"]
        assert body["data"]["user"]["rol"] == "empleado"
        assert body["data"]["token_type"] == "Bearer"
        assert body["data"]["token"]
        assert "password" not in body["data"]["user"]
        assert "hashed_password" not in body["data"]["user"]

    def test_registro_email_duplicado(self, client: TestClient):
        client.post("/api/register", json=REGISTRO)
        response = client.post("/api/register", json=REGISTRO)

        assert response.status_code == 422
        body = response.json()
        assert body["status"] is False
        assert body["message"] == "Error de validación"
        assert "email" in body["errors"]

    def test_registro_password_corto(self, client: TestClient):
        response = client.post("/api/register", json={**REGISTRO, "password": "123"})

        assert response.status_code == 422
        assert "password" in response.json()["errors"]

    def test_registro_rol_invalido(self, client: TestClient):
        response = client.post("/api/register", json={**REGISTRO, "rol": "gerente"})

        assert response.status_code == 422
        assert "rol" in response.json()["errors"]


class TestLogin:
    """POST /api/login"""

    def test_login_exitoso(self, client: TestClient):
        client.post("/api/register", json=REGISTRO)
        response = client.post(
            "/api/login",
            json={"email": REGISTRO["email"], "password": REGISTRO["password"]},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Login exitoso"
        assert body["data"]["user"]["email"] == REGISTRO["email"]
        assert body["data"]["token"]

    def test_login_credenciales_invalidas(self, client: TestClient):
        client.post("/api/register", json=REGISTRO)
        response = client.post(
            "/api/login",
            json={"email": REGISTRO["email"], "password": "incorrecta"},
        )

        assert response.status_code == 401
        assert response.json() == {"status": False, "message": "Credenciales inválidas"}

    def test_login_usuario_inexistente(self, client: TestClient):
        response = client.post(
            "/api/login",
            json={"email": "nadie@maquinaria.com", "password": "123456"},
        )

        assert response.status_code == 401


class TestRutasProtegidas:
    """Perfil, logout y acceso sin token."""

    def test_me_devuelve_usuario_en_sobre(self, client: TestClient, auth_headers):
        response = client.get("/api/me", headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["status"] is True
        assert body["data"]["email"] == "pruebas@maquinaria.com"

    def test_user_devuelve_usuario_sin_sobre(self, client: TestClient, auth_headers):
        response = client.get("/api/user", headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["email"] == "pruebas@maquinaria.com"
        assert "status" not in body

    def test_sin_token(self, client: TestClient):
        response = client.get("/api/empresas")

        assert response.status_code == 401
        assert response.json() == {"status": False, "message": "Unauthenticated."}

    def test_token_invalido(self, client: TestClient):
        response = client.get("/api/me", headers={"Authorization": "Bearer no-es-un-jwt"})

        assert response.status_code == 401
        assert response.json()["message"] == "Unauthenticated."

    def test_logout_revoca_el_token(self, client: TestClient, auth_headers):
        response = client.post("/api/logout", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["message"] == "Logout exitoso"

        assert client.get("/api/me", headers=auth_headers).status_code == 401
        assert client.get("/api/empresas", headers=auth_headers).status_code == 401

    def test_logout_no_afecta_otros_tokens(self, client: TestClient, auth_headers):
        login = client.post(
            "/api/login",
            json={"email": "pruebas@maquinaria.com", "password": "secreto123"},
        )
        otro_token = {"Authorization": f"Bearer {login.json()['data']['token']}"}

        client.post("/api/logout", headers=auth_headers)

        assert client.get("/api/me", headers=otro_token).status_code == 200


class TestRaiz:
    def test_liveness(self, client: TestClient):
        response = client.get("/api/")

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "API de Maquinaria funcionando correctamente"
        assert body["version"]
        assert body["timestamp"]

    def test_ruta_inexistente(self, client: TestClient):
        response = client.get("/api/no-existe")

        assert response.status_code == 404
        assert response.json() == {"status": False, "message": "Endpoint no encontrado"}
