"""
Consultas de reportes sobre los datos de demostración.

Datos relevantes: Argos tiene SOL-001 (2 retroexcavadoras) y SOL-003
(3 bulldozers); Constructora ABC tiene SOL-002 (1 excavadora); Ingeniería
XYZ no tiene solicitudes. Todas las solicitudes son de octubre de 2023.
"""
from fastapi.testclient import TestClient


class TestConsultasSimples:

    def test_empleados_ordenados(self, client: TestClient, auth_headers, datos_demo):
        response = client.get("/api/consultas/empleados-ordenados", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()["data"]
        assert [e["apellido"] for e in data] == ["González", "Martínez"]
        assert set(data[0]) == {"nombre", "apellido", "documento", "email", "telefono"}

    def test_maquinaria_pesada_costosa(self, client: TestClient, auth_headers, datos_demo):
        response = client.get("/api/consultas/maquinaria-pesada-costosa", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()["data"]
        assert [m["codigo"] for m in data] == ["MANT-002", "MANT-001"]
        assert data[0]["tipo_maquinaria"] == "Excavadora"
        assert data[0]["categoria"] == "Maquinaria Pesada"
        assert float(data[0]["costo"]) == 2500000.0

    def test_maquinaria_costosa_con_umbral(self, client: TestClient, auth_headers, datos_demo):
        response = client.get(
            "/api/consultas/maquinaria-pesada-costosa",
            params={"umbral": 500000},
            headers=auth_headers,
        )

        assert [m["codigo"] for m in response.json()["data"]] == ["MANT-002", "MANT-001", "MANT-003"]

    def test_empresa_mas_solicitudes(self, client: TestClient, auth_headers, datos_demo):
        response = client.get("/api/consultas/empresa-mas-solicitudes", headers=auth_headers)

        data = response.json()["data"]
        assert data["nombre"] == "Argos S.A."
        assert data["nit"] == "900123456-1"
        assert data["total_solicitudes"] == 2

    def test_empresa_mas_solicitudes_sin_datos(self, client: TestClient, auth_headers):
        response = client.get("/api/consultas/empresa-mas-solicitudes", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["data"] is None

    def test_maquinas_empresa(self, client: TestClient, auth_headers, datos_demo):
        response = client.get(
            "/api/consultas/maquinas-empresa",
            params={"nombre": "argos"},
            headers=auth_headers,
        )

        assert response.json()["data"] == {"total_maquinas": 5, "empresa": "argos"}

    def test_maquinas_argos_ruta_historica(self, client: TestClient, auth_headers, datos_demo):
        response = client.get("/api/consultas/maquinas-argos", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["data"]["total_maquinas"] == 5

    def test_maquinas_empresa_sin_solicitudes(self, client: TestClient, auth_headers, datos_demo):
        response = client.get(
            "/api/consultas/maquinas-empresa",
            params={"nombre": "XYZ"},
            headers=auth_headers,
        )

        assert response.json()["data"]["total_maquinas"] == 0

    def test_comodines_se_buscan_literalmente(self, client: TestClient, auth_headers, datos_demo):
        for nombre in ("%", "_"):
            response = client.get(
                "/api/consultas/maquinas-empresa",
                params={"nombre": nombre},
                headers=auth_headers,
            )

            assert response.json()["data"]["total_maquinas"] == 0


class TestConsultasDeSolicitudes:

    def test_solicitudes_empleado(self, client: TestClient, auth_headers, datos_demo):
        response = client.get(
            "/api/consultas/solicitudes-empleado",
            params={"documento": "1057896547"},
            headers=auth_headers,
        )

        data = response.json()["data"]
        assert [s["codigo"] for s in data] == ["SOL-001", "SOL-002"]
        assert [s["estado_asignacion"] for s in data] == ["asignado", "completado"]
        assert data[0]["empresa"]["nombre"] == "Argos S.A."

    def test_representantes_sin_solicitudes(self, client: TestClient, auth_headers, datos_demo):
        empresas = client.get("/api/empresas", headers=auth_headers).json()["data"]
        xyz = next(e for e in empresas if e["nombre"] == "Ingeniería XYZ")
        client.post(
            "/api/representantes",
            json={
                "nombre": "Sofía",
                "apellido": "Ramírez",
                "documento": "7788990011",
                "telefono": "3201234567",
                "email": "sofia@ingenieriaxyz.com",
                "empresa_id": xyz["id"],
            },
            headers=auth_headers,
        )

        response = client.get("/api/consultas/representantes-sin-solicitudes", headers=auth_headers)

        data = response.json()["data"]
        assert [r["documento"] for r in data] == ["7788990011"]
        assert data[0]["empresa_nombre"] == "Ingeniería XYZ"

    def test_listado_solicitudes(self, client: TestClient, auth_headers, datos_demo):
        response = client.get("/api/consultas/listado-solicitudes", headers=auth_headers)

        data = response.json()["data"]
        assert [fila["codigo_solicitud"] for fila in data] == ["SOL-001", "SOL-002", "SOL-003"]
        assert data[0]["empresa"] == "Argos S.A."
        assert data[0]["cantidad_maquinas"] == 2
        assert float(data[0]["costo_total"]) == 3000000.0
        assert float(data[2]["costo_total"]) == 2400000.0

    def test_solicitud_por_codigo(self, client: TestClient, auth_headers, datos_demo):
        response = client.post(
            "/api/consultas/solicitud-por-codigo",
            json={"codigo": "SOL-002"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["empresa"]["nombre"] == "Constructora ABC"
        assert data["detalles"][0]["mantenimiento"]["codigo"] == "MANT-002"
        assert data["detalles"][0]["mantenimiento"]["tipo_maquinaria"]["nombre"] == "Excavadora"
        assert [a["estado"] for a in data["asignaciones"]] == ["completado"]

    def test_solicitud_por_codigo_inexistente(self, client: TestClient, auth_headers, datos_demo):
        response = client.post(
            "/api/consultas/solicitud-por-codigo",
            json={"codigo": "SOL-999"},
            headers=auth_headers,
        )

        assert response.status_code == 404
        assert response.json() == {"status": False, "message": "Solicitud no encontrada"}

    def test_mantenimientos_tipo(self, client: TestClient, auth_headers, datos_demo):
        response = client.get("/api/consultas/mantenimientos-retroexcavadoras", headers=auth_headers)

        assert response.json()["data"] == {"cantidad_mantenimientos": 1, "tipo_maquinaria": "retroexcavadora"}

        response = client.get(
            "/api/consultas/mantenimientos-tipo",
            params={"tipo": "bulldozer"},
            headers=auth_headers,
        )
        assert response.json()["data"]["cantidad_mantenimientos"] == 1

    def test_solicitudes_octubre_2023(self, client: TestClient, auth_headers, datos_demo):
        response = client.get("/api/consultas/solicitudes-octubre-2023", headers=auth_headers)

        data = response.json()["data"]
        assert len(data) == 3
        assert data[0] == {
            "empresa": "Argos S.A.",
            "maquinaria": "Retroexcavadora",
            "codigo": "MANT-001",
            "mantenimiento": "Mantenimiento preventivo retroexcavadora",
            "cantidad_maquinas": 2,
        }

    def test_solicitudes_otro_mes(self, client: TestClient, auth_headers, datos_demo):
        response = client.get(
            "/api/consultas/solicitudes-mes",
            params={"anio": 2023, "mes": 11},
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert response.json()["data"] == []

    def test_mes_invalido(self, client: TestClient, auth_headers):
        response = client.get(
            "/api/consultas/solicitudes-mes",
            params={"anio": 2023, "mes": 13},
            headers=auth_headers,
        )

        assert response.status_code == 422
        assert "mes" in response.json()["errors"]

    def test_requiere_autenticacion(self, client: TestClient):
        assert client.get("/api/consultas/listado-solicitudes").status_code == 401
