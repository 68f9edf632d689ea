"""
Tests de empresas: CRUD, unicidad de NIT y consultas por solicitudes.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from app.core.exceptions import ValidationException
from app.crud.common import confirmar
from app.crud.empresa import CAMPOS_UNICOS
from app.models.empresa import Empresa
from app.models.solicitud import Solicitud

API = "/api/v1/empresas"

EMPRESA = {
    "nit": "900123456-1",
    "nombreEmpresa": "X",
    "direccion": "A",
    "ciudad": "Bogotá",
    "telefono": "123",
}


def _crear(client, headers, **cambios):
    return client.post(f"{API}/", json={**EMPRESA, **cambios}, headers=headers)


class TestCrudEmpresa:

    def test_crear_empresa(self, client: TestClient, admin_headers):
        response = _crear(client, admin_headers)

        assert response.status_code == 201
        body = response.json()
        assert body["id"] > 0
        assert body["nombreEmpresa"] == "X"
        assert body["representante"] is None

    def test_nit_duplicado(self, client: TestClient, admin_headers):
        assert _crear(client, admin_headers).status_code == 201

        response = _crear(client, admin_headers, nombreEmpresa="Otra")

        assert response.status_code == 422
        body = response.json()
        assert body["message"] == "Error de validación"
        assert body["errors"]["nit"] == ["El NIT ya está registrado"]

    def test_acepta_snake_case(self, client: TestClient, admin_headers):
        payload = {**EMPRESA, "nombre_empresa": "Snake S.A.S"}
        del payload["nombreEmpresa"]

        response = client.post(f"{API}/", json=payload, headers=admin_headers)

        assert response.status_code == 201
        assert response.json()["nombreEmpresa"] == "Snake S.A.S"

    def test_campos_requeridos(self, client: TestClient, admin_headers):
        response = client.post(f"{API}/", json={"nit": "1"}, headers=admin_headers)

        assert response.status_code == 422
        errores = response.json()["errors"]
        for campo in ("nombreEmpresa", "direccion", "ciudad", "telefono"):
            assert campo in errores

    def test_actualizacion_parcial(self, client: TestClient, admin_headers, empresa):
        response = client.put(f"{API}/{empresa.id}", json={"ciudad": "Medellín"}, headers=admin_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["ciudad"] == "Medellín"
        assert body["nombreEmpresa"] == "Constructora Andina"
        assert body["nit"] == "900123456-1"

    def test_actualizar_con_su_propio_nit(self, client: TestClient, admin_headers, empresa):
        response = client.put(f"{API}/{empresa.id}", json={"nit": empresa.nit}, headers=admin_headers)

        assert response.status_code == 200

    def test_actualizar_con_nit_de_otra(self, client: TestClient, admin_headers, empresa):
        otra = _crear(client, admin_headers, nit="800999888-2").json()

        response = client.put(f"{API}/{otra['id']}", json={"nit": empresa.nit}, headers=admin_headers)

        assert response.status_code == 422
        assert "nit" in response.json()["errors"]

    def test_null_explicito_en_campo_requerido(self, client: TestClient, admin_headers, empresa):
        response = client.put(f"{API}/{empresa.id}", json={"nombreEmpresa": None}, headers=admin_headers)

        assert response.status_code == 422
        assert "nombreEmpresa" in response.json()["errors"]

    def test_empresa_inexistente(self, client: TestClient, admin_headers):
        response = client.get(f"{API}/999", headers=admin_headers)

        assert response.status_code == 404
        assert response.json() == {"message": "Empresa no encontrada"}

    def test_eliminar_empresa(self, client: TestClient, db: Session, admin_headers, empresa):
        empresa_id = empresa.id

        response = client.delete(f"{API}/{empresa_id}", headers=admin_headers)

        assert response.status_code == 200
        assert db.query(Empresa).filter(Empresa.id == empresa_id).first() is None

    def test_requiere_autenticacion(self, client: TestClient):
        assert client.get(f"{API}/").status_code == 401


class TestCarreraDeUnicidad:

    def test_integrity_error_se_traduce_a_422(self, db: Session, empresa):
        # Simula la petición que pierde la carrera: ya pasó la validación previa
        db.add(
            Empresa(
                nit=empresa.nit,
                nombre_empresa="Duplicada",
                direccion="B",
                ciudad="Cali",
                telefono="456",
            )
        )

        with pytest.raises(ValidationException) as exc_info:
            confirmar(db, CAMPOS_UNICOS)

        assert "nit" in exc_info.value.errors
        assert db.query(Empresa).count() == 1


class TestConsultasSolicitudes:

    def _solicitud(self, db, empresa, plantilla):
        nueva = Solicitud(
            usuario_id=plantilla.usuario_id,
            empresa_id=empresa.id,
            fecha_solicitud=plantilla.fecha_solicitud,
            fecha_uso=plantilla.fecha_uso,
            hora_inicio=plantilla.hora_inicio,
            hora_fin=plantilla.hora_fin,
            proyecto="Otro proyecto",
            lugar="Soacha",
        )
        db.add(nueva)
        db.commit()

    def test_mas_solicitudes(self, client: TestClient, db: Session, admin_headers, empresa, solicitud):
        otra = Empresa(nit="800", nombre_empresa="Vías del Sur", direccion="C", ciudad="Neiva", telefono="1")
        db.add(otra)
        db.commit()
        self._solicitud(db, otra, solicitud)
        self._solicitud(db, otra, solicitud)

        response = client.get(f"{API}/mas-solicitudes", headers=admin_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["nombreEmpresa"] == "Vías del Sur"
        assert body["solicitudesCount"] == 2

    def test_mas_solicitudes_empate_gana_la_primera(
        self, client: TestClient, db: Session, admin_headers, empresa, solicitud
    ):
        otra = Empresa(nit="800", nombre_empresa="Vías del Sur", direccion="C", ciudad="Neiva", telefono="1")
        db.add(otra)
        db.commit()
        self._solicitud(db, otra, solicitud)

        response = client.get(f"{API}/mas-solicitudes", headers=admin_headers)

        assert response.json()["id"] == empresa.id
        assert response.json()["solicitudesCount"] == 1

    def test_mas_solicitudes_sin_empresas(self, client: TestClient, admin_headers):
        response = client.get(f"{API}/mas-solicitudes", headers=admin_headers)

        assert response.status_code == 404

    def test_sin_solicitudes(self, client: TestClient, db: Session, admin_headers, empresa, solicitud):
        otra = Empresa(nit="800", nombre_empresa="Vías del Sur", direccion="C", ciudad="Neiva", telefono="1")
        db.add(otra)
        db.commit()

        response = client.get(f"{API}/sin-solicitudes", headers=admin_headers)

        assert response.status_code == 200
        assert [e["nombreEmpresa"] for e in response.json()] == ["Vías del Sur"]
