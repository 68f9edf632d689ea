"""
Tests de catálogos: cargos, categorías, empleados, representantes y máquinas.
"""
from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from app.core.exceptions import ValidationException
from app.crud.common import confirmar
from app.crud.representante import CAMPOS_UNICOS as CAMPOS_UNICOS_REPRESENTANTE
from app.models.cargo import Cargo
from app.models.empleado import Empleado
from app.models.empresa import Empresa
from app.models.maquina import Maquina
from app.models.representante import Representante

API = "/api/v1"


class TestCargos:

    def test_crear_y_listar_ordenados(self, client: TestClient, admin_headers):
        for nombre in ("Supervisor", "Conductor"):
            response = client.post(
                f"{API}/cargos/", json={"nombre": nombre, "descripcion": "Cargo de obra"}, headers=admin_headers
            )
            assert response.status_code == 201

        response = client.get(f"{API}/cargos/", headers=admin_headers)

        assert [c["nombre"] for c in response.json()] == ["Conductor", "Supervisor"]

    def test_nombre_duplicado(self, client: TestClient, admin_headers, cargo):
        response = client.post(
            f"{API}/cargos/", json={"nombre": cargo.nombre, "descripcion": "Otro"}, headers=admin_headers
        )

        assert response.status_code == 422
        assert "nombre" in response.json()["errors"]

    def test_eliminar_cargo_elimina_empleados(self, client: TestClient, db: Session, admin_headers, empleado):
        cargo_id = empleado.cargo_id

        response = client.delete(f"{API}/cargos/{cargo_id}", headers=admin_headers)

        assert response.status_code == 200
        assert db.query(Cargo).count() == 0
        assert db.query(Empleado).count() == 0


class TestCategorias:

    def test_tipo_invalido(self, client: TestClient, admin_headers):
        response = client.post(
            f"{API}/categorias-maquinarias/",
            json={"tipoMaquinaria": "mediana", "descripcion": "No existe"},
            headers=admin_headers,
        )

        assert response.status_code == 422
        assert "tipoMaquinaria" in response.json()["errors"]

    def test_categoria_con_maquinas(self, client: TestClient, admin_headers, categoria_pesada, maquinas):
        response = client.get(f"{API}/categorias-maquinarias/{categoria_pesada.id}", headers=admin_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["tipoMaquinaria"] == "pesada"
        assert len(body["maquinas"]) == 3


class TestEmpleados:

    def test_crear_empleado(self, client: TestClient, admin_headers, cargo):
        response = client.post(
            f"{API}/empleados/",
            json={
                "documento": "79888777",
                "nombre": "Luis",
                "apellido": "Arango",
                "telefono": "3104445566",
                "cargoId": cargo.id,
            },
            headers=admin_headers,
        )

        assert response.status_code == 201
        body = response.json()
        assert body["cargo"]["nombre"] == cargo.nombre
        assert body["email"] is None

    def test_cargo_inexistente_y_documento_duplicado(self, client: TestClient, admin_headers, empleado):
        response = client.post(
            f"{API}/empleados/",
            json={
                "documento": empleado.documento,
                "nombre": "Luis",
                "apellido": "Arango",
                "telefono": "3104445566",
                "cargoId": 999,
            },
            headers=admin_headers,
        )

        assert response.status_code == 422
        errores = response.json()["errors"]
        assert "documento" in errores
        assert "cargoId" in errores

    def test_ordenados_por_apellido(self, client: TestClient, db: Session, admin_headers, cargo, empleado):
        otro_cargo = Cargo(nombre="Ingeniero residente", descripcion="Dirige la obra")
        db.add(otro_cargo)
        db.commit()
        db.add_all(
            [
                Empleado(documento="2", nombre="Ana", apellido="Buitrago", telefono="1", cargo_id=cargo.id),
                Empleado(documento="3", nombre="Beto", apellido="Acosta", telefono="1", cargo_id=otro_cargo.id),
                Empleado(documento="4", nombre="Alba", apellido="Buitrago", telefono="1", cargo_id=cargo.id),
            ]
        )
        db.commit()

        response = client.get(f"{API}/empleados/ordenados", headers=admin_headers)

        assert response.status_code == 200
        assert [(e["apellido"], e["nombre"]) for e in response.json()] == [
            ("Buitrago", "Alba"),
            ("Buitrago", "Ana"),
            ("Gómez", "Carlos"),
        ]


class TestRepresentantes:

    def _payload(self, empresa_id, **cambios):
        return {
            "nombre": "Sofía Herrera",
            "cedula": "52111222",
            "telefono": "3157778899",
            "email": "sofia@example.com",
            "empresaId": empresa_id,
            **cambios,
        }

    def test_crear_representante(self, client: TestClient, admin_headers, empresa):
        response = client.post(f"{API}/representantes/", json=self._payload(empresa.id), headers=admin_headers)

        assert response.status_code == 201
        assert response.json()["empresa"]["nit"] == empresa.nit

    def test_email_y_cedula_unicos(self, client: TestClient, admin_headers, empresa):
        client.post(f"{API}/representantes/", json=self._payload(empresa.id), headers=admin_headers)

        response = client.post(f"{API}/representantes/", json=self._payload(empresa.id), headers=admin_headers)

        assert response.status_code == 422
        errores = response.json()["errors"]
        assert "email" in errores
        assert "cedula" in errores

    def test_email_invalido(self, client: TestClient, admin_headers, empresa):
        response = client.post(
            f"{API}/representantes/", json=self._payload(empresa.id, email="no-es-email"), headers=admin_headers
        )

        assert response.status_code == 422
        assert "email" in response.json()["errors"]

    def test_empresa_con_un_solo_representante(self, client: TestClient, db: Session, admin_headers, empresa):
        client.post(f"{API}/representantes/", json=self._payload(empresa.id), headers=admin_headers)

        response = client.post(
            f"{API}/representantes/",
            json=self._payload(empresa.id, cedula="79333444", email="otro@example.com"),
            headers=admin_headers,
        )

        assert response.status_code == 422
        assert response.json()["errors"] == {"empresaId": ["La empresa ya tiene un representante"]}
        assert db.query(Representante).filter(Representante.empresa_id == empresa.id).count() == 1

    def test_mover_representante_a_empresa_ocupada(self, client: TestClient, db: Session, admin_headers, empresa):
        otra = Empresa(nit="800", nombre_empresa="Vías del Sur", direccion="C", ciudad="Neiva", telefono="1")
        db.add(otra)
        db.commit()
        client.post(f"{API}/representantes/", json=self._payload(empresa.id), headers=admin_headers)
        segundo = client.post(
            f"{API}/representantes/",
            json=self._payload(otra.id, cedula="1", email="rep@example.com"),
            headers=admin_headers,
        ).json()

        response = client.put(
            f"{API}/representantes/{segundo['id']}", json={"empresaId": empresa.id}, headers=admin_headers
        )
        assert response.status_code == 422
        assert "empresaId" in response.json()["errors"]

        response = client.put(
            f"{API}/representantes/{segundo['id']}",
            json={"empresaId": otra.id, "telefono": "3000000000"},
            headers=admin_headers,
        )
        assert response.status_code == 200

    def test_carrera_por_empresa_se_traduce_a_422(self, db: Session, empresa):
        db.add(Representante(nombre="A", cedula="1", telefono="1", email="a@example.com", empresa_id=empresa.id))
        db.commit()
        db.add(Representante(nombre="B", cedula="2", telefono="2", email="b@example.com", empresa_id=empresa.id))

        with pytest.raises(ValidationException) as exc_info:
            confirmar(db, CAMPOS_UNICOS_REPRESENTANTE)

        assert "empresaId" in exc_info.value.errors
        assert db.query(Representante).count() == 1

    def test_sin_solicitudes(self, client: TestClient, db: Session, admin_headers, empresa, solicitud):
        otra = Empresa(nit="800", nombre_empresa="Vías del Sur", direccion="C", ciudad="Neiva", telefono="1")
        db.add(otra)
        db.commit()
        client.post(f"{API}/representantes/", json=self._payload(empresa.id), headers=admin_headers)
        client.post(
            f"{API}/representantes/",
            json=self._payload(otra.id, cedula="1", email="rep@example.com", nombre="Tomás Vélez"),
            headers=admin_headers,
        )

        response = client.get(f"{API}/representantes/sin-solicitudes", headers=admin_headers)

        assert response.status_code == 200
        assert [r["nombre"] for r in response.json()] == ["Tomás Vélez"]


class TestMaquinas:

    def test_crear_maquina_estado_por_defecto(self, client: TestClient, admin_headers, categoria_pesada):
        response = client.post(
            f"{API}/maquinas/",
            json={"tipoMaquina": "Bulldozer", "categoriaId": categoria_pesada.id},
            headers=admin_headers,
        )

        assert response.status_code == 201
        body = response.json()
        assert body["estado"] == "disponible"
        assert body["categoria"]["tipoMaquinaria"] == "pesada"

    def test_categoria_inexistente(self, client: TestClient, admin_headers):
        response = client.post(
            f"{API}/maquinas/", json={"tipoMaquina": "Bulldozer", "categoriaId": 999}, headers=admin_headers
        )

        assert response.status_code == 422
        assert "categoriaId" in response.json()["errors"]

    def test_pesadas_costosas_solo_trae_mantenimientos_costosos(
        self, client: TestClient, db: Session, admin_headers, maquinas, categoria_lijera, crear_mantenimiento
    ):
        retro, volqueta, _ = maquinas
        liviana = Maquina(tipo_maquina="Compactadora", categoria_id=categoria_lijera.id)
        db.add(liviana)
        db.commit()

        caro = crear_mantenimiento(retro, "MT-001", "2500000")
        crear_mantenimiento(retro, "MT-002", "150000")
        crear_mantenimiento(volqueta, "MT-003", "900000")
        crear_mantenimiento(liviana, "MT-004", "5000000")

        response = client.get(f"{API}/maquinas/pesadas-costosas", headers=admin_headers)

        assert response.status_code == 200
        body = response.json()
        assert [m["id"] for m in body] == [retro.id]
        assert [m["codigo"] for m in body[0]["mantenimientos"]] == [caro.codigo]

    def test_pesadas_costosas_no_recorta_la_maquina_en_sesion(
        self, client: TestClient, db: Session, admin_headers, maquinas, crear_mantenimiento
    ):
        retro = maquinas[0]
        crear_mantenimiento(retro, "MT-A", "2500000")
        crear_mantenimiento(retro, "MT-B", "150000")

        client.get(f"{API}/maquinas/pesadas-costosas", headers=admin_headers)
        response = client.get(f"{API}/maquinas/{retro.id}", headers=admin_headers)

        assert sorted(m["codigo"] for m in response.json()["mantenimientos"]) == ["MT-A", "MT-B"]
        assert {m.codigo for m in retro.mantenimientos} == {"MT-A", "MT-B"}

    def test_pesadas_costosas_con_umbral(
        self, client: TestClient, admin_headers, maquinas, crear_mantenimiento
    ):
        retro, volqueta, _ = maquinas
        crear_mantenimiento(retro, "MT-001", "2500000")
        crear_mantenimiento(volqueta, "MT-003", "900000", fecha_entrega=date.today() - timedelta(days=1))

        response = client.get(
            f"{API}/maquinas/pesadas-costosas", params={"umbral": "500000"}, headers=admin_headers
        )

        assert [m["id"] for m in response.json()] == [retro.id, volqueta.id]
