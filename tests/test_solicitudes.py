"""
Test suite del flujo de solicitudes y asignación de maquinaria.

ARQUITECTURA:
    - Tabla: solicitud_maquina (solicitud, máquina, cantidad >= 1)
    - Crear/actualizar reemplaza el conjunto completo de asignaciones
    - Cambio de estado libre entre los cuatro estados
    - Eliminar borra asignaciones y empleados antes de la cabecera

CASOS DE PRUEBA:
    1. Crear con [(m1, 3), (m2, 5)] → filas (m1, 3) y (m2, 5)
    2. Actualizar con [(m2, 7)] → solo (m2, 7)
    3. Reenviar el mismo conjunto no duplica filas
    4. Validaciones de máquinas, cantidades y horario
    5. Cambio de estado sin tocar asignaciones
    6. Eliminación y reportes
"""
from datetime import datetime

from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from app.models.solicitud import Solicitud, SolicitudMaquina, solicitud_empleado

API = "/api/v1/solicitudes"


def _payload(asignaciones, **cambios):
    return {
        "fechaUso": "2025-12-01",
        "horaInicio": "07:00:00",
        "horaFin": "16:00:00",
        "proyecto": "Puente Río Frío",
        "lugar": "Cajicá",
        "maquinas": [{"maquinaId": m, "cantidad": c} for m, c in asignaciones],
        **cambios,
    }


def _filas(db: Session, solicitud_id):
    return sorted(
        (a.maquina_id, a.cantidad)
        for a in db.query(SolicitudMaquina).filter(SolicitudMaquina.solicitud_id == solicitud_id)
    )


class TestCrearSolicitud:

    def test_crear_con_asignaciones(self, client: TestClient, db: Session, admin, admin_headers, maquinas):
        m1, m2, _ = maquinas

        response = client.post(f"{API}/", json=_payload([(m1.id, 3), (m2.id, 5)]), headers=admin_headers)

        assert response.status_code == 201
        body = response.json()
        assert body["estado"] == "pendiente"
        assert body["usuarioId"] == admin.id
        assert body["fechaSolicitud"]
        assert [(a["maquinaId"], a["cantidad"]) for a in body["asignaciones"]] == [(m1.id, 3), (m2.id, 5)]
        assert _filas(db, body["id"]) == [(m1.id, 3), (m2.id, 5)]

    def test_maquina_inexistente_no_crea_nada(self, client: TestClient, db: Session, admin_headers, maquinas):
        response = client.post(
            f"{API}/", json=_payload([(maquinas[0].id, 1), (999, 2)]), headers=admin_headers
        )

        assert response.status_code == 422
        assert "maquinas.1.maquinaId" in response.json()["errors"]
        assert db.query(Solicitud).count() == 0
        assert db.query(SolicitudMaquina).count() == 0

    def test_cantidad_minima(self, client: TestClient, admin_headers, maquinas):
        response = client.post(f"{API}/", json=_payload([(maquinas[0].id, 0)]), headers=admin_headers)

        assert response.status_code == 422
        assert "maquinas.0.cantidad" in response.json()["errors"]

    def test_maquina_repetida(self, client: TestClient, admin_headers, maquinas):
        m1 = maquinas[0].id

        response = client.post(f"{API}/", json=_payload([(m1, 1), (m1, 2)]), headers=admin_headers)

        assert response.status_code == 422
        assert "maquinas" in response.json()["errors"]

    def test_sin_maquinas(self, client: TestClient, admin_headers):
        response = client.post(f"{API}/", json=_payload([]), headers=admin_headers)

        assert response.status_code == 422
        assert "maquinas" in response.json()["errors"]

    def test_hora_fin_anterior(self, client: TestClient, admin_headers, maquinas):
        response = client.post(
            f"{API}/",
            json=_payload([(maquinas[0].id, 1)], horaInicio="15:00:00", horaFin="08:00:00"),
            headers=admin_headers,
        )

        assert response.status_code == 422
        assert "horaFin" in response.json()["errors"]

    def test_empresa_inexistente(self, client: TestClient, admin_headers, maquinas):
        response = client.post(
            f"{API}/", json=_payload([(maquinas[0].id, 1)], empresaId=999), headers=admin_headers
        )

        assert response.status_code == 422
        assert "empresaId" in response.json()["errors"]


class TestActualizarSolicitud:

    def _crear(self, client, headers, asignaciones, **cambios):
        return client.post(f"{API}/", json=_payload(asignaciones, **cambios), headers=headers).json()["id"]

    def test_reemplazo_completo(self, client: TestClient, db: Session, admin_headers, maquinas):
        m1, m2, _ = maquinas
        solicitud_id = self._crear(client, admin_headers, [(m1.id, 3), (m2.id, 5)])

        response = client.put(
            f"{API}/{solicitud_id}", json=_payload([(m2.id, 7)], proyecto="Puente fase 2"), headers=admin_headers
        )

        assert response.status_code == 200
        body = response.json()
        assert body["proyecto"] == "Puente fase 2"
        assert [(a["maquinaId"], a["cantidad"]) for a in body["asignaciones"]] == [(m2.id, 7)]
        assert _filas(db, solicitud_id) == [(m2.id, 7)]

    def test_reemplazo_idempotente(self, client: TestClient, db: Session, admin_headers, maquinas):
        m1, m2, m3 = maquinas
        solicitud_id = self._crear(client, admin_headers, [(m1.id, 1)])
        conjunto = _payload([(m2.id, 2), (m3.id, 4)])

        client.put(f"{API}/{solicitud_id}", json=conjunto, headers=admin_headers)
        ids_antes = sorted(a.id for a in db.query(SolicitudMaquina))
        client.put(f"{API}/{solicitud_id}", json=conjunto, headers=admin_headers)
        ids_despues = sorted(a.id for a in db.query(SolicitudMaquina))

        assert _filas(db, solicitud_id) == [(m2.id, 2), (m3.id, 4)]
        assert ids_antes == ids_despues

    def test_estado_invalido(self, client: TestClient, admin_headers, maquinas):
        solicitud_id = self._crear(client, admin_headers, [(maquinas[0].id, 1)])

        response = client.put(
            f"{API}/{solicitud_id}", json=_payload([(maquinas[0].id, 1)], estado="cancelada"), headers=admin_headers
        )

        assert response.status_code == 422
        assert "estado" in response.json()["errors"]

    def test_actualiza_estado_y_empleados(self, client: TestClient, db: Session, admin_headers, maquinas, empleado):
        solicitud_id = self._crear(client, admin_headers, [(maquinas[0].id, 1)])

        response = client.put(
            f"{API}/{solicitud_id}",
            json=_payload([(maquinas[0].id, 1)], estado="aprobada", empleadoIds=[empleado.id]),
            headers=admin_headers,
        )

        assert response.json()["estado"] == "aprobada"
        detalle = client.get(f"{API}/{solicitud_id}", headers=admin_headers).json()
        assert [e["documento"] for e in detalle["empleados"]] == [empleado.documento]

    def test_maquina_inexistente_conserva_asignaciones(
        self, client: TestClient, db: Session, admin_headers, maquinas
    ):
        m1 = maquinas[0]
        solicitud_id = self._crear(client, admin_headers, [(m1.id, 3)])

        response = client.put(f"{API}/{solicitud_id}", json=_payload([(999, 1)]), headers=admin_headers)

        assert response.status_code == 422
        assert _filas(db, solicitud_id) == [(m1.id, 3)]

    def test_solicitud_inexistente(self, client: TestClient, admin_headers, maquinas):
        response = client.put(f"{API}/999", json=_payload([(maquinas[0].id, 1)]), headers=admin_headers)

        assert response.status_code == 404


class TestEstadoYEliminacion:

    def test_cualquier_transicion_permitida(self, client: TestClient, db: Session, admin_headers, maquinas):
        m1 = maquinas[0]
        solicitud_id = client.post(f"{API}/", json=_payload([(m1.id, 2)]), headers=admin_headers).json()["id"]

        for estado in ("completada", "pendiente", "rechazada", "aprobada"):
            response = client.patch(f"{API}/{solicitud_id}/estado", json={"estado": estado}, headers=admin_headers)
            assert response.status_code == 200
            assert response.json()["estado"] == estado

        assert _filas(db, solicitud_id) == [(m1.id, 2)]

    def test_estado_fuera_del_conjunto(self, client: TestClient, admin_headers, solicitud):
        response = client.patch(f"{API}/{solicitud.id}/estado", json={"estado": "archivada"}, headers=admin_headers)

        assert response.status_code == 422
        assert "estado" in response.json()["errors"]

    def test_eliminar_borra_asignaciones_y_empleados(
        self, client: TestClient, db: Session, admin_headers, maquinas, empleado
    ):
        solicitud_id = client.post(
            f"{API}/",
            json=_payload([(maquinas[0].id, 1), (maquinas[1].id, 2)], empleadoIds=[empleado.id]),
            headers=admin_headers,
        ).json()["id"]

        response = client.delete(f"{API}/{solicitud_id}", headers=admin_headers)

        assert response.status_code == 200
        assert db.query(Solicitud).count() == 0
        assert db.query(SolicitudMaquina).count() == 0
        assert db.query(solicitud_empleado).count() == 0
        assert client.get(f"{API}/{solicitud_id}", headers=admin_headers).status_code == 404


class TestReportes:

    def test_total_maquinas_empresa(self, client: TestClient, admin_headers, empresa, maquinas):
        m1, m2, m3 = maquinas
        client.post(
            f"{API}/", json=_payload([(m1.id, 3), (m2.id, 5)], empresaId=empresa.id), headers=admin_headers
        )
        client.post(f"{API}/", json=_payload([(m3.id, 2)], empresaId=empresa.id), headers=admin_headers)
        client.post(f"{API}/", json=_payload([(m3.id, 9)]), headers=admin_headers)

        response = client.get(f"{API}/total-maquinas-empresa/{empresa.nombre_empresa}", headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == {"empresa": "Constructora Andina", "totalMaquinas": 10}

    def test_total_maquinas_empresa_sin_asignaciones(self, client: TestClient, admin_headers, empresa):
        response = client.get(f"{API}/total-maquinas-empresa/{empresa.nombre_empresa}", headers=admin_headers)

        assert response.json()["totalMaquinas"] == 0

    def test_total_maquinas_empresa_inexistente(self, client: TestClient, admin_headers):
        response = client.get(f"{API}/total-maquinas-empresa/No Existe", headers=admin_headers)

        assert response.status_code == 404

    def test_solicitudes_por_documento(self, client: TestClient, admin_headers, maquinas, empleado):
        m1 = maquinas[0]
        client.post(f"{API}/", json=_payload([(m1.id, 4)], empleadoIds=[empleado.id]), headers=admin_headers)
        client.post(f"{API}/", json=_payload([(m1.id, 1)]), headers=admin_headers)

        response = client.get(f"{API}/empleado/{empleado.documento}", headers=admin_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["empleado"]["documento"] == empleado.documento
        assert len(body["solicitudes"]) == 1
        assert body["solicitudes"][0]["asignaciones"][0]["cantidad"] == 4

    def test_solicitudes_documento_inexistente(self, client: TestClient, admin_headers):
        response = client.get(f"{API}/empleado/000", headers=admin_headers)

        assert response.status_code == 404
        assert response.json() == {"message": "Empleado no encontrado"}

    def test_reporte_octubre_2023(self, client: TestClient, db: Session, admin_headers, solicitud, maquinas):
        otra_id = client.post(f"{API}/", json=_payload([(maquinas[0].id, 1)]), headers=admin_headers).json()["id"]
        otra = db.query(Solicitud).filter(Solicitud.id == otra_id).first()
        otra.fecha_solicitud = datetime(2023, 11, 2, 8, 0)
        db.commit()

        response = client.get(f"{API}/reporte-octubre-2023", headers=admin_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["count"] == 1
        assert body["data"][0]["id"] == solicitud.id
        assert body["data"][0]["empresa"]["nombreEmpresa"] == "Constructora Andina"

    def test_reporte_mensual(self, client: TestClient, admin_headers, solicitud):
        response = client.get(f"{API}/reporte-mensual", params={"anio": 2023, "mes": 10}, headers=admin_headers)

        assert response.json()["count"] == 1
        assert client.get(
            f"{API}/reporte-mensual", params={"anio": 2023, "mes": 13}, headers=admin_headers
        ).status_code == 422

    def test_reporte_detallado(self, client: TestClient, admin, admin_headers, solicitud):
        response = client.get(f"{API}/reporte", headers=admin_headers)

        body = response.json()
        assert body["count"] == 1
        assert body["data"][0]["usuario"]["email"] == admin.email
