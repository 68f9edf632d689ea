"""
Fixtures compartidas.

La base de datos es SQLite en memoria (StaticPool: una sola conexión
compartida por la sesión de prueba y las peticiones del TestClient).
"""
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "test"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ.setdefault("SECRET_KEY", "clave-secreta-de-pruebas")

from datetime import date, datetime, time, timedelta  # noqa: E402
from decimal import Decimal  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.crud.usuario import create_usuario  # noqa: E402
from app.db.session import get_db  # noqa: E402
from app.main import app  # noqa: E402
from app.models import (  # noqa: E402
    Base,
    Cargo,
    CategoriaMaquinaria,
    Empleado,
    Empresa,
    EstadoSolicitud,
    Mantenimiento,
    Maquina,
    RolUsuario,
    Solicitud,
    TipoMaquinaria,
)
from app.services.auth_service import emitir_token  # noqa: E402

PASSWORD = "secreto123"

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
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


# -----------------------------------------------------
# Usuarios y autenticación
# -----------------------------------------------------
@pytest.fixture
def admin(db: Session):
    return create_usuario(db, "Administrador", "admin@maquinaria.com", PASSWORD, RolUsuario.admin)


@pytest.fixture
def empleado_user(db: Session):
    return create_usuario(db, "Marta Ruiz", "marta@maquinaria.com", PASSWORD, RolUsuario.empleado)


@pytest.fixture
def admin_headers(db: Session, admin):
    return {"Authorization": f"Bearer {emitir_token(db, admin)}"}


@pytest.fixture
def empleado_headers(db: Session, empleado_user):
    return {"Authorization": f"Bearer {emitir_token(db, empleado_user)}"}


# -----------------------------------------------------
# Datos de dominio
# -----------------------------------------------------
@pytest.fixture
def empresa(db: Session):
    empresa = Empresa(
        nit="900123456-1",
        nombre_empresa="Constructora Andina",
        direccion="Calle 100 # 10-20",
        ciudad="Bogotá",
        telefono="6011234567",
    )
    db.add(empresa)
    db.commit()
    db.refresh(empresa)
    return empresa


@pytest.fixture
def cargo(db: Session):
    cargo = Cargo(nombre="Operario empleado", descripcion="Opera maquinaria en obra")
    db.add(cargo)
    db.commit()
    db.refresh(cargo)
    return cargo


@pytest.fixture
def empleado(db: Session, cargo):
    empleado = Empleado(
        documento="1020304050",
        nombre="Carlos",
        apellido="Gómez",
        telefono="3001234567",
        email="carlos@maquinaria.com",
        cargo_id=cargo.id,
    )
    db.add(empleado)
    db.commit()
    db.refresh(empleado)
    return empleado


@pytest.fixture
def categoria_pesada(db: Session):
    categoria = CategoriaMaquinaria(tipo_maquinaria=TipoMaquinaria.pesada, descripcion="Maquinaria pesada")
    db.add(categoria)
    db.commit()
    db.refresh(categoria)
    return categoria


@pytest.fixture
def categoria_lijera(db: Session):
    categoria = CategoriaMaquinaria(tipo_maquinaria=TipoMaquinaria.lijera, descripcion="Maquinaria liviana")
    db.add(categoria)
    db.commit()
    db.refresh(categoria)
    return categoria


@pytest.fixture
def maquinas(db: Session, categoria_pesada):
    """Tres máquinas pesadas: retroexcavadora, volqueta y grúa."""
    lista = [
        Maquina(tipo_maquina="Retroexcavadora", nombre="CAT 420F", categoria_id=categoria_pesada.id),
        Maquina(tipo_maquina="Volqueta", nombre="Kenworth T800", categoria_id=categoria_pesada.id),
        Maquina(tipo_maquina="Grúa", nombre="Liebherr LTM", categoria_id=categoria_pesada.id),
    ]
    db.add_all(lista)
    db.commit()
    for maquina in lista:
        db.refresh(maquina)
    return lista


@pytest.fixture
def solicitud(db: Session, admin, empresa):
    solicitud = Solicitud(
        usuario_id=admin.id,
        empresa_id=empresa.id,
        fecha_solicitud=datetime(2023, 10, 15, 9, 30),
        fecha_uso=date(2023, 10, 20),
        hora_inicio=time(7, 0),
        hora_fin=time(17, 0),
        proyecto="Vía Perimetral Norte",
        lugar="Chía",
        estado=EstadoSolicitud.pendiente,
    )
    db.add(solicitud)
    db.commit()
    db.refresh(solicitud)
    return solicitud


@pytest.fixture
def crear_mantenimiento(db: Session, solicitud):
    def _crear(maquina, codigo, costo, fecha_entrega=None, nombre="Cambio de aceite"):
        mantenimiento = Mantenimiento(
            codigo=codigo,
            nombre=nombre,
            descripcion=f"{nombre} programado",
            costo=Decimal(costo),
            tiempo_estimado=8,
            fecha_entrega=fecha_entrega or date.today() + timedelta(days=5),
            maquina_id=maquina.id,
            solicitud_id=solicitud.id,
        )
        db.add(mantenimiento)
        db.commit()
        db.refresh(mantenimiento)
        return mantenimiento

    return _crear


@pytest.fixture
def password():
    return PASSWORD
