"""init

Revision ID: 3f9a2c7d1e4b
Revises:
Create Date: 2025-10-20 09:12:31.502114
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = '3f9a2c7d1e4b'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

MYSQL_OPTS = dict(
    mysql_engine='InnoDB',
    mysql_charset='utf8mb4',
    mysql_collate='utf8mb4_unicode_ci',
)


def _timestamps():
    return [
        sa.Column('creado_en', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('actualizado_en', sa.DateTime(timezone=True), server_default=sa.func.now()),
    ]


def upgrade() -> None:
    # === usuarios ===
    op.create_table(
        'usuarios',
        sa.Column('id', sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column('nombre', sa.String(255), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('rol', sa.Enum('admin', 'empleado', name='rolusuario'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        **MYSQL_OPTS
    )
    op.create_index('ix_usuarios_email', 'usuarios', ['email'], unique=True)
    op.create_index('ix_usuarios_rol', 'usuarios', ['rol'])

    # === auth_tokens ===
    op.create_table(
        'auth_tokens',
        sa.Column('id', sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column('usuario_id', sa.BigInteger(), sa.ForeignKey('usuarios.id', ondelete='CASCADE'), nullable=False),
        sa.Column('jti', sa.String(64), nullable=False),
        sa.Column('nombre', sa.String(100), nullable=False),
        sa.Column('creado_en', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('expira_en', sa.DateTime(timezone=True), nullable=False),
        **MYSQL_OPTS
    )
    op.create_index('ix_auth_tokens_jti', 'auth_tokens', ['jti'], unique=True)
    op.create_index('ix_auth_tokens_usuario_id', 'auth_tokens', ['usuario_id'])

    # === empresas ===
    op.create_table(
        'empresas',
        sa.Column('id', sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column('nit', sa.String(64), nullable=False, unique=True),
        sa.Column('nombre_empresa', sa.String(255), nullable=False),
        sa.Column('direccion', sa.String(255), nullable=False),
        sa.Column('ciudad', sa.String(100), nullable=False),
        sa.Column('telefono', sa.String(20), nullable=False),
        *_timestamps(),
        **MYSQL_OPTS
    )
    op.create_index('ix_empresas_nombre_empresa', 'empresas', ['nombre_empresa'])

    # === representantes ===
    op.create_table(
        'representantes',
        sa.Column('id', sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column('nombre', sa.String(255), nullable=False),
        sa.Column('cedula', sa.String(20), nullable=False, unique=True),
        sa.Column('telefono', sa.String(20), nullable=False),
        sa.Column('email', sa.String(255), nullable=False, unique=True),
        sa.Column('empresa_id', sa.BigInteger(), sa.ForeignKey('empresas.id', ondelete='CASCADE'), nullable=False),
        *_timestamps(),
        **MYSQL_OPTS
    )
    # Una empresa tiene a lo sumo un representante
    op.create_index('ix_representantes_empresa_id', 'representantes', ['empresa_id'], unique=True)

    # === cargos / empleados ===
    op.create_table(
        'cargos',
        sa.Column('id', sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column('nombre', sa.String(255), nullable=False, unique=True),
        sa.Column('descripcion', sa.String(500), nullable=False),
        *_timestamps(),
        **MYSQL_OPTS
    )
    op.create_table(
        'empleados',
        sa.Column('id', sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column('documento', sa.String(20), nullable=False),
        sa.Column('nombre', sa.String(255), nullable=False),
        sa.Column('apellido', sa.String(255), nullable=False),
        sa.Column('telefono', sa.String(20), nullable=False),
        sa.Column('email', sa.String(255), nullable=True),
        sa.Column('cargo_id', sa.BigInteger(), sa.ForeignKey('cargos.id', ondelete='CASCADE'), nullable=False),
        *_timestamps(),
        **MYSQL_OPTS
    )
    op.create_index('ix_empleados_documento', 'empleados', ['documento'], unique=True)
    op.create_index('ix_empleados_cargo_id', 'empleados', ['cargo_id'])

    # === categorias_maquinarias / maquinas ===
    op.create_table(
        'categorias_maquinarias',
        sa.Column('id', sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column('tipo_maquinaria', sa.Enum('lijera', 'pesada', name='tipomaquinaria'), nullable=False),
        sa.Column('descripcion', sa.String(500), nullable=False),
        *_timestamps(),
        **MYSQL_OPTS
    )
    op.create_index('ix_categorias_maquinarias_tipo_maquinaria', 'categorias_maquinarias', ['tipo_maquinaria'])

    op.create_table(
        'maquinas',
        sa.Column('id', sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column('tipo_maquina', sa.String(255), nullable=False),
        sa.Column('nombre', sa.String(255), nullable=True),
        sa.Column(
            'categoria_id', sa.BigInteger(),
            sa.ForeignKey('categorias_maquinarias.id', ondelete='CASCADE'), nullable=False,
        ),
        sa.Column('empresa_id', sa.BigInteger(), sa.ForeignKey('empresas.id', ondelete='SET NULL'), nullable=True),
        sa.Column(
            'estado', sa.Enum('disponible', 'mantenimiento', 'reparacion', name='estadomaquina'),
            nullable=False, server_default='disponible',
        ),
        *_timestamps(),
        **MYSQL_OPTS
    )
    op.create_index('ix_maquinas_tipo_maquina', 'maquinas', ['tipo_maquina'])
    op.create_index('ix_maquinas_categoria_id', 'maquinas', ['categoria_id'])

    # === solicitudes ===
    op.create_table(
        'solicitudes',
        sa.Column('id', sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column('usuario_id', sa.BigInteger(), sa.ForeignKey('usuarios.id', ondelete='SET NULL'), nullable=True),
        sa.Column('empresa_id', sa.BigInteger(), sa.ForeignKey('empresas.id', ondelete='CASCADE'), nullable=True),
        sa.Column('fecha_solicitud', sa.DateTime(timezone=True), nullable=False),
        sa.Column('fecha_uso', sa.Date(), nullable=False),
        sa.Column('hora_inicio', sa.Time(), nullable=False),
        sa.Column('hora_fin', sa.Time(), nullable=False),
        sa.Column('proyecto', sa.String(255), nullable=False),
        sa.Column('lugar', sa.String(255), nullable=False),
        sa.Column(
            'estado', sa.Enum('pendiente', 'aprobada', 'rechazada', 'completada', name='estadosolicitud'),
            nullable=False, server_default='pendiente',
        ),
        *_timestamps(),
        **MYSQL_OPTS
    )
    op.create_index('ix_solicitudes_usuario_id', 'solicitudes', ['usuario_id'])
    op.create_index('ix_solicitudes_empresa_id', 'solicitudes', ['empresa_id'])
    op.create_index('ix_solicitudes_fecha_solicitud', 'solicitudes', ['fecha_solicitud'])
    op.create_index('ix_solicitudes_estado', 'solicitudes', ['estado'])

    op.create_table(
        'solicitud_maquina',
        sa.Column('id', sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column(
            'solicitud_id', sa.BigInteger(),
            sa.ForeignKey('solicitudes.id', ondelete='CASCADE'), nullable=False,
        ),
        sa.Column('maquina_id', sa.BigInteger(), sa.ForeignKey('maquinas.id', ondelete='CASCADE'), nullable=False),
        sa.Column('cantidad', sa.Integer(), nullable=False, server_default='1'),
        *_timestamps(),
        sa.UniqueConstraint('solicitud_id', 'maquina_id', name='uq_solicitud_maquina'),
        sa.CheckConstraint('cantidad >= 1', name='ck_solicitud_maquina_cantidad'),
        **MYSQL_OPTS
    )
    op.create_index('ix_solicitud_maquina_solicitud_id', 'solicitud_maquina', ['solicitud_id'])
    op.create_index('ix_solicitud_maquina_maquina_id', 'solicitud_maquina', ['maquina_id'])

    op.create_table(
        'solicitud_empleado',
        sa.Column(
            'solicitud_id', sa.BigInteger(),
            sa.ForeignKey('solicitudes.id', ondelete='CASCADE'), primary_key=True,
        ),
        sa.Column(
            'empleado_id', sa.BigInteger(),
            sa.ForeignKey('empleados.id', ondelete='CASCADE'), primary_key=True,
        ),
        **MYSQL_OPTS
    )

    # === mantenimientos / pagos ===
    op.create_table(
        'mantenimientos',
        sa.Column('id', sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column('codigo', sa.String(100), nullable=False),
        sa.Column('nombre', sa.String(255), nullable=False),
        sa.Column('descripcion', sa.String(1000), nullable=False),
        sa.Column('costo', sa.Numeric(12, 2), nullable=False),
        sa.Column('tiempo_estimado', sa.Integer(), nullable=False, comment='Tiempo estimado en horas'),
        sa.Column('manual_procedimiento', sa.Text(), nullable=True),
        sa.Column('fecha_entrega', sa.Date(), nullable=False),
        sa.Column('maquina_id', sa.BigInteger(), sa.ForeignKey('maquinas.id', ondelete='CASCADE'), nullable=False),
        sa.Column(
            'solicitud_id', sa.BigInteger(),
            sa.ForeignKey('solicitudes.id', ondelete='CASCADE'), nullable=False,
        ),
        *_timestamps(),
        **MYSQL_OPTS
    )
    op.create_index('ix_mantenimientos_codigo', 'mantenimientos', ['codigo'], unique=True)
    op.create_index('ix_mantenimientos_fecha_entrega', 'mantenimientos', ['fecha_entrega'])
    op.create_index('ix_mantenimientos_maquina_id', 'mantenimientos', ['maquina_id'])
    op.create_index('ix_mantenimientos_solicitud_id', 'mantenimientos', ['solicitud_id'])

    op.create_table(
        'pagos',
        sa.Column('id', sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column('codigo_pago', sa.String(100), nullable=False),
        sa.Column('fecha_pago', sa.Date(), nullable=False),
        sa.Column('monto', sa.Numeric(12, 2), nullable=False),
        sa.Column(
            'metodo_pago', sa.Enum('efectivo', 'tarjeta', 'transferencia', name='metodopago'), nullable=False
        ),
        sa.Column('referencia', sa.String(255), nullable=True),
        sa.Column(
            'estado', sa.Enum('pendiente', 'completado', 'rechazado', name='estadopago'),
            nullable=False, server_default='pendiente',
        ),
        sa.Column('observaciones', sa.Text(), nullable=True),
        sa.Column(
            'mantenimiento_id', sa.BigInteger(),
            sa.ForeignKey('mantenimientos.id', ondelete='CASCADE'), nullable=False,
        ),
        sa.Column('empresa_id', sa.BigInteger(), sa.ForeignKey('empresas.id', ondelete='CASCADE'), nullable=False),
        *_timestamps(),
        **MYSQL_OPTS
    )
    op.create_index('ix_pagos_codigo_pago', 'pagos', ['codigo_pago'], unique=True)
    op.create_index('ix_pagos_mantenimiento_id', 'pagos', ['mantenimiento_id'])
    op.create_index('ix_pagos_empresa_id', 'pagos', ['empresa_id'])
    op.create_index('ix_pagos_estado', 'pagos', ['estado'])


def downgrade() -> None:
    op.drop_table('pagos')
    op.drop_table('mantenimientos')
    op.drop_table('solicitud_empleado')
    op.drop_table('solicitud_maquina')
    op.drop_table('solicitudes')
    op.drop_table('maquinas')
    op.drop_table('categorias_maquinarias')
    op.drop_table('empleados')
    op.drop_table('cargos')
    op.drop_table('representantes')
    op.drop_table('empresas')
    op.drop_table('auth_tokens')
    op.drop_table('usuarios')
