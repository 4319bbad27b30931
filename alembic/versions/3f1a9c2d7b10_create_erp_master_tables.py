"""Create ERP master tables

Creates company, personnel, job position, product, warehouse, vessel,
fishing port, access reason and incoterm tables.

Revision ID: 3f1a9c2d7b10
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3f1a9c2d7b10'
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    ]


def upgrade():
    op.create_table(
        'empresa',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('razon_social', sa.String(), nullable=False),
        sa.Column('ruc', sa.String(length=11), nullable=False),
        sa.Column('direccion', sa.String(), nullable=True),
        sa.Column('telefono', sa.String(), nullable=True),
        sa.Column('email', sa.String(), nullable=True),
        sa.Column('cesado', sa.Boolean(), nullable=False, server_default='false'),
        *_timestamps(),
    )
    op.create_index(op.f('ix_empresa_id'), 'empresa', ['id'], unique=False)
    op.create_index(op.f('ix_empresa_ruc'), 'empresa', ['ruc'], unique=True)

    op.create_table(
        'cargos_personal',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('descripcion', sa.String(), nullable=False, unique=True),
        sa.Column('activo', sa.Boolean(), nullable=False, server_default='true'),
        *_timestamps(),
    )
    op.create_index(op.f('ix_cargos_personal_id'), 'cargos_personal', ['id'], unique=False)

    op.create_table(
        'personal',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('empresa_id', sa.Integer(), sa.ForeignKey('empresa.id'), nullable=True),
        sa.Column('cargo_id', sa.Integer(), sa.ForeignKey('cargos_personal.id'), nullable=True),
        sa.Column('nombres', sa.String(), nullable=False),
        sa.Column('apellidos', sa.String(), nullable=False),
        sa.Column('numero_documento', sa.String(), nullable=True),
        sa.Column('fecha_nacimiento', sa.Date(), nullable=True),
        sa.Column('telefono', sa.String(), nullable=True),
        sa.Column('correo', sa.String(), nullable=True),
        sa.Column('es_vendedor', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('cesado', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('url_foto_persona', sa.String(), nullable=True),
        *_timestamps(),
    )
    op.create_index(op.f('ix_personal_id'), 'personal', ['id'], unique=False)
    op.create_index(op.f('ix_personal_empresa_id'), 'personal', ['empresa_id'], unique=False)
    op.create_index(op.f('ix_personal_numero_documento'), 'personal', ['numero_documento'], unique=False)

    op.create_table(
        'producto',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('empresa_id', sa.Integer(), sa.ForeignKey('empresa.id'), nullable=True),
        sa.Column('codigo', sa.String(), nullable=False),
        sa.Column('descripcion_base', sa.String(), nullable=False),
        sa.Column('descripcion_extendida', sa.String(), nullable=True),
        sa.Column('cesado', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('url_foto_producto', sa.String(), nullable=True),
        *_timestamps(),
    )
    op.create_index(op.f('ix_producto_id'), 'producto', ['id'], unique=False)
    op.create_index(op.f('ix_producto_empresa_id'), 'producto', ['empresa_id'], unique=False)
    op.create_index(op.f('ix_producto_codigo'), 'producto', ['codigo'], unique=True)

    op.create_table(
        'almacen',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('empresa_id', sa.Integer(), sa.ForeignKey('empresa.id'), nullable=True),
        sa.Column('nombre', sa.String(), nullable=False),
        sa.Column('descripcion', sa.String(), nullable=True),
        sa.Column('permite_stock_negativo', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('activo', sa.Boolean(), nullable=False, server_default='true'),
        *_timestamps(),
    )
    op.create_index(op.f('ix_almacen_id'), 'almacen', ['id'], unique=False)
    op.create_index(op.f('ix_almacen_empresa_id'), 'almacen', ['empresa_id'], unique=False)

    op.create_table(
        'embarcacion',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('empresa_id', sa.Integer(), sa.ForeignKey('empresa.id'), nullable=True),
        sa.Column('matricula', sa.String(), nullable=False),
        sa.Column('nombre', sa.String(), nullable=False),
        sa.Column('capacidad_bodega_ton', sa.Float(), nullable=True),
        sa.Column('activo', sa.Boolean(), nullable=False, server_default='true'),
        sa.Column('url_foto_embarcacion', sa.String(), nullable=True),
        *_timestamps(),
    )
    op.create_index(op.f('ix_embarcacion_id'), 'embarcacion', ['id'], unique=False)
    op.create_index(op.f('ix_embarcacion_empresa_id'), 'embarcacion', ['empresa_id'], unique=False)
    op.create_index(op.f('ix_embarcacion_matricula'), 'embarcacion', ['matricula'], unique=True)

    op.create_table(
        'puerto_pesca',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('nombre', sa.String(), nullable=False),
        sa.Column('zona', sa.String(), nullable=True),
        sa.Column('provincia', sa.String(), nullable=True),
        sa.Column('departamento', sa.String(), nullable=True),
        sa.Column('latitud', sa.Float(), nullable=True),
        sa.Column('longitud', sa.Float(), nullable=True),
        sa.Column('activo', sa.Boolean(), nullable=False, server_default='true'),
        *_timestamps(),
    )
    op.create_index(op.f('ix_puerto_pesca_id'), 'puerto_pesca', ['id'], unique=False)

    op.create_table(
        'motivo_acceso',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('nombre', sa.String(), nullable=False, unique=True),
        sa.Column('descripcion', sa.String(), nullable=True),
        sa.Column('activo', sa.Boolean(), nullable=False, server_default='true'),
        *_timestamps(),
    )
    op.create_index(op.f('ix_motivo_acceso_id'), 'motivo_acceso', ['id'], unique=False)

    op.create_table(
        'incoterm',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('codigo', sa.String(length=3), nullable=False),
        sa.Column('nombre', sa.String(), nullable=False),
        sa.Column('descripcion', sa.String(), nullable=True),
        sa.Column('activo', sa.Boolean(), nullable=False, server_default='true'),
        *_timestamps(),
    )
    op.create_index(op.f('ix_incoterm_id'), 'incoterm', ['id'], unique=False)
    op.create_index(op.f('ix_incoterm_codigo'), 'incoterm', ['codigo'], unique=True)


def downgrade():
    # Children first, companies last
    op.drop_table('incoterm')
    op.drop_table('motivo_acceso')
    op.drop_table('puerto_pesca')
    op.drop_table('embarcacion')
    op.drop_table('almacen')
    op.drop_table('producto')
    op.drop_table('personal')
    op.drop_table('cargos_personal')
    op.drop_table('empresa')
