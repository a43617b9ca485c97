"""initial_garden_tracker_schema

Revision ID: a3c9e51d7b20
Revises:
Create Date: 2026-10-18 09:12:44.301876

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = 'a3c9e51d7b20'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        'gardens',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('location', sa.String(length=200), nullable=False),
        sa.Column('grow_zone', sa.String(length=10), nullable=False),
        sa.Column('size', sa.String(length=100), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_gardens_grow_zone'), 'gardens', ['grow_zone'], unique=False)

    op.create_table(
        'plants',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('scientific_name', sa.String(length=200), nullable=True),
        sa.Column('plant_type', sa.String(length=50), nullable=False),
        sa.Column('category', sa.String(length=50), nullable=True),
        sa.Column('days_to_maturity', sa.Integer(), nullable=True),
        sa.Column('spacing_inches', sa.Float(), nullable=True),
        sa.Column('sun_requirements', sa.String(length=100), nullable=True),
        sa.Column('water_requirements', sa.String(length=100), nullable=True),
        sa.Column('soil_ph_min', sa.Float(), nullable=True),
        sa.Column('soil_ph_max', sa.Float(), nullable=True),
        sa.Column('frost_tolerance', sa.String(length=50), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_plants_name'), 'plants', ['name'], unique=False)
    op.create_index(op.f('ix_plants_plant_type'), 'plants', ['plant_type'], unique=False)
    op.create_index(op.f('ix_plants_category'), 'plants', ['category'], unique=False)

    op.create_table(
        'planting_schedules',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('plant_id', sa.Integer(), nullable=False),
        sa.Column('grow_zone', sa.String(length=10), nullable=False),
        sa.Column('sow_indoor_start', sa.String(length=20), nullable=True),
        sa.Column('sow_indoor_end', sa.String(length=20), nullable=True),
        sa.Column('sow_outdoor_start', sa.String(length=20), nullable=True),
        sa.Column('sow_outdoor_end', sa.String(length=20), nullable=True),
        sa.Column('transplant_start', sa.String(length=20), nullable=True),
        sa.Column('transplant_end', sa.String(length=20), nullable=True),
        sa.Column('harvest_start', sa.String(length=20), nullable=True),
        sa.Column('harvest_end', sa.String(length=20), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['plant_id'], ['plants.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('plant_id', 'grow_zone', name='uq_planting_schedule_plant_zone'),
    )
    op.create_index(op.f('ix_planting_schedules_plant_id'), 'planting_schedules', ['plant_id'], unique=False)
    op.create_index(op.f('ix_planting_schedules_grow_zone'), 'planting_schedules', ['grow_zone'], unique=False)

    op.create_table(
        'garden_plants',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('garden_id', sa.Integer(), nullable=False),
        sa.Column('plant_id', sa.Integer(), nullable=False),
        sa.Column('planted_date', sa.Date(), nullable=False),
        sa.Column(
            'status',
            sa.Enum(
                'planned', 'seedling', 'growing', 'flowering', 'fruiting',
                'harvesting', 'dormant', 'removed',
                name='garden_plant_status_enum',
            ),
            nullable=False,
        ),
        sa.Column('notes', sa.Text(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['garden_id'], ['gardens.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['plant_id'], ['plants.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_garden_plants_garden_id'), 'garden_plants', ['garden_id'], unique=False)
    op.create_index(op.f('ix_garden_plants_plant_id'), 'garden_plants', ['plant_id'], unique=False)

    op.create_table(
        'pipeline_runs',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('pipeline_name', sa.String(length=100), nullable=False),
        sa.Column(
            'status',
            sa.Enum('running', 'success', 'failed', 'skipped', name='pipeline_status_enum'),
            nullable=False,
        ),
        sa.Column('started_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('finished_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('duration_ms', sa.Integer(), nullable=True),
        sa.Column('records_processed', sa.Integer(), nullable=True),
        sa.Column('error_message', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_pipeline_runs_pipeline_name'), 'pipeline_runs', ['pipeline_name'], unique=False)

    op.create_table(
        'api_request_logs',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('timestamp', sa.DateTime(timezone=True), nullable=False),
        sa.Column('method', sa.String(length=10), nullable=False),
        sa.Column('endpoint', sa.String(length=255), nullable=False),
        sa.Column('status_code', sa.Integer(), nullable=False),
        sa.Column('latency_ms', sa.Integer(), nullable=False),
        sa.Column('ip_address', sa.String(length=45), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_api_request_logs_timestamp'), 'api_request_logs', ['timestamp'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_api_request_logs_timestamp'), table_name='api_request_logs')
    op.drop_table('api_request_logs')
    op.drop_index(op.f('ix_pipeline_runs_pipeline_name'), table_name='pipeline_runs')
    op.drop_table('pipeline_runs')
    op.drop_index(op.f('ix_garden_plants_plant_id'), table_name='garden_plants')
    op.drop_index(op.f('ix_garden_plants_garden_id'), table_name='garden_plants')
    op.drop_table('garden_plants')
    op.drop_index(op.f('ix_planting_schedules_grow_zone'), table_name='planting_schedules')
    op.drop_index(op.f('ix_planting_schedules_plant_id'), table_name='planting_schedules')
    op.drop_table('planting_schedules')
    op.drop_index(op.f('ix_plants_category'), table_name='plants')
    op.drop_index(op.f('ix_plants_plant_type'), table_name='plants')
    op.drop_index(op.f('ix_plants_name'), table_name='plants')
    op.drop_table('plants')
    op.drop_index(op.f('ix_gardens_grow_zone'), table_name='gardens')
    op.drop_table('gardens')

    sa.Enum(name='garden_plant_status_enum').drop(op.get_bind(), checkfirst=True)
    sa.Enum(name='pipeline_status_enum').drop(op.get_bind(), checkfirst=True)
