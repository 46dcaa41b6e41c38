"""initial schema, seed breed presets

Revision ID: 3f1a7c2e9b10
Revises:
Create Date: 2026-10-18 00:00:00.000000

"""
from dataclasses import asdict
from datetime import datetime, timezone
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from granjafacil.domain.presets.breeds import default_breeds


# revision identifiers, used by Alembic.
revision: str = '3f1a7c2e9b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps(updated: bool = True) -> list[sa.Column]:
    cols = [sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False)]
    if updated:
        cols.append(sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False))
    return cols


def upgrade() -> None:
    breeds = op.create_table(
        'breeds',
        sa.Column('id', sa.String(length=64), nullable=False),
        sa.Column('name', sa.String(length=50), nullable=False),
        sa.Column('phases', sa.JSON(), nullable=False),
        sa.Column('growth_curve', sa.JSON(), nullable=True),
        sa.Column('is_system_default', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('active', sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_breeds_name'), 'breeds', ['name'], unique=True)

    op.create_table(
        'batches',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('bird_count', sa.Integer(), nullable=False),
        sa.Column('birth_date', sa.Date(), nullable=False),
        sa.Column('entry_date', sa.Date(), nullable=False),
        sa.Column('breed_id', sa.String(length=64), nullable=False),
        sa.Column('house_id', sa.String(length=64), nullable=True),
        sa.Column('cost_center', sa.String(length=64), nullable=True),
        sa.Column('notes', sa.String(length=1024), nullable=True),
        *_timestamps(updated=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_batches_breed_id'), 'batches', ['breed_id'], unique=False)

    op.create_table(
        'vaccination_records',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('batch_id', sa.Uuid(), sa.ForeignKey('batches.id', ondelete='CASCADE'), nullable=False),
        sa.Column('vaccine_id', sa.String(length=64), nullable=False),
        sa.Column('application_date', sa.Date(), nullable=False),
        sa.Column('age_at_application', sa.Integer(), nullable=False),
        sa.Column('birds_vaccinated', sa.Integer(), nullable=False),
        sa.Column('responsible', sa.String(length=100), nullable=False),
        sa.Column('vaccine_lot', sa.String(length=64), nullable=True),
        sa.Column('notes', sa.String(length=1024), nullable=True),
        sa.Column('next_application_date', sa.Date(), nullable=True),
        *_timestamps(updated=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_vaccination_records_batch_id'), 'vaccination_records', ['batch_id'], unique=False)

    op.create_table(
        'weighing_records',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('batch_id', sa.Uuid(), sa.ForeignKey('batches.id', ondelete='CASCADE'), nullable=False),
        sa.Column('week', sa.Integer(), nullable=False),
        sa.Column('age_in_days', sa.Integer(), nullable=False),
        sa.Column('expected_date', sa.Date(), nullable=False),
        sa.Column('ideal_weight_grams', sa.Integer(), nullable=False),
        sa.Column('actual_weight_grams', sa.Float(), nullable=True),
        sa.Column('performed_date', sa.Date(), nullable=True),
        sa.Column('sample_size', sa.Integer(), nullable=True),
        sa.Column('responsible', sa.String(length=100), nullable=True),
        sa.Column('notes', sa.String(length=1024), nullable=True),
        sa.Column('status', sa.String(length=16), nullable=False, server_default='pending'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('batch_id', 'week', name='uq_weighing_batch_week'),
    )
    op.create_index(op.f('ix_weighing_records_batch_id'), 'weighing_records', ['batch_id'], unique=False)

    op.create_table(
        'alerts',
        sa.Column('id', sa.String(length=160), nullable=False),
        sa.Column('batch_id', sa.Uuid(), sa.ForeignKey('batches.id', ondelete='CASCADE'), nullable=False),
        sa.Column('event_id', sa.String(length=128), nullable=False),
        sa.Column('kind', sa.String(length=32), nullable=False),
        sa.Column('priority', sa.String(length=16), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.String(length=1024), nullable=False),
        sa.Column('acknowledged', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_alerts_batch_id'), 'alerts', ['batch_id'], unique=False)

    op.create_table(
        'suppliers',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('contact', sa.String(length=255), nullable=False),
        sa.Column('cnpj', sa.String(length=14), nullable=True),
        sa.Column('phone', sa.String(length=32), nullable=True),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('address', sa.String(length=512), nullable=True),
        sa.Column('notes', sa.String(length=1024), nullable=True),
        sa.Column('active', sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_suppliers_name'), 'suppliers', ['name'], unique=False)

    op.create_table(
        'feed_inputs',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('category', sa.String(length=16), nullable=False),
        sa.Column('unit', sa.String(length=8), nullable=False),
        sa.Column('price_per_unit', sa.DECIMAL(12, 4), nullable=False),
        sa.Column('current_stock', sa.DECIMAL(14, 3), nullable=False),
        sa.Column('minimum_stock', sa.DECIMAL(14, 3), nullable=False),
        sa.Column('supplier_id', sa.Uuid(), sa.ForeignKey('suppliers.id', ondelete='SET NULL'), nullable=True),
        sa.Column('description', sa.String(length=1024), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_feed_inputs_name'), 'feed_inputs', ['name'], unique=False)
    op.create_index(op.f('ix_feed_inputs_category'), 'feed_inputs', ['category'], unique=False)

    op.create_table(
        'stock_movements',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('feed_input_id', sa.Uuid(), sa.ForeignKey('feed_inputs.id', ondelete='CASCADE'), nullable=False),
        sa.Column('type', sa.String(length=4), nullable=False),
        sa.Column('quantity', sa.DECIMAL(14, 3), nullable=False),
        sa.Column('reason', sa.String(length=255), nullable=False),
        sa.Column('responsible', sa.String(length=100), nullable=False),
        sa.Column('unit_cost', sa.DECIMAL(12, 4), nullable=True),
        sa.Column('batch_id', sa.Uuid(), nullable=True),
        sa.Column('invoice_number', sa.String(length=64), nullable=True),
        sa.Column('notes', sa.String(length=1024), nullable=True),
        *_timestamps(updated=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_stock_movements_feed_input_id'), 'stock_movements', ['feed_input_id'], unique=False)

    op.create_table(
        'feed_formulas',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('type', sa.String(length=16), nullable=False),
        sa.Column('ingredients', sa.JSON(), nullable=False),
        sa.Column('cost_per_kg', sa.DECIMAL(12, 4), nullable=False),
        sa.Column('notes', sa.String(length=1024), nullable=True),
        sa.Column('active', sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'egg_productions',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('batch_id', sa.Uuid(), sa.ForeignKey('batches.id', ondelete='CASCADE'), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('eggs_collected', sa.Integer(), nullable=False),
        sa.Column('bird_count', sa.Integer(), nullable=False),
        sa.Column('laying_rate', sa.DECIMAL(5, 2), nullable=False),
        sa.Column('notes', sa.String(length=1024), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('batch_id', 'date', name='uq_egg_production_batch_date'),
    )
    op.create_index(op.f('ix_egg_productions_batch_id'), 'egg_productions', ['batch_id'], unique=False)
    op.create_index(op.f('ix_egg_productions_date'), 'egg_productions', ['date'], unique=False)

    # Seed system default breeds
    now = datetime.now(timezone.utc)
    op.bulk_insert(
        breeds,
        [
            {
                'id': b.id,
                'name': b.name,
                'phases': [asdict(p) for p in b.phases],
                'growth_curve': {str(w): g for w, g in b.growth_curve.items()} or None,
                'is_system_default': True,
                'active': True,
                'created_at': now,
                'updated_at': now,
            }
            for b in default_breeds()
        ],
    )


def downgrade() -> None:
    op.drop_table('egg_productions')
    op.drop_table('feed_formulas')
    op.drop_table('stock_movements')
    op.drop_table('feed_inputs')
    op.drop_table('suppliers')
    op.drop_table('alerts')
    op.drop_table('weighing_records')
    op.drop_table('vaccination_records')
    op.drop_table('batches')
    op.drop_table('breeds')
