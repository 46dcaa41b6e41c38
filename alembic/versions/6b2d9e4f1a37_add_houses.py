"""add houses, link batches to a house

Revision ID: 6b2d9e4f1a37
Revises: 3f1a7c2e9b10
Create Date: 2026-10-18 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '6b2d9e4f1a37'
down_revision: Union[str, Sequence[str], None] = '3f1a7c2e9b10'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'houses',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('width_m', sa.DECIMAL(6, 2), nullable=False),
        sa.Column('length_m', sa.DECIMAL(6, 2), nullable=False),
        sa.Column('height_m', sa.DECIMAL(6, 2), nullable=False),
        sa.Column('density', sa.DECIMAL(3, 1), nullable=False),
        sa.Column('area_m2', sa.DECIMAL(10, 2), nullable=False),
        sa.Column('max_capacity', sa.Integer(), nullable=False),
        sa.Column('manual_capacity', sa.Integer(), nullable=True),
        sa.Column('capacity_override', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('responsibles', sa.JSON(), nullable=False),
        sa.Column('notes', sa.String(length=1024), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_houses_name'), 'houses', ['name'], unique=True)

    # house_id was free text; values that are not house ids cannot be kept
    op.execute("UPDATE batches SET house_id = NULL")
    with op.batch_alter_table('batches') as batch_op:
        batch_op.alter_column(
            'house_id',
            existing_type=sa.String(length=64),
            type_=sa.Uuid(),
            existing_nullable=True,
            postgresql_using='house_id::uuid',
        )
        batch_op.create_foreign_key(
            'fk_batches_house_id_houses', 'houses', ['house_id'], ['id'], ondelete='RESTRICT'
        )
        batch_op.create_index('ix_batches_house_id', ['house_id'], unique=False)


def downgrade() -> None:
    with op.batch_alter_table('batches') as batch_op:
        batch_op.drop_index('ix_batches_house_id')
        batch_op.drop_constraint('fk_batches_house_id_houses', type_='foreignkey')
        batch_op.alter_column(
            'house_id',
            existing_type=sa.Uuid(),
            type_=sa.String(length=64),
            existing_nullable=True,
        )
    op.drop_index(op.f('ix_houses_name'), table_name='houses')
    op.drop_table('houses')
