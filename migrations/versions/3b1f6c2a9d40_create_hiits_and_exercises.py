# File: migrations/versions/3b1f6c2a9d40_create_hiits_and_exercises.py

"""Create hiits and exercises

Revision ID: 3b1f6c2a9d40
Revises:
Create Date: 2025-09-02 18:12:05.118204
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '3b1f6c2a9d40'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'hiits',
        sa.Column('hiits_id', sa.String(length=36), primary_key=True),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('type', sa.String(length=16), nullable=False, server_default='custom'),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.current_timestamp()),
        sa.CheckConstraint("type IN ('default','custom')", name='ck_hiits_type'),
    )

    # hiit_id sin FK: la app borra los ejercicios al borrar la HIIT
    op.create_table(
        'exercises',
        sa.Column('exercise_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('exercise_duration', sa.Integer(), nullable=False),
        sa.Column('rest_duration', sa.Integer(), nullable=False),
        sa.Column('hiit_id', sa.String(length=36), nullable=False),
    )
    op.create_index('ix_exercises_hiit_id', 'exercises', ['hiit_id'])


def downgrade():
    op.drop_index('ix_exercises_hiit_id', table_name='exercises')
    op.drop_table('exercises')
    op.drop_table('hiits')
