# File: migrations/versions/8e4a7d1c5b22_seed_default_hiits.py

"""Seed default hiits

Revision ID: 8e4a7d1c5b22
Revises: 3b1f6c2a9d40
Create Date: 2025-09-02 18:40:31.552907
"""
from alembic import op
import sqlalchemy as sa

from seefit.cli.seed import DEFAULT_HIITS

# revision identifiers, used by Alembic.
revision = '8e4a7d1c5b22'
down_revision = '3b1f6c2a9d40'
branch_labels = None
depends_on = None


hiits = sa.table(
    'hiits',
    sa.column('hiits_id', sa.String),
    sa.column('name', sa.String),
    sa.column('description', sa.Text),
    sa.column('type', sa.String),
)

exercises = sa.table(
    'exercises',
    sa.column('name', sa.String),
    sa.column('description', sa.Text),
    sa.column('exercise_duration', sa.Integer),
    sa.column('rest_duration', sa.Integer),
    sa.column('hiit_id', sa.String),
)


def upgrade():
    op.bulk_insert(hiits, [
        {'hiits_id': h['hiits_id'], 'name': h['name'], 'description': h['description'], 'type': 'default'}
        for h in DEFAULT_HIITS
    ])
    op.bulk_insert(exercises, [
        {
            'name': name,
            'description': description,
            'exercise_duration': work,
            'rest_duration': rest,
            'hiit_id': h['hiits_id'],
        }
        for h in DEFAULT_HIITS
        for name, description, work, rest in h['exercises']
    ])


def downgrade():
    ids = [h['hiits_id'] for h in DEFAULT_HIITS]
    op.execute(exercises.delete().where(exercises.c.hiit_id.in_(ids)))
    op.execute(hiits.delete().where(hiits.c.hiits_id.in_(ids)))
