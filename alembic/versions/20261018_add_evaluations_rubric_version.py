"""add evaluations.rubric_version

Revision ID: 20261018_add_evaluations_rubric_version
Revises: 0001_initial
Create Date: 2026-10-18 00:00:00.000000
"""
from alembic import op
import sqlalchemy as sa

revision = '20261018_add_evaluations_rubric_version'
down_revision = '0001_initial'
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)
    cols = [c['name'] for c in insp.get_columns('evaluations')]
    if 'rubric_version' not in cols:
        # rows written before this column existed were all scored under v1
        op.add_column('evaluations', sa.Column('rubric_version', sa.String(20), nullable=False,
                                               server_default='v1'))


def downgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)
    cols = [c['name'] for c in insp.get_columns('evaluations')]
    if 'rubric_version' in cols:
        op.drop_column('evaluations', 'rubric_version')
