"""add question_category overrides

Revision ID: c2d8b7a1f4e3
Revises: 9c41f0e6a2d8
Create Date: 2026-01-17 21:05:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = 'c2d8b7a1f4e3'
down_revision = '9c41f0e6a2d8'
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)
    if 'question_category' in set(insp.get_table_names()):
        return
    op.create_table(
        'question_category',
        sa.Column('question_number', sa.Integer(), primary_key=True, autoincrement=False),
        sa.Column('category', sa.String(length=128), nullable=False, server_default=''),
        sa.Column('icon', sa.String(length=32), nullable=False, server_default=''),
    )


def downgrade():
    op.drop_table('question_category')
