"""split answer points into chosen_points and awarded_points

Revision ID: 9c41f0e6a2d8
Revises: 5a7e2c19d3b0
Create Date: 2025-10-11 19:30:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '9c41f0e6a2d8'
down_revision = '5a7e2c19d3b0'
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)
    cols = {c['name'] for c in insp.get_columns('answer')}

    if 'bonus_answer' not in cols:
        op.add_column('answer', sa.Column('bonus_answer', sa.Text(), nullable=True))
    if 'chosen_points' not in cols:
        op.add_column('answer', sa.Column('chosen_points', sa.Float(), nullable=False, server_default='0'))
        # The old single points column was the team's wager
        if 'points' in cols:
            op.execute("UPDATE answer SET chosen_points = COALESCE(points, 0)")
    if 'awarded_points' not in cols:
        op.add_column('answer', sa.Column('awarded_points', sa.Float(), nullable=False, server_default='0'))


def downgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)
    cols = {c['name'] for c in insp.get_columns('answer')}
    with op.batch_alter_table('answer') as batch_op:
        if 'awarded_points' in cols:
            batch_op.drop_column('awarded_points')
        if 'chosen_points' in cols:
            batch_op.drop_column('chosen_points')
        if 'bonus_answer' in cols:
            batch_op.drop_column('bonus_answer')
