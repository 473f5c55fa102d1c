"""create game, team and answer tables

Revision ID: 5a7e2c19d3b0
Revises:
Create Date: 2025-09-06 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '5a7e2c19d3b0'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)
    existing_tables = set(insp.get_table_names())

    # Databases bootstrapped at startup already have these tables
    if 'game' not in existing_tables:
        op.create_table(
            'game',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('passcode', sa.String(length=4), nullable=False),
            sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.current_timestamp()),
        )
        op.create_index('ix_game_created_at', 'game', ['created_at'])
    if 'team' not in existing_tables:
        op.create_table(
            'team',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('game_id', sa.Integer(), sa.ForeignKey('game.id'), nullable=False),
            sa.Column('name', sa.String(length=128), nullable=False),
            sa.Column('game_code', sa.String(length=4), nullable=True),
        )
        op.create_index('ix_team_game_id', 'team', ['game_id'])
    if 'answer' not in existing_tables:
        op.create_table(
            'answer',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('team_id', sa.Integer(), sa.ForeignKey('team.id'), nullable=False),
            sa.Column('question_number', sa.Integer(), nullable=False),
            sa.Column('answer', sa.Text(), nullable=True),
            sa.Column('points', sa.Float(), nullable=True),
        )
        op.create_index('ix_answer_team_id', 'answer', ['team_id'])
        op.create_index('ix_answer_question_number', 'answer', ['question_number'])


def downgrade():
    op.drop_table('answer')
    op.drop_table('team')
    op.drop_table('game')
