"""Create game_config table

Revision ID: 0001
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '0001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table('game_config',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('game_name', sa.String(length=100), nullable=False),
        sa.Column('game_rtp', sa.Float(), nullable=False),
        sa.Column('reel_strips', sa.JSON(), nullable=False), # [{"reelOne": {"L1": 5.0}}, ...]
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_game_config_game_name'), 'game_config', ['game_name'], unique=False)


def downgrade():
    op.drop_index(op.f('ix_game_config_game_name'), table_name='game_config')
    op.drop_table('game_config')
