"""create game_record table

Revision ID: 5c2e9a1d7b40
Revises:
Create Date: 2026-10-19 00:00:00
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '5c2e9a1d7b40'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)
    if 'game_record' in insp.get_table_names():
        return
    op.create_table(
        'game_record',
        sa.Column('id', sa.String(length=16), primary_key=True),
        sa.Column('started', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('payload', sa.Text(), nullable=False),
        sa.Column('created_at', sa.Float(), nullable=False),
    )
    op.create_index('ix_game_record_started', 'game_record', ['started'])


def downgrade():
    op.drop_index('ix_game_record_started', table_name='game_record')
    op.drop_table('game_record')
