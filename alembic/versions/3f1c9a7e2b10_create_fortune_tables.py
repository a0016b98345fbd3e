"""Create fortune templates, sessions and draws

Revision ID: 3f1c9a7e2b10
Revises:
Create Date: 2026-10-19 10:12:44.318204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c9a7e2b10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'fortune_templates',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('user_id', sa.String(), nullable=True),
        sa.Column('title', sa.String(), nullable=True),
        sa.Column('body', sa.Text(), nullable=False),
        sa.Column('category', sa.String(), nullable=True),
        sa.Column('tone', sa.String(), nullable=True),
        sa.Column('is_system', sa.Boolean(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_fortune_templates_user_id'), 'fortune_templates', ['user_id'], unique=False)
    op.create_index(op.f('ix_fortune_templates_category'), 'fortune_templates', ['category'], unique=False)

    op.create_table(
        'fortune_sessions',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('question', sa.Text(), nullable=True),
        sa.Column('spread_type', sa.String(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_fortune_sessions_user_id'), 'fortune_sessions', ['user_id'], unique=False)

    op.create_table(
        'fortune_draws',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('session_id', sa.String(), nullable=False),
        sa.Column('fortune_template_id', sa.String(), nullable=True),
        sa.Column('position_index', sa.Integer(), nullable=True),
        sa.Column('interpreted_text', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['session_id'], ['fortune_sessions.id']),
        sa.ForeignKeyConstraint(['fortune_template_id'], ['fortune_templates.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_fortune_draws_session_id'), 'fortune_draws', ['session_id'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_fortune_draws_session_id'), table_name='fortune_draws')
    op.drop_table('fortune_draws')
    op.drop_index(op.f('ix_fortune_sessions_user_id'), table_name='fortune_sessions')
    op.drop_table('fortune_sessions')
    op.drop_index(op.f('ix_fortune_templates_category'), table_name='fortune_templates')
    op.drop_index(op.f('ix_fortune_templates_user_id'), table_name='fortune_templates')
    op.drop_table('fortune_templates')
