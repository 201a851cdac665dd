"""create_profile_tables

Revision ID: 4b1f7c2e9a10
Revises:
Create Date: 2026-10-16 09:12:44.318201

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4b1f7c2e9a10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create users, tokens and profiles tables."""
    op.create_table('users',
        sa.Column('id', sa.UUID(), nullable=False),
        sa.Column('sn', sa.String(length=100), nullable=False),
        sa.Column('pass_hash', sa.String(length=64), nullable=False),
        sa.Column('date', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('sn'),
    )

    op.create_table('tokens',
        sa.Column('id', sa.UUID(), nullable=False),
        sa.Column('user', sa.UUID(), nullable=False),
        sa.Column('key_hash', sa.String(length=64), nullable=False),
        sa.Column('type', sa.String(length=20), nullable=False, server_default='general'),
        sa.Column('date', sa.DateTime(), nullable=False),
        sa.CheckConstraint("type IN ('master', 'general')", name='ck_tokens_type'),
        sa.ForeignKeyConstraint(['user'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_tokens_user', 'tokens', ['user'], unique=False)

    # Screen-name uniqueness is enforced here and nowhere else; the
    # application maps the violation to a 409.
    op.create_table('profiles',
        sa.Column('id', sa.UUID(), nullable=False),
        sa.Column('user', sa.UUID(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('text', sa.Text(), nullable=False),
        sa.Column('mdtext', sa.Text(), nullable=False),
        sa.Column('date', sa.DateTime(), nullable=False),
        sa.Column('update', sa.DateTime(), nullable=False),
        sa.Column('sn', sa.String(length=100), nullable=False),
        sa.ForeignKeyConstraint(['user'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('sn'),
    )
    op.create_index('ix_profiles_user', 'profiles', ['user'], unique=False)
    op.create_index('ix_profiles_date', 'profiles', ['date'], unique=False)


def downgrade() -> None:
    """Drop profiles, tokens and users tables."""
    op.drop_index('ix_profiles_date', table_name='profiles')
    op.drop_index('ix_profiles_user', table_name='profiles')
    op.drop_table('profiles')
    op.drop_index('ix_tokens_user', table_name='tokens')
    op.drop_table('tokens')
    op.drop_table('users')
