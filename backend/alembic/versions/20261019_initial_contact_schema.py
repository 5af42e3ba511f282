"""Initial contact directory schema

Creates:
1. contact - directory entries with a unique contact_name
2. message - per-contact messages (no foreign key to contact)
3. user - login credentials and roles

Revision ID: initial_contact_schema
Revises:
Create Date: 2026-10-19
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'initial_contact_schema'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'contact',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('contact_name', sa.String(length=255), nullable=False),
        sa.Column('phone_number', sa.String(length=50), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('image_url', sa.String(length=500), nullable=True),
        sa.UniqueConstraint('contact_name', name='uq_contact_name'),
    )

    op.create_table(
        'message',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('contact_id', sa.Integer(), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('message_timestamp', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_message_contact_id', 'message', ['contact_id'])
    op.create_index('ix_message_message_timestamp', 'message', ['message_timestamp'])

    op.create_table(
        'user',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user', sa.String(length=255), nullable=False),
        sa.Column('password', sa.String(length=255), nullable=False),
        sa.Column('role', sa.String(length=50), nullable=False),
    )
    op.create_index('ix_user_user', 'user', ['user'])


def downgrade() -> None:
    op.drop_index('ix_user_user', table_name='user')
    op.drop_table('user')
    op.drop_index('ix_message_message_timestamp', table_name='message')
    op.drop_index('ix_message_contact_id', table_name='message')
    op.drop_table('message')
    op.drop_table('contact')
