"""Create users table

Revision ID: 001
Revises: 
Create Date: 2025-01-23 10:00:00.000000

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create users table"""

    op.create_table('users',
        sa.Column('id', sa.String(36), nullable=False, comment='Unique identifier for each user (UUID4)'),
        sa.Column('email', sa.String(255), nullable=False, comment="User's email address, unique across users"),
        sa.Column('first_name', sa.String(100), nullable=False, comment="User's first name"),
        sa.Column('last_name', sa.String(100), nullable=False, comment="User's last name"),
        sa.Column('age', sa.Integer(), nullable=False, comment="User's age in years"),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, comment='Row creation time'),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, comment='Last successful update time'),

        sa.PrimaryKeyConstraint('id', name='pk_users'),
        sa.CheckConstraint('age >= 0', name='ck_users_age_non_negative'),
    )

    # Unique index backs the email uniqueness rule under concurrent writes
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    # Listing is ordered by creation time
    op.create_index('ix_users_created_at', 'users', ['created_at'])


def downgrade() -> None:
    """Drop users table"""
    op.drop_index('ix_users_created_at', table_name='users')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
