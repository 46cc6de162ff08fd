"""Initial schema with all tables

Revision ID: 001
Revises:
Create Date: 2024-01-01

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Users table
    op.create_table(
        'users',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('username', sa.String(100), nullable=False),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('is_admin', sa.Boolean, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_users_username', 'users', ['username'], unique=True)

    # Politicians table
    op.create_table(
        'politicians',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('party', sa.String(50), nullable=False),
        sa.Column('parish', sa.String(100), nullable=False),
        sa.Column('number_of_votes', sa.Integer, server_default='0'),
        sa.Column('status', sa.String(20), server_default='Current'),
        sa.Column('bio', sa.Text),
        sa.Column('first_elected', sa.Date),
        sa.Column('profile_image_url', sa.String(500)),
        sa.Column('manifesto_points', sa.JSON),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('idx_politicians_party', 'politicians', ['party'])
    op.create_index('idx_politicians_parish', 'politicians', ['parish'])

    # Promises table
    op.create_table(
        'promises',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('politician_id', sa.String(36), sa.ForeignKey('politicians.id', ondelete='CASCADE'), nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('description', sa.Text, nullable=False),
        sa.Column('status', sa.String(20), server_default='InProgress'),
        sa.Column('fulfillment_date', sa.Date),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('idx_promises_politician', 'promises', ['politician_id'])

    # Bills table
    op.create_table(
        'bills',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('title', sa.Text, nullable=False),
        sa.Column('description', sa.Text, nullable=False),
        sa.Column('date_voted', sa.Date, nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    # Voting records table
    op.create_table(
        'voting_records',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('politician_id', sa.String(36), sa.ForeignKey('politicians.id', ondelete='CASCADE'), nullable=False),
        sa.Column('bill_id', sa.String(36), sa.ForeignKey('bills.id', ondelete='CASCADE'), nullable=False),
        sa.Column('vote', sa.String(20), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('idx_voting_records_politician', 'voting_records', ['politician_id'])
    op.create_index('idx_voting_records_bill', 'voting_records', ['bill_id'])

    # Ratings table; one rating per (user, politician)
    op.create_table(
        'ratings',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('politician_id', sa.String(36), sa.ForeignKey('politicians.id', ondelete='CASCADE'), nullable=False),
        sa.Column('user_id', sa.String(100), nullable=False),
        sa.Column('rating', sa.Float, nullable=False),
        sa.Column('comment', sa.Text),
        sa.Column('status', sa.String(20), server_default='Pending'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint('user_id', 'politician_id', name='uq_ratings_user_politician'),
    )
    op.create_index('idx_ratings_politician', 'ratings', ['politician_id'])
    op.create_index('idx_ratings_status', 'ratings', ['status'])

    # Admin audit log table
    op.create_table(
        'admin_logs',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('user_id', sa.String(36), nullable=False),
        sa.Column('action', sa.String(50), nullable=False),
        sa.Column('details', sa.JSON),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('idx_admin_logs_created', 'admin_logs', ['created_at'])


def downgrade() -> None:
    op.drop_table('admin_logs')
    op.drop_table('ratings')
    op.drop_table('voting_records')
    op.drop_table('bills')
    op.drop_table('promises')
    op.drop_table('politicians')
    op.drop_table('users')
