"""
Initial Schema - Create all GoTogether tables

This migration creates:
1. users - Identity records keyed by identity-provider subject
2. contact_categories - User-owned contact labels
3. contacts - Directed contact edges (composite key user_id, contact_id)
4. interests / user_interests - Interest tags and user selections
5. hangouts / hangout_visibility - Events and their visibility grants

Revision ID: 20261019_initial_schema
Revises:
Create Date: 2026-10-19
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '20261019_initial_schema'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    # ============================================
    # USERS
    # ============================================
    op.create_table(
        'users',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('firebase_uid', sa.String(length=128), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('display_name', sa.String(length=255), nullable=True),
        sa.Column('photo_url', sa.String(length=1024), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_users_firebase_uid', 'users', ['firebase_uid'], unique=True)

    # ============================================
    # CONTACT CATEGORIES
    # ============================================
    op.create_table(
        'contact_categories',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('user_id', sa.String(length=36), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('color', sa.String(length=20), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_contact_categories_user_id', 'contact_categories', ['user_id'])

    # ============================================
    # CONTACTS
    # ============================================
    op.create_table(
        'contacts',
        sa.Column('user_id', sa.String(length=36), sa.ForeignKey('users.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('contact_id', sa.String(length=36), sa.ForeignKey('users.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='PENDING'),
        sa.Column(
            'category_id', sa.String(length=36),
            sa.ForeignKey('contact_categories.id', ondelete='SET NULL'), nullable=True,
        ),
        sa.Column('nickname', sa.String(length=255), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint('user_id <> contact_id', name='ck_contact_no_self_edge'),
        sa.CheckConstraint("status IN ('PENDING', 'ACCEPTED')", name='ck_contact_status'),
    )
    op.create_index('ix_contacts_contact_id', 'contacts', ['contact_id'])
    op.create_index('ix_contacts_status', 'contacts', ['status'])

    # ============================================
    # INTERESTS
    # ============================================
    op.create_table(
        'interests',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('name', sa.String(length=100), nullable=False, unique=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        'user_interests',
        sa.Column('user_id', sa.String(length=36), sa.ForeignKey('users.id', ondelete='CASCADE'), primary_key=True),
        sa.Column(
            'interest_id', sa.String(length=36),
            sa.ForeignKey('interests.id', ondelete='CASCADE'), primary_key=True,
        ),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_user_interests_interest_id', 'user_interests', ['interest_id'])

    # ============================================
    # HANGOUTS
    # ============================================
    op.create_table(
        'hangouts',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('user_id', sa.String(length=36), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('location', sa.String(length=255), nullable=True),
        sa.Column('latitude', sa.Float(), nullable=True),
        sa.Column('longitude', sa.Float(), nullable=True),
        sa.Column('starts_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('ends_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('is_public', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_hangouts_user_id', 'hangouts', ['user_id'])
    op.create_index('ix_hangouts_starts_at', 'hangouts', ['starts_at'])

    op.create_table(
        'hangout_visibility',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column(
            'hangout_id', sa.String(length=36),
            sa.ForeignKey('hangouts.id', ondelete='CASCADE'), nullable=False,
        ),
        sa.Column(
            'category_id', sa.String(length=36),
            sa.ForeignKey('contact_categories.id', ondelete='CASCADE'), nullable=True,
        ),
        sa.Column('user_id', sa.String(length=36), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint('category_id IS NOT NULL OR user_id IS NOT NULL', name='ck_visibility_target'),
    )
    op.create_index('ix_hangout_visibility_hangout_id', 'hangout_visibility', ['hangout_id'])


def downgrade():
    op.drop_table('hangout_visibility')
    op.drop_table('hangouts')
    op.drop_table('user_interests')
    op.drop_table('interests')
    op.drop_table('contacts')
    op.drop_table('contact_categories')
    op.drop_table('users')
