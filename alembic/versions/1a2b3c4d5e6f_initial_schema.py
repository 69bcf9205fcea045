"""initial_schema

Revision ID: 1a2b3c4d5e6f
Revises:
Create Date: 2026-10-18

Creates:
- users and sessions for admin login
- daily_menus keyed by date
- menu_items (custom items and image-bearing built-ins) and generated_images
- site_settings key/value store (announcement)
- menu_suggestions and delivery_enrollments lead tables

Note: After running this migration, create an admin user with:
    python -m app.cli create-admin --username admin
"""
from alembic import op
import sqlalchemy as sa

revision = '1a2b3c4d5e6f'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(as_uuid=True), nullable=False),
        sa.Column('username', sa.String(150), nullable=False),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('is_admin', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('username'),
    )

    op.create_table(
        'sessions',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Uuid(as_uuid=True), nullable=False),
        sa.Column('token', sa.String(64), nullable=False),
        sa.Column('expires_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('user_agent', sa.String(512), nullable=True),
        sa.Column('ip_address', sa.String(45), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_sessions_token'), 'sessions', ['token'], unique=True)

    op.create_table(
        'daily_menus',
        sa.Column('date', sa.String(10), nullable=False),
        sa.Column('soups', sa.JSON(), nullable=False),
        sa.Column('panini_id', sa.String(64), nullable=True),
        sa.Column('sandwich_id', sa.String(64), nullable=True),
        sa.Column('salad_id', sa.String(64), nullable=True),
        sa.Column('entree_id', sa.String(64), nullable=True),
        sa.Column('is_published', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('date'),
    )
    op.create_index('idx_daily_menus_published', 'daily_menus', ['is_published', 'date'])

    op.create_table(
        'menu_items',
        sa.Column('id', sa.String(64), nullable=False),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False, server_default=''),
        sa.Column('type', sa.String(20), nullable=False),
        sa.Column('tags', sa.JSON(), nullable=False),
        sa.Column('price', sa.String(20), nullable=True),
        sa.Column('image_url', sa.Text(), nullable=True),
        sa.Column('is_custom', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'generated_images',
        sa.Column('item_id', sa.String(64), nullable=False),
        sa.Column('image_url', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('item_id'),
    )

    op.create_table(
        'site_settings',
        sa.Column('key', sa.String(100), nullable=False),
        sa.Column('value', sa.JSON(), nullable=False),
        sa.PrimaryKeyConstraint('key'),
    )

    op.create_table(
        'menu_suggestions',
        sa.Column('id', sa.String(36), nullable=False),
        sa.Column('guest_name', sa.String(255), nullable=False),
        sa.Column('contact_email', sa.String(255), nullable=True),
        sa.Column('contact_phone', sa.String(50), nullable=True),
        sa.Column('item_name', sa.String(255), nullable=False),
        sa.Column('item_type', sa.String(20), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('status', sa.String(20), nullable=False, server_default='new'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('idx_menu_suggestions_created_at', 'menu_suggestions', ['created_at'])

    op.create_table(
        'delivery_enrollments',
        sa.Column('id', sa.String(36), nullable=False),
        sa.Column('guest_name', sa.String(255), nullable=False),
        sa.Column('phone_number', sa.String(50), nullable=False),
        sa.Column('opt_in_confirmed', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('preferred_contact_window', sa.String(100), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('idx_delivery_enrollments_created_at', 'delivery_enrollments', ['created_at'])


def downgrade() -> None:
    op.drop_index('idx_delivery_enrollments_created_at', table_name='delivery_enrollments')
    op.drop_table('delivery_enrollments')
    op.drop_index('idx_menu_suggestions_created_at', table_name='menu_suggestions')
    op.drop_table('menu_suggestions')
    op.drop_table('site_settings')
    op.drop_table('generated_images')
    op.drop_table('menu_items')
    op.drop_index('idx_daily_menus_published', table_name='daily_menus')
    op.drop_table('daily_menus')
    op.drop_index(op.f('ix_sessions_token'), table_name='sessions')
    op.drop_table('sessions')
    op.drop_table('users')
