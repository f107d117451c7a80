"""Add payment form and form style setting tables

Revision ID: 7c1f4e2a9b30
Revises: 
Create Date: 2026-10-19 10:04:51.218337

"""
from alembic import op
import sqlalchemy as sa

revision = '7c1f4e2a9b30'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'payment_form',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('display_type', sa.String(length=30), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'form_style_setting',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('form_id', sa.Integer(), nullable=False),
        sa.Column('key', sa.String(length=64), nullable=False),
        sa.Column('value', sa.String(length=255), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['form_id'], ['payment_form.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('form_id', 'key', name='uq_form_style_setting_form_key'),
    )
    with op.batch_alter_table('form_style_setting', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_form_style_setting_form_id'), ['form_id'], unique=False)


def downgrade():
    with op.batch_alter_table('form_style_setting', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_form_style_setting_form_id'))

    op.drop_table('form_style_setting')
    op.drop_table('payment_form')
