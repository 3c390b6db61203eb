"""Initial schema

Revision ID: 001
Revises: 
Create Date: 2026-10-19 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'product',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('price', sa.Numeric(19, 2), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table(
        'menu_group',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table(
        'menu',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('price', sa.Numeric(19, 2), nullable=False),
        sa.Column('menu_group_id', sa.Uuid(), nullable=False),
        sa.Column('displayed', sa.Boolean(), nullable=False),
        sa.ForeignKeyConstraint(['menu_group_id'], ['menu_group.id'], ),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table(
        'menu_product',
        sa.Column('seq', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('menu_id', sa.Uuid(), nullable=False),
        sa.Column('product_id', sa.Uuid(), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['menu_id'], ['menu.id'], ),
        sa.ForeignKeyConstraint(['product_id'], ['product.id'], ),
        sa.PrimaryKeyConstraint('seq')
    )

    op.create_table(
        'order_table',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('number_of_guests', sa.Integer(), nullable=False),
        sa.Column('occupied', sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table(
        'orders',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('type', sa.String(length=16), nullable=False),
        sa.Column('status', sa.String(length=16), nullable=False),
        sa.Column('order_date_time', sa.DateTime(), nullable=False),
        sa.Column('delivery_address', sa.String(), nullable=True),
        sa.Column('order_table_id', sa.Uuid(), nullable=True),
        sa.ForeignKeyConstraint(['order_table_id'], ['order_table.id'], ),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table(
        'order_line_item',
        sa.Column('seq', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('order_id', sa.Uuid(), nullable=False),
        sa.Column('menu_id', sa.Uuid(), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('price', sa.Numeric(19, 2), nullable=False),
        sa.ForeignKeyConstraint(['order_id'], ['orders.id'], ),
        sa.ForeignKeyConstraint(['menu_id'], ['menu.id'], ),
        sa.PrimaryKeyConstraint('seq')
    )


def downgrade() -> None:
    op.drop_table('order_line_item')
    op.drop_table('orders')
    op.drop_table('order_table')
    op.drop_table('menu_product')
    op.drop_table('menu')
    op.drop_table('menu_group')
    op.drop_table('product')
