"""Initial schema - catalog, suppliers, stock movements and orders

Revision ID: 001_initial_schema
Revises:
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001_initial_schema'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

MONEY = sa.Numeric(20, 6)


def upgrade() -> None:
    op.create_table(
        'suppliers',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(64), nullable=False),
        sa.Column('active', sa.Boolean(), nullable=False, server_default=sa.true()),
    )

    op.create_table(
        'products',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('created_at', sa.TIMESTAMP(timezone=False), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.TIMESTAMP(timezone=False), server_default=sa.func.now(), nullable=False),
        # Basic information
        sa.Column('type', sa.String(32), nullable=False, server_default='standard'),
        sa.Column('name', sa.JSON(), nullable=False),
        sa.Column('description', sa.JSON(), nullable=False),
        sa.Column('description_short', sa.JSON(), nullable=False),
        sa.Column('tags', sa.JSON(), nullable=False),
        # Prices
        sa.Column('price', MONEY, nullable=False, server_default='0'),
        sa.Column('ecotax', MONEY, nullable=False, server_default='0'),
        sa.Column('wholesale_price', MONEY, nullable=False, server_default='0'),
        sa.Column('unit_price', MONEY, nullable=False, server_default='0'),
        sa.Column('unity', sa.String(255), nullable=False, server_default=''),
        sa.Column('on_sale', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('tax_rules_group_id', sa.Integer(), nullable=False, server_default='0'),
        # SEO
        sa.Column('meta_title', sa.JSON(), nullable=False),
        sa.Column('meta_description', sa.JSON(), nullable=False),
        sa.Column('link_rewrite', sa.JSON(), nullable=False),
        sa.Column('redirect_type', sa.String(16), nullable=False, server_default='404'),
        sa.Column('redirect_target_id', sa.Integer(), nullable=False, server_default='0'),
        # Shipping
        sa.Column('width', MONEY, nullable=False, server_default='0'),
        sa.Column('height', MONEY, nullable=False, server_default='0'),
        sa.Column('depth', MONEY, nullable=False, server_default='0'),
        sa.Column('weight', MONEY, nullable=False, server_default='0'),
        sa.Column('additional_shipping_cost', MONEY, nullable=False, server_default='0'),
        sa.Column('delivery_time_note_type', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('delivery_in_stock', sa.JSON(), nullable=False),
        sa.Column('delivery_out_stock', sa.JSON(), nullable=False),
        sa.Column('carrier_references', sa.JSON(), nullable=False),
        # Options
        sa.Column('active', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('visibility', sa.String(16), nullable=False, server_default='both'),
        sa.Column('available_for_order', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('show_price', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('online_only', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('show_condition', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('condition', sa.String(16), nullable=False, server_default='new'),
        # Details
        sa.Column('reference', sa.String(64), nullable=False, server_default=''),
        sa.Column('mpn', sa.String(40), nullable=False, server_default=''),
        sa.Column('upc', sa.String(12), nullable=False, server_default=''),
        sa.Column('ean13', sa.String(13), nullable=False, server_default=''),
        sa.Column('isbn', sa.String(32), nullable=False, server_default=''),
        # Stock
        sa.Column('quantity', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('minimal_quantity', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('location', sa.String(64), nullable=False, server_default=''),
        sa.Column('low_stock_threshold', sa.Integer(), nullable=True),
        sa.Column('low_stock_alert', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('pack_stock_type', sa.Integer(), nullable=False, server_default='3'),
        sa.Column('out_of_stock_type', sa.Integer(), nullable=False, server_default='2'),
        sa.Column('available_now', sa.JSON(), nullable=False),
        sa.Column('available_later', sa.JSON(), nullable=False),
        sa.Column('available_date', sa.Date(), nullable=True),
        sa.Column('advanced_stock_management', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('depends_on_stock', sa.Boolean(), nullable=False, server_default=sa.false()),
        # Suppliers
        sa.Column('default_supplier_id', sa.Integer(), sa.ForeignKey('suppliers.id'), nullable=True),
    )

    op.create_table(
        'product_suppliers',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('product_id', sa.Integer(), sa.ForeignKey('products.id', ondelete='CASCADE'), nullable=False),
        sa.Column('supplier_id', sa.Integer(), sa.ForeignKey('suppliers.id'), nullable=False),
        sa.Column('combination_id', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('reference', sa.String(64), nullable=False, server_default=''),
        sa.Column('price_tax_excluded', MONEY, nullable=False, server_default='0'),
        sa.Column('currency_id', sa.Integer(), nullable=True),
    )
    op.create_index('ix_product_suppliers_product_id', 'product_suppliers', ['product_id'])
    op.create_index('ix_product_suppliers_supplier_id', 'product_suppliers', ['supplier_id'])

    op.create_table(
        'stock_movements',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('product_id', sa.Integer(), sa.ForeignKey('products.id', ondelete='CASCADE'), nullable=False),
        sa.Column('delta_quantity', sa.Integer(), nullable=False),
        sa.Column('sign', sa.Integer(), nullable=False),
        sa.Column('physical_quantity', sa.Integer(), nullable=False),
        sa.Column('reason', sa.String(32), nullable=False),
        sa.Column('created_at', sa.TIMESTAMP(timezone=False), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_stock_movements_product_id', 'stock_movements', ['product_id'])

    op.create_table(
        'customers',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('firstname', sa.String(255), nullable=False),
        sa.Column('lastname', sa.String(255), nullable=False),
        sa.Column('email', sa.String(255), nullable=False, unique=True),
    )

    op.create_table(
        'order_states',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(64), nullable=False, unique=True),
        sa.Column('color', sa.String(32), nullable=False, server_default='#32CD32'),
    )

    op.create_table(
        'orders',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('reference', sa.String(9), nullable=False),
        sa.Column('customer_id', sa.Integer(), sa.ForeignKey('customers.id'), nullable=False),
        sa.Column('current_state_id', sa.Integer(), sa.ForeignKey('order_states.id'), nullable=False),
        sa.Column('delivery_country', sa.String(64), nullable=False),
        sa.Column('payment', sa.String(255), nullable=False),
        sa.Column('total_paid_tax_incl', sa.Numeric(20, 6), nullable=False, server_default='0'),
        sa.Column('date_add', sa.TIMESTAMP(timezone=False), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_orders_id', 'orders', ['id'])
    op.create_index('ix_orders_reference', 'orders', ['reference'])
    op.create_index('ix_orders_customer_id', 'orders', ['customer_id'])


def downgrade() -> None:
    op.drop_table('orders')
    op.drop_table('order_states')
    op.drop_table('customers')
    op.drop_table('stock_movements')
    op.drop_table('product_suppliers')
    op.drop_table('products')
    op.drop_table('suppliers')
