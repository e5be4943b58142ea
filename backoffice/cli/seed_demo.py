# backoffice/cli/seed_demo.py
"""
Load the demo shop: order states, customers, five orders and a few products.

The orders are dated relative to the day the command runs, so the first and
last of them always fall on "today". tests/ui/data/orders.py describes the same
orders as the grid displays them.
"""
import asyncio
import logging
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Dict, Optional

import click
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.core.enums import OutOfStockType, PackStockType, ProductType
from backoffice.database import async_session
from backoffice.models import Customer, Order, OrderState, Product, ProductSupplier, Supplier

logger = logging.getLogger(__name__)

ORDER_STATES = [
    ("Awaiting check payment", "#34209E"),
    ("Payment accepted", "#3498D8"),
    ("Processing in progress", "#3498D8"),
    ("Shipped", "#01b887"),
    ("Delivered", "#01b887"),
    ("Canceled", "#2C3E50"),
    ("Refunded", "#ec2e15"),
    ("Payment error", "#ec2e15"),
    ("Awaiting bank wire payment", "#34209E"),
]

CUSTOMERS = [
    {"firstname": "John", "lastname": "DOE", "email": "pub@prestashop.com"},
    {"firstname": "Jane", "lastname": "SMITH", "email": "jane.smith@example.com"},
]

# (reference, customer email, country, payment, state, total, days ago)
ORDERS = [
    ("XKBKNABJK", "pub@prestashop.com", "France", "Payment by check", "Canceled", "61.80", 0),
    ("OHSATSERP", "pub@prestashop.com", "France", "Payment by check", "Awaiting check payment", "169.90", 3),
    ("UOYEVOLI", "jane.smith@example.com", "United States", "Payment by check", "Payment error", "14.90", 2),
    ("FFATNOMMJ", "jane.smith@example.com", "United States", "Bank wire", "Awaiting bank wire payment", "14.90", 1),
    ("KHWLILZLL", "pub@prestashop.com", "France", "Bank wire", "Awaiting bank wire payment", "20.90", 0),
]

SUPPLIERS = ["Fashion Supplier", "Accessories supplier"]

PRODUCTS = [
    {
        "reference": "demo_1",
        "name": "Hummingbird printed t-shirt",
        "price": Decimal("23.90"),
        "quantity": 2400,
        "tags": ["t-shirt", "hummingbird"],
        "supplier": "Fashion Supplier",
        "supplier_price": Decimal("5.490000"),
    },
    {
        "reference": "demo_11",
        "name": "Mug The best is yet to come",
        "price": Decimal("11.90"),
        "quantity": 300,
        "tags": ["mug"],
        "supplier": "Accessories supplier",
        "supplier_price": Decimal("4.000000"),
    },
    {
        "reference": "demo_21",
        "name": "Pack Mug + Framed poster",
        "price": Decimal("35.00"),
        "quantity": 100,
        "type": ProductType.PACK.value,
        "pack_stock_type": PackStockType.BOTH.value,
    },
]


async def seed_demo_data(session: AsyncSession, language_id: int = 1, now: Optional[datetime] = None) -> Dict[str, int]:
    """Insert the demo rows. Returns how many rows of each kind were created."""
    now = now or datetime.now()
    language = str(language_id)

    states = {name: OrderState(name=name, color=color) for name, color in ORDER_STATES}
    customers = {data["email"]: Customer(**data) for data in CUSTOMERS}
    suppliers = {name: Supplier(name=name) for name in SUPPLIERS}
    session.add_all([*states.values(), *customers.values(), *suppliers.values()])

    # Inserted in list order, so XKBKNABJK gets the lowest id
    orders = []
    for reference, email, country, payment, state, total, days_ago in ORDERS:
        orders.append(Order(
            reference=reference,
            customer=customers[email],
            current_state=states[state],
            delivery_country=country,
            payment=payment,
            total_paid_tax_incl=Decimal(total),
            date_add=(now - timedelta(days=days_ago)).replace(microsecond=0),
        ))
    session.add_all(orders)

    products = []
    for data in PRODUCTS:
        product = Product(
            type=data.get("type", ProductType.STANDARD.value),
            reference=data["reference"],
            name={language: data["name"]},
            link_rewrite={language: data["name"].lower().replace(" ", "-")},
            tags={language: data.get("tags", [])},
            price=data["price"],
            quantity=data["quantity"],
            active=True,
            pack_stock_type=data.get("pack_stock_type", PackStockType.DEFAULT.value),
            out_of_stock_type=OutOfStockType.DEFAULT.value,
        )
        if "supplier" in data:
            supplier = suppliers[data["supplier"]]
            product.default_supplier = supplier
            product.product_suppliers.append(ProductSupplier(
                supplier=supplier,
                reference=f"{data['reference']}-sup",
                price_tax_excluded=data["supplier_price"],
            ))
        products.append(product)
    session.add_all(products)

    await session.commit()

    counts = {
        "order_states": len(states),
        "customers": len(customers),
        "orders": len(orders),
        "suppliers": len(suppliers),
        "products": len(products),
    }
    logger.info("Demo data loaded: %s", counts)
    return counts


@click.command()
@click.option('--force', is_flag=True, help='Seed even when orders already exist')
def seed_demo(force):
    """Load the demo orders, customers and products"""

    async def _seed():
        async with async_session() as session:
            existing = await session.scalar(select(func.count(Order.id)))
            if existing and not force:
                click.echo(f"Database already holds {existing} orders, use --force to seed anyway")
                return
            counts = await seed_demo_data(session)
            for table, count in counts.items():
                click.echo(f"{table}: {count}")

    asyncio.run(_seed())


if __name__ == "__main__":
    seed_demo()
