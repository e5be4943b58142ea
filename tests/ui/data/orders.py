# tests/ui/data/orders.py
"""Demo orders as the grid shows them (loaded by backoffice.cli.seed_demo)."""
from dataclasses import dataclass


@dataclass(frozen=True)
class OrderData:
    id: int
    ref: str
    new_client: str
    delivery: str
    customer: str
    total_paid: str
    payment_method: str
    status: str


ORDERS = {
    "first_order": OrderData(
        id=1,
        ref="XKBKNABJK",
        new_client="Yes",
        delivery="France",
        customer="J. DOE",
        total_paid="€61.80",
        payment_method="Payment by check",
        status="Canceled",
    ),
    "second_order": OrderData(
        id=2,
        ref="OHSATSERP",
        new_client="No",
        delivery="France",
        customer="J. DOE",
        total_paid="€169.90",
        payment_method="Payment by check",
        status="Awaiting check payment",
    ),
    "third_order": OrderData(
        id=3,
        ref="UOYEVOLI",
        new_client="Yes",
        delivery="United States",
        customer="J. SMITH",
        total_paid="€14.90",
        payment_method="Payment by check",
        status="Payment error",
    ),
    "fourth_order": OrderData(
        id=4,
        ref="FFATNOMMJ",
        new_client="No",
        delivery="United States",
        customer="J. SMITH",
        total_paid="€14.90",
        payment_method="Bank wire",
        status="Awaiting bank wire payment",
    ),
    "fifth_order": OrderData(
        id=5,
        ref="KHWLILZLL",
        new_client="No",
        delivery="France",
        customer="J. DOE",
        total_paid="€20.90",
        payment_method="Bank wire",
        status="Awaiting bank wire payment",
    ),
}
