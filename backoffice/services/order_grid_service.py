"""
Purpose: Builds the admin orders grid.

Each grid column maps to one SQL expression; the same expression is used to
filter, to sort and to display the column, so what a filter matches is always
what the cell shows.

- input filters: id_order and total_paid_tax_incl match exactly, reference,
  customer and payment match case-insensitive substrings
- select filters: new (first order of the customer), country_name and osname
  match exactly
- date_from / date_to bound date_add by whole days, both inclusive
"""

import logging
import math
from datetime import datetime, time, timedelta

from sqlalchemy import String, case, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from backoffice.core.exceptions import OrderGridError
from backoffice.models.order import Customer, Order, OrderState
from backoffice.schemas.order import OrderFilters, OrderGrid, OrderGridRow

logger = logging.getLogger(__name__)

SORT_ORDERS = ("asc", "desc")


class OrderGridService:
    def __init__(self, db: AsyncSession):
        self.db = db

        earlier_order = aliased(Order)
        self._has_earlier_order = (
            select(earlier_order.id)
            .where(
                earlier_order.customer_id == Order.customer_id,
                earlier_order.id < Order.id,
            )
            .exists()
        )
        self._customer_name = (
            func.substr(Customer.firstname, 1, 1, type_=String) + ". " + Customer.lastname
        )
        self.columns = {
            "id_order": Order.id,
            "reference": Order.reference,
            "new": case((self._has_earlier_order, False), else_=True),
            "country_name": Order.delivery_country,
            "customer": self._customer_name,
            "total_paid_tax_incl": Order.total_paid_tax_incl,
            "payment": Order.payment,
            "osname": OrderState.name,
            "date_add": Order.date_add,
        }

    def _base_query(self):
        return (
            select(
                *(expression.label(name) for name, expression in self.columns.items()),
                OrderState.color.label("os_color"),
            )
            .join(Customer, Order.customer_id == Customer.id)
            .join(OrderState, Order.current_state_id == OrderState.id)
        )

    def _apply_filters(self, query, filters: OrderFilters):
        if filters.id_order is not None:
            query = query.where(Order.id == filters.id_order)
        if filters.reference:
            query = query.where(Order.reference.icontains(filters.reference, autoescape=True))
        if filters.new is not None:
            query = query.where(~self._has_earlier_order if filters.new else self._has_earlier_order)
        if filters.country_name:
            query = query.where(Order.delivery_country == filters.country_name)
        if filters.customer:
            query = query.where(self._customer_name.icontains(filters.customer, autoescape=True))
        if filters.total_paid_tax_incl is not None:
            query = query.where(Order.total_paid_tax_incl == filters.total_paid_tax_incl)
        if filters.payment:
            query = query.where(Order.payment.icontains(filters.payment, autoescape=True))
        if filters.osname:
            query = query.where(OrderState.name == filters.osname)
        if filters.date_from:
            query = query.where(Order.date_add >= datetime.combine(filters.date_from, time.min))
        if filters.date_to:
            query = query.where(Order.date_add < datetime.combine(filters.date_to + timedelta(days=1), time.min))
        return query

    async def get_grid(
        self,
        filters: OrderFilters,
        page: int = 1,
        per_page: int = 50,
        order_by: str = "id_order",
        sort_order: str = "desc",
    ) -> OrderGrid:
        """
        Returns one page of the filtered grid.

        Raises:
            OrderGridError: If the sort column or direction is unknown
        """
        if order_by not in self.columns:
            raise OrderGridError(f"Cannot sort orders by '{order_by}'")
        if sort_order not in SORT_ORDERS:
            raise OrderGridError(f"Sort order must be one of {', '.join(SORT_ORDERS)}")

        query = self._apply_filters(self._base_query(), filters)

        total = await self.db.scalar(select(func.count()).select_from(query.subquery()))
        total_pages = max(1, math.ceil(total / per_page))
        page = min(max(1, page), total_pages)

        sort_expression = self.columns[order_by]
        sort_expression = sort_expression.desc() if sort_order == "desc" else sort_expression.asc()
        query = (
            query.order_by(sort_expression, Order.id.desc())
            .offset((page - 1) * per_page)
            .limit(per_page)
        )

        result = await self.db.execute(query)
        rows = [OrderGridRow(**row._mapping) for row in result.all()]

        logger.debug("Orders grid: %s of %s rows (filters=%s)", len(rows), total, filters.model_dump(exclude_none=True))

        return OrderGrid(
            rows=rows,
            total=total,
            page=page,
            per_page=per_page,
            total_pages=total_pages,
            order_by=order_by,
            sort_order=sort_order,
            filters=filters,
            countries=await self.get_countries(),
            statuses=await self.get_statuses(),
        )

    async def get_countries(self):
        result = await self.db.execute(
            select(Order.delivery_country).distinct().order_by(Order.delivery_country)
        )
        return list(result.scalars().all())

    async def get_statuses(self):
        result = await self.db.execute(select(OrderState.name).order_by(OrderState.name))
        return list(result.scalars().all())
