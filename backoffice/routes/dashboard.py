from datetime import datetime, time
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.core.templates import templates
from backoffice.dependencies import get_db
from backoffice.models.order import Order
from backoffice.models.product import Product

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def dashboard(request: Request, db: AsyncSession = Depends(get_db)):
    """Landing page with a few catalog and order counters"""
    today_start = datetime.combine(datetime.now().date(), time.min)

    stats = {
        "products": await db.scalar(select(func.count(Product.id))),
        "active_products": await db.scalar(select(func.count(Product.id)).where(Product.active.is_(True))),
        "orders": await db.scalar(select(func.count(Order.id))),
        "orders_today": await db.scalar(select(func.count(Order.id)).where(Order.date_add >= today_start)),
    }

    return templates.TemplateResponse("dashboard.html", {"request": request, "stats": stats})
