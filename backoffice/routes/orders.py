"""Orders routes - the filterable orders grid."""
import logging
from typing import Optional
from urllib.parse import urlencode

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.core.config import get_settings
from backoffice.core.exceptions import OrderGridError
from backoffice.core.templates import templates
from backoffice.dependencies import get_db
from backoffice.schemas.order import INPUT_FILTERS, ORDER_GRID_COLUMNS, SELECT_FILTERS, OrderFilters
from backoffice.services.order_grid_service import OrderGridService

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/orders", response_class=HTMLResponse)
async def orders_list(
    request: Request,
    page: int = Query(1, ge=1),
    per_page: Optional[int] = Query(None, ge=10, le=300),
    order_by: str = Query("id_order", description="Column to sort by"),
    sort_order: str = Query("desc", description="Sort order: asc or desc"),
    db: AsyncSession = Depends(get_db),
):
    """Orders grid. Filters come from `orders[<column>]` parameters."""
    if request.query_params.get("reset"):
        return RedirectResponse(url=request.url.path, status_code=303)

    per_page = per_page or get_settings().ORDERS_PER_PAGE
    errors = []

    try:
        filters = OrderFilters.from_query_params(request.query_params)
    except ValidationError as e:
        errors.extend(error["msg"] for error in e.errors())
        filters = OrderFilters()

    service = OrderGridService(db)
    try:
        grid = await service.get_grid(filters, page=page, per_page=per_page, order_by=order_by, sort_order=sort_order)
    except OrderGridError as e:
        errors.append(str(e))
        grid = await service.get_grid(filters, page=page, per_page=per_page)

    if errors:
        logger.info("Orders grid filters rejected: %s", "; ".join(errors))

    filter_values = grid.filters.as_form_values()

    return templates.TemplateResponse(
        "orders/list.html",
        {
            "request": request,
            "grid": grid,
            "columns": ORDER_GRID_COLUMNS,
            "input_filters": INPUT_FILTERS,
            "select_filters": SELECT_FILTERS,
            "filter_values": filter_values,
            "filter_query": urlencode({f"orders[{name}]": value for name, value in filter_values.items() if value}),
            "errors": errors,
        }
    )
