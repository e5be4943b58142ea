"""Catalog routes - product list, product form and stock updates."""
import logging
import re
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.commands.product_stock import UpdateProductStockCommand
from backoffice.core.bus import CommandBus
from backoffice.core.config import get_settings
from backoffice.core.enums import DeliveryTimeNoteType, OutOfStockType, PackStockType, ProductCondition, ProductVisibility, RedirectType
from backoffice.core.exceptions import ProductConstraintError
from backoffice.core.templates import templates
from backoffice.dependencies import get_bus, get_db, get_product_form_data_provider
from backoffice.models.product import Product
from backoffice.services.product_form_data_provider import ProductFormDataProvider

logger = logging.getLogger(__name__)
router = APIRouter()

FORM_KEY_PART = re.compile(r"\[([^\]]*)\]")


def parse_form_section(form, section: str) -> Dict[str, Any]:
    """
    Rebuild one nested section of a posted form.

    `stock[quantity]=3` and `stock[available_now_label][1]=In stock` become
    {'quantity': '3', 'available_now_label': {'1': 'In stock'}}. When a key is
    posted several times (hidden input + checkbox), the last value wins.
    """
    data: Dict[str, Any] = {}
    prefix = f"{section}["
    for key in form.keys():
        if not key.startswith(prefix):
            continue
        parts = FORM_KEY_PART.findall(key[len(section):])
        if not parts:
            continue
        target = data
        for part in parts[:-1]:
            target = target.setdefault(part, {})
        target[parts[-1]] = form.getlist(key)[-1]
    return data


def _form_context(request: Request, form_data: Dict[str, Any], **extra) -> Dict[str, Any]:
    settings = get_settings()
    basic = form_data.get('basic', {})
    languages = sorted(basic.get('name', {}).keys()) or [settings.DEFAULT_LANGUAGE_ID]
    return {
        "request": request,
        "form_data": form_data,
        "languages": languages,
        "pack_stock_types": PackStockType,
        "out_of_stock_types": OutOfStockType,
        "redirect_types": RedirectType,
        "delivery_time_note_types": DeliveryTimeNoteType,
        "visibilities": ProductVisibility,
        "conditions": ProductCondition,
        **extra,
    }


@router.get("/products", response_class=HTMLResponse)
async def list_products(request: Request, db: AsyncSession = Depends(get_db)):
    """Product list with links to the edit form"""
    result = await db.execute(select(Product).order_by(Product.id.desc()))
    products = result.scalars().all()

    return templates.TemplateResponse(
        "catalog/products.html",
        {
            "request": request,
            "products": products,
            "language_id": get_settings().DEFAULT_LANGUAGE_ID,
        }
    )


@router.get("/products/new", response_class=HTMLResponse)
async def new_product_form(
    request: Request,
    provider: ProductFormDataProvider = Depends(get_product_form_data_provider),
):
    """Empty product form"""
    return templates.TemplateResponse(
        "catalog/product_form.html",
        _form_context(request, provider.get_default_data(), is_new=True),
    )


@router.get("/products/{product_id}/edit", response_class=HTMLResponse)
async def edit_product_form(
    request: Request,
    product_id: int,
    provider: ProductFormDataProvider = Depends(get_product_form_data_provider),
):
    """Product form prefilled with the stored product"""
    form_data = await provider.get_data(product_id)
    return templates.TemplateResponse(
        "catalog/product_form.html",
        _form_context(request, form_data, is_new=False, updated=request.query_params.get("updated") == "1"),
    )


@router.get("/products/{product_id}/form-data")
async def get_product_form_data(
    product_id: int,
    provider: ProductFormDataProvider = Depends(get_product_form_data_provider),
):
    form_data = await provider.get_data(product_id)
    return JSONResponse(jsonable_encoder(form_data))


@router.post("/products/{product_id}/stock")
async def update_product_stock(
    request: Request,
    product_id: int,
    bus: CommandBus = Depends(get_bus),
    provider: ProductFormDataProvider = Depends(get_product_form_data_provider),
):
    """Apply the stock section of the product form"""
    form = await request.form()
    stock_data = parse_form_section(form, "stock")

    try:
        command = UpdateProductStockCommand.from_form(product_id, stock_data)
        await bus.handle(command)
    except ProductConstraintError as e:
        logger.warning("Stock update of product %s rejected: %s", product_id, e)
        form_data = await provider.get_data(product_id)
        return templates.TemplateResponse(
            "catalog/product_form.html",
            _form_context(request, form_data, is_new=False, error=str(e)),
            status_code=422,
        )

    return RedirectResponse(
        url=f"/catalog/products/{product_id}/edit?updated=1",
        status_code=303
    )
