# backoffice/main.py

import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from backoffice.core import logging_config  # noqa: F401  configures logging on import
from backoffice.core.config import get_settings
from backoffice.core.exceptions import HandlerNotFoundError, ProductConstraintError, ProductNotFoundError
from backoffice.core.security import require_auth
from backoffice.core.templates import templates
from backoffice.routes import dashboard, health, orders, products

logger = logging.getLogger(__name__)

settings = get_settings()

app = FastAPI(
    title="Back Office",
    debug=settings.DEBUG,
)

# Mount static files with proper path resolution
static_dir = Path(__file__).resolve().parent / "static"
app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")

# Include routers with authentication
app.include_router(dashboard.router, prefix="", tags=["dashboard"], dependencies=[require_auth()])
app.include_router(products.router, prefix="/catalog", tags=["catalog"], dependencies=[require_auth()])
app.include_router(orders.router, prefix="", tags=["orders"], dependencies=[require_auth()])
app.include_router(health.router)  # Health check should be accessible without auth


def _wants_html(request: Request) -> bool:
    return "text/html" in request.headers.get("accept", "")


@app.exception_handler(ProductNotFoundError)
async def product_not_found_handler(request: Request, exc: ProductNotFoundError):
    logger.info("Product %s not found (%s)", exc.product_id, request.url.path)
    if _wants_html(request):
        return templates.TemplateResponse(
            "errors/404.html",
            {"request": request, "message": str(exc)},
            status_code=404
        )
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(ProductConstraintError)
async def product_constraint_handler(request: Request, exc: ProductConstraintError):
    logger.warning("Constraint violation on %s: %s (code %s)", request.url.path, exc, exc.code)
    return JSONResponse(status_code=422, content={"detail": str(exc), "code": exc.code})


@app.exception_handler(HandlerNotFoundError)
async def handler_not_found_handler(request: Request, exc: HandlerNotFoundError):
    logger.error("Message bus misconfigured: %s", exc)
    return JSONResponse(status_code=500, content={"detail": str(exc)})
