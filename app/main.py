"""
FastAPI Application Entry Point

Restaurant Table Orders - REST API over the in-memory order store.

Endpoints:
    - POST   /api/v1/add_item/{table_id}/{item_id}: Order a menu item
    - DELETE /api/v1/remove_item/{table_id}/{item_id}: Remove one occurrence
    - GET    /api/v1/get_items/{table_id}: All items ordered at a table
    - GET    /api/v1/get_item/{table_id}/{item_id}: One ordered item
    - GET    /api/v1/tables: Registered tables
    - GET    /api/v1/menus: The menu
    - GET    /health: System health check

Route handlers are plain functions, so they run on the worker thread
pool and reach the order store concurrently.

Author: Khalil_Bannouri
Version: 1.0.0
"""

import logging
from datetime import datetime
from contextlib import asynccontextmanager

from fastapi import FastAPI, Depends, Path, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.config import get_settings, setup_logging
from app.exceptions import ItemNotOrdered, RestaurantError
from app.schemas import (
    ErrorResponse,
    HealthResponse,
    MenuItemSchema,
    SuccessResponseMenuItem,
    SuccessResponseMenuItems,
    SuccessResponseMessage,
    SuccessResponseTables,
)
from app.services import TableOrderStore, get_order_store

# Initialize configuration and logging
settings = get_settings()
setup_logging()
logger = logging.getLogger(__name__)

# Table and menu item ids are unsigned 32-bit integers
MAX_ID = 2**32 - 1

PARAM_LABELS = {
    "table_id": "table ID",
    "item_id": "item ID",
}

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Bad request"},
    404: {"model": ErrorResponse, "description": "Table or menu item not found"},
    500: {"model": ErrorResponse, "description": "Internal server error"},
}


# =============================================================================
# APPLICATION LIFECYCLE
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application startup and shutdown events.
    """
    logger.info("=" * 60)
    logger.info(f"Starting {settings.app_name}")
    logger.info(f"   Version: {settings.app_version}")
    logger.info(f"   Debug: {settings.debug}")
    logger.info("=" * 60)

    # Build the menu and tables before the first request
    store = get_order_store()
    logger.info(f"Tables: {len(store.list_tables())}")
    logger.info(f"Menu items: {len(store.list_menu())}")
    logger.info("Application ready!")

    yield

    logger.info("Shutting down...")


# =============================================================================
# APPLICATION INSTANCE
# =============================================================================

app = FastAPI(
    title=settings.app_name,
    description="API for managing restaurant orders and menu items",
    version=settings.app_version,
    lifespan=lifespan,
    docs_url="/swagger-ui",
    redoc_url="/redoc",
    openapi_url="/api-doc/openapi.json",
)


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def error_response(status_code: int, message: str) -> JSONResponse:
    """Build the standard error envelope."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=message).model_dump(),
    )


def to_schema(items) -> list[MenuItemSchema]:
    return [MenuItemSchema.model_validate(item) for item in items]


# =============================================================================
# ROOT & HEALTH ENDPOINTS
# =============================================================================

@app.get("/", tags=["Root"])
def root() -> dict[str, str]:
    """API root with navigation links."""
    return {
        "message": f"Welcome to {settings.app_name}",
        "version": settings.app_version,
        "documentation": "/swagger-ui",
        "openapi": "/api-doc/openapi.json",
        "health": "/health",
    }


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["Health"],
    summary="System Health Check",
)
def health_check(
    store: TableOrderStore = Depends(get_order_store),
) -> HealthResponse:
    """Report the size of the registered tables and menu."""
    return HealthResponse(
        status="operational",
        tables=len(store.list_tables()),
        menu_items=len(store.list_menu()),
        timestamp=datetime.now(),
    )


# =============================================================================
# ORDER API ENDPOINTS
# =============================================================================

@app.post(
    "/api/v1/add_item/{table_id}/{item_id}",
    response_model=SuccessResponseMessage,
    responses=ERROR_RESPONSES,
    tags=["Orders"],
    summary="Add a Menu Item to a Table",
)
def add_item(
    table_id: int = Path(..., ge=0, le=MAX_ID, description="ID of the table"),
    item_id: int = Path(..., ge=0, le=MAX_ID, description="ID of the menu item"),
    store: TableOrderStore = Depends(get_order_store),
) -> SuccessResponseMessage:
    """Order one more occurrence of a menu item for a table."""
    store.add_item(table_id, item_id)

    return SuccessResponseMessage(
        message=(
            f"Menu item with item id: {item_id} added successfully "
            f"for table with table id {table_id}"
        )
    )


@app.delete(
    "/api/v1/remove_item/{table_id}/{item_id}",
    response_model=SuccessResponseMessage,
    responses={
        **ERROR_RESPONSES,
        409: {"model": ErrorResponse, "description": "Menu item not ordered for the table"},
    },
    tags=["Orders"],
    summary="Remove a Menu Item from a Table",
)
def remove_item(
    table_id: int = Path(..., ge=0, le=MAX_ID, description="ID of the table"),
    item_id: int = Path(..., ge=0, le=MAX_ID, description="ID of the menu item to remove"),
    store: TableOrderStore = Depends(get_order_store),
):
    """Remove exactly one occurrence of a menu item from a table."""
    try:
        store.remove_item(table_id, item_id)
    except ItemNotOrdered as e:
        return error_response(409, e.message)

    return SuccessResponseMessage(
        message=(
            f"Menu item with item id:{item_id} removed from table "
            f"with table id:{table_id} successfully"
        )
    )


@app.get(
    "/api/v1/get_items/{table_id}",
    response_model=SuccessResponseMenuItems,
    responses=ERROR_RESPONSES,
    tags=["Orders"],
    summary="Get All Orders for a Table",
)
def get_items(
    table_id: int = Path(..., ge=0, le=MAX_ID, description="ID of the table"),
    store: TableOrderStore = Depends(get_order_store),
) -> SuccessResponseMenuItems:
    """List the menu items currently ordered at a table."""
    return SuccessResponseMenuItems(data=to_schema(store.list_items(table_id)))


@app.get(
    "/api/v1/get_item/{table_id}/{item_id}",
    response_model=SuccessResponseMenuItem,
    responses=ERROR_RESPONSES,
    tags=["Orders"],
    summary="Get a Specific Menu Item Ordered for a Table",
)
def get_item(
    table_id: int = Path(..., ge=0, le=MAX_ID, description="ID of the table"),
    item_id: int = Path(..., ge=0, le=MAX_ID, description="ID of the menu item"),
    store: TableOrderStore = Depends(get_order_store),
) -> SuccessResponseMenuItem:
    """Get the details of a menu item ordered at a table."""
    item = store.get_item(table_id, item_id)
    return SuccessResponseMenuItem(data=MenuItemSchema.model_validate(item))


@app.get(
    "/api/v1/tables",
    response_model=SuccessResponseTables,
    tags=["Restaurant"],
    summary="List Tables",
)
def get_tables(
    store: TableOrderStore = Depends(get_order_store),
) -> SuccessResponseTables:
    """List the registered table ids."""
    return SuccessResponseTables(data=[table.id for table in store.list_tables()])


@app.get(
    "/api/v1/menus",
    response_model=SuccessResponseMenuItems,
    tags=["Restaurant"],
    summary="List Menus",
)
def get_menus(
    store: TableOrderStore = Depends(get_order_store),
) -> SuccessResponseMenuItems:
    """List every menu item with its cooking time."""
    return SuccessResponseMenuItems(data=to_schema(store.list_menu()))


# =============================================================================
# ERROR HANDLERS
# =============================================================================

@app.exception_handler(RestaurantError)
async def restaurant_error_handler(request: Request, exc: RestaurantError) -> JSONResponse:
    """Map order store failures to their HTTP status."""
    return error_response(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Reject malformed path parameters with 400."""
    errors = exc.errors()
    name = errors[0]["loc"][-1] if errors else "parameter"
    label = PARAM_LABELS.get(name, name)

    return error_response(400, f"Invalid {label}. Must be a valid positive integer.")


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all exception handler."""
    logger.exception(f"Unhandled exception: {exc}")

    return error_response(
        500,
        str(exc) if settings.debug else "An unexpected error occurred",
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
    )
