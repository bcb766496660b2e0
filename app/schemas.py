"""
Pydantic Schemas for API Responses

Every endpoint answers with the same envelope:
    - {"status": "ok", "data": ...}       for reads
    - {"status": "ok", "message": ...}    for add/remove
    - {"status": "error", "message": ...} for failures

Author: Khalil_Bannouri
Version: 1.0.0
"""

from datetime import datetime
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# DATA SCHEMAS
# =============================================================================

class MenuItemSchema(BaseModel):
    """A menu item as exposed by the API."""
    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., ge=1, examples=[6])
    name: str = Field(..., examples=["Burger"])
    cooking_time: int = Field(..., description="Cooking time in minutes", examples=[10])


# =============================================================================
# RESPONSE SCHEMAS
# =============================================================================

class SuccessResponseMessage(BaseModel):
    """Response after adding or removing a menu item."""
    status: Literal["ok"] = "ok"
    message: str


class SuccessResponseMenuItems(BaseModel):
    """Response carrying a list of menu items."""
    status: Literal["ok"] = "ok"
    data: List[MenuItemSchema]


class SuccessResponseMenuItem(BaseModel):
    """Response carrying a single menu item."""
    status: Literal["ok"] = "ok"
    data: MenuItemSchema


class SuccessResponseTables(BaseModel):
    """Response carrying the registered table ids."""
    status: Literal["ok"] = "ok"
    data: List[int]


class ErrorResponse(BaseModel):
    """Standard error response."""
    status: Literal["error"] = "error"
    message: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    tables: int
    menu_items: int
    timestamp: datetime
