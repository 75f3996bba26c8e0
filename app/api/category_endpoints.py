"""POI category endpoints."""
from fastapi import APIRouter, Query
from typing import Optional

from app.schemas.base import Envelope
from app.schemas.category import CategoryListResponse, CategoryRead, SanitizedCategory
from app.services.poi_categories import (
    DEFAULT_POI_CATEGORY,
    POI_CATEGORIES,
    icon_class_for,
    is_valid_category,
    sanitize_category,
)

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=Envelope[CategoryListResponse])
async def list_categories():
    categories = [CategoryRead(name=name, icon_class=icon_class_for(name)) for name in POI_CATEGORIES]
    payload = CategoryListResponse(categories=categories, default_category=DEFAULT_POI_CATEGORY)
    return Envelope(status="ok", data=payload)


@router.get("/sanitize", response_model=Envelope[SanitizedCategory])
async def sanitize(value: Optional[str] = Query(None)):
    """Normalize a client supplied category; unknown values become the default."""
    payload = SanitizedCategory(
        value=value,
        category=sanitize_category(value),
        valid=is_valid_category(value),
    )
    return Envelope(status="ok", data=payload)
