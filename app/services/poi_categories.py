"""POI category vocabulary shared by the map frontends."""
from typing import Optional

POI_CATEGORIES: tuple[str, ...] = (
    "cash",
    "coffee",
    "company",
    "gasstation",
    "lodging",
    "parking",
    "pharmacy",
    "police",
    "post",
    "restaurant",
    "supermarket",
    "toilet",
    "other",
)

DEFAULT_POI_CATEGORY = "other"

DEFAULT_ICON_CLASS = "bi-geo-alt"

CATEGORY_ICON_CLASSES = {
    "cash": "bi-credit-card",
    "coffee": "bi-cup-hot",
    "company": "bi-building",
    "gasstation": "bi-fuel-pump",
    "lodging": "bi-house",
    "parking": "bi-car-front",
    "pharmacy": "bi-plus-square",
    "police": "bi-shield-check",
    "post": "bi-mailbox",
    "restaurant": "bi-fork-knife",
    "supermarket": "bi-shop",
    "toilet": "bi-person-standing",
}


def is_valid_category(value: Optional[str]) -> bool:
    """Case-insensitive check against the known categories."""
    if not value:
        return False
    return value.strip().lower() in POI_CATEGORIES


def sanitize_category(value: Optional[str]) -> str:
    """
    Normalize a category string.

    Args:
        value: Raw category as sent by a client

    Returns:
        The trimmed, lowercased category, or ``DEFAULT_POI_CATEGORY``
        when it is empty or unknown
    """
    if not value:
        return DEFAULT_POI_CATEGORY
    normalized = value.strip().lower()
    return normalized if normalized in POI_CATEGORIES else DEFAULT_POI_CATEGORY


def icon_class_for(category: Optional[str]) -> str:
    return CATEGORY_ICON_CLASSES.get((category or "").strip().lower(), DEFAULT_ICON_CLASS)
