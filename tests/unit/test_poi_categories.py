import pytest
from app.services.poi_categories import (
    CATEGORY_ICON_CLASSES,
    DEFAULT_ICON_CLASS,
    DEFAULT_POI_CATEGORY,
    POI_CATEGORIES,
    icon_class_for,
    is_valid_category,
    sanitize_category,
)


def test_default_category_is_known():
    assert DEFAULT_POI_CATEGORY in POI_CATEGORIES
    assert len(POI_CATEGORIES) == len(set(POI_CATEGORIES))


@pytest.mark.parametrize("value", ["coffee", "COFFEE", " Parking ", "other"])
def test_valid_categories(value):
    assert is_valid_category(value)


@pytest.mark.parametrize("value", [None, "", "bakery", "coffee shop"])
def test_invalid_categories(value):
    assert not is_valid_category(value)


def test_sanitize_normalizes_known_values():
    assert sanitize_category("  GasStation ") == "gasstation"
    assert sanitize_category("toilet") == "toilet"


def test_sanitize_falls_back_to_default():
    assert sanitize_category(None) == DEFAULT_POI_CATEGORY
    assert sanitize_category("") == DEFAULT_POI_CATEGORY
    assert sanitize_category("<script>") == DEFAULT_POI_CATEGORY


def test_icon_classes():
    assert icon_class_for("cash") == "bi-credit-card"
    assert icon_class_for("Restaurant") == "bi-fork-knife"
    assert icon_class_for("other") == DEFAULT_ICON_CLASS
    assert icon_class_for(None) == DEFAULT_ICON_CLASS
    assert icon_class_for("unknown") == DEFAULT_ICON_CLASS


def test_every_category_except_default_has_an_icon():
    assert set(CATEGORY_ICON_CLASSES) == set(POI_CATEGORIES) - {DEFAULT_POI_CATEGORY}
