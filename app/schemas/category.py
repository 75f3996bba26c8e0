from pydantic import BaseModel


class CategoryRead(BaseModel):
    name: str
    icon_class: str


class CategoryListResponse(BaseModel):
    categories: list[CategoryRead]
    default_category: str


class SanitizedCategory(BaseModel):
    value: str | None = None
    category: str
    valid: bool
