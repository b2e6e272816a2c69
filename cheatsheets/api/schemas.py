"""Pydantic schemas for API response models."""

from pydantic import BaseModel, Field
from typing import List, Optional


# ========== Response Schemas ==========


class CheatsheetSummaryModel(BaseModel):
    """Listing entry for a cheatsheet."""

    slug: str = Field(..., description="Identifier derived from the filename")
    title: str = Field(..., description="Cheatsheet title")
    description: str = Field(..., description="Short description")
    category: str = Field(..., description="Category name")


class CheatsheetListResponse(BaseModel):
    """Response model for the listing endpoint."""

    items: List[CheatsheetSummaryModel] = Field(
        default_factory=list, description="Matching cheatsheets sorted by title"
    )
    total: int = Field(..., ge=0, description="Number of matching cheatsheets")
    categories: List[str] = Field(
        default_factory=list, description="All categories, prefixed with 'All'"
    )


class CheatsheetResponse(CheatsheetSummaryModel):
    """Response model for a single rendered cheatsheet."""

    content: str = Field(..., description="Raw markdown body")
    content_html: str = Field(..., description="Rendered HTML fragment")


class CategoriesResponse(BaseModel):
    """Response model for the categories endpoint."""

    categories: List[str] = Field(default_factory=list, description="Category names")


# ========== Error Schemas ==========


class ErrorResponse(BaseModel):
    """Error response model."""

    detail: Optional[str] = Field(None, description="Detailed error information")
