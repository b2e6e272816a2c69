"""Cheatsheet listing and document endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from cheatsheets.api.dependencies import get_loader
from cheatsheets.api.schemas import (
    CheatsheetListResponse,
    CheatsheetResponse,
    CheatsheetSummaryModel,
    ErrorResponse,
)
from cheatsheets.content.loader import CheatsheetLoader
from cheatsheets.content.search import filter_cheatsheets, list_categories

router = APIRouter(prefix="/cheatsheets", tags=["cheatsheets"])


@router.get("", response_model=CheatsheetListResponse)
def list_cheatsheets(
    q: str = Query("", max_length=200, description="Search title and description"),
    category: Optional[str] = Query(None, max_length=200, description="Exact category"),
    loader: CheatsheetLoader = Depends(get_loader),
) -> CheatsheetListResponse:
    """List cheatsheets, optionally filtered.

    Args:
        q: Case-insensitive search text
        category: Category filter ("All" or empty disables it)
        loader: Cheatsheet loader dependency

    Returns:
        Filtered listing plus the full category list
    """
    summaries = loader.list_cheatsheets()
    matches = filter_cheatsheets(summaries, query=q, category=category)

    return CheatsheetListResponse(
        items=[CheatsheetSummaryModel(**sheet.to_dict()) for sheet in matches],
        total=len(matches),
        categories=list_categories(summaries),
    )


@router.get(
    "/{slug}",
    response_model=CheatsheetResponse,
    responses={404: {"model": ErrorResponse}},
)
def get_cheatsheet(
    slug: str,
    loader: CheatsheetLoader = Depends(get_loader),
) -> CheatsheetResponse:
    """Get a single cheatsheet with its rendered HTML.

    Raises:
        HTTPException: 404 if no cheatsheet exists for the slug
    """
    cheatsheet = loader.get_cheatsheet(slug)
    if cheatsheet is None:
        raise HTTPException(status_code=404, detail="Cheatsheet not found")

    return CheatsheetResponse(
        slug=cheatsheet.slug,
        title=cheatsheet.title,
        description=cheatsheet.description,
        category=cheatsheet.category,
        content=cheatsheet.content,
        content_html=cheatsheet.content_html,
    )
