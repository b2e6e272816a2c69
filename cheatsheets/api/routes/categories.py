"""Category listing endpoint."""

from fastapi import APIRouter, Depends

from cheatsheets.api.dependencies import get_loader
from cheatsheets.api.schemas import CategoriesResponse
from cheatsheets.content.loader import CheatsheetLoader
from cheatsheets.content.search import list_categories

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=CategoriesResponse)
def categories(loader: CheatsheetLoader = Depends(get_loader)) -> CategoriesResponse:
    """List categories present in the corpus, prefixed with "All"."""
    return CategoriesResponse(categories=list_categories(loader.list_cheatsheets()))
