import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import Optional

from golfcartly.core.database import get_db
from golfcartly.core.errors import ApiError, ErrorKind
from golfcartly.schemas.search import SearchResults
from golfcartly.services import search as search_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=SearchResults)
def search(q: Optional[str] = None, db: Session = Depends(get_db)):
    """Substring search over brands, models, parts and suppliers."""
    if not q or not q.strip():
        raise ApiError(ErrorKind.VALIDATION, "Search query is required")
    try:
        return search_service.search(db, q)
    except Exception as e:
        # One failed bucket fails the whole search
        logger.exception(f"Search failed for {q!r}")
        raise ApiError(ErrorKind.INTERNAL, "Search failed") from e
