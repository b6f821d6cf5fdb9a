from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from golfcartly.core.database import get_db
from golfcartly.core.errors import ApiError, ErrorKind, handle_errors
from golfcartly.schemas.part import PartCreate, PartResponse
from golfcartly.services import catalog

router = APIRouter()


@router.get("", response_model=List[PartResponse])
def list_parts(
    category: Optional[str] = None,
    brand_id: Optional[int] = Query(None, alias="brandId"),
    db: Session = Depends(get_db),
):
    """Get parts by category and/or the brand they fit."""
    with handle_errors("fetch parts"):
        return catalog.list_parts(db, category=category, brand_id=brand_id)


@router.get("/{part_id}", response_model=PartResponse)
def get_part(part_id: int, db: Session = Depends(get_db)):
    with handle_errors("fetch part"):
        part = catalog.get_part(db, part_id)
        if not part:
            raise ApiError(ErrorKind.NOT_FOUND, "Part not found")
        return part


@router.post("", response_model=PartResponse, status_code=201)
def create_part(part: PartCreate, db: Session = Depends(get_db)):
    """Add a part to the catalog. Part numbers are unique."""
    with handle_errors("create part"):
        return catalog.create_part(db, part)
