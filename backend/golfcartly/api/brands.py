from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from golfcartly.core.database import get_db
from golfcartly.core.errors import ApiError, ErrorKind, handle_errors
from golfcartly.schemas.brand import BrandCreate, BrandResponse
from golfcartly.services import catalog

router = APIRouter()


@router.get("", response_model=List[BrandResponse])
def list_brands(db: Session = Depends(get_db)):
    """Get all golf cart brands."""
    with handle_errors("fetch brands"):
        return catalog.list_brands(db)


@router.get("/{brand_id}", response_model=BrandResponse)
def get_brand(brand_id: int, db: Session = Depends(get_db)):
    with handle_errors("fetch brand"):
        brand = catalog.get_brand(db, brand_id)
        if not brand:
            raise ApiError(ErrorKind.NOT_FOUND, "Brand not found")
        return brand


@router.post("", response_model=BrandResponse, status_code=201)
def create_brand(brand: BrandCreate, db: Session = Depends(get_db)):
    """Create a brand. Names are unique."""
    with handle_errors("create brand"):
        return catalog.create_brand(db, brand)
