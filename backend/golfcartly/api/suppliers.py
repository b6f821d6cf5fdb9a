from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from golfcartly.core.database import get_db
from golfcartly.core.errors import ApiError, ErrorKind, handle_errors
from golfcartly.schemas.part import SupplierCreate, SupplierResponse
from golfcartly.services import catalog

router = APIRouter()


@router.get("", response_model=List[SupplierResponse])
def list_suppliers(db: Session = Depends(get_db)):
    with handle_errors("fetch suppliers"):
        return catalog.list_suppliers(db)


@router.get("/{supplier_id}", response_model=SupplierResponse)
def get_supplier(supplier_id: int, db: Session = Depends(get_db)):
    with handle_errors("fetch supplier"):
        supplier = catalog.get_supplier(db, supplier_id)
        if not supplier:
            raise ApiError(ErrorKind.NOT_FOUND, "Supplier not found")
        return supplier


@router.post("", response_model=SupplierResponse, status_code=201)
def create_supplier(supplier: SupplierCreate, db: Session = Depends(get_db)):
    with handle_errors("create supplier"):
        return catalog.create_supplier(db, supplier)
