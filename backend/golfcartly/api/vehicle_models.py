from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from golfcartly.core.database import get_db
from golfcartly.core.errors import ApiError, ErrorKind, handle_errors
from golfcartly.schemas.brand import VehicleModelCreate, VehicleModelResponse
from golfcartly.services import catalog

router = APIRouter()


@router.get("", response_model=List[VehicleModelResponse])
def list_models(
    brand_id: Optional[int] = Query(None, alias="brandId"),
    vehicle_type: Optional[str] = Query(None, alias="vehicleType"),
    db: Session = Depends(get_db),
):
    """Get golf cart models, optionally filtered by brand and vehicle type."""
    with handle_errors("fetch models"):
        return catalog.list_models(db, brand_id=brand_id, vehicle_type=vehicle_type)


@router.get("/{model_id}", response_model=VehicleModelResponse)
def get_model(model_id: int, db: Session = Depends(get_db)):
    with handle_errors("fetch model"):
        model = catalog.get_model(db, model_id)
        if not model:
            raise ApiError(ErrorKind.NOT_FOUND, "Model not found")
        return model


@router.post("", response_model=VehicleModelResponse, status_code=201)
def create_model(model: VehicleModelCreate, db: Session = Depends(get_db)):
    with handle_errors("create model"):
        return catalog.create_model(db, model)
