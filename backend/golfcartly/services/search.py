"""Substring search across brands, models, parts and suppliers."""
from typing import Dict, List

from sqlalchemy import or_
from sqlalchemy.orm import Session

from golfcartly.models.brand import Brand, VehicleModel
from golfcartly.models.part import Part, Supplier
from golfcartly.services.filters import substring


def search(db: Session, query: str) -> Dict[str, List]:
    """Run one independent query per bucket. Results are neither ranked nor merged."""
    return {
        "brands": db.query(Brand).filter(
            or_(substring(Brand.name, query), substring(Brand.description, query))
        ).all(),
        "models": db.query(VehicleModel).filter(
            or_(substring(VehicleModel.model_name, query), substring(VehicleModel.vehicle_type, query))
        ).all(),
        "parts": db.query(Part).filter(
            or_(
                substring(Part.name, query),
                substring(Part.part_number, query),
                substring(Part.description, query),
            )
        ).all(),
        "suppliers": db.query(Supplier).filter(substring(Supplier.name, query)).all(),
    }
