"""Storage access for the read-mostly catalog: brands, models, suppliers, parts
and wiring diagrams."""
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from golfcartly.models.brand import Brand, VehicleModel
from golfcartly.models.part import Part, Supplier
from golfcartly.models.wiring import WiringDiagram
from golfcartly.schemas.brand import BrandCreate, VehicleModelCreate
from golfcartly.schemas.part import PartCreate, SupplierCreate
from golfcartly.schemas.wiring import WiringDiagramCreate
from golfcartly.services.filters import array_contains
from golfcartly.services.persistence import save

logger = logging.getLogger(__name__)


# Brands

def list_brands(db: Session) -> List[Brand]:
    return db.query(Brand).all()


def get_brand(db: Session, brand_id: int) -> Optional[Brand]:
    return db.query(Brand).filter(Brand.id == brand_id).first()


def create_brand(db: Session, data: BrandCreate) -> Brand:
    brand = save(db, Brand(**data.model_dump(exclude_none=True)))
    logger.info(f"Created brand {brand.id} ({brand.name})")
    return brand


# Models

def list_models(
    db: Session,
    brand_id: Optional[int] = None,
    vehicle_type: Optional[str] = None,
) -> List[VehicleModel]:
    query = db.query(VehicleModel)
    if brand_id is not None:
        query = query.filter(VehicleModel.brand_id == brand_id)
    if vehicle_type:
        query = query.filter(VehicleModel.vehicle_type == vehicle_type)
    return query.all()


def get_model(db: Session, model_id: int) -> Optional[VehicleModel]:
    return db.query(VehicleModel).filter(VehicleModel.id == model_id).first()


def create_model(db: Session, data: VehicleModelCreate) -> VehicleModel:
    return save(db, VehicleModel(**data.model_dump(exclude_none=True)))


# Suppliers

def list_suppliers(db: Session) -> List[Supplier]:
    return db.query(Supplier).all()


def get_supplier(db: Session, supplier_id: int) -> Optional[Supplier]:
    return db.query(Supplier).filter(Supplier.id == supplier_id).first()


def create_supplier(db: Session, data: SupplierCreate) -> Supplier:
    return save(db, Supplier(**data.model_dump(exclude_none=True)))


# Parts

def list_parts(
    db: Session,
    category: Optional[str] = None,
    brand_id: Optional[int] = None,
) -> List[Part]:
    """List parts, optionally narrowed by category and by compatible brand.

    Compatibility is stored as brand names, so ``brand_id`` is resolved to the
    brand's name first. An unknown brand matches nothing.
    """
    query = db.query(Part)
    if category:
        query = query.filter(Part.category == category)
    if brand_id is not None:
        brand = get_brand(db, brand_id)
        if brand is None:
            return []
        query = query.filter(array_contains(db, Part.compatible_brands, brand.name))
    return query.all()


def get_part(db: Session, part_id: int) -> Optional[Part]:
    return db.query(Part).filter(Part.id == part_id).first()


def create_part(db: Session, data: PartCreate) -> Part:
    return save(db, Part(**data.model_dump(exclude_none=True)))


# Wiring diagrams

def list_wiring_diagrams(
    db: Session,
    brand_id: Optional[int] = None,
    model_id: Optional[int] = None,
) -> List[WiringDiagram]:
    query = db.query(WiringDiagram)
    if brand_id is not None:
        query = query.filter(WiringDiagram.brand_id == brand_id)
    if model_id is not None:
        query = query.filter(WiringDiagram.model_id == model_id)
    return query.all()


def get_wiring_diagram(db: Session, diagram_id: int) -> Optional[WiringDiagram]:
    return db.query(WiringDiagram).filter(WiringDiagram.id == diagram_id).first()


def create_wiring_diagram(db: Session, data: WiringDiagramCreate) -> WiringDiagram:
    diagram = save(db, WiringDiagram(**data.model_dump(exclude_none=True)))
    logger.info(
        f"Stored wiring diagram {diagram.id} '{diagram.title}' "
        f"({diagram.file_size or 0} bytes inline)"
    )
    return diagram
