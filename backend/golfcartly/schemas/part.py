from decimal import Decimal
from typing import Any, Dict, List, Optional
from pydantic import Field
from golfcartly.schemas.base import CamelModel


class SupplierBase(CamelModel):
    name: str
    contact_email: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    specialization: Optional[str] = None


class SupplierCreate(SupplierBase):
    pass


class SupplierResponse(SupplierBase):
    id: int


class PartBase(CamelModel):
    part_number: str
    name: str
    category: str
    description: Optional[str] = None
    price: Optional[Decimal] = Field(default=None, max_digits=10, decimal_places=2)
    supplier_id: Optional[int] = None
    compatible_brands: Optional[List[str]] = None
    compatible_models: Optional[List[str]] = None
    image_url: Optional[str] = None
    specifications: Optional[Dict[str, Any]] = None


class PartCreate(PartBase):
    in_stock: bool = True


class PartResponse(PartBase):
    id: int
    in_stock: Optional[bool] = None
