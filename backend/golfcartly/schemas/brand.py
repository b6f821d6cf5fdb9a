from typing import List, Optional
from golfcartly.schemas.base import CamelModel


class BrandBase(CamelModel):
    name: str
    description: Optional[str] = None
    specialization: Optional[str] = None
    key_features: Optional[List[str]] = None
    website_url: Optional[str] = None
    market_position: Optional[str] = None
    logo_url: Optional[str] = None


class BrandCreate(BrandBase):
    pass


class BrandResponse(BrandBase):
    id: int


class VehicleModelBase(CamelModel):
    brand_id: int
    model_name: str
    year: Optional[int] = None
    vehicle_type: Optional[str] = None  # LSV, NEV, Street Legal
    battery_type: Optional[str] = None
    voltage: Optional[str] = None
    range: Optional[str] = None
    top_speed: Optional[str] = None
    seating_capacity: Optional[int] = None
    price: Optional[str] = None
    features: Optional[List[str]] = None
    image_url: Optional[str] = None


class VehicleModelCreate(VehicleModelBase):
    pass


class VehicleModelResponse(VehicleModelBase):
    id: int
