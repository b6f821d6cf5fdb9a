from golfcartly.schemas.brand import (
    BrandCreate, BrandResponse, VehicleModelCreate, VehicleModelResponse,
)
from golfcartly.schemas.wiring import WiringDiagramCreate, WiringDiagramResponse
from golfcartly.schemas.part import PartCreate, PartResponse, SupplierCreate, SupplierResponse
from golfcartly.schemas.cart import CartItemCreate, CartItemUpdate, CartItemResponse
from golfcartly.schemas.gps import (
    RouteCreate, RouteResponse,
    NavigationSessionCreate, NavigationSessionUpdate, NavigationSessionResponse,
    TrackingPointCreate, TrackingPointResponse,
)
from golfcartly.schemas.search import SearchResults

__all__ = [
    "BrandCreate", "BrandResponse", "VehicleModelCreate", "VehicleModelResponse",
    "WiringDiagramCreate", "WiringDiagramResponse",
    "PartCreate", "PartResponse", "SupplierCreate", "SupplierResponse",
    "CartItemCreate", "CartItemUpdate", "CartItemResponse",
    "RouteCreate", "RouteResponse",
    "NavigationSessionCreate", "NavigationSessionUpdate", "NavigationSessionResponse",
    "TrackingPointCreate", "TrackingPointResponse",
    "SearchResults",
]
