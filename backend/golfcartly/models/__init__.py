from golfcartly.models.brand import Brand, VehicleModel
from golfcartly.models.wiring import WiringDiagram
from golfcartly.models.part import Part, Supplier
from golfcartly.models.cart import CartItem
from golfcartly.models.session import HttpSession
from golfcartly.models.gps import GpsRoute, NavigationSession, TrackingPoint

__all__ = [
    "Brand", "VehicleModel", "WiringDiagram", "Part", "Supplier", "CartItem",
    "HttpSession", "GpsRoute", "NavigationSession", "TrackingPoint",
]
