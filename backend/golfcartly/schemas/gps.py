from datetime import datetime
from decimal import Decimal
from typing import Any, List, Optional
from pydantic import Field
from golfcartly.schemas.base import CamelModel, UtcDateTime

Coordinate = Decimal
Measure = Decimal


class RouteBase(CamelModel):
    name: str
    description: Optional[str] = None
    start_lat: Coordinate
    start_lng: Coordinate
    end_lat: Coordinate
    end_lng: Coordinate
    start_address: Optional[str] = None
    end_address: Optional[str] = None
    distance: Optional[Measure] = None
    estimated_time: Optional[int] = None
    difficulty: Optional[str] = None
    vehicle_types: Optional[List[str]] = None
    waypoints: Optional[Any] = None
    road_types: Optional[List[str]] = None
    safety_requirements: Optional[Any] = None
    restrictions: Optional[Any] = None
    amenities: Optional[List[str]] = None
    traffic_level: Optional[str] = None
    scenic_rating: Optional[int] = Field(default=None, ge=1, le=5)


class RouteCreate(RouteBase):
    max_speed_limit: int = 35
    is_verified: bool = False


class RouteResponse(RouteBase):
    id: int
    max_speed_limit: Optional[int] = None
    is_verified: Optional[bool] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class NavigationSessionCreate(CamelModel):
    session_id: str = Field(min_length=1, max_length=255)
    vehicle_type: str
    route_id: Optional[int] = None
    status: str = "active"  # active, completed, cancelled
    current_lat: Optional[Coordinate] = None
    current_lng: Optional[Coordinate] = None
    current_waypoint_index: int = 0
    start_time: Optional[UtcDateTime] = None
    end_time: Optional[UtcDateTime] = None
    total_distance: Optional[Measure] = None
    avg_speed: Optional[Measure] = None


class NavigationSessionUpdate(CamelModel):
    route_id: Optional[int] = None
    vehicle_type: Optional[str] = None
    status: Optional[str] = None
    current_lat: Optional[Coordinate] = None
    current_lng: Optional[Coordinate] = None
    current_waypoint_index: Optional[int] = None
    end_time: Optional[UtcDateTime] = None
    total_distance: Optional[Measure] = None
    avg_speed: Optional[Measure] = None


class NavigationSessionResponse(CamelModel):
    id: int
    session_id: str
    vehicle_type: str
    route_id: Optional[int] = None
    status: str
    current_lat: Optional[Coordinate] = None
    current_lng: Optional[Coordinate] = None
    current_waypoint_index: Optional[int] = None
    start_time: datetime
    end_time: Optional[datetime] = None
    total_distance: Optional[Measure] = None
    avg_speed: Optional[Measure] = None


class TrackingPointCreate(CamelModel):
    session_id: str = Field(min_length=1, max_length=255)
    lat: Coordinate
    lng: Coordinate
    speed: Optional[Measure] = None
    heading: Optional[Measure] = None
    accuracy: Optional[Measure] = None
    road_type: Optional[str] = None
    timestamp: Optional[UtcDateTime] = None


class TrackingPointResponse(TrackingPointCreate):
    id: int
