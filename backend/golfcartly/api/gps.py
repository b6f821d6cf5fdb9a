from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from golfcartly.core.database import get_db
from golfcartly.core.errors import ApiError, ErrorKind, handle_errors
from golfcartly.schemas.gps import (
    NavigationSessionCreate,
    NavigationSessionResponse,
    NavigationSessionUpdate,
    RouteCreate,
    RouteResponse,
    TrackingPointCreate,
    TrackingPointResponse,
)
from golfcartly.services import gps

router = APIRouter()


# Routes

@router.get("/routes", response_model=List[RouteResponse])
def list_routes(
    vehicle_type: Optional[str] = Query(None, alias="vehicleType"),
    max_speed_limit: Optional[int] = Query(None, alias="maxSpeedLimit"),
    db: Session = Depends(get_db),
):
    """Get routes open to a vehicle type and/or within a speed-limit ceiling."""
    with handle_errors("fetch routes"):
        return gps.list_routes(db, vehicle_type=vehicle_type, max_speed_limit=max_speed_limit)


@router.get("/routes/{route_id}", response_model=RouteResponse)
def get_route(route_id: int, db: Session = Depends(get_db)):
    with handle_errors("fetch route"):
        route = gps.get_route(db, route_id)
        if not route:
            raise ApiError(ErrorKind.NOT_FOUND, "Route not found")
        return route


@router.post("/routes", response_model=RouteResponse, status_code=201)
def create_route(route: RouteCreate, db: Session = Depends(get_db)):
    with handle_errors("create route"):
        return gps.create_route(db, route)


# Navigation

@router.post("/navigation/start", response_model=NavigationSessionResponse, status_code=201)
def start_navigation(nav: NavigationSessionCreate, db: Session = Depends(get_db)):
    """Start a navigation session under a caller-chosen unique session id."""
    with handle_errors("start navigation session"):
        return gps.create_navigation_session(db, nav)


@router.get("/navigation/{session_id}", response_model=NavigationSessionResponse)
def get_navigation(session_id: str, db: Session = Depends(get_db)):
    with handle_errors("fetch navigation session"):
        nav = gps.get_navigation_session(db, session_id)
        if not nav:
            raise ApiError(ErrorKind.NOT_FOUND, "Navigation session not found")
        return nav


@router.put("/navigation/{session_id}", response_model=NavigationSessionResponse)
def update_navigation(
    session_id: str,
    nav: NavigationSessionUpdate,
    db: Session = Depends(get_db),
):
    """Update position, progress or status of a navigation session."""
    with handle_errors("update navigation session"):
        return gps.update_navigation_session(db, session_id, nav)


# Tracking

@router.post("/tracking", response_model=TrackingPointResponse, status_code=201)
def add_tracking_point(point: TrackingPointCreate, db: Session = Depends(get_db)):
    with handle_errors("add tracking point"):
        return gps.add_tracking_point(db, point)


@router.get("/tracking/{session_id}", response_model=List[TrackingPointResponse])
def list_tracking_points(session_id: str, db: Session = Depends(get_db)):
    """Get a session's tracking points, oldest first."""
    with handle_errors("fetch tracking points"):
        return gps.list_tracking_points(db, session_id)
