"""Storage access for GPS routes, navigation sessions and tracking points."""
import logging
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.orm import Session

from golfcartly.core.errors import ErrorKind, StorageError
from golfcartly.models.gps import GpsRoute, NavigationSession, TrackingPoint
from golfcartly.schemas.gps import (
    NavigationSessionCreate,
    NavigationSessionUpdate,
    RouteCreate,
    TrackingPointCreate,
)
from golfcartly.services.filters import array_contains
from golfcartly.services.persistence import save

logger = logging.getLogger(__name__)

FINISHED_STATUSES = {"completed", "cancelled"}


# Routes

def list_routes(
    db: Session,
    vehicle_type: Optional[str] = None,
    max_speed_limit: Optional[int] = None,
) -> List[GpsRoute]:
    query = db.query(GpsRoute)
    if vehicle_type:
        query = query.filter(array_contains(db, GpsRoute.vehicle_types, vehicle_type))
    if max_speed_limit is not None:
        query = query.filter(GpsRoute.max_speed_limit <= max_speed_limit)
    return query.all()


def get_route(db: Session, route_id: int) -> Optional[GpsRoute]:
    return db.query(GpsRoute).filter(GpsRoute.id == route_id).first()


def create_route(db: Session, data: RouteCreate) -> GpsRoute:
    route = save(db, GpsRoute(**data.model_dump(exclude_none=True)))
    logger.info(f"Created route {route.id} ({route.name})")
    return route


# Navigation sessions

def create_navigation_session(db: Session, data: NavigationSessionCreate) -> NavigationSession:
    return save(db, NavigationSession(**data.model_dump(exclude_none=True)))


def get_navigation_session(db: Session, session_id: str) -> Optional[NavigationSession]:
    return (
        db.query(NavigationSession)
        .filter(NavigationSession.session_id == session_id)
        .first()
    )


def update_navigation_session(
    db: Session, session_id: str, data: NavigationSessionUpdate
) -> NavigationSession:
    """Apply the supplied fields; finishing a session stamps its end time."""
    nav = get_navigation_session(db, session_id)
    if nav is None:
        raise StorageError(ErrorKind.NOT_FOUND, "Navigation session not found")

    update_data = data.model_dump(exclude_unset=True)
    if update_data.get("status") in FINISHED_STATUSES and "end_time" not in update_data:
        update_data["end_time"] = datetime.now(timezone.utc).replace(tzinfo=None)

    for key, value in update_data.items():
        setattr(nav, key, value)

    return save(db, nav)


# Tracking points

def add_tracking_point(db: Session, data: TrackingPointCreate) -> TrackingPoint:
    return save(db, TrackingPoint(**data.model_dump(exclude_none=True)))


def list_tracking_points(db: Session, session_id: str) -> List[TrackingPoint]:
    return (
        db.query(TrackingPoint)
        .filter(TrackingPoint.session_id == session_id)
        .order_by(TrackingPoint.timestamp.asc(), TrackingPoint.id.asc())
        .all()
    )
