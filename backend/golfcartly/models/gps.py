from sqlalchemy import Column, Integer, String, Text, Boolean, Numeric, DateTime, ForeignKey
from sqlalchemy.sql import func
from golfcartly.core.database import Base
from golfcartly.models.types import TextArray, JSONBag


class GpsRoute(Base):
    __tablename__ = "gps_routes"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(Text, nullable=False)
    description = Column(Text)

    # Endpoints
    start_lat = Column(Numeric(10, 7), nullable=False)
    start_lng = Column(Numeric(10, 7), nullable=False)
    end_lat = Column(Numeric(10, 7), nullable=False)
    end_lng = Column(Numeric(10, 7), nullable=False)
    start_address = Column(Text)
    end_address = Column(Text)

    distance = Column(Numeric(10, 2))  # miles
    estimated_time = Column(Integer)  # minutes
    difficulty = Column(Text)  # Easy, Moderate, Challenging
    vehicle_types = Column(TextArray)  # LSV, NEV, Street Legal
    waypoints = Column(JSONBag)  # [{"lat": ..., "lng": ...}, ...]
    road_types = Column(TextArray)  # residential, bike_path, low_speed
    max_speed_limit = Column(Integer, default=35)  # mph
    safety_requirements = Column(JSONBag)
    restrictions = Column(JSONBag)
    amenities = Column(TextArray)
    traffic_level = Column(Text)  # Low, Medium, High
    scenic_rating = Column(Integer)  # 1-5
    is_verified = Column(Boolean, default=False)

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())


class NavigationSession(Base):
    __tablename__ = "navigation_sessions"

    id = Column(Integer, primary_key=True, index=True)
    route_id = Column(Integer, ForeignKey("gps_routes.id"))
    session_id = Column(String(255), unique=True, nullable=False)
    vehicle_type = Column(Text, nullable=False)
    status = Column(Text, nullable=False, default="active")  # active, completed, cancelled

    current_lat = Column(Numeric(10, 7))
    current_lng = Column(Numeric(10, 7))
    current_waypoint_index = Column(Integer, default=0)

    start_time = Column(DateTime, nullable=False, server_default=func.now())
    end_time = Column(DateTime)
    total_distance = Column(Numeric(10, 2))
    avg_speed = Column(Numeric(10, 2))


class TrackingPoint(Base):
    __tablename__ = "tracking_points"

    id = Column(Integer, primary_key=True, index=True)
    # Joined to navigation_sessions.session_id by value only
    session_id = Column(String(255), nullable=False, index=True)
    lat = Column(Numeric(10, 7), nullable=False)
    lng = Column(Numeric(10, 7), nullable=False)
    speed = Column(Numeric(10, 2))  # mph
    heading = Column(Numeric(10, 2))  # degrees
    accuracy = Column(Numeric(10, 2))  # meters
    road_type = Column(Text)
    timestamp = Column(DateTime, server_default=func.now())
