from datetime import datetime, timezone

from fastapi import APIRouter

from golfcartly.core.database import check_database_health

router = APIRouter()


@router.get("")
def health_check():
    """Liveness probe."""
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}


@router.get("/db")
def database_health():
    """Database connectivity and connection pool status."""
    return check_database_health()
