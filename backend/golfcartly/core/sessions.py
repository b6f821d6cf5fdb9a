"""Server-side browser sessions.

The session id is an opaque random string stored in ``http_sessions``; the
browser only holds a signed copy of it in a cookie. The cart is scoped by this
id.
"""
import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, Request, Response
from itsdangerous import BadSignature, Signer
from sqlalchemy import select
from sqlalchemy.orm import Session

from golfcartly.core.config import settings
from golfcartly.core.database import get_db
from golfcartly.models.cart import CartItem
from golfcartly.models.session import HttpSession

logger = logging.getLogger(__name__)

signer = Signer(settings.SESSION_SECRET, salt="golfcartly.session")


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _unsign(cookie: Optional[str]) -> Optional[str]:
    if not cookie:
        return None
    try:
        return signer.unsign(cookie).decode()
    except BadSignature:
        logger.info("Discarding session cookie with bad signature")
        return None


def prune_expired_sessions(db: Session, now: datetime) -> int:
    """Delete every expired session together with its cart items.

    Bulk deletes, so rows already removed by a concurrent request are skipped.
    Does not commit.
    """
    expired = select(HttpSession.sid).where(HttpSession.expire <= now)
    db.query(CartItem).filter(CartItem.session_id.in_(expired)).delete(synchronize_session=False)
    removed = (
        db.query(HttpSession)
        .filter(HttpSession.expire <= now)
        .delete(synchronize_session=False)
    )
    if removed:
        logger.info(f"Pruned {removed} expired sessions")
    return removed


def load_or_create_session(db: Session, cookie: Optional[str]) -> HttpSession:
    """Return the live session named by ``cookie`` or a new one, with expiry refreshed."""
    now = utcnow()
    expire = now + timedelta(days=settings.SESSION_MAX_AGE_DAYS)

    sid = _unsign(cookie)
    session = db.get(HttpSession, sid) if sid else None
    if session is not None and session.expire <= now:
        db.expunge(session)
        session = None

    if session is None:
        prune_expired_sessions(db, now)
        session = HttpSession(sid=secrets.token_urlsafe(24), data={})
        db.add(session)
        logger.debug("Created new browser session")

    session.expire = expire
    db.commit()
    return session


def get_session_id(request: Request, response: Response, db: Session = Depends(get_db)) -> str:
    """Dependency returning the caller's session id and (re)setting its cookie."""
    session = load_or_create_session(db, request.cookies.get(settings.SESSION_COOKIE_NAME))
    response.set_cookie(
        settings.SESSION_COOKIE_NAME,
        signer.sign(session.sid).decode(),
        max_age=settings.SESSION_MAX_AGE_DAYS * 24 * 60 * 60,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
    )
    return session.sid
