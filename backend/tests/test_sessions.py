from datetime import timedelta

from fastapi.testclient import TestClient

from golfcartly.core.database import SessionLocal
from golfcartly.core.sessions import load_or_create_session, signer, utcnow
from golfcartly.main import app
from golfcartly.models.cart import CartItem
from golfcartly.models.session import HttpSession


def test_creates_session_without_cookie(db):
    session = load_or_create_session(db, None)

    assert session.sid
    assert session.expire > utcnow() + timedelta(days=29)
    assert db.get(HttpSession, session.sid) is not None


def test_reuses_session_from_signed_cookie(db):
    first = load_or_create_session(db, None)

    again = load_or_create_session(db, signer.sign(first.sid).decode())

    assert again.sid == first.sid
    assert db.query(HttpSession).count() == 1


def test_tampered_cookie_starts_new_session(db):
    first = load_or_create_session(db, None)
    forged = signer.sign(first.sid).decode() + "x"

    session = load_or_create_session(db, forged)

    assert session.sid != first.sid


def test_unsigned_session_id_is_not_trusted(db):
    first = load_or_create_session(db, None)

    session = load_or_create_session(db, first.sid)

    assert session.sid != first.sid


def test_expired_session_is_replaced(db):
    stale = HttpSession(sid="stale-session", data={}, expire=utcnow() - timedelta(minutes=1))
    db.add(stale)
    db.commit()

    session = load_or_create_session(db, signer.sign("stale-session").decode())

    assert session.sid != "stale-session"
    assert db.get(HttpSession, "stale-session") is None


def seed_session(db, sid, expire):
    db.add(HttpSession(sid=sid, data={}, expire=expire))
    db.commit()


def test_new_session_prunes_expired_sessions_and_their_carts(db, part):
    now = utcnow()
    for n in range(5):
        seed_session(db, f"gone-{n}", now - timedelta(days=n + 1))
        db.add(CartItem(session_id=f"gone-{n}", part_id=part["id"], quantity=1))
    seed_session(db, "live", now + timedelta(days=3))
    db.add(CartItem(session_id="live", part_id=part["id"], quantity=2))
    db.commit()

    load_or_create_session(db, None)

    assert db.query(HttpSession).filter(HttpSession.expire <= utcnow()).count() == 0
    assert db.query(HttpSession).count() == 2
    assert [item.session_id for item in db.query(CartItem).all()] == ["live"]


def test_cookieless_cart_requests_do_not_accumulate_expired_rows(db):
    for n in range(5):
        seed_session(db, f"gone-{n}", utcnow() - timedelta(hours=1))

    for _ in range(3):
        assert TestClient(app).get("/api/cart").status_code == 200

    db.expire_all()
    assert db.query(HttpSession).filter(HttpSession.expire <= utcnow()).count() == 0
    assert db.query(HttpSession).count() == 3


def test_expired_session_already_removed_elsewhere(db):
    seed_session(db, "stale-session", utcnow() - timedelta(minutes=1))
    cookie = signer.sign("stale-session").decode()
    other = SessionLocal()
    try:
        other.get(HttpSession, "stale-session")
        load_or_create_session(db, cookie)

        session = load_or_create_session(other, cookie)

        assert session.sid != "stale-session"
    finally:
        other.close()
    assert db.get(HttpSession, "stale-session") is None
