"""Storage access for the session-scoped shopping cart.

Every row-level operation takes the caller's session id and treats rows of
other sessions as absent.
"""
from typing import List

from sqlalchemy.orm import Session

from golfcartly.core.errors import ErrorKind, StorageError
from golfcartly.models.cart import CartItem
from golfcartly.models.part import Part
from golfcartly.services.persistence import commit, save


def _owned_item(db: Session, session_id: str, item_id: int) -> CartItem:
    item = (
        db.query(CartItem)
        .filter(CartItem.id == item_id, CartItem.session_id == session_id)
        .first()
    )
    if item is None:
        raise StorageError(ErrorKind.NOT_FOUND, "Cart item not found")
    return item


def list_cart_items(db: Session, session_id: str) -> List[CartItem]:
    return (
        db.query(CartItem)
        .filter(CartItem.session_id == session_id)
        .order_by(CartItem.id)
        .all()
    )


def add_cart_item(db: Session, session_id: str, part_id: int, quantity: int = 1) -> CartItem:
    if db.query(Part.id).filter(Part.id == part_id).first() is None:
        raise StorageError(ErrorKind.NOT_FOUND, "Part not found")
    return save(db, CartItem(session_id=session_id, part_id=part_id, quantity=quantity))


def update_cart_item(db: Session, session_id: str, item_id: int, quantity: int) -> CartItem:
    item = _owned_item(db, session_id, item_id)
    item.quantity = quantity
    return save(db, item)


def remove_cart_item(db: Session, session_id: str, item_id: int) -> None:
    db.delete(_owned_item(db, session_id, item_id))
    commit(db)


def clear_cart(db: Session, session_id: str) -> int:
    """Delete every item of the session's cart and return how many were removed."""
    removed = (
        db.query(CartItem)
        .filter(CartItem.session_id == session_id)
        .delete(synchronize_session=False)
    )
    commit(db)
    return removed
