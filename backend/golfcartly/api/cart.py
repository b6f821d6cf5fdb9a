"""Shopping cart for the caller's browser session.

The session comes from the signed session cookie, never from the request body
or path.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from golfcartly.core.database import get_db
from golfcartly.core.errors import handle_errors
from golfcartly.core.sessions import get_session_id
from golfcartly.schemas.cart import CartItemCreate, CartItemResponse, CartItemUpdate
from golfcartly.services import cart

router = APIRouter()


@router.get("", response_model=List[CartItemResponse])
def list_cart_items(session_id: str = Depends(get_session_id), db: Session = Depends(get_db)):
    with handle_errors("fetch cart items"):
        return cart.list_cart_items(db, session_id)


@router.post("", response_model=CartItemResponse, status_code=201)
def add_cart_item(
    item: CartItemCreate,
    session_id: str = Depends(get_session_id),
    db: Session = Depends(get_db),
):
    with handle_errors("add item to cart"):
        return cart.add_cart_item(db, session_id, item.part_id, item.quantity or 1)


@router.put("/{item_id}", response_model=CartItemResponse)
def update_cart_item(
    item_id: int,
    item: CartItemUpdate,
    session_id: str = Depends(get_session_id),
    db: Session = Depends(get_db),
):
    with handle_errors("update cart item"):
        return cart.update_cart_item(db, session_id, item_id, item.quantity)


@router.delete("/{item_id}", status_code=204)
def remove_cart_item(
    item_id: int,
    session_id: str = Depends(get_session_id),
    db: Session = Depends(get_db),
):
    with handle_errors("remove cart item"):
        cart.remove_cart_item(db, session_id, item_id)


@router.delete("", status_code=204)
def clear_cart(session_id: str = Depends(get_session_id), db: Session = Depends(get_db)):
    """Empty the current session's cart."""
    with handle_errors("clear cart"):
        cart.clear_cart(db, session_id)
