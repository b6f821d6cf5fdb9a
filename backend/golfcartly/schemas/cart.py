from datetime import datetime
from typing import Optional
from pydantic import Field
from golfcartly.schemas.base import CamelModel


class CartItemCreate(CamelModel):
    part_id: int
    quantity: Optional[int] = Field(default=None, ge=1)


class CartItemUpdate(CamelModel):
    quantity: int = Field(ge=1)


class CartItemResponse(CamelModel):
    id: int
    session_id: str
    part_id: int
    quantity: int
    added_at: Optional[datetime] = None
