from datetime import datetime
from typing import List, Optional
from golfcartly.schemas.base import CamelModel


class WiringDiagramCreate(CamelModel):
    title: str
    model_id: Optional[int] = None
    brand_id: Optional[int] = None
    description: Optional[str] = None
    year: Optional[int] = None
    image_data: Optional[str] = None
    file_name: Optional[str] = None
    file_type: Optional[str] = None
    file_size: Optional[int] = None
    image_url: Optional[str] = None
    is_custom_drawing: bool = False
    tags: Optional[List[str]] = None


class WiringDiagramResponse(WiringDiagramCreate):
    id: int
    is_custom_drawing: Optional[bool] = None
    uploaded_at: Optional[datetime] = None
