from sqlalchemy import Column, Integer, Text, Boolean, DateTime, ForeignKey
from sqlalchemy.sql import func
from golfcartly.core.database import Base
from golfcartly.models.types import TextArray


class WiringDiagram(Base):
    __tablename__ = "wiring_diagrams"

    id = Column(Integer, primary_key=True, index=True)
    model_id = Column(Integer, ForeignKey("golf_cart_models.id"), index=True)
    brand_id = Column(Integer, ForeignKey("golf_cart_brands.id"), index=True)
    title = Column(Text, nullable=False)
    description = Column(Text)
    year = Column(Integer)

    # Uploaded file, base64 encoded
    image_data = Column(Text)
    file_name = Column(Text)
    file_type = Column(Text)  # image/png, image/jpeg, application/pdf
    file_size = Column(Integer)  # bytes
    uploaded_at = Column(DateTime, server_default=func.now())

    # Alternative to image_data when the file lives elsewhere
    image_url = Column(Text)
    is_custom_drawing = Column(Boolean, default=False)  # drawn in CAD, not scanned
    tags = Column(TextArray)
