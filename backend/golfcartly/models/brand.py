from sqlalchemy import Column, Integer, Text, ForeignKey
from golfcartly.core.database import Base
from golfcartly.models.types import TextArray


class Brand(Base):
    __tablename__ = "golf_cart_brands"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(Text, unique=True, nullable=False)
    description = Column(Text)
    specialization = Column(Text)
    key_features = Column(TextArray)
    website_url = Column(Text)
    market_position = Column(Text)
    logo_url = Column(Text)


class VehicleModel(Base):
    __tablename__ = "golf_cart_models"

    id = Column(Integer, primary_key=True, index=True)
    brand_id = Column(Integer, ForeignKey("golf_cart_brands.id"), nullable=False, index=True)
    model_name = Column(Text, nullable=False)
    year = Column(Integer)
    vehicle_type = Column(Text)  # LSV, NEV, Street Legal

    # Drivetrain, stored as display text ("48V", "35 miles")
    battery_type = Column(Text)
    voltage = Column(Text)
    range = Column(Text)
    top_speed = Column(Text)

    seating_capacity = Column(Integer)
    price = Column(Text)
    features = Column(TextArray)
    image_url = Column(Text)
