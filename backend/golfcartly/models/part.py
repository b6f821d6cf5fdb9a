from sqlalchemy import Column, Integer, Text, Boolean, Numeric, ForeignKey
from golfcartly.core.database import Base
from golfcartly.models.types import TextArray, JSONBag


class Supplier(Base):
    __tablename__ = "suppliers"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(Text, unique=True, nullable=False)
    contact_email = Column(Text)
    phone = Column(Text)
    website = Column(Text)
    location = Column(Text)
    specialization = Column(Text)


class Part(Base):
    __tablename__ = "parts"

    id = Column(Integer, primary_key=True, index=True)
    part_number = Column(Text, unique=True, nullable=False)
    name = Column(Text, nullable=False)
    description = Column(Text)
    category = Column(Text, nullable=False)  # Batteries, Tires, Controllers, Motors...
    price = Column(Numeric(10, 2))
    supplier_id = Column(Integer, ForeignKey("suppliers.id"))

    # Brand and model names, not foreign keys
    compatible_brands = Column(TextArray)
    compatible_models = Column(TextArray)

    in_stock = Column(Boolean, default=True)
    image_url = Column(Text)
    specifications = Column(JSONBag)
