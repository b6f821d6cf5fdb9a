from typing import List
from pydantic import BaseModel
from golfcartly.schemas.brand import BrandResponse, VehicleModelResponse
from golfcartly.schemas.part import PartResponse, SupplierResponse


class SearchResults(BaseModel):
    brands: List[BrandResponse] = []
    models: List[VehicleModelResponse] = []
    parts: List[PartResponse] = []
    suppliers: List[SupplierResponse] = []
