# models/apartment.py

from typing import List, Optional
from decimal import Decimal
from pydantic import BaseModel


class Apartment(BaseModel):
    """Rental unit. Rows are immutable once listed."""
    id: str
    apartment_no: str
    floor_no: Optional[int] = None
    block_name: Optional[str] = None
    rent: Decimal
    image_url: Optional[str] = None


class ApartmentPage(BaseModel):
    items: List[Apartment]
    total: int
    page: int
    limit: int
