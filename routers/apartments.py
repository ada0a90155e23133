# routers/apartments.py

from decimal import Decimal
from typing import Optional

from fastapi import APIRouter, Depends, Query

from core.errors import NotFound
from dependencies.services import get_apartment_repository
from models.apartment import Apartment, ApartmentPage
from repositories import ApartmentRepository


router = APIRouter(
    prefix="/apartments",
    tags=["Apartments"],
)


# -------------------------------------------------------------
# LIST apartments (paged, optional rent range)
# -------------------------------------------------------------
@router.get("", response_model=ApartmentPage)
def list_apartments(
    page: int = Query(1, ge=1),
    limit: int = Query(6, ge=1, le=100),
    min_rent: Optional[Decimal] = Query(None, ge=0),
    max_rent: Optional[Decimal] = Query(None, ge=0),
    apartments: ApartmentRepository = Depends(get_apartment_repository),
):
    items, total = apartments.page((page - 1) * limit, limit, min_rent, max_rent)
    return ApartmentPage(items=items, total=total, page=page, limit=limit)


@router.get("/{apartment_id}", response_model=Apartment)
def get_apartment(
    apartment_id: str,
    apartments: ApartmentRepository = Depends(get_apartment_repository),
):
    apartment = apartments.get(apartment_id)
    if not apartment:
        raise NotFound(f"Apartment {apartment_id} not found")
    return apartment
