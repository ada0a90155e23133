# models/coupon.py

from typing import Optional
from decimal import Decimal
from pydantic import BaseModel, Field


class CouponCreate(BaseModel):
    code: str = Field(..., min_length=1, max_length=64)
    percentage: Decimal = Field(..., ge=0, le=100)
    description: Optional[str] = None


class Coupon(BaseModel):
    code: str
    percentage: Optional[Decimal] = None
    description: Optional[str] = None
    expired: bool = False


class Discount(BaseModel):
    """Outcome of resolving a coupon against a rent. Never persisted."""
    code: Optional[str] = None
    discount: Decimal = Decimal("0")
    saved: Decimal = Decimal("0")
