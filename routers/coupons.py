# routers/coupons.py

from decimal import Decimal
from typing import List

from fastapi import APIRouter, Depends, Query

from dependencies.auth import get_current_user, require_admin
from dependencies.services import get_discount_resolver
from models.coupon import Coupon, CouponCreate, Discount
from services.discounts import DiscountResolver


router = APIRouter(
    prefix="/coupons",
    tags=["Coupons"],
)


@router.get("", response_model=List[Coupon], summary="List coupons")
def list_coupons(discounts: DiscountResolver = Depends(get_discount_resolver)):
    return discounts.list_coupons()


@router.post(
    "",
    response_model=Coupon,
    status_code=201,
    summary="Admin: Create coupon",
    dependencies=[Depends(require_admin)],
)
def create_coupon(
    payload: CouponCreate,
    discounts: DiscountResolver = Depends(get_discount_resolver),
):
    return discounts.create_coupon(payload)


@router.patch(
    "/{code}/expire",
    response_model=Coupon,
    summary="Admin: Expire coupon",
    dependencies=[Depends(require_admin)],
)
def expire_coupon(code: str, discounts: DiscountResolver = Depends(get_discount_resolver)):
    return discounts.expire_coupon(code)


# -----------------------------------------------------
# RESOLVE: preview the discount a code gives on a rent
# -----------------------------------------------------
@router.get(
    "/{code}/resolve",
    response_model=Discount,
    summary="Resolve a coupon against a rent",
    dependencies=[Depends(get_current_user)],
)
def resolve_coupon(
    code: str,
    rent: Decimal = Query(Decimal("0"), ge=0),
    discounts: DiscountResolver = Depends(get_discount_resolver),
):
    return discounts.resolve(code, rent)
