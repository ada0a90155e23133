# tests/test_discounts.py

"""
Tests for coupon resolution and administration.
"""

import pytest
from decimal import Decimal

from core.errors import Conflict, NotFound
from models.coupon import Coupon, CouponCreate
from services.discounts import compute_saved


@pytest.fixture
def coupons(repos):
    repos.coupons.insert(Coupon(code="OLD50", percentage=Decimal("50"), expired=True))
    repos.coupons.insert(Coupon(code="ZERO", percentage=Decimal("0")))
    repos.coupons.insert(Coupon(code="BLANK", percentage=None))
    return repos.coupons


def test_valid_coupon(discounts):
    result = discounts.resolve("SAVE10", Decimal("1000"))

    assert result.discount == Decimal("10")
    assert result.saved == Decimal("100.00")


@pytest.mark.parametrize("code", ["OLD50", "ZERO", "BLANK", "UNKNOWN", "", None])
def test_unusable_codes_give_no_discount(discounts, coupons, code):
    result = discounts.resolve(code, Decimal("1000"))

    assert result.discount == 0
    assert result.saved == 0


def test_saved_rounds_half_up_to_cent():
    assert compute_saved(Decimal("999.99"), Decimal("15")) == Decimal("150.00")
    assert compute_saved(Decimal("10.05"), Decimal("50")) == Decimal("5.03")
    assert compute_saved(1450.50, 12.5) == Decimal("181.31")


def test_create_and_expire_coupon(discounts):
    created = discounts.create_coupon(CouponCreate(code=" SPRING ", percentage=Decimal("20")))
    assert created.code == "SPRING"
    assert created.expired is False

    expired = discounts.expire_coupon("SPRING")
    assert expired.expired is True
    assert discounts.resolve("SPRING", Decimal("100")).saved == 0

    # expiring again keeps it expired
    assert discounts.expire_coupon("SPRING").expired is True


def test_create_duplicate_coupon(discounts):
    with pytest.raises(Conflict):
        discounts.create_coupon(CouponCreate(code="SAVE10", percentage=Decimal("5")))


def test_expire_missing_coupon(discounts):
    with pytest.raises(NotFound):
        discounts.expire_coupon("NOPE")


def test_percentage_bounds_validated():
    with pytest.raises(ValueError):
        CouponCreate(code="TOO-MUCH", percentage=Decimal("101"))
