# services/discounts.py

from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional

from core.errors import DuplicateRecord, Conflict, NotFound
from core.logging_config import logger
from models.coupon import Coupon, CouponCreate, Discount
from repositories.coupons import CouponRepository


CENT = Decimal("0.01")


def to_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def compute_saved(base_rent, percentage) -> Decimal:
    """base_rent × percentage / 100, rounded half-up to the cent."""
    saved = to_decimal(base_rent) * to_decimal(percentage) / Decimal(100)
    return saved.quantize(CENT, rounding=ROUND_HALF_UP)


def normalize_code(code: Optional[str]) -> str:
    return (code or "").strip()


class DiscountResolver:
    def __init__(self, coupons: CouponRepository):
        self.coupons = coupons

    def resolve(self, code: Optional[str], base_rent) -> Discount:
        """
        Resolve `code` against `base_rent`.

        An empty, unknown, zero-percent or expired code yields a zero
        discount; it is never an error.
        """
        code = normalize_code(code)
        if not code:
            return Discount()

        coupon = self.coupons.get(code)
        if not coupon or coupon.expired or not coupon.percentage:
            return Discount(code=code)

        return Discount(
            code=code,
            discount=to_decimal(coupon.percentage),
            saved=compute_saved(base_rent, coupon.percentage),
        )

    # -----------------------------------------------------
    # Administration
    # -----------------------------------------------------
    def create_coupon(self, payload: CouponCreate) -> Coupon:
        coupon = Coupon(
            code=normalize_code(payload.code),
            percentage=payload.percentage,
            description=payload.description,
            expired=False,
        )
        try:
            created = self.coupons.insert(coupon)
        except DuplicateRecord as e:
            raise Conflict(f"Coupon {coupon.code} already exists") from e

        logger.info(f"Coupon {created.code} created ({created.percentage}%)")
        return created

    def list_coupons(self) -> List[Coupon]:
        return self.coupons.list()

    def expire_coupon(self, code: str) -> Coupon:
        code = normalize_code(code)
        expired = self.coupons.mark_expired(code)
        if not expired:
            raise NotFound(f"Coupon {code} not found")

        logger.info(f"Coupon {code} expired")
        return expired
