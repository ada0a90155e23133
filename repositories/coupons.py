# repositories/coupons.py

from typing import List, Optional

from models.coupon import Coupon
from repositories.base import SupabaseRepository


class CouponRepository(SupabaseRepository):
    table = "coupons"

    def get(self, code: str) -> Optional[Coupon]:
        result = self.execute(
            self.query().select("*").eq("code", code).limit(1),
            f"Failed to fetch coupon {code}",
        )
        row = self.first(result)
        return Coupon(**row) if row else None

    def list(self) -> List[Coupon]:
        result = self.execute(
            self.query().select("*").order("code"),
            "Failed to list coupons",
        )
        return [Coupon(**row) for row in result.data or []]

    def insert(self, coupon: Coupon) -> Coupon:
        result = self.execute(
            self.query().insert(coupon.model_dump(mode="json")),
            f"Failed to create coupon {coupon.code}",
        )
        row = self.first(result)
        return Coupon(**row) if row else coupon

    def mark_expired(self, code: str) -> Optional[Coupon]:
        # expired only ever moves false -> true
        result = self.execute(
            self.query().update({"expired": True}).eq("code", code),
            f"Failed to expire coupon {code}",
        )
        row = self.first(result)
        return Coupon(**row) if row else None
