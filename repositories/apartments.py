# repositories/apartments.py

from decimal import Decimal
from typing import List, Optional, Tuple

from models.apartment import Apartment
from repositories.base import SupabaseRepository


class ApartmentRepository(SupabaseRepository):
    table = "apartments"

    def get(self, apartment_id: str) -> Optional[Apartment]:
        result = self.execute(
            self.query().select("*").eq("id", apartment_id).limit(1),
            f"Failed to fetch apartment {apartment_id}",
        )
        row = self.first(result)
        return Apartment(**row) if row else None

    def page(
        self,
        offset: int,
        limit: int,
        min_rent: Optional[Decimal] = None,
        max_rent: Optional[Decimal] = None,
    ) -> Tuple[List[Apartment], int]:
        """Return one page of apartments ordered by apartment number, plus the filtered total."""
        query = self.query().select("*", count="exact")
        if min_rent is not None:
            query = query.gte("rent", str(min_rent))
        if max_rent is not None:
            query = query.lte("rent", str(max_rent))

        query = query.order("apartment_no").range(offset, offset + limit - 1)
        result = self.execute(query, "Failed to list apartments")

        items = [Apartment(**row) for row in result.data or []]
        return items, result.count or 0

    def count(self) -> int:
        result = self.execute(
            self.query().select("id", count="exact"),
            "Failed to count apartments",
        )
        return result.count or 0
