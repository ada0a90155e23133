# repositories/payments.py

from typing import List, Optional

from models.payment import Payment
from repositories.base import SupabaseRepository


class PaymentRepository(SupabaseRepository):
    """Append-only: no update or delete is exposed."""

    table = "payments"

    def insert(self, payment: Payment) -> Payment:
        result = self.execute(
            self.query().insert(payment.model_dump(mode="json")),
            f"Failed to record payment {payment.payment_intent_id}",
        )
        row = self.first(result)
        return Payment(**row) if row else payment

    def get_by_intent(self, payment_intent_id: str) -> Optional[Payment]:
        result = self.execute(
            self.query().select("*").eq("payment_intent_id", payment_intent_id).limit(1),
            f"Failed to fetch payment {payment_intent_id}",
        )
        row = self.first(result)
        return Payment(**row) if row else None

    def list_for_user(self, email: str) -> List[Payment]:
        result = self.execute(
            self.query().select("*").eq("email", email).order("created_at", desc=True),
            f"Failed to list payments for {email}",
        )
        return [Payment(**row) for row in result.data or []]
