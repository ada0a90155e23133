# repositories/agreements.py

from datetime import datetime
from typing import List, Optional

from models.agreement import Agreement
from models.enums import AgreementStatus, Decision
from repositories.base import SupabaseRepository


class AgreementRepository(SupabaseRepository):
    """
    Agreements table. A partial unique index on (email) WHERE
    status = 'pending' backs the one-pending-per-user rule; inserting a
    second pending row raises DuplicateRecord.
    """

    table = "agreements"

    def get(self, agreement_id: str) -> Optional[Agreement]:
        result = self.execute(
            self.query().select("*").eq("id", agreement_id).limit(1),
            f"Failed to fetch agreement {agreement_id}",
        )
        row = self.first(result)
        return Agreement(**row) if row else None

    def insert(self, agreement: Agreement) -> Agreement:
        result = self.execute(
            self.query().insert(agreement.model_dump(mode="json")),
            f"Failed to create agreement for {agreement.email}",
        )
        row = self.first(result)
        return Agreement(**row) if row else agreement

    def find_for_user(self, email: str, status: Optional[AgreementStatus] = None) -> List[Agreement]:
        """All agreements of `email`, newest first."""
        query = self.query().select("*").eq("email", email)
        if status is not None:
            query = query.eq("status", status.value)
        result = self.execute(
            query.order("requested_at", desc=True),
            f"Failed to fetch agreements for {email}",
        )
        return [Agreement(**row) for row in result.data or []]

    def list_by_status(self, status: AgreementStatus) -> List[Agreement]:
        result = self.execute(
            self.query().select("*").eq("status", status.value).order("requested_at"),
            f"Failed to list {status.value} agreements",
        )
        return [Agreement(**row) for row in result.data or []]

    def transition(
        self,
        agreement_id: str,
        from_status: AgreementStatus,
        to_status: AgreementStatus,
        decision: Decision,
        decided_at: datetime,
    ) -> Optional[Agreement]:
        """
        Compare-and-set the status of one agreement.
        Returns None when no row had `from_status` (missing or already moved).
        """
        result = self.execute(
            self.query()
            .update({
                "status": to_status.value,
                "decision": decision.value,
                "decided_at": decided_at.isoformat(),
            })
            .eq("id", agreement_id)
            .eq("status", from_status.value),
            f"Failed to update agreement {agreement_id}",
        )
        row = self.first(result)
        return Agreement(**row) if row else None

    def delete_for_user(self, email: str, status: AgreementStatus) -> int:
        result = self.execute(
            self.query().delete().eq("email", email).eq("status", status.value),
            f"Failed to delete {status.value} agreements for {email}",
        )
        return len(result.data or [])
