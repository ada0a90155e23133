# services/agreements.py

"""
Agreement workflow.

    pending ──accept──▶ checked   (owner becomes member)
       └─────reject──▶ rejected  (role unchanged)

checked and rejected are terminal; re-adjudication is refused.
"""

from datetime import datetime, timezone
from typing import List
from uuid import uuid4

from core.errors import (
    AdminCannotApply,
    AlreadyMember,
    DuplicateApplication,
    DuplicateRecord,
    InvalidState,
    NotFound,
)
from core.logging_config import logger
from models.agreement import Agreement
from models.enums import AgreementStatus, Decision, Role
from repositories.agreements import AgreementRepository
from repositories.apartments import ApartmentRepository
from services.role_ledger import RoleLedger, normalize_email


DECISION_OUTCOMES = {
    Decision.accept: AgreementStatus.checked,
    Decision.reject: AgreementStatus.rejected,
}

TERMINAL_STATUSES = frozenset({AgreementStatus.checked, AgreementStatus.rejected})


class AgreementWorkflow:
    def __init__(
        self,
        agreements: AgreementRepository,
        apartments: ApartmentRepository,
        ledger: RoleLedger,
    ):
        self.agreements = agreements
        self.apartments = apartments
        self.ledger = ledger

    # -----------------------------------------------------
    # Submit
    # -----------------------------------------------------
    def submit(self, email: str, apartment_id: str) -> Agreement:
        email = normalize_email(email)

        user = self.ledger.get_user(email)
        if not user:
            raise NotFound(f"User {email} not found")
        if user.role == Role.member:
            raise AlreadyMember("You are already a member")
        if user.role == Role.admin:
            raise AdminCannotApply()

        if self.agreements.find_for_user(email, AgreementStatus.pending):
            raise DuplicateApplication("You already have a pending agreement request")

        apartment = self.apartments.get(apartment_id)
        if not apartment:
            raise NotFound(f"Apartment {apartment_id} not found")

        agreement = Agreement(
            id=str(uuid4()),
            email=email,
            name=user.name,
            apartment_id=apartment.id,
            apartment_no=apartment.apartment_no,
            floor_no=apartment.floor_no,
            block_name=apartment.block_name,
            rent=apartment.rent,
            status=AgreementStatus.pending,
            requested_at=datetime.now(timezone.utc),
        )

        try:
            created = self.agreements.insert(agreement)
        except DuplicateRecord as e:
            # The pending-per-user unique index caught a concurrent submit.
            raise DuplicateApplication("You already have a pending agreement request") from e

        logger.info(f"Agreement {created.id} submitted by {email} for apartment {apartment.id}")
        return created

    # -----------------------------------------------------
    # Adjudicate
    # -----------------------------------------------------
    def adjudicate(self, agreement_id: str, decision: Decision) -> Agreement:
        """
        Move a pending agreement to its terminal status.

        On accept the owner is promoted to member after the status change.
        If the owner's user record is gone the agreement stays checked and
        NotFound is raised so the partial outcome is visible to the caller.
        """
        to_status = DECISION_OUTCOMES[decision]

        updated = self.agreements.transition(
            agreement_id,
            AgreementStatus.pending,
            to_status,
            decision,
            datetime.now(timezone.utc),
        )

        if updated is None:
            current = self.agreements.get(agreement_id)
            if current is None:
                raise NotFound(f"Agreement {agreement_id} not found")
            raise InvalidState(
                f"Agreement {agreement_id} is already {current.status.value}"
            )

        logger.info(f"Agreement {agreement_id} {to_status.value} ({decision.value})")

        if decision == Decision.accept:
            try:
                self.ledger.set_role(updated.email, Role.member)
            except NotFound:
                logger.warning(
                    f"Agreement {agreement_id} checked but user {updated.email} is missing; role not granted"
                )
                raise

        return updated

    # -----------------------------------------------------
    # Reads
    # -----------------------------------------------------
    def list_pending(self) -> List[Agreement]:
        return self.agreements.list_by_status(AgreementStatus.pending)

    def get_for_user(self, email: str) -> Agreement:
        """Most recent agreement of `email`."""
        email = normalize_email(email)
        found = self.agreements.find_for_user(email)
        if not found:
            raise NotFound(f"No agreement found for {email}")
        return found[0]

    def get_checked_for_user(self, email: str):
        found = self.agreements.find_for_user(normalize_email(email), AgreementStatus.checked)
        return found[0] if found else None
