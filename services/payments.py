# services/payments.py

"""
Payment settlement for members.

Charges are only computed for callers holding a checked agreement; the
amount handed to Stripe is (rent − saved) in cents.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import List, Optional
from uuid import uuid4

from core.errors import Conflict, DuplicateRecord, Forbidden, PreconditionFailed
from core.logging_config import logger
from core.stripe_helpers import PaymentGateway
from models.payment import Charge, ChargeResponse, Payment
from repositories.payments import PaymentRepository
from services.agreements import AgreementWorkflow
from services.discounts import CENT, DiscountResolver
from services.role_ledger import normalize_email


def to_minor_units(amount: Decimal) -> int:
    return int((amount.quantize(CENT) * 100).to_integral_value())


class PaymentService:
    def __init__(
        self,
        workflow: AgreementWorkflow,
        discounts: DiscountResolver,
        payments: PaymentRepository,
        gateway: PaymentGateway,
        currency: str,
    ):
        self.workflow = workflow
        self.discounts = discounts
        self.payments = payments
        self.gateway = gateway
        self.currency = currency

    def compute_charge(self, email: str, coupon_code: Optional[str] = None) -> Charge:
        email = normalize_email(email)

        agreement = self.workflow.get_checked_for_user(email)
        if not agreement:
            raise PreconditionFailed("Apartment not found")

        discount = self.discounts.resolve(coupon_code, agreement.rent)
        final_rent = max(agreement.rent - discount.saved, Decimal("0"))

        return Charge(
            agreement=agreement,
            coupon_code=discount.code,
            discount=discount.discount,
            saved=discount.saved,
            final_rent=final_rent,
            amount_cents=to_minor_units(final_rent),
            currency=self.currency,
        )

    def create_charge(self, email: str, coupon_code: Optional[str] = None) -> ChargeResponse:
        charge = self.compute_charge(email, coupon_code)

        intent = self.gateway.create_payment_intent(
            charge.amount_cents,
            charge.currency,
            metadata={
                "email": charge.agreement.email,
                "agreement_id": charge.agreement.id,
                "coupon_code": charge.coupon_code or "",
            },
        )

        logger.info(
            f"Charge for {charge.agreement.email}: {charge.amount_cents} {charge.currency} "
            f"(saved {charge.saved})"
        )
        return ChargeResponse(
            **charge.model_dump(),
            payment_intent_id=intent["id"],
            client_secret=intent["client_secret"],
        )

    def record_payment(self, email: str, payment_intent_id: str, month: Optional[str] = None) -> Payment:
        """
        Append a payment once Stripe reports the intent as succeeded.
        """
        email = normalize_email(email)

        if not self.workflow.get_checked_for_user(email):
            raise PreconditionFailed("Apartment not found")

        if self.payments.get_by_intent(payment_intent_id):
            raise Conflict(f"Payment {payment_intent_id} already recorded")

        intent = self.gateway.verify_payment_intent(payment_intent_id)
        if not intent["succeeded"]:
            raise PreconditionFailed(f"Payment {payment_intent_id} has not succeeded ({intent['status']})")

        owner = intent.get("metadata", {}).get("email")
        if not owner or normalize_email(owner) != email:
            logger.warning(f"{email} tried to record payment {payment_intent_id} charged to {owner}")
            raise Forbidden(f"Payment {payment_intent_id} was not charged to {email}")

        amount_cents = int(intent["amount"])
        payment = Payment(
            id=str(uuid4()),
            email=email,
            amount=(Decimal(amount_cents) / 100).quantize(CENT),
            amount_cents=amount_cents,
            currency=intent["currency"] or self.currency,
            payment_intent_id=payment_intent_id,
            month=month,
            created_at=datetime.now(timezone.utc),
        )

        try:
            recorded = self.payments.insert(payment)
        except DuplicateRecord as e:
            raise Conflict(f"Payment {payment_intent_id} already recorded") from e

        logger.info(f"Recorded payment {payment_intent_id} from {email}: {amount_cents} {payment.currency}")
        return recorded

    def list_payments(self, email: str) -> List[Payment]:
        return self.payments.list_for_user(normalize_email(email))
