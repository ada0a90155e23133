# routers/payments.py

from typing import List

from fastapi import APIRouter, Depends

from dependencies.auth import require_matching_identity
from dependencies.services import get_payment_service
from models.payment import ChargeRequest, ChargeResponse, Payment, PaymentRecordCreate
from services.payments import PaymentService


router = APIRouter(
    prefix="/payments",
    tags=["Payments"],
)


# -----------------------------------------------------
# CREATE CHARGE: Stripe PaymentIntent for this month's rent
# -----------------------------------------------------
@router.post(
    "/intent",
    response_model=ChargeResponse,
    summary="Create a payment intent for the caller's rent",
    dependencies=[Depends(require_matching_identity())],
)
def create_charge(
    payload: ChargeRequest,
    service: PaymentService = Depends(get_payment_service),
):
    return service.create_charge(payload.email, payload.coupon_code)


# -----------------------------------------------------
# RECORD a succeeded payment
# -----------------------------------------------------
@router.post(
    "",
    response_model=Payment,
    status_code=201,
    summary="Record a completed payment",
    dependencies=[Depends(require_matching_identity())],
)
def record_payment(
    payload: PaymentRecordCreate,
    service: PaymentService = Depends(get_payment_service),
):
    return service.record_payment(payload.email, payload.payment_intent_id, payload.month)


@router.get(
    "/{email}",
    response_model=List[Payment],
    summary="Payment history of the caller",
    dependencies=[Depends(require_matching_identity())],
)
def list_payments(email: str, service: PaymentService = Depends(get_payment_service)):
    return service.list_payments(email)
