# models/payment.py

from typing import Optional
from datetime import datetime
from decimal import Decimal
from pydantic import BaseModel, EmailStr, Field

from models.agreement import Agreement


class ChargeRequest(BaseModel):
    email: EmailStr
    coupon_code: Optional[str] = None


class Charge(BaseModel):
    """Amount breakdown for a member's rent charge."""
    agreement: Agreement
    coupon_code: Optional[str] = None
    discount: Decimal
    saved: Decimal
    final_rent: Decimal
    amount_cents: int
    currency: str


class ChargeResponse(Charge):
    payment_intent_id: str
    client_secret: str


class PaymentRecordCreate(BaseModel):
    email: EmailStr
    payment_intent_id: str = Field(..., min_length=1)
    month: Optional[str] = Field(None, description="Billing month label, e.g. '2026-10'")


class Payment(BaseModel):
    """Row of the append-only payments table."""
    id: str
    email: str
    amount: Decimal
    amount_cents: int
    currency: str
    payment_intent_id: str
    month: Optional[str] = None
    created_at: datetime
