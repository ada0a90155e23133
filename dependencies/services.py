# dependencies/services.py

"""
Per-request wiring: Supabase client → repositories → services.

Tests swap the repository and gateway providers through
app.dependency_overrides.
"""

from functools import lru_cache

from fastapi import Depends
from supabase import Client

from core.config import settings
from core.stripe_helpers import PaymentGateway
from core.supabase_client import get_supabase_client
from repositories import (
    AgreementRepository,
    ApartmentRepository,
    CouponRepository,
    PaymentRepository,
    UserRepository,
)
from services import AgreementWorkflow, DiscountResolver, PaymentService, RoleLedger


def get_db() -> Client:
    return get_supabase_client()


# ============================================================
# Repositories
# ============================================================
def get_user_repository(client: Client = Depends(get_db)) -> UserRepository:
    return UserRepository(client)


def get_apartment_repository(client: Client = Depends(get_db)) -> ApartmentRepository:
    return ApartmentRepository(client)


def get_agreement_repository(client: Client = Depends(get_db)) -> AgreementRepository:
    return AgreementRepository(client)


def get_coupon_repository(client: Client = Depends(get_db)) -> CouponRepository:
    return CouponRepository(client)


def get_payment_repository(client: Client = Depends(get_db)) -> PaymentRepository:
    return PaymentRepository(client)


# One gateway per process so its StripeClient and HTTP pool are reused
@lru_cache
def get_payment_gateway() -> PaymentGateway:
    return PaymentGateway()


# ============================================================
# Services
# ============================================================
def get_role_ledger(
    users: UserRepository = Depends(get_user_repository),
    agreements: AgreementRepository = Depends(get_agreement_repository),
) -> RoleLedger:
    return RoleLedger(users, agreements)


def get_agreement_workflow(
    agreements: AgreementRepository = Depends(get_agreement_repository),
    apartments: ApartmentRepository = Depends(get_apartment_repository),
    ledger: RoleLedger = Depends(get_role_ledger),
) -> AgreementWorkflow:
    return AgreementWorkflow(agreements, apartments, ledger)


def get_discount_resolver(
    coupons: CouponRepository = Depends(get_coupon_repository),
) -> DiscountResolver:
    return DiscountResolver(coupons)


def get_payment_service(
    workflow: AgreementWorkflow = Depends(get_agreement_workflow),
    discounts: DiscountResolver = Depends(get_discount_resolver),
    payments: PaymentRepository = Depends(get_payment_repository),
    gateway: PaymentGateway = Depends(get_payment_gateway),
) -> PaymentService:
    return PaymentService(workflow, discounts, payments, gateway, settings.PAYMENT_CURRENCY)
