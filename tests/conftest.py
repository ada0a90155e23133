# tests/conftest.py

"""
Pytest configuration and shared fixtures for testing.
"""

import pytest
from decimal import Decimal
from types import SimpleNamespace
from typing import Generator
from fastapi.testclient import TestClient

from main import create_app
from core.tokens import issue_token
from dependencies.services import (
    get_agreement_repository,
    get_apartment_repository,
    get_coupon_repository,
    get_payment_gateway,
    get_payment_repository,
    get_user_repository,
)
from models.apartment import Apartment
from models.coupon import Coupon
from models.enums import Role
from models.user import User
from services import AgreementWorkflow, DiscountResolver, PaymentService, RoleLedger
from tests.fakes import (
    FakeAgreementRepository,
    FakeApartmentRepository,
    FakeCouponRepository,
    FakePaymentGateway,
    FakePaymentRepository,
    FakeUserRepository,
)


ADMIN_EMAIL = "admin@example.com"
TENANT_EMAIL = "tenant@example.com"


def auth_headers(email: str, **claims) -> dict:
    token = issue_token({"email": email, **claims})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def repos():
    """Fresh in-memory repositories seeded with an admin, a tenant and two apartments."""
    repos = SimpleNamespace(
        users=FakeUserRepository(),
        apartments=FakeApartmentRepository(),
        agreements=FakeAgreementRepository(),
        coupons=FakeCouponRepository(),
        payments=FakePaymentRepository(),
    )
    repos.users.insert(User(email=ADMIN_EMAIL, name="Admin", role=Role.admin))
    repos.users.insert(User(email=TENANT_EMAIL, name="Tenant", role=Role.user))
    repos.apartments.add(Apartment(id="A-101", apartment_no="101", floor_no=1, block_name="A", rent=Decimal("1000")))
    repos.apartments.add(Apartment(id="B-202", apartment_no="202", floor_no=2, block_name="B", rent=Decimal("1450.50")))
    repos.coupons.insert(Coupon(code="SAVE10", percentage=Decimal("10"), expired=False))
    return repos


@pytest.fixture
def gateway():
    return FakePaymentGateway()


@pytest.fixture
def ledger(repos):
    return RoleLedger(repos.users, repos.agreements, admin_emails=[])


@pytest.fixture
def workflow(repos, ledger):
    return AgreementWorkflow(repos.agreements, repos.apartments, ledger)


@pytest.fixture
def discounts(repos):
    return DiscountResolver(repos.coupons)


@pytest.fixture
def payments(repos, workflow, discounts, gateway):
    return PaymentService(workflow, discounts, repos.payments, gateway, "usd")


@pytest.fixture(scope="function")
def app(repos, gateway):
    """Create a test FastAPI application wired to the in-memory repositories."""
    app = create_app()
    app.dependency_overrides[get_user_repository] = lambda: repos.users
    app.dependency_overrides[get_apartment_repository] = lambda: repos.apartments
    app.dependency_overrides[get_agreement_repository] = lambda: repos.agreements
    app.dependency_overrides[get_coupon_repository] = lambda: repos.coupons
    app.dependency_overrides[get_payment_repository] = lambda: repos.payments
    app.dependency_overrides[get_payment_gateway] = lambda: gateway
    yield app
    app.dependency_overrides = {}


@pytest.fixture(scope="function")
def client(app) -> Generator[TestClient, None, None]:
    """Create a test client for the FastAPI application."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_headers():
    return auth_headers(ADMIN_EMAIL)


@pytest.fixture
def tenant_headers():
    return auth_headers(TENANT_EMAIL)
