# tests/test_payments.py

"""
Tests for charge computation and payment recording.
"""

import pytest
from decimal import Decimal

from core.errors import Conflict, Forbidden, PreconditionFailed, UpstreamUnavailable
from models.enums import Decision
from tests.conftest import TENANT_EMAIL


@pytest.fixture
def member(workflow):
    agreement = workflow.submit(TENANT_EMAIL, "A-101")
    workflow.adjudicate(agreement.id, Decision.accept)
    return agreement


def test_charge_with_coupon(payments, gateway, member):
    response = payments.create_charge(TENANT_EMAIL, "SAVE10")

    assert response.saved == Decimal("100.00")
    assert response.final_rent == Decimal("900.00")
    assert response.amount_cents == 90000
    assert response.currency == "usd"
    assert response.client_secret == "pi_test_1_secret"
    assert gateway.created == [{
        "amount": 90000,
        "currency": "usd",
        "metadata": {"email": TENANT_EMAIL, "agreement_id": member.id, "coupon_code": "SAVE10"},
    }]


def test_charge_without_coupon(payments, member):
    charge = payments.compute_charge(TENANT_EMAIL)

    assert charge.discount == 0
    assert charge.amount_cents == 100000


def test_charge_requires_checked_agreement(payments, gateway, workflow):
    workflow.submit(TENANT_EMAIL, "A-101")

    with pytest.raises(PreconditionFailed) as exc:
        payments.create_charge(TENANT_EMAIL, "SAVE10")
    assert exc.value.detail == "Apartment not found"
    assert gateway.created == []


def test_rejected_agreement_cannot_be_charged(payments, gateway, workflow):
    agreement = workflow.submit(TENANT_EMAIL, "A-101")
    workflow.adjudicate(agreement.id, Decision.reject)

    with pytest.raises(PreconditionFailed):
        payments.create_charge(TENANT_EMAIL)
    assert gateway.created == []


def test_gateway_failure_propagates(payments, gateway, member):
    gateway.fail = True

    with pytest.raises(UpstreamUnavailable):
        payments.create_charge(TENANT_EMAIL)


def test_record_succeeded_payment(payments, gateway, member):
    intent_id = payments.create_charge(TENANT_EMAIL, "SAVE10").payment_intent_id
    gateway.settle(intent_id)

    payment = payments.record_payment(TENANT_EMAIL, intent_id, "2026-10")

    assert payment.amount == Decimal("900.00")
    assert payment.amount_cents == 90000
    assert payment.month == "2026-10"
    assert [p.payment_intent_id for p in payments.list_payments(TENANT_EMAIL)] == [intent_id]


def test_record_unsettled_payment(payments, member):
    intent_id = payments.create_charge(TENANT_EMAIL).payment_intent_id

    with pytest.raises(PreconditionFailed):
        payments.record_payment(TENANT_EMAIL, intent_id)


def test_record_payment_twice(payments, gateway, member):
    intent_id = payments.create_charge(TENANT_EMAIL).payment_intent_id
    gateway.settle(intent_id)
    payments.record_payment(TENANT_EMAIL, intent_id)

    with pytest.raises(Conflict):
        payments.record_payment(TENANT_EMAIL, intent_id)


def test_cannot_record_another_members_payment(payments, gateway, workflow, ledger, member):
    ledger.upsert_user("other@example.com", "Other")
    other = workflow.submit("other@example.com", "B-202")
    workflow.adjudicate(other.id, Decision.accept)

    intent_id = payments.create_charge(TENANT_EMAIL).payment_intent_id
    gateway.settle(intent_id)

    with pytest.raises(Forbidden):
        payments.record_payment("other@example.com", intent_id)
    assert payments.list_payments("other@example.com") == []

    assert payments.record_payment(TENANT_EMAIL, intent_id).email == TENANT_EMAIL
