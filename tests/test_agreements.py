# tests/test_agreements.py

"""
Tests for the agreement workflow state machine.
"""

import pytest
from decimal import Decimal

from core.errors import (
    AdminCannotApply,
    AlreadyMember,
    Conflict,
    DuplicateApplication,
    DuplicateRecord,
    InvalidState,
    NotFound,
)
from models.apartment import Apartment
from models.enums import AgreementStatus, Decision, Role
from tests.conftest import ADMIN_EMAIL, TENANT_EMAIL


def test_submit_creates_pending_with_rent_snapshot(workflow):
    agreement = workflow.submit(TENANT_EMAIL, "A-101")

    assert agreement.status == AgreementStatus.pending
    assert agreement.rent == Decimal("1000")
    assert agreement.apartment_no == "101"
    assert agreement.name == "Tenant"
    assert agreement.decision is None


def test_rent_snapshot_survives_listing_change(workflow, repos):
    agreement = workflow.submit(TENANT_EMAIL, "A-101")
    repos.apartments.add(Apartment(id="A-101", apartment_no="101", rent=Decimal("2000")))

    assert workflow.get_for_user(TENANT_EMAIL).rent == Decimal("1000")
    assert repos.agreements.get(agreement.id).rent == Decimal("1000")


def test_second_submit_while_pending_is_duplicate(workflow):
    workflow.submit(TENANT_EMAIL, "A-101")

    with pytest.raises(DuplicateApplication) as exc:
        workflow.submit(TENANT_EMAIL, "B-202")
    assert isinstance(exc.value, Conflict)
    assert len(workflow.list_pending()) == 1


def test_member_cannot_submit(workflow, repos):
    repos.users.update_role(TENANT_EMAIL, Role.member)

    with pytest.raises(AlreadyMember) as exc:
        workflow.submit(TENANT_EMAIL, "A-101")
    assert isinstance(exc.value, Conflict)


def test_admin_cannot_submit(workflow):
    with pytest.raises(AdminCannotApply) as exc:
        workflow.submit(ADMIN_EMAIL, "A-101")
    assert isinstance(exc.value, Conflict)
    assert exc.value.status_code == 409


def test_submit_unknown_user_or_apartment(workflow):
    with pytest.raises(NotFound):
        workflow.submit("ghost@example.com", "A-101")
    with pytest.raises(NotFound):
        workflow.submit(TENANT_EMAIL, "Z-999")


def test_storage_uniqueness_maps_to_duplicate_application(workflow, repos, monkeypatch):
    """A concurrent submit that slips past the read check hits the unique index."""
    monkeypatch.setattr(repos.agreements, "find_for_user", lambda email, status=None: [])

    def racing_insert(agreement):
        raise DuplicateRecord("agreements: record already exists")

    monkeypatch.setattr(repos.agreements, "insert", racing_insert)

    with pytest.raises(DuplicateApplication):
        workflow.submit(TENANT_EMAIL, "A-101")


def test_accept_checks_agreement_and_grants_membership(workflow, ledger):
    agreement = workflow.submit(TENANT_EMAIL, "A-101")

    result = workflow.adjudicate(agreement.id, Decision.accept)

    assert result.status == AgreementStatus.checked
    assert result.decision == Decision.accept
    assert result.decided_at is not None
    assert ledger.get_role(TENANT_EMAIL) == Role.member
    assert workflow.list_pending() == []


def test_reject_leaves_role_unchanged(workflow, ledger):
    agreement = workflow.submit(TENANT_EMAIL, "A-101")

    result = workflow.adjudicate(agreement.id, Decision.reject)

    assert result.status == AgreementStatus.rejected
    assert ledger.get_role(TENANT_EMAIL) == Role.user


def test_rejected_user_may_apply_again(workflow):
    first = workflow.submit(TENANT_EMAIL, "A-101")
    workflow.adjudicate(first.id, Decision.reject)

    second = workflow.submit(TENANT_EMAIL, "B-202")

    assert second.status == AgreementStatus.pending
    assert workflow.get_for_user(TENANT_EMAIL).id == second.id


@pytest.mark.parametrize("first, second", [
    (Decision.accept, Decision.reject),
    (Decision.reject, Decision.accept),
    (Decision.accept, Decision.accept),
])
def test_terminal_agreement_cannot_be_readjudicated(workflow, ledger, first, second):
    agreement = workflow.submit(TENANT_EMAIL, "A-101")
    workflow.adjudicate(agreement.id, first)
    role_before = ledger.get_role(TENANT_EMAIL)

    with pytest.raises(InvalidState):
        workflow.adjudicate(agreement.id, second)
    assert ledger.get_role(TENANT_EMAIL) == role_before


def test_adjudicate_missing_agreement(workflow):
    with pytest.raises(NotFound):
        workflow.adjudicate("no-such-id", Decision.accept)


def test_accept_with_missing_user_surfaces_partial_failure(workflow, repos):
    agreement = workflow.submit(TENANT_EMAIL, "A-101")
    del repos.users.rows[TENANT_EMAIL]

    with pytest.raises(NotFound):
        workflow.adjudicate(agreement.id, Decision.accept)
    assert repos.agreements.get(agreement.id).status == AgreementStatus.checked


def test_get_for_user_without_agreement(workflow):
    with pytest.raises(NotFound):
        workflow.get_for_user(TENANT_EMAIL)
