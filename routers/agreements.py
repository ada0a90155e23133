# routers/agreements.py

from typing import List

from fastapi import APIRouter, Depends

from dependencies.auth import require_admin, require_matching_identity
from dependencies.services import get_agreement_workflow
from models.agreement import AdjudicationRequest, Agreement, AgreementCreate
from services.agreements import AgreementWorkflow


router = APIRouter(
    prefix="/agreements",
    tags=["Agreements"],
)


# -----------------------------------------------------
# SUBMIT: caller applies for an apartment
# -----------------------------------------------------
@router.post(
    "",
    response_model=Agreement,
    status_code=201,
    summary="Apply for an apartment",
    dependencies=[Depends(require_matching_identity())],
)
def submit_agreement(
    payload: AgreementCreate,
    workflow: AgreementWorkflow = Depends(get_agreement_workflow),
):
    return workflow.submit(payload.email, payload.apartment_id)


# -----------------------------------------------------
# LIST pending (admin)
# -----------------------------------------------------
@router.get(
    "/pending",
    response_model=List[Agreement],
    summary="Admin: Pending agreement requests",
    dependencies=[Depends(require_admin)],
)
def list_pending(workflow: AgreementWorkflow = Depends(get_agreement_workflow)):
    return workflow.list_pending()


# -----------------------------------------------------
# GET caller's agreement
# -----------------------------------------------------
@router.get(
    "/user/{email}",
    response_model=Agreement,
    summary="Most recent agreement of the caller",
    dependencies=[Depends(require_matching_identity())],
)
def get_agreement_for_user(
    email: str,
    workflow: AgreementWorkflow = Depends(get_agreement_workflow),
):
    return workflow.get_for_user(email)


# -----------------------------------------------------
# ADJUDICATE (admin)
# -----------------------------------------------------
@router.patch(
    "/{agreement_id}",
    response_model=Agreement,
    summary="Admin: Accept or reject a pending agreement",
    dependencies=[Depends(require_admin)],
)
def adjudicate_agreement(
    agreement_id: str,
    payload: AdjudicationRequest,
    workflow: AgreementWorkflow = Depends(get_agreement_workflow),
):
    return workflow.adjudicate(agreement_id, payload.decision)
