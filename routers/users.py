# routers/users.py

from typing import List

from fastapi import APIRouter, Depends, Query

from core.errors import NotFound
from dependencies.auth import require_admin, require_matching_identity
from dependencies.services import get_role_ledger
from models.enums import Role
from models.user import DemoteResult, RoleRead, User
from services.role_ledger import RoleLedger, normalize_email


router = APIRouter(
    prefix="/users",
    tags=["Users"],
)


# -----------------------------------------------------
# LIST users by role (admin)
# -----------------------------------------------------
@router.get(
    "",
    response_model=List[User],
    summary="Admin: List users holding a role",
    dependencies=[Depends(require_admin)],
)
def list_users(
    role: Role = Query(Role.user),
    ledger: RoleLedger = Depends(get_role_ledger),
):
    return ledger.list_by_role(role)


# -----------------------------------------------------
# GET own role
# -----------------------------------------------------
@router.get(
    "/{email}/role",
    response_model=RoleRead,
    summary="Current role of the caller",
    dependencies=[Depends(require_matching_identity())],
)
def get_role(email: str, ledger: RoleLedger = Depends(get_role_ledger)):
    user = ledger.get_user(email)
    if not user:
        raise NotFound(f"User {email} not found")
    return RoleRead(email=user.email, role=user.role)


# -----------------------------------------------------
# DEMOTE member → user (admin)
# -----------------------------------------------------
@router.patch(
    "/{email}/demote",
    response_model=DemoteResult,
    summary="Admin: Remove membership",
    dependencies=[Depends(require_admin)],
)
def demote_user(email: str, ledger: RoleLedger = Depends(get_role_ledger)):
    removed = ledger.demote(email)
    return DemoteResult(email=normalize_email(email), role=Role.user, removed_agreements=removed)
