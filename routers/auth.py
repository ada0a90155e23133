from fastapi import APIRouter, Depends

from core.config import settings
from core.tokens import issue_token
from dependencies.auth import get_current_user, CurrentUser
from dependencies.services import get_role_ledger
from models.auth import TokenClaims, TokenResponse
from models.user import UserRegister
from services.role_ledger import RoleLedger


router = APIRouter(
    prefix="/auth",
    tags=["Auth"],
)


def _token_response(claims: dict) -> TokenResponse:
    return TokenResponse(
        access_token=issue_token(claims),
        expires_in_days=settings.ACCESS_TOKEN_EXPIRE_DAYS,
    )


# ============================================================
# ISSUE TOKEN
# ============================================================
@router.post("/token", response_model=TokenResponse, summary="Issue an access token for identity claims")
def issue(payload: TokenClaims):
    return _token_response(payload.model_dump(exclude_none=True))


# ============================================================
# REGISTER (idempotent upsert by email)
# ============================================================
@router.post("/register", response_model=TokenResponse, summary="Register or re-register a user")
def register(
    payload: UserRegister,
    ledger: RoleLedger = Depends(get_role_ledger),
):
    user = ledger.upsert_user(payload.email, payload.name)
    return _token_response({"email": user.email, "name": user.name, "role": user.role.value})


# ============================================================
# CURRENT USER
# ============================================================
@router.get("/me", response_model=CurrentUser, summary="Current authenticated identity")
def read_me(
    current_user: CurrentUser = Depends(get_current_user),
    ledger: RoleLedger = Depends(get_role_ledger),
):
    return current_user.model_copy(update={"role": ledger.get_role(current_user.email)})
