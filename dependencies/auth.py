from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from pydantic import BaseModel

from core.errors import Forbidden, Unauthorized
from core.tokens import verify_token
from dependencies.services import get_role_ledger
from models.enums import Role
from services.role_ledger import RoleLedger, normalize_email


bearer_scheme = HTTPBearer(auto_error=False)


# ============================================================
# Current User Model
# ============================================================
class CurrentUser(BaseModel):
    email: str
    name: Optional[str] = None

    # Role carried inside the token at issue time. Informational only.
    token_role: Optional[str] = None

    # Role read from the ledger; set by requires_role
    role: Optional[Role] = None


# ============================================================
# AUTH DECODING (validates JWT, identity only)
# ============================================================
def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> CurrentUser:
    if not credentials or not credentials.credentials:
        raise Unauthorized()

    claims = verify_token(credentials.credentials)

    return CurrentUser(
        email=normalize_email(claims["email"]),
        name=claims.get("name"),
        token_role=claims.get("role"),
    )


# ============================================================
# IDENTITY MATCH (body field → path param → query param)
# ============================================================
async def resolve_target_email(request: Request, field: str = "email") -> Optional[str]:
    content_type = request.headers.get("content-type", "")
    if request.method in ("POST", "PUT", "PATCH") and content_type.startswith("application/json"):
        try:
            body = await request.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get(field):
            return str(body[field])

    if request.path_params.get(field):
        return str(request.path_params[field])

    if request.query_params.get(field):
        return request.query_params[field]

    return None


def require_matching_identity(field: str = "email"):
    """
    Usage:
        @router.get("/{email}", dependencies=[Depends(require_matching_identity())])
    """

    async def checker(
        request: Request,
        current_user: CurrentUser = Depends(get_current_user),
    ) -> CurrentUser:
        target = await resolve_target_email(request, field)
        if not target or normalize_email(target) != current_user.email:
            raise Forbidden("Forbidden access")
        return current_user

    return checker


# ============================================================
# ROLE CHECKER (always re-reads the role ledger)
# ============================================================
def requires_role(*roles: Role):
    """
    Role guard as a dependency factory.

    The caller's role comes from the ledger on every request, so a token
    issued before a promotion or demotion carries no stale authority.
    """

    def checker(
        current_user: CurrentUser = Depends(get_current_user),
        ledger: RoleLedger = Depends(get_role_ledger),
    ) -> CurrentUser:
        role = ledger.get_role(current_user.email)
        if role is None or role not in roles:
            raise Forbidden(f"Requires one of: {[r.value for r in roles]}")
        return current_user.model_copy(update={"role": role})

    return checker


require_admin = requires_role(Role.admin)
