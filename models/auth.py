from typing import Optional
from pydantic import BaseModel, EmailStr


# -----------------------------------------------------
# TOKEN REQUEST (identity claims to sign)
# -----------------------------------------------------
class TokenClaims(BaseModel):
    email: EmailStr
    name: Optional[str] = None
    role: Optional[str] = None    # snapshot only, never used for authorization


# -----------------------------------------------------
# TOKEN RESPONSE
# -----------------------------------------------------
class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in_days: int
