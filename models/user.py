# models/user.py

from typing import Optional
from datetime import datetime
from pydantic import BaseModel, EmailStr, Field

from models.enums import Role


class UserRegister(BaseModel):
    """
    Public registration payload. Registering again with the same email
    is a no-op for the stored role.
    """
    name: str = Field(..., min_length=1)
    email: EmailStr


class User(BaseModel):
    """
    Row of the users table, keyed by email.
    """
    email: str
    name: Optional[str] = None
    role: Role = Role.user
    created_at: Optional[datetime] = None


class RoleRead(BaseModel):
    email: str
    role: Role


class DemoteResult(BaseModel):
    email: str
    role: Role
    removed_agreements: int
