# models/agreement.py

from typing import Optional
from datetime import datetime
from decimal import Decimal
from pydantic import BaseModel, EmailStr, Field

from models.enums import AgreementStatus, Decision


class AgreementCreate(BaseModel):
    """Tenant application for a unit."""
    email: EmailStr
    apartment_id: str = Field(..., min_length=1)


class Agreement(BaseModel):
    """
    Row of the agreements table.

    rent and the unit descriptors are copied from the apartment at
    submission time and never re-read.
    """
    id: str
    email: str
    name: Optional[str] = None
    apartment_id: str
    apartment_no: Optional[str] = None
    floor_no: Optional[int] = None
    block_name: Optional[str] = None
    rent: Decimal
    status: AgreementStatus = AgreementStatus.pending
    decision: Optional[Decision] = None
    requested_at: datetime
    decided_at: Optional[datetime] = None


class AdjudicationRequest(BaseModel):
    decision: Decision
