# -------------------------
# Enums
# -------------------------
from .enums import (
    Role,
    AgreementStatus,
    Decision,
)

# -------------------------
# User Models
# -------------------------
from .user import (
    UserRegister,
    User,
    RoleRead,
    DemoteResult,
)

# -------------------------
# Auth Models
# -------------------------
from .auth import TokenClaims, TokenResponse

# -------------------------
# Apartment Models
# -------------------------
from .apartment import Apartment, ApartmentPage

# -------------------------
# Agreement Models
# -------------------------
from .agreement import (
    AgreementCreate,
    Agreement,
    AdjudicationRequest,
)

# -------------------------
# Coupon Models
# -------------------------
from .coupon import CouponCreate, Coupon, Discount

# -------------------------
# Payment Models
# -------------------------
from .payment import (
    ChargeRequest,
    Charge,
    ChargeResponse,
    PaymentRecordCreate,
    Payment,
)

from .stats import Stats

__all__ = [
    # enums
    "Role",
    "AgreementStatus",
    "Decision",

    # users
    "UserRegister",
    "User",
    "RoleRead",
    "DemoteResult",

    # auth
    "TokenClaims",
    "TokenResponse",

    # apartments
    "Apartment",
    "ApartmentPage",

    # agreements
    "AgreementCreate",
    "Agreement",
    "AdjudicationRequest",

    # coupons
    "CouponCreate",
    "Coupon",
    "Discount",

    # payments
    "ChargeRequest",
    "Charge",
    "ChargeResponse",
    "PaymentRecordCreate",
    "Payment",

    "Stats",
]
