from .base import SupabaseRepository
from .users import UserRepository
from .apartments import ApartmentRepository
from .agreements import AgreementRepository
from .coupons import CouponRepository
from .payments import PaymentRepository

__all__ = [
    "SupabaseRepository",
    "UserRepository",
    "ApartmentRepository",
    "AgreementRepository",
    "CouponRepository",
    "PaymentRepository",
]
