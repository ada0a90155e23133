from .role_ledger import RoleLedger
from .agreements import AgreementWorkflow
from .discounts import DiscountResolver
from .payments import PaymentService
from .stats import collect_stats

__all__ = [
    "RoleLedger",
    "AgreementWorkflow",
    "DiscountResolver",
    "PaymentService",
    "collect_stats",
]
