from enum import Enum


class BaseStrEnum(str, Enum):
    """
    Base enum that serializes cleanly to a string
    and provides a .list() method for UI dropdowns.
    """

    def __str__(self):
        return str(self.value)

    @classmethod
    def list(cls):
        return [item.value for item in cls]


# -----------------------------------------------------
# USER ROLE
# -----------------------------------------------------
class Role(BaseStrEnum):
    """Authorization level held in the role ledger."""

    user = "user"
    member = "member"
    admin = "admin"


# -----------------------------------------------------
# AGREEMENT STATUS
# -----------------------------------------------------
class AgreementStatus(BaseStrEnum):
    """Lifecycle of a tenancy agreement. checked and rejected are terminal."""

    pending = "pending"
    checked = "checked"
    rejected = "rejected"


# -----------------------------------------------------
# ADJUDICATION DECISION
# -----------------------------------------------------
class Decision(BaseStrEnum):
    """Admin verdict on a pending agreement."""

    accept = "accept"
    reject = "reject"
