# services/role_ledger.py

"""
Role ledger: the authoritative email → role mapping.

Only the agreement workflow (user ↔ member) and admin provisioning via
ADMIN_EMAILS change a stored role. Registration never downgrades.
"""

from datetime import datetime, timezone
from typing import List, Optional

from core.config import settings
from core.errors import DuplicateRecord, InvalidState, NotFound
from core.logging_config import logger
from models.enums import AgreementStatus, Role
from models.user import User
from repositories.agreements import AgreementRepository
from repositories.users import UserRepository


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


class RoleLedger:
    def __init__(
        self,
        users: UserRepository,
        agreements: AgreementRepository,
        admin_emails: Optional[List[str]] = None,
    ):
        self.users = users
        self.agreements = agreements
        if admin_emails is None:
            admin_emails = settings.ADMIN_EMAILS
        self.admin_emails = {normalize_email(e) for e in admin_emails}

    # -----------------------------------------------------
    # Reads
    # -----------------------------------------------------
    def get_user(self, email: str) -> Optional[User]:
        return self.users.get(normalize_email(email))

    def get_role(self, email: str) -> Optional[Role]:
        user = self.get_user(email)
        return user.role if user else None

    def list_by_role(self, role: Role) -> List[User]:
        return self.users.list_by_role(role)

    def count_users(self, role: Optional[Role] = None) -> int:
        return self.users.count(role)

    # -----------------------------------------------------
    # Writes
    # -----------------------------------------------------
    def upsert_user(self, email: str, name: str) -> User:
        email = normalize_email(email)

        existing = self.users.get(email)
        if existing:
            return existing

        role = Role.admin if email in self.admin_emails else Role.user
        user = User(
            email=email,
            name=(name or "").strip() or None,
            role=role,
            created_at=datetime.now(timezone.utc),
        )

        try:
            created = self.users.insert(user)
        except DuplicateRecord:
            # Concurrent registration won the insert; keep its row.
            return self.users.get(email)

        logger.info(f"Registered {email} as {role.value}")
        return created

    def set_role(self, email: str, role: Role) -> User:
        email = normalize_email(email)
        updated = self.users.update_role(email, role)
        if not updated:
            raise NotFound(f"User {email} not found")

        logger.info(f"Role of {email} set to {role.value}")
        return updated

    def demote(self, email: str) -> int:
        """
        Reset a member to role `user` and purge their checked agreements.

        Pending and rejected agreements are left alone. Returns the number
        of agreements removed.
        """
        email = normalize_email(email)

        user = self.users.get(email)
        if not user:
            raise NotFound(f"User {email} not found")
        if user.role != Role.member:
            raise InvalidState(f"User {email} is not a member")

        # Purge before the role reset: a failed delete leaves a member that can be demoted again
        removed = self.agreements.delete_for_user(email, AgreementStatus.checked)
        self.set_role(email, Role.user)

        logger.info(f"Demoted {email}; removed {removed} checked agreement(s)")
        return removed
