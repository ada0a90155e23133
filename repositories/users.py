# repositories/users.py

from typing import List, Optional

from models.enums import Role
from models.user import User
from repositories.base import SupabaseRepository


class UserRepository(SupabaseRepository):
    table = "users"

    def get(self, email: str) -> Optional[User]:
        result = self.execute(
            self.query().select("*").eq("email", email).limit(1),
            f"Failed to fetch user {email}",
        )
        row = self.first(result)
        return User(**row) if row else None

    def insert(self, user: User) -> User:
        result = self.execute(
            self.query().insert(user.model_dump(mode="json", exclude_none=True)),
            f"Failed to create user {user.email}",
        )
        row = self.first(result)
        return User(**row) if row else user

    def update_role(self, email: str, role: Role) -> Optional[User]:
        result = self.execute(
            self.query().update({"role": role.value}).eq("email", email),
            f"Failed to update role for {email}",
        )
        row = self.first(result)
        return User(**row) if row else None

    def list_by_role(self, role: Role) -> List[User]:
        result = self.execute(
            self.query().select("*").eq("role", role.value).order("email"),
            f"Failed to list {role.value} users",
        )
        return [User(**row) for row in result.data or []]

    def count(self, role: Optional[Role] = None) -> int:
        query = self.query().select("email", count="exact")
        if role is not None:
            query = query.eq("role", role.value)
        result = self.execute(query, "Failed to count users")
        return result.count or 0
