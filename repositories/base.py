# repositories/base.py

from supabase import Client

from core.errors import DuplicateRecord, is_unique_violation, storage_error


# =================================================================
#  SUPABASE TABLE ACCESS: one repository per entity
# =================================================================
# Repositories own all PostgREST query building for their table.
# Services never touch the client directly.
#
# Failures are normalised here:
#   - unique-constraint violations → DuplicateRecord (409)
#   - anything else               → Unavailable (503), logged
# =================================================================

class SupabaseRepository:
    table: str = ""

    def __init__(self, client: Client):
        self.client = client

    def query(self):
        return self.client.table(self.table)

    def execute(self, query, operation: str):
        try:
            return query.execute()
        except Exception as e:
            if is_unique_violation(e):
                raise DuplicateRecord(f"{operation}: record already exists") from e
            raise storage_error(e, operation) from e

    @staticmethod
    def first(result):
        return result.data[0] if result and result.data else None
