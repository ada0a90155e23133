# core/errors.py

from core.logging_config import logger


# ============================================================
# DOMAIN ERRORS
# ============================================================
class AppError(Exception):
    """
    Base class for every failure returned to API callers.

    Each subclass pins an HTTP status and a stable machine-readable code;
    main.py converts raised errors into {"detail", "code"} responses.
    """

    status_code = 500
    code = "error"
    default_detail = "Request failed"

    def __init__(self, detail: str = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class InvalidCredential(AppError):
    status_code = 401
    code = "invalid_credential"
    default_detail = "Invalid or expired authentication token"


class Unauthorized(AppError):
    status_code = 401
    code = "unauthorized"
    default_detail = "Authentication required"


class Forbidden(AppError):
    status_code = 403
    code = "forbidden"
    default_detail = "Forbidden"


class NotFound(AppError):
    status_code = 404
    code = "not_found"
    default_detail = "Resource not found"


class Conflict(AppError):
    status_code = 409
    code = "conflict"
    default_detail = "Conflict"


class AlreadyMember(Conflict):
    code = "already_member"
    default_detail = "User is already a member"


class AdminCannotApply(Conflict):
    code = "admin_cannot_apply"
    default_detail = "Admins cannot apply for an apartment"


class DuplicateApplication(Conflict):
    code = "duplicate_application"
    default_detail = "An agreement request is already pending"


class DuplicateRecord(Conflict):
    code = "duplicate_record"
    default_detail = "Record already exists"


class InvalidState(AppError):
    status_code = 409
    code = "invalid_state"
    default_detail = "Resource is not in a valid state for this action"


class PreconditionFailed(AppError):
    status_code = 412
    code = "precondition_failed"
    default_detail = "Precondition failed"


class UpstreamUnavailable(AppError):
    status_code = 502
    code = "upstream_unavailable"
    default_detail = "Payment provider unavailable"


class Unavailable(AppError):
    status_code = 503
    code = "unavailable"
    default_detail = "Service temporarily unavailable"


# ============================================================
# STORAGE ERROR CLASSIFICATION
# ============================================================
def extract_supabase_error(error: Exception) -> str:
    """
    Safely extract readable details from Supabase Python client errors.
    Handles:
      • PostgREST errors (APIError carries .message / .code)
      • Generic Python exceptions
    """

    message = getattr(error, "message", None)
    if message:
        return str(message)

    if error.args:
        return str(error.args[0])

    return str(error) or type(error).__name__


def is_unique_violation(error: Exception) -> bool:
    """True when Postgres rejected a write on a unique constraint (SQLSTATE 23505)."""
    if getattr(error, "code", None) == "23505":
        return True

    detail = extract_supabase_error(error).lower()
    return "duplicate" in detail or "unique" in detail


def storage_error(error: Exception, operation: str) -> Unavailable:
    """
    Log a storage failure and return the Unavailable error to raise.
    Returns (doesn't raise) so caller can chain with `raise ... from e`.
    """
    logger.error(f"{operation}: {extract_supabase_error(error)}")
    return Unavailable(f"{operation} failed: storage unavailable")
